"""Command 'edit' of todoly"""

import typer

from todoly.utils.dates import try_parse_due_date
from todoly.utils.ui.formatters import format_info, format_success, format_warning

from .decorators import command_wrapper
from .store_helpers import editing_store, open_store

app = typer.Typer()


@app.command("edit")
@command_wrapper
def edit(
    task_id: int = typer.Argument(..., help="Task ID"),
    title: str | None = typer.Option(None, "--title", "-t", help="New title"),
    project: str | None = typer.Option(None, "--project", "-p", help="New project"),
    due: str | None = typer.Option(None, "--due", "-d", help="New due date (YYYY-MM-DD)"),
    file: str | None = typer.Option(None, "--file", "-f", help="Task file path"),
) -> None:
    """
    Update a task's title, project or due date.

    Options left out (or blank) keep their current value. An invalid due
    date is ignored and the rest of the update still applies.
    """
    if not any(value and value.strip() for value in (title, project, due)):
        # Still fail for unknown ids so scripts notice typos
        open_store(file).find(task_id)
        format_info("Nothing to change.")
        return

    with editing_store(file) as store:
        store.update(task_id, title=title, project=project, due_date=due)

    if due and due.strip() and try_parse_due_date(due) is None:
        format_warning(f"Invalid date {due!r}; due date unchanged.")
    format_success("Updated.")
