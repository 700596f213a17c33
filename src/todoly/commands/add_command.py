"""Command 'add' of todoly"""

import typer

from todoly.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .store_helpers import editing_store

app = typer.Typer()


@app.command("add")
@command_wrapper
def add(
    title: str = typer.Argument(..., help="Task title"),
    due: str = typer.Option(..., "--due", "-d", help="Due date (YYYY-MM-DD)"),
    project: str = typer.Option("", "--project", "-p", help="Project name"),
    file: str | None = typer.Option(None, "--file", "-f", help="Task file path"),
) -> None:
    """
    Add a new task.

    Examples:
      todoly add "Write report" --due 2024-03-01 --project Work
      todoly add "Buy milk" -d 2024-03-02
    """
    with editing_store(file) as store:
        task = store.add(title, project, due)
    format_success(f"Task added: #{task.id} {task.title}")
