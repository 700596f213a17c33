"""Command 'done' of todoly"""

import typer

from todoly.models import TaskStatus
from todoly.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .store_helpers import editing_store

app = typer.Typer()


@app.command("done")
@command_wrapper
def done(
    task_id: int = typer.Argument(..., help="Task ID"),
    file: str | None = typer.Option(None, "--file", "-f", help="Task file path"),
) -> None:
    """Mark a task as done."""
    with editing_store(file) as store:
        task = store.set_status(task_id, TaskStatus.DONE)
    format_success(f"Marked as DONE: {task.title}")
