"""Command 'undo' of todoly"""

import typer

from todoly.models import TaskStatus
from todoly.utils.ui.formatters import format_info

from .decorators import command_wrapper
from .store_helpers import editing_store

app = typer.Typer()


@app.command("undo")
@command_wrapper
def undo(
    task_id: int = typer.Argument(..., help="Task ID"),
    file: str | None = typer.Option(None, "--file", "-f", help="Task file path"),
) -> None:
    """Mark a done task as todo again."""
    with editing_store(file) as store:
        task = store.set_status(task_id, TaskStatus.TODO)
    format_info(f"Marked as TODO: {task.title}")
