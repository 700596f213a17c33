"""Command 'remove' of todoly"""

import typer

from todoly.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper
from .store_helpers import editing_store

app = typer.Typer()


@app.command("remove")
@command_wrapper
def remove(
    task_id: int = typer.Argument(..., help="Task ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    file: str | None = typer.Option(None, "--file", "-f", help="Task file path"),
) -> None:
    """Remove a task."""
    with editing_store(file) as store:
        task = store.find(task_id)
        if not yes:
            confirm = typer.confirm(f"Remove task '{task.title}'?")
            if not confirm:
                format_info("Cancelled")
                raise typer.Exit(0)
        store.remove(task_id)
    format_success(f"Removed: {task.title}")
