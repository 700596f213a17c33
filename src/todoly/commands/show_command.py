"""Command 'show' of todoly"""

import typer

from todoly.models import OutputFormat
from todoly.utils.ui.formatters import format_output, format_task_detail

from .decorators import command_wrapper
from .store_helpers import open_store

app = typer.Typer()


@app.command("show")
@command_wrapper
def show(
    task_id: int = typer.Argument(..., help="Task ID"),
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE, "--output", "-o", help="Output format (table/json/yaml)"
    ),
    file: str | None = typer.Option(None, "--file", "-f", help="Task file path"),
) -> None:
    """Show a single task."""
    task = open_store(file).find(task_id)
    if output is OutputFormat.TABLE:
        format_task_detail(task)
    else:
        format_output(task.model_dump(mode="json"), output.value)
