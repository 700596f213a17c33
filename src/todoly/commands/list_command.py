"""Command 'list' of todoly"""

import typer

from todoly.models import OutputFormat, SortKey
from todoly.services.config_service import get_config_service
from todoly.utils.ui.formatters import (
    format_output,
    format_task_table,
    tasks_to_records,
)

from .decorators import command_wrapper
from .store_helpers import open_store

app = typer.Typer()


@app.command("list")
@command_wrapper
def list_tasks(
    by: SortKey | None = typer.Option(
        None, "--by", "-b", help="Sort by date, project or id (default from config)"
    ),
    project: str | None = typer.Option(
        None, "--project", "-p", help="Only tasks in this project (case-insensitive)"
    ),
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE, "--output", "-o", help="Output format (table/json/yaml)"
    ),
    json_opt: bool = typer.Option(
        False, "--json", help="Output as JSON (alias for --output json)"
    ),
    file: str | None = typer.Option(None, "--file", "-f", help="Task file path"),
) -> None:
    """List tasks sorted by due date or project."""
    if json_opt:
        output = OutputFormat.JSON

    config = get_config_service().config
    store = open_store(file)
    tasks = store.list_tasks(by or config.default_sort, project)

    if output is OutputFormat.TABLE:
        format_task_table(tasks, soon_days=config.soon_days, color=config.color)
    else:
        format_output(tasks_to_records(tasks), output.value)
