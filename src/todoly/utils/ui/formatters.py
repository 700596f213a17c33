"""Output formatters for different formats."""

import json
from datetime import date, timedelta
from typing import Any

import yaml
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from todoly.models import Task, TaskCounts

from .console import get_console

console = get_console()

TITLE_WIDTH = 30
PROJECT_WIDTH = 18

# Row styles by due state
DUE_STYLES = {
    "done": "dim",
    "overdue": "red",
    "soon": "yellow",
    "normal": "",
}

STATUS_STYLES = {
    "done": "green",
    "overdue": "bold red",
    "soon": "bold yellow",
    "normal": "white",
}


def due_state(task: Task, today: date, soon_days: int = 2) -> str:
    """Classify a task for highlighting: done, overdue, soon or normal."""
    if task.is_done:
        return "done"
    if task.due_date < today:
        return "overdue"
    if task.due_date <= today + timedelta(days=soon_days):
        return "soon"
    return "normal"


def tasks_to_records(tasks: list[Task]) -> list[dict[str, Any]]:
    """Plain dicts in file order, for json/yaml output."""
    return [task.model_dump(mode="json") for task in tasks]


def build_task_table(
    tasks: list[Task],
    *,
    today: date | None = None,
    soon_days: int = 2,
    color: bool = True,
) -> Table:
    """Build the task table: ID, Title, Project, Due Date, Status."""
    today = today or date.today()
    table = Table(show_header=True, header_style="bold cyan" if color else "")
    table.add_column("ID", justify="right")
    table.add_column("Title", max_width=TITLE_WIDTH, overflow="ellipsis", no_wrap=True)
    table.add_column("Project", max_width=PROJECT_WIDTH, overflow="ellipsis", no_wrap=True)
    table.add_column("Due Date")
    table.add_column("Status")

    for task in tasks:
        state = due_state(task, today, soon_days)
        status_style = STATUS_STYLES[state] if color else ""
        table.add_row(
            str(task.id),
            Text(task.title),
            Text(task.project or "-"),
            task.due_date.isoformat(),
            Text(task.status.value, style=status_style),
            style=DUE_STYLES[state] if color else None,
        )
    return table


def format_task_table(
    tasks: list[Task],
    *,
    today: date | None = None,
    soon_days: int = 2,
    color: bool = True,
) -> None:
    """Print tasks as a table."""
    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return
    console.print(build_task_table(tasks, today=today, soon_days=soon_days, color=color))


def format_output(data: Any, output_format: str = "table") -> None:
    """Print structured data as json or yaml."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    else:
        raise ValueError(f"Unsupported output format: {output_format}")


def format_task_detail(task: Task) -> None:
    """Format a single task as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in task.model_dump(mode="json").items():
        formatted_key = key.replace("_", " ").title()
        table.add_row(formatted_key, Text(str(value) if value != "" else "-"))

    console.print(table)


def format_summary(counts: TaskCounts) -> None:
    """Print the task summary line."""
    console.print(
        f"You have [cyan]{counts.todo}[/cyan] tasks todo "
        f"and [green]{counts.done}[/green] tasks are done!"
    )


def format_error(message: str) -> None:
    """Display an error message. The message is printed literally."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {escape(message)}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {escape(message)}")
