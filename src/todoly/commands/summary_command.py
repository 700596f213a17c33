"""Command 'summary' of todoly"""

import typer

from todoly.utils.ui.formatters import format_summary

from .decorators import command_wrapper
from .store_helpers import open_store

app = typer.Typer()


@app.command("summary")
@command_wrapper
def summary(
    file: str | None = typer.Option(None, "--file", "-f", help="Task file path"),
) -> None:
    """Show how many tasks are todo and done."""
    format_summary(open_store(file).counts())
