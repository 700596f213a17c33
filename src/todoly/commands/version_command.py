"""Command 'version' of todoly"""

import typer

from todoly import __version__
from todoly.utils.ui.console import get_console

app = typer.Typer()
console = get_console(highlight=False)


@app.command()
def version() -> None:
    """Show version information"""
    console.print(__version__)
