"""Typer helpers for the todoly command group."""

from difflib import get_close_matches

import typer
from rich.markup import escape
from typer.core import TyperGroup

from todoly.utils.ui.console import get_console


class SuggestingGroup(TyperGroup):
    """Command group that offers the closest command names on a typo."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            if not args:
                raise
            attempted = args[0]
            suggestions = get_close_matches(attempted, list(self.commands), n=3, cutoff=0.6)
            if not suggestions:
                raise

            console = get_console()
            console.print(f'[red]Error:[/red] unknown command "{escape(attempted)}" for "{ctx.info_name}"')
            console.print()
            console.print("[yellow]Did you mean:[/yellow]")
            for suggestion in suggestions:
                console.print(f"    {suggestion}")
            raise typer.Exit(1) from e
