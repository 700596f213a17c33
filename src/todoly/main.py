"""Main entry point for ToDoLy."""

import typer

from todoly.commands import (
    add_command,
    complete_command,
    delete_command,
    edit_command,
    list_command,
    reopen_command,
    show_command,
    summary_command,
    version_command,
)
from todoly.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    name="todoly",
    cls=SuggestingGroup,
    help="ToDoLy - track short-lived tasks from the command line",
    no_args_is_help=True,
)

app.command("list")(list_command.list_tasks)
app.command("add")(add_command.add)
app.command("show")(show_command.show)
app.command("edit")(edit_command.edit)
app.command("done")(complete_command.done)
app.command("undo")(reopen_command.undo)
app.command("remove")(delete_command.remove)
app.command("summary")(summary_command.summary)
app.command("version")(version_command.version)


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
