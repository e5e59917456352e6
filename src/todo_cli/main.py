"""Main entry point for Todo CLI."""

from pathlib import Path

import typer

from todo_cli.commands import (
    add_command,
    clear_command,
    config_command,
    list_command,
    remove_command,
    search_command,
    status_command,
    tags_command,
    version_command,
)
from todo_cli.commands.utils import TASK_ID_CONTEXT
from todo_cli.utils.typer_helpers import SuggestingGroup

# Create main app with custom group class
app = typer.Typer(
    name="todo",
    cls=SuggestingGroup,
    help="A simple command-line task manager",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        envvar="TODO_FILE",
        dir_okay=False,
        help="Task file to use (overrides the configured store.path)",
    ),
) -> None:
    """A simple command-line task manager."""
    ctx.obj = {"store_path": str(file) if file else None}


# Task commands
app.command("add")(add_command.add)
app.command("list")(list_command.list_tasks)
app.command("search")(search_command.search)
app.command("done", context_settings=TASK_ID_CONTEXT)(status_command.done)
app.command("undone", context_settings=TASK_ID_CONTEXT)(status_command.undone)
app.command("remove", context_settings=TASK_ID_CONTEXT)(remove_command.remove)
app.command("clear")(clear_command.clear)
app.command("tags")(tags_command.tags)

# General
app.command("version")(version_command.version)
app.add_typer(config_command.app, name="config", help="Configuration management")

# Aliases
app.command("ls", hidden=True)(list_command.list_tasks)
app.command("rm", hidden=True, context_settings=TASK_ID_CONTEXT)(remove_command.remove)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
