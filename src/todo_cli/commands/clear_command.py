"""Command 'clear' of todo-cli"""

import typer

from todo_cli.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper
from .utils import confirm, get_task_service

app = typer.Typer()


@app.command("clear")
@command_wrapper
def clear(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete every task. Running it again is harmless."""
    service = get_task_service(ctx)

    if not service.store_exists():
        format_info("Nothing to clear: no tasks are stored")
        return

    if not yes and not confirm("Remove ALL tasks? This cannot be undone"):
        format_info("Cancelled")
        return

    if service.clear_tasks():
        format_success("All tasks removed")
    else:
        format_info("Nothing to clear: no tasks are stored")
