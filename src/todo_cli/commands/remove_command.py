"""Command 'remove' of todo-cli"""

import typer

from todo_cli.utils.ui.console import get_console
from todo_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .utils import TASK_ID_CONTEXT, get_task_service

app = typer.Typer()
console = get_console()


@app.command("remove", context_settings=TASK_ID_CONTEXT)
@command_wrapper
def remove(
    ctx: typer.Context,
    task_id: int = typer.Argument(..., help="Task number as shown by 'todo list'"),
) -> None:
    """
    Delete a task permanently.

    Tasks listed after it move up one number.
    """
    removed = get_task_service(ctx).remove_task(task_id)
    format_success(f"Removed task {task_id}: {removed.text}")
    console.print("[dim]Task numbers after it have shifted down by one.[/dim]")
