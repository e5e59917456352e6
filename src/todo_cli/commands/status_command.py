"""Commands 'done' and 'undone' of todo-cli"""

import typer

from todo_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .utils import TASK_ID_CONTEXT, get_task_service

app = typer.Typer()


@app.command("done", context_settings=TASK_ID_CONTEXT)
@command_wrapper
def done(
    ctx: typer.Context,
    task_id: int = typer.Argument(..., help="Task number as shown by 'todo list'"),
) -> None:
    """Mark a task as completed."""
    position, task = get_task_service(ctx).complete_task(task_id)
    format_success(f"Completed task {position}: {task.text}")


@app.command("undone", context_settings=TASK_ID_CONTEXT)
@command_wrapper
def undone(
    ctx: typer.Context,
    task_id: int = typer.Argument(..., help="Task number as shown by 'todo list'"),
) -> None:
    """Mark a completed task as pending again."""
    position, task = get_task_service(ctx).reopen_task(task_id)
    format_success(f"Reopened task {position}: {task.text}")
