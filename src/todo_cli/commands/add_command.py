"""Command 'add' of todo-cli"""

import typer
from rich.text import Text

from todo_cli.models import Priority
from todo_cli.utils.ui.console import get_console
from todo_cli.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .utils import get_task_service

app = typer.Typer()
console = get_console()


@app.command("add")
@command_wrapper
def add(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Task description"),
    priority: Priority = typer.Option(
        Priority.MEDIUM, "--priority", "-p", case_sensitive=False, help="Task priority"
    ),
    tags: list[str] | None = typer.Option(
        None, "--tag", "-t", help="Tag the task (repeat for several tags)"
    ),
    due: str | None = typer.Option(None, "--due", "-d", help="Due date (YYYY-MM-DD)"),
) -> None:
    """
    Add a new task.

    Examples:
      todo add "Buy milk"
      todo add "Write report" --priority high --tag work --due 2025-03-01
    """
    service = get_task_service(ctx)
    position, task = service.add_task(text, priority=priority, tags=tags, due_date=due)

    format_success(f"Added task {position}: {task.text}")

    details = [f"priority {task.priority.value}"]
    if task.tags:
        details.append(" ".join(f"#{tag}" for tag in task.tags))
    if task.due_date:
        details.append(f"due {task.due_date.isoformat()}")
    console.print(Text(f"  {', '.join(details)}", style="dim"))
