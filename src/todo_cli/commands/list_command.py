"""Command 'list' of todo-cli"""

import typer

from todo_cli.models import (
    DueFilter,
    OutputFormat,
    Priority,
    SortKey,
    StatusFilter,
    TaskQuery,
)
from todo_cli.utils.ui.formatters import format_info, format_output, format_tasks

from .decorators import command_wrapper
from .utils import JSON_HELP, OUTPUT_HELP, get_output_config, get_task_service, resolve_output

app = typer.Typer()


@app.command("list")
@command_wrapper
def list_tasks(
    ctx: typer.Context,
    status: StatusFilter = typer.Option(
        StatusFilter.ALL, "--status", "-s", case_sensitive=False, help="Filter by status"
    ),
    priority: Priority | None = typer.Option(
        None, "--priority", "-p", case_sensitive=False, help="Filter by priority"
    ),
    tag: str | None = typer.Option(None, "--tag", "-t", help="Filter by tag (exact)"),
    due: DueFilter | None = typer.Option(
        None, "--due", case_sensitive=False, help="Filter by due date"
    ),
    sort: SortKey | None = typer.Option(
        None, "--sort", case_sensitive=False, help="Sort order (default: creation)"
    ),
    output: OutputFormat | None = typer.Option(
        None, "--output", "-o", case_sensitive=False, help=OUTPUT_HELP
    ),
    json_opt: bool = typer.Option(False, "--json", help=JSON_HELP),
) -> None:
    """
    List tasks.

    Task numbers always refer to the position in the full list, so a number
    shown under a filter can be passed straight to done/undone/remove.
    """
    output = resolve_output(output, json_opt)
    query = TaskQuery(status=status, priority=priority, tag=tag, due=due, sort=sort)

    rows = get_task_service(ctx).list_tasks(query)

    if not rows:
        if output is OutputFormat.TABLE:
            format_info('No tasks yet. Add one with: todo add "Buy milk"')
        else:
            format_output({"tasks": []}, output)
        return

    out_cfg = get_output_config()
    format_tasks(
        rows,
        output,
        color=out_cfg.color,
        date_format=out_cfg.date_format,
        title="Tasks" if not query.is_filtered else "Tasks (filtered)",
    )
