"""Command 'search' of todo-cli"""

import typer

from todo_cli.models import OutputFormat
from todo_cli.utils.ui.formatters import format_tasks

from .decorators import command_wrapper
from .utils import JSON_HELP, OUTPUT_HELP, get_output_config, get_task_service, resolve_output

app = typer.Typer()


@app.command("search")
@command_wrapper
def search(
    ctx: typer.Context,
    term: str = typer.Argument(..., help="Text to look for (case-insensitive)"),
    tag: str | None = typer.Option(None, "--tag", "-t", help="Only tasks with this tag"),
    output: OutputFormat | None = typer.Option(
        None, "--output", "-o", case_sensitive=False, help=OUTPUT_HELP
    ),
    json_opt: bool = typer.Option(False, "--json", help=JSON_HELP),
) -> None:
    """Search task text."""
    output = resolve_output(output, json_opt)
    rows = get_task_service(ctx).search_tasks(term, tag=tag)

    out_cfg = get_output_config()
    format_tasks(
        rows,
        output,
        color=out_cfg.color,
        date_format=out_cfg.date_format,
        title=f"Search: {term}",
    )
