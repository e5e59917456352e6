"""Command 'tags' of todo-cli"""

import typer

from todo_cli.models import OutputFormat
from todo_cli.utils.ui.formatters import format_tag_counts

from .decorators import command_wrapper
from .utils import JSON_HELP, OUTPUT_HELP, get_task_service, resolve_output

app = typer.Typer()


@app.command("tags")
@command_wrapper
def tags(
    ctx: typer.Context,
    output: OutputFormat | None = typer.Option(
        None, "--output", "-o", case_sensitive=False, help=OUTPUT_HELP
    ),
    json_opt: bool = typer.Option(False, "--json", help=JSON_HELP),
) -> None:
    """List every tag with the number of tasks using it."""
    output = resolve_output(output, json_opt)
    format_tag_counts(get_task_service(ctx).list_tags(), output)
