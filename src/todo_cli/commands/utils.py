"""Helpers shared by command modules."""

from __future__ import annotations

from pathlib import Path

import typer

from todo_cli.adapters import JsonTaskRepository
from todo_cli.models import OutputConfig, OutputFormat
from todo_cli.services.config_service import get_config_service
from todo_cli.services.task_service import TaskService

OUTPUT_HELP = "Output format (table/json/yaml, default from config)"
JSON_HELP = "Output as JSON (alias for --output json)"

# "-1" is a task number, not an unknown option
TASK_ID_CONTEXT = {"ignore_unknown_options": True}


def store_override(ctx: typer.Context | None) -> str | None:
    """The --file value given to the root command, if any."""
    if ctx is None:
        return None
    obj = ctx.find_root().obj
    if isinstance(obj, dict):
        return obj.get("store_path")
    return None


def resolve_store_path(ctx: typer.Context | None) -> Path:
    return get_config_service().resolve_store_path(store_override(ctx))


def get_task_service(ctx: typer.Context | None = None) -> TaskService:
    """Build a TaskService over the task file selected for this invocation."""
    return TaskService(JsonTaskRepository(resolve_store_path(ctx)))


def get_output_config() -> OutputConfig:
    return get_config_service().config.output


def resolve_output(output: OutputFormat | None, json_opt: bool) -> OutputFormat:
    """Pick the output format: --json, then --output, then the configured default."""
    if json_opt:
        return OutputFormat.JSON
    if output is not None:
        return output
    return get_output_config().format


def confirm(prompt: str) -> bool:
    """Ask a yes/no question; closed stdin or Ctrl-C counts as no."""
    try:
        return typer.confirm(prompt)
    except typer.Abort:
        return False
