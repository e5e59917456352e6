"""Configuration management commands."""

from enum import Enum

import typer

from todo_cli.models import OutputFormat
from todo_cli.services.config_service import get_config_service
from todo_cli.utils.ui.console import get_console
from todo_cli.utils.ui.formatters import (
    format_info,
    format_output,
    format_single_item,
    format_success,
)

from .decorators import command_wrapper
from .utils import JSON_HELP, confirm, resolve_store_path

app = typer.Typer(help="Configuration management commands", no_args_is_help=True)
console = get_console(highlight=False)


def _flatten(data: dict, prefix: str = "") -> dict:
    """{"output": {"color": True}} -> {"output.color": True}"""
    flat = {}
    for key, value in data.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{name}."))
        else:
            flat[name] = value
    return flat


def _display(value):
    return value.value if isinstance(value, Enum) else value


@app.command("show")
@command_wrapper
def show_config(
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE, "--output", "-o", case_sensitive=False, help="Output format"
    ),
    json_opt: bool = typer.Option(False, "--json", help=JSON_HELP),
) -> None:
    """Show the current configuration."""
    data = get_config_service().to_dict()
    if json_opt:
        output = OutputFormat.JSON
    if output is OutputFormat.TABLE:
        format_single_item(_flatten(data))
    else:
        format_output(data, output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., output.format)"),
) -> None:
    """Get a configuration value."""
    value = _display(get_config_service().get(key))
    console.print("null" if value is None else str(value), markup=False)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., output.format)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    stored = _display(get_config_service().set(key, value))
    format_success(f"Configuration '{key}' set to '{stored}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: str | None = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "the entire configuration" if not key else f"'{key}'"
        if not confirm(f"Are you sure you want to reset {msg}?"):
            format_info("Cancelled")
            return

    get_config_service().reset(key)

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")


@app.command("path")
@command_wrapper
def show_paths(ctx: typer.Context) -> None:
    """Show where the configuration and task files live."""
    service = get_config_service()
    format_single_item(
        {
            "config": str(service.config_path),
            "tasks": str(resolve_store_path(ctx)),
        }
    )
