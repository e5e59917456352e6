"""Output formatters for different formats."""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import date
from typing import Any

import yaml
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from todo_cli.models import DueWindow, IndexedTask, Priority
from todo_cli.services.query import classify_due
from todo_cli.utils.dates import describe_relative
from todo_cli.utils.ui.console import get_console, get_error_console

PRIORITY_COLORS = {
    Priority.HIGH: "bold red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "green",
}

DUE_COLORS = {
    DueWindow.OVERDUE: "bold red",
    DueWindow.TODAY: "bold yellow",
    DueWindow.SOON: "cyan",
    DueWindow.FUTURE: "",
    DueWindow.NONE: "dim",
}

STATUS_ICONS = {
    True: "✓",
    False: " ",
}


def format_output(data: Any, output_format: str = "table") -> None:
    """Print plain data as JSON or YAML."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
    elif output_format == "yaml":
        print(
            yaml.safe_dump(
                data, default_flow_style=False, sort_keys=False, allow_unicode=True
            ),
            end="",
        )
    else:
        raise ValueError(f"Unsupported output format: {output_format}")


def task_rows_to_dicts(rows: Iterable[IndexedTask]) -> list[dict]:
    """Serialisable form of a task view, numbered by stored position."""
    return [{"id": row.position, **row.task.model_dump(mode="json")} for row in rows]


def format_tasks(
    rows: list[IndexedTask],
    output_format: str = "table",
    *,
    color: bool = True,
    date_format: str = "%Y-%m-%d",
    title: str | None = None,
    today: date | None = None,
) -> None:
    """Render a task view in the requested format."""
    if output_format == "table":
        format_task_table(
            rows, color=color, date_format=date_format, title=title, today=today
        )
    else:
        format_output({"tasks": task_rows_to_dicts(rows)}, output_format)


def format_task_table(
    rows: list[IndexedTask],
    *,
    color: bool = True,
    date_format: str = "%Y-%m-%d",
    title: str | None = None,
    today: date | None = None,
) -> None:
    """Format a task view as a Rich table with a pending/done footer."""
    today = today or date.today()
    console = get_console()

    table = Table(
        title=title,
        show_header=True,
        header_style="bold magenta" if color else "",
    )
    table.add_column("#", justify="right", style="cyan" if color else "")
    table.add_column("Done", justify="center")
    table.add_column("Priority")
    table.add_column("Task", overflow="fold")
    table.add_column("Tags")
    table.add_column("Due")
    table.add_column("Created")

    def style(name: str) -> str:
        return name if color else ""

    for position, task in rows:
        text_style = "dim strike" if task.completed else ""
        window = classify_due(task, today)

        if task.due_date is None:
            due_cell = Text("-", style=style("dim"))
        else:
            due_style = "dim" if task.completed else DUE_COLORS[window]
            due_cell = Text(task.due_date.strftime(date_format), style=style(due_style))
            due_cell.append(
                f" ({describe_relative(task.due_date, today)})", style=style("dim")
            )

        table.add_row(
            str(position),
            STATUS_ICONS[task.completed],
            Text(task.priority.value, style=style(PRIORITY_COLORS[task.priority])),
            Text(task.text, style=style(text_style)),
            Text(", ".join(f"#{tag}" for tag in task.tags), style=style("blue")),
            due_cell,
            task.created_at.strftime(date_format),
        )

    console.print(table)

    done = sum(1 for row in rows if row.task.completed)
    console.print(
        f"[dim]{len(rows)} task(s): {len(rows) - done} pending, {done} done[/dim]"
    )


def format_tag_counts(counts: list[tuple[str, int]], output_format: str = "table") -> None:
    """Render tag names with the number of tasks carrying each."""
    if output_format != "table":
        format_output(
            {"tags": [{"tag": tag, "count": count} for tag, count in counts]},
            output_format,
        )
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Tag", style="blue")
    table.add_column("Tasks", justify="right")
    for tag, count in counts:
        table.add_row(Text(f"#{tag}"), str(count))
    get_console().print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        if isinstance(value, bool):
            formatted_value = "✓" if value else "✗"
        elif value is None:
            formatted_value = "-"
        else:
            formatted_value = str(value)
        table.add_row(key, Text(formatted_value))

    get_console().print(table)


def error_causes(exc: BaseException) -> list[str]:
    """Collect the 'why' lines behind an error, innermost last."""
    detail = getattr(exc, "detail", None)
    if detail:
        return [detail]

    causes = []
    cause = exc.__cause__
    while cause is not None:
        causes.append(getattr(cause, "strerror", None) or str(cause))
        cause = cause.__cause__
    return causes


def format_error(message: str, causes: Iterable[str] = ()) -> None:
    """Format and display an error message on stderr."""
    console = get_error_console()
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    for cause in causes:
        console.print(f"  [red]Caused by:[/red] {escape(cause)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]✓[/bold green] {escape(message)}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    get_console().print(f"[bold blue]Info:[/bold blue] {escape(message)}")
