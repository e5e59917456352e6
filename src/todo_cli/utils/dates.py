"""Date parsing and display helpers."""

from __future__ import annotations

import re
from datetime import date

from todo_cli.models.exceptions import InvalidDateError

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_due_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD calendar date.

    Raises:
        InvalidDateError: If *value* is not a real date in that form
    """
    text = value.strip()
    if not _ISO_DATE.match(text):
        raise InvalidDateError(value)
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        # Right shape, impossible date (2024-02-30)
        raise InvalidDateError(value) from e


def describe_relative(due: date, today: date) -> str:
    """Describe *due* relative to *today* ("today", "in 3 days", "2 days ago")."""
    delta = (due - today).days
    if delta == 0:
        return "today"
    if delta == 1:
        return "tomorrow"
    if delta == -1:
        return "yesterday"
    if delta > 0:
        return f"in {delta} days"
    return f"{-delta} days ago"
