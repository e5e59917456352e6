"""Tests for date parsing and relative descriptions."""

from __future__ import annotations

from datetime import date

import pytest

from todo_cli.models.exceptions import InvalidDateError, ParseError
from todo_cli.utils.dates import describe_relative, parse_due_date


class TestParseDueDate:
    def test_valid(self):
        assert parse_due_date("2025-03-01") == date(2025, 3, 1)

    def test_leap_day(self):
        assert parse_due_date("2024-02-29") == date(2024, 2, 29)

    def test_surrounding_whitespace(self):
        assert parse_due_date(" 2025-03-01 ") == date(2025, 3, 1)

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "tomorrow",
            "2025-3-1",
            "2025/03/01",
            "01-03-2025",
            "20250301",
            "2025-03-01T10:00",
        ],
    )
    def test_wrong_shape(self, value):
        with pytest.raises(InvalidDateError) as exc_info:
            parse_due_date(value)
        assert exc_info.value.value == value
        assert exc_info.value.__cause__ is None

    @pytest.mark.parametrize("value", ["2024-13-45", "2023-02-29", "2024-04-31", "2024-00-10"])
    def test_impossible_date_is_chained(self, value):
        with pytest.raises(InvalidDateError) as exc_info:
            parse_due_date(value)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_is_a_parse_error(self):
        with pytest.raises(ParseError):
            parse_due_date("nope")


class TestDescribeRelative:
    TODAY = date(2024, 6, 15)

    @pytest.mark.parametrize(
        ("due", "expected"),
        [
            (date(2024, 6, 15), "today"),
            (date(2024, 6, 16), "tomorrow"),
            (date(2024, 6, 14), "yesterday"),
            (date(2024, 6, 20), "in 5 days"),
            (date(2024, 6, 1), "14 days ago"),
        ],
    )
    def test_describe(self, due, expected):
        assert describe_relative(due, self.TODAY) == expected
