"""Unit tests for SuggestingGroup (typer_helpers.py)."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import typer
from typer.core import TyperGroup
from typer.testing import CliRunner

from todo_cli.main import app
from todo_cli.utils.exit_codes import ERROR_INVALID_ARGS
from todo_cli.utils.typer_helpers import SuggestingGroup

runner = CliRunner()


class TestSuggestingGroup:
    def test_typo_suggests_single_command(self):
        result = runner.invoke(app, ["serch", "milk"])

        assert result.exit_code == ERROR_INVALID_ARGS
        assert 'unknown command "serch" for "todo"' in result.output
        assert "Did you mean this?" in result.output
        assert "search" in result.output

    def test_typo_with_several_matches(self):
        result = runner.invoke(app, ["don"])

        assert result.exit_code == ERROR_INVALID_ARGS
        assert "done" in result.output

    def test_unrelated_word_falls_back_to_usage_error(self):
        result = runner.invoke(app, ["zzzzzz"])

        assert result.exit_code == ERROR_INVALID_ARGS
        assert "Did you mean" not in result.output

    def test_markup_in_attempted_name_is_printed_literally(self):
        result = runner.invoke(app, ["[red]lis"])
        assert result.exit_code == ERROR_INVALID_ARGS

    def test_known_command_resolves(self, tmp_path):
        result = runner.invoke(app, ["--file", str(tmp_path / "t.json"), "list"])
        assert result.exit_code == 0


class TestResolveCommandErrors:
    """Suggestions must not depend on which exception class the parser raises."""

    def _make_group(self):
        group = SuggestingGroup(name="todo")
        group.commands = {"search": MagicMock(), "list": MagicMock()}
        ctx = MagicMock()
        ctx.info_name = "todo"
        return group, ctx

    def test_any_resolution_error_gets_suggestions(self, capsys):
        group, ctx = self._make_group()

        with patch.object(
            TyperGroup, "resolve_command", side_effect=RuntimeError("No such command")
        ):
            with pytest.raises(typer.Exit) as exc_info:
                group.resolve_command(ctx, ["serch"])

        assert exc_info.value.exit_code == ERROR_INVALID_ARGS
        err = capsys.readouterr().err
        assert "Did you mean this?" in err
        assert "search" in err

    def test_original_error_reraised_without_close_match(self):
        group, ctx = self._make_group()

        with patch.object(
            TyperGroup, "resolve_command", side_effect=RuntimeError("No such command")
        ):
            with pytest.raises(RuntimeError, match="No such command"):
                group.resolve_command(ctx, ["zzzzzz"])
