"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from todo_cli.models.exceptions import TodoError
from todo_cli.utils.exit_codes import ERROR_GENERAL, get_exit_code_name
from todo_cli.utils.logger import get_logger
from todo_cli.utils.ui.formatters import error_causes, format_error


def command_wrapper(func: Callable):
    """Wrap a command with timing logs and uniform error reporting.

    TodoError subclasses are printed as "Error: <what>" plus their causes and
    exit with the error's own exit code; anything else is logged with its
    traceback and exits with ERROR_GENERAL.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except TodoError as e:
            elapsed = time.monotonic() - start
            causes = error_causes(e)
            logger.error(
                "command failed: %s (%.3fs) [%s] - %s%s",
                cmd,
                elapsed,
                get_exit_code_name(e.exit_code),
                str(e),
                "".join(f" <- {c}" for c in causes),
            )
            format_error(str(e), causes)
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
