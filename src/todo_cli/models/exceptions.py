"""Error taxonomy for Todo CLI.

Every error carries the exit code the CLI terminates with. Errors raised
from a lower-level failure are chained with ``raise ... from exc`` so the
command layer can report both what failed and why.
"""

from __future__ import annotations

from pathlib import Path

from todo_cli.utils.exit_codes import (
    ERROR_CONFLICT,
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    ERROR_PERMISSION_DENIED,
    ERROR_STORAGE,
)


class TodoError(Exception):
    """Base exception for all Todo CLI errors."""

    exit_code: int = ERROR_GENERAL


class ConfigError(TodoError):
    """Raised when the configuration file can't be read or a key is invalid."""


class ParseError(TodoError):
    """Raised when a command-line argument can't be parsed."""

    exit_code = ERROR_INVALID_ARGS


class InvalidDateError(ParseError):
    """Raised when a date argument is not a valid YYYY-MM-DD date."""

    def __init__(self, value: str):
        super().__init__(f"Invalid date '{value}': expected YYYY-MM-DD")
        self.value = value


class EmptyTaskTextError(TodoError):
    """Raised when adding a task with no text."""

    exit_code = ERROR_INVALID_ARGS

    def __init__(self):
        super().__init__("Task text cannot be empty")


class EmptySearchTermError(TodoError):
    """Raised when searching with a blank term."""

    exit_code = ERROR_INVALID_ARGS

    def __init__(self):
        super().__init__("Search term cannot be empty")


class InvalidTaskIdError(TodoError):
    """Raised when a task number is outside the stored collection."""

    exit_code = ERROR_NOT_FOUND

    def __init__(self, task_id: int, max_id: int):
        if max_id == 0:
            message = f"Invalid task number {task_id}: there are no tasks"
        else:
            message = (
                f"Invalid task number {task_id}: expected a number between 1 and {max_id}"
            )
        super().__init__(message)
        self.task_id = task_id
        self.max_id = max_id


class TaskAlreadyInStatusError(TodoError):
    """Raised when done/undone targets a task already in that state."""

    exit_code = ERROR_CONFLICT

    def __init__(self, task_id: int, status: str):
        super().__init__(f"Task {task_id} is already {status}")
        self.task_id = task_id
        self.status = status


class NothingToShowError(TodoError):
    """Base for queries that matched nothing."""

    exit_code = ERROR_NOT_FOUND


class NoTasksFoundError(NothingToShowError):
    def __init__(self):
        super().__init__("No tasks match the given filters")


class NoSearchResultsError(NothingToShowError):
    def __init__(self, term: str):
        super().__init__(f"No tasks found matching '{term}'")
        self.term = term


class TagNotFoundError(NothingToShowError):
    def __init__(self, tag: str):
        super().__init__(f"No task is tagged '{tag}'")
        self.tag = tag


class NoTagsFoundError(NothingToShowError):
    def __init__(self):
        super().__init__("No tags found")


class StorageError(TodoError):
    """Base for task file failures."""

    exit_code = ERROR_STORAGE

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class StorageCorruptError(StorageError):
    """Raised when the task file exists but isn't a valid task list."""

    def __init__(self, path: Path, detail: str):
        super().__init__(f"Failed to load tasks from {path}", path)
        self.detail = detail


class StorageIOError(StorageError):
    """Raised when the OS refuses to read or write the task file."""

    def __init__(self, action: str, path: Path, cause: OSError):
        super().__init__(f"Failed to {action} {path}", path)
        self.cause = cause
        if isinstance(cause, PermissionError):
            self.exit_code = ERROR_PERMISSION_DENIED
