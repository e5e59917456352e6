"""JSON file task repository.

The whole collection lives in one pretty-printed JSON array. Saves go to a
temporary file in the same directory which is then renamed over the
original, so readers only ever see the old or the new contents.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from todo_cli.models import Task
from todo_cli.models.exceptions import StorageCorruptError, StorageIOError
from todo_cli.repositories import TaskRepository
from todo_cli.utils.logger import get_logger

_TASK_LIST = TypeAdapter(list[Task])


def _describe_validation_error(exc: ValidationError) -> str:
    """Turn the first pydantic error into 'task N, field F: message'."""
    error = exc.errors()[0]
    loc = list(error.get("loc", ()))
    msg = error.get("msg", "invalid value")
    if not loc:
        return f"Expected a list of tasks: {msg}"
    position = loc[0]
    if isinstance(position, int):
        where = f"task {position + 1}"
        if len(loc) > 1:
            field = ".".join(str(part) for part in loc[1:])
            where += f", field '{field}'"
        return f"Invalid {where}: {msg}"
    return f"Invalid task data at {'.'.join(str(p) for p in loc)}: {msg}"


class JsonTaskRepository(TaskRepository):
    """Task repository backed by a single JSON file."""

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()
        self.logger = get_logger()

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> list[Task]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            # No file yet means no tasks yet
            self.logger.debug("task file %s does not exist, starting empty", self.path)
            return []
        except UnicodeDecodeError as e:
            raise StorageCorruptError(self.path, f"File is not valid UTF-8: {e}") from e
        except OSError as e:
            raise StorageIOError("read", self.path, e) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageCorruptError(
                self.path,
                f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}",
            ) from e

        try:
            tasks = _TASK_LIST.validate_python(data)
        except ValidationError as e:
            raise StorageCorruptError(self.path, _describe_validation_error(e)) from e

        self.logger.debug("loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        payload = json.dumps(
            [task.model_dump(mode="json") for task in tasks],
            indent=2,
            ensure_ascii=False,
        )

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_fd, tmp_path = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
            )
        except OSError as e:
            raise StorageIOError("write", self.path, e) from e

        try:
            with os.fdopen(tmp_fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except BaseException as e:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            if isinstance(e, OSError):
                raise StorageIOError("write", self.path, e) from e
            raise

        self.logger.debug("saved %d task(s) to %s", len(tasks), self.path)

    def delete(self) -> bool:
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StorageIOError("delete", self.path, e) from e
        self.logger.debug("deleted task file %s", self.path)
        return True
