"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state: config,
data and log directories are redirected into *tmp_path* for every test.
"""

from __future__ import annotations

import logging
import os
from datetime import date
from unittest.mock import patch

# Wide virtual terminal so Rich tables never wrap task text in assertions.
# Must be set before any Rich console is created.
os.environ["COLUMNS"] = "200"

import pytest  # noqa: E402

from todo_cli.adapters import JsonTaskRepository  # noqa: E402
from todo_cli.models import Priority, Task  # noqa: E402
from todo_cli.services.task_service import TaskService  # noqa: E402


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


def _drop_app_handlers(logger: logging.Logger) -> None:
    """Close the file handler get_logger() installed; leave pytest's own alone."""
    from todo_cli.utils.logger import _HANDLER_NAME

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            handler.close()
            logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Redirect platformdirs lookups and reset cached singletons."""
    import todo_cli.utils.logger as logger_mod
    from todo_cli.services.config_service import get_config_service

    monkeypatch.delenv("TODO_FILE", raising=False)

    logger_mod._logger = None
    app_logger = logging.getLogger("todo_cli")
    _drop_app_handlers(app_logger)

    get_config_service.cache_clear()
    with (
        patch(
            "todo_cli.services.config_service.user_config_dir",
            return_value=str(tmp_path / "config"),
        ),
        patch(
            "todo_cli.services.config_service.user_data_dir",
            return_value=str(tmp_path / "data"),
        ),
        patch(
            "todo_cli.utils.logger.user_log_dir",
            return_value=str(tmp_path / "logs"),
        ),
    ):
        yield tmp_path

    get_config_service.cache_clear()
    _drop_app_handlers(app_logger)
    logger_mod._logger = None


# ---------------------------------------------------------------------------
# Store helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def store_path(tmp_path):
    """Path of a task file that does not exist yet."""
    return tmp_path / "store" / "tasks.json"


@pytest.fixture()
def repo(store_path):
    return JsonTaskRepository(store_path)


@pytest.fixture()
def service(repo):
    return TaskService(repo)


def make_task(
    text: str,
    *,
    completed: bool = False,
    priority: Priority = Priority.MEDIUM,
    tags: list[str] | None = None,
    due_date: date | None = None,
    created_at: date = date(2024, 1, 1),
) -> Task:
    """Build a Task with test-friendly defaults."""
    return Task(
        text=text,
        completed=completed,
        priority=priority,
        tags=tags or [],
        due_date=due_date,
        created_at=created_at,
    )


@pytest.fixture()
def seed(repo):
    """Write tasks straight to the store and return them."""

    def _seed(*tasks: Task) -> list[Task]:
        repo.save(list(tasks))
        return list(tasks)

    return _seed
