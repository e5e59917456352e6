"""Task service - Business logic for task operations.

This service layer sits between commands and the task repository. Each
public method is one command: it validates its arguments, loads the
collection once, queries or mutates it in memory and, for mutations that
succeed, saves it exactly once.

Validation runs in a fixed order so a malformed invocation always surfaces
the same error: argument shape, argument parsing, task number bounds,
task state, then the action itself and persistence.
"""

from __future__ import annotations

from datetime import date

from todo_cli.models import IndexedTask, Priority, Task, TaskQuery
from todo_cli.models.exceptions import (
    EmptySearchTermError,
    EmptyTaskTextError,
    InvalidTaskIdError,
    NoSearchResultsError,
    NoTagsFoundError,
    NoTasksFoundError,
    TagNotFoundError,
    TaskAlreadyInStatusError,
)
from todo_cli.repositories import TaskRepository
from todo_cli.services.query import (
    has_tag,
    query_tasks,
    search_tasks,
    tag_counts,
)
from todo_cli.utils.dates import parse_due_date
from todo_cli.utils.logger import get_logger


def _clean_tags(tags: list[str] | tuple[str, ...] | None) -> list[str]:
    """Strip tags, drop blanks and repeats, keep first-seen order."""
    seen: dict[str, None] = {}
    for tag in tags or ():
        tag = tag.strip()
        if tag:
            seen.setdefault(tag, None)
    return list(seen)


def _check_bounds(tasks: list[Task], task_id: int) -> int:
    """Return the 0-based index for a 1-based task number."""
    if not 1 <= task_id <= len(tasks):
        raise InvalidTaskIdError(task_id, len(tasks))
    return task_id - 1


class TaskService:
    """Service for task business logic.

    This service encapsulates business rules and orchestrates task operations
    using the task repository.
    """

    def __init__(self, task_repository: TaskRepository):
        """Initialize the task service.

        Args:
            task_repository: TaskRepository implementation for data access
        """
        self.repository = task_repository
        self.logger = get_logger()

    def add_task(
        self,
        text: str,
        *,
        priority: Priority = Priority.MEDIUM,
        tags: list[str] | None = None,
        due_date: str | date | None = None,
        today: date | None = None,
    ) -> IndexedTask:
        """Create a new pending task at the end of the collection.

        Args:
            text: Task description (required, not blank)
            priority: Priority level
            tags: Tag names; blanks and repeats are dropped
            due_date: Due date as YYYY-MM-DD string or date
            today: Creation date (defaults to date.today())

        Returns:
            The new task with its position

        Raises:
            EmptyTaskTextError: If text is blank
            InvalidDateError: If due_date can't be parsed
        """
        text = text.strip() if text else ""
        if not text:
            raise EmptyTaskTextError()

        parsed_due = parse_due_date(due_date) if isinstance(due_date, str) else due_date

        tasks = self.repository.load()
        task = Task(
            text=text,
            priority=priority,
            tags=_clean_tags(tags),
            due_date=parsed_due,
            created_at=today or date.today(),
        )
        tasks.append(task)
        self.repository.save(tasks)

        self.logger.info("added task %d (%s)", len(tasks), task.priority.value)
        return IndexedTask(len(tasks), task)

    def list_tasks(
        self, query: TaskQuery | None = None, *, today: date | None = None
    ) -> list[IndexedTask]:
        """List tasks matching *query* with their original positions.

        Returns an empty list only when no tasks are stored at all.

        Raises:
            TagNotFoundError: If the tag filter names a tag no task carries
            NoTasksFoundError: If tasks exist but none match
        """
        query = query or TaskQuery()
        tasks = self.repository.load()
        if not tasks:
            return []

        if query.tag is not None and not has_tag(tasks, query.tag):
            raise TagNotFoundError(query.tag)

        rows = query_tasks(tasks, query, today=today)
        if not rows:
            raise NoTasksFoundError()
        return rows

    def search_tasks(self, term: str, *, tag: str | None = None) -> list[IndexedTask]:
        """Case-insensitive text search, optionally narrowed to one tag.

        Raises:
            EmptySearchTermError: If term is blank
            TagNotFoundError: If the tag filter names a tag no task carries
            NoSearchResultsError: If nothing matches
        """
        if not term or not term.strip():
            raise EmptySearchTermError()
        term = term.strip()

        tasks = self.repository.load()
        if tag is not None and tasks and not has_tag(tasks, tag):
            raise TagNotFoundError(tag)

        rows = search_tasks(tasks, term, tag=tag)
        if not rows:
            raise NoSearchResultsError(term)
        return rows

    def complete_task(self, task_id: int) -> IndexedTask:
        """Mark a pending task as completed.

        Raises:
            InvalidTaskIdError: If task_id is out of range
            TaskAlreadyInStatusError: If the task is already completed
        """
        return self._set_completed(task_id, True)

    def reopen_task(self, task_id: int) -> IndexedTask:
        """Mark a completed task as pending again.

        Raises:
            InvalidTaskIdError: If task_id is out of range
            TaskAlreadyInStatusError: If the task is already pending
        """
        return self._set_completed(task_id, False)

    def _set_completed(self, task_id: int, completed: bool) -> IndexedTask:
        tasks = self.repository.load()
        index = _check_bounds(tasks, task_id)

        task = tasks[index]
        if task.completed == completed:
            raise TaskAlreadyInStatusError(task_id, task.status)

        task.completed = completed
        self.repository.save(tasks)

        self.logger.info("task %d marked %s", task_id, task.status)
        return IndexedTask(task_id, task)

    def remove_task(self, task_id: int) -> Task:
        """Delete a task permanently.

        Every task after it moves up one position.

        Raises:
            InvalidTaskIdError: If task_id is out of range
        """
        tasks = self.repository.load()
        index = _check_bounds(tasks, task_id)

        removed = tasks.pop(index)
        self.repository.save(tasks)

        self.logger.info("removed task %d, %d left", task_id, len(tasks))
        return removed

    def store_exists(self) -> bool:
        return self.repository.exists()

    def clear_tasks(self) -> bool:
        """Delete the whole task store.

        Returns:
            True if a store was deleted, False if there was nothing to clear
        """
        deleted = self.repository.delete()
        self.logger.info("clear: %s", "store deleted" if deleted else "nothing to clear")
        return deleted

    def list_tags(self) -> list[tuple[str, int]]:
        """Distinct tags with task counts, alphabetically.

        Raises:
            NoTagsFoundError: If no task has a tag
        """
        counts = tag_counts(self.repository.load())
        if not counts:
            raise NoTagsFoundError()
        return counts
