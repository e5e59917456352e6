"""Filtering, sorting and searching over an in-memory task collection.

Every function here is pure: the input list is never modified and each
result row keeps the 1-based position the task holds in the full stored
collection, so a number shown in a filtered view can be passed straight
to ``done``, ``undone`` or ``remove``.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from datetime import date, timedelta

from todo_cli.models import (
    DueFilter,
    DueWindow,
    IndexedTask,
    SortKey,
    StatusFilter,
    Task,
    TaskQuery,
)

SOON_DAYS = 7

TaskPredicate = Callable[[Task], bool]


def index_tasks(tasks: Iterable[Task]) -> list[IndexedTask]:
    """Pair every task with its 1-based position."""
    return [IndexedTask(position, task) for position, task in enumerate(tasks, start=1)]


def classify_due(task: Task, today: date) -> DueWindow:
    """Place a task's due date relative to today."""
    if task.due_date is None:
        return DueWindow.NONE
    if task.due_date < today:
        return DueWindow.OVERDUE
    if task.due_date == today:
        return DueWindow.TODAY
    if task.due_date <= today + timedelta(days=SOON_DAYS):
        return DueWindow.SOON
    return DueWindow.FUTURE


def is_overdue(task: Task, today: date) -> bool:
    return (
        task.due_date is not None and task.due_date < today and not task.completed
    )


def is_due_soon(task: Task, today: date) -> bool:
    # Date window only; completed tasks are left to the status filter
    return (
        task.due_date is not None
        and today <= task.due_date <= today + timedelta(days=SOON_DAYS)
    )


def _status_predicate(status: StatusFilter) -> TaskPredicate | None:
    if status is StatusFilter.PENDING:
        return lambda task: not task.completed
    if status is StatusFilter.DONE:
        return lambda task: task.completed
    return None


def _due_predicate(due: DueFilter | None, today: date) -> TaskPredicate | None:
    if due is None:
        return None
    if due is DueFilter.OVERDUE:
        return lambda task: is_overdue(task, today)
    if due is DueFilter.SOON:
        return lambda task: is_due_soon(task, today)
    if due is DueFilter.WITH_DUE:
        return lambda task: task.due_date is not None
    return lambda task: task.due_date is None


def build_predicates(query: TaskQuery, today: date) -> list[TaskPredicate]:
    """Translate a query into the list of predicates a task must satisfy."""
    predicates: list[TaskPredicate] = []

    status = _status_predicate(query.status)
    if status is not None:
        predicates.append(status)

    if query.priority is not None:
        priority = query.priority
        predicates.append(lambda task: task.priority is priority)

    if query.tag is not None:
        tag = query.tag
        predicates.append(lambda task: tag in task.tags)

    due = _due_predicate(query.due, today)
    if due is not None:
        predicates.append(due)

    return predicates


def sort_indexed(rows: list[IndexedTask], key: SortKey | None) -> list[IndexedTask]:
    """Return *rows* ordered by *key*; stable, so ties keep stored order."""
    if key is None:
        return list(rows)
    if key is SortKey.PRIORITY:
        return sorted(rows, key=lambda row: row.task.priority.rank)
    if key is SortKey.DUE:
        # Undated tasks go after every dated one
        return sorted(
            rows,
            key=lambda row: (row.task.due_date is None, row.task.due_date or date.min),
        )
    return sorted(rows, key=lambda row: row.task.created_at)


def query_tasks(
    tasks: list[Task], query: TaskQuery, today: date | None = None
) -> list[IndexedTask]:
    """Filter then sort *tasks*, keeping original positions.

    Args:
        tasks: Full stored collection
        query: Filter and sort options
        today: Reference date for due filters (defaults to date.today())

    Returns:
        Matching tasks as (position, task) pairs in display order
    """
    today = today or date.today()
    predicates = build_predicates(query, today)
    rows = [
        row for row in index_tasks(tasks) if all(pred(row.task) for pred in predicates)
    ]
    return sort_indexed(rows, query.sort)


def search_tasks(
    tasks: list[Task], term: str, tag: str | None = None
) -> list[IndexedTask]:
    """Case-insensitive substring search on task text, optionally by exact tag."""
    needle = term.casefold()
    return [
        row
        for row in index_tasks(tasks)
        if needle in row.task.text.casefold() and (tag is None or tag in row.task.tags)
    ]


def tag_counts(tasks: Iterable[Task]) -> list[tuple[str, int]]:
    """Distinct tags with the number of tasks carrying each, alphabetically."""
    counts: Counter[str] = Counter()
    for task in tasks:
        # A tag listed twice on one task still counts that task once
        counts.update(set(task.tags))
    return sorted(counts.items())


def has_tag(tasks: Iterable[Task], tag: str) -> bool:
    return any(tag in task.tags for task in tasks)
