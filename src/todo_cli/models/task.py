"""Task data models."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, Field, field_validator


class Priority(str, Enum):
    """Task priority levels, stored lowercase."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort rank: high sorts first."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


class StatusFilter(str, Enum):
    """Completion filter for list views."""

    ALL = "all"
    PENDING = "pending"
    DONE = "done"


class DueFilter(str, Enum):
    """Due date filter for list views. At most one applies."""

    OVERDUE = "overdue"
    SOON = "soon"
    WITH_DUE = "with-due"
    NO_DUE = "no-due"


class SortKey(str, Enum):
    """Sort orders for list views."""

    PRIORITY = "priority"
    DUE = "due"
    CREATED = "created"


class DueWindow(str, Enum):
    """Where a task's due date falls relative to today."""

    OVERDUE = "overdue"
    TODAY = "today"
    SOON = "soon"
    FUTURE = "future"
    NONE = "none"


class Task(BaseModel):
    """A single to-do item.

    Attributes:
        text: Free-form description, never empty
        completed: Completion status
        priority: One of high, medium, low
        tags: Ordered tag names, may be empty
        due_date: Optional calendar date the task is due
        created_at: Date the task was added, never changed afterwards
    """

    text: str = Field(..., min_length=1)
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    tags: list[str] = Field(default_factory=list)
    due_date: date | None = None
    created_at: date

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("text cannot be blank")
        return v

    @property
    def status(self) -> str:
        return "completed" if self.completed else "pending"


class TaskQuery(BaseModel):
    """Filter and sort options for a list view.

    Every field is single-valued, so mutually exclusive choices such as
    pending/done or overdue/no-due can't be combined.
    """

    status: StatusFilter = StatusFilter.ALL
    priority: Priority | None = None
    tag: str | None = None
    due: DueFilter | None = None
    sort: SortKey | None = None

    @property
    def is_filtered(self) -> bool:
        return (
            self.status is not StatusFilter.ALL
            or self.priority is not None
            or self.tag is not None
            or self.due is not None
        )


class IndexedTask(NamedTuple):
    """A task paired with its 1-based position in the stored collection."""

    position: int
    task: Task
