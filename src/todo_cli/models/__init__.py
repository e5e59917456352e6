"""Todo CLI domain models.

Pydantic models for tasks, list queries and configuration, plus the error
taxonomy shared by every layer.
"""

from .config_models import AppConfig, OutputConfig, OutputFormat, StoreConfig
from .task import (
    DueFilter,
    DueWindow,
    IndexedTask,
    Priority,
    SortKey,
    StatusFilter,
    Task,
    TaskQuery,
)

__all__ = [
    # Task models
    "Task",
    "TaskQuery",
    "IndexedTask",
    "Priority",
    "StatusFilter",
    "DueFilter",
    "DueWindow",
    "SortKey",
    # Config models
    "AppConfig",
    "StoreConfig",
    "OutputConfig",
    "OutputFormat",
]
