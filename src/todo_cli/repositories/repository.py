"""Repository abstraction layer for Todo CLI.

The task store is a port: business logic talks to ``TaskRepository`` and
never to the file system directly. The JSON file adapter lives in
``todo_cli.adapters.json_store``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from todo_cli.models import Task


class TaskRepository(ABC):
    """Abstract base class for whole-collection task persistence.

    The collection is always read and written as a unit: one ``load`` at the
    start of a command and at most one ``save`` at the end.
    """

    @abstractmethod
    def load(self) -> list[Task]:
        """Load the full task collection in stored order.

        Returns:
            List of tasks; empty when nothing has been stored yet

        Raises:
            StorageCorruptError: If stored data is not a valid task list
            StorageIOError: If the storage can't be read
        """
        raise NotImplementedError("TaskRepository.load() must be implemented by adapter")

    @abstractmethod
    def save(self, tasks: list[Task]) -> None:
        """Replace the stored collection with *tasks*, all or nothing.

        Raises:
            StorageIOError: If the storage can't be written
        """
        raise NotImplementedError("TaskRepository.save() must be implemented by adapter")

    @abstractmethod
    def delete(self) -> bool:
        """Delete the stored collection.

        Returns:
            True if something was deleted, False if nothing was stored

        Raises:
            StorageIOError: If the storage can't be removed
        """
        raise NotImplementedError(
            "TaskRepository.delete() must be implemented by adapter"
        )

    @abstractmethod
    def exists(self) -> bool:
        """Return True if a collection has been stored."""
        raise NotImplementedError(
            "TaskRepository.exists() must be implemented by adapter"
        )
