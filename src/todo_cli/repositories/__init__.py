"""Repository interfaces for the Todo CLI.

Implementations (Adapters) are in:
- todo_cli.adapters.json_store (local JSON file)
"""

from .repository import TaskRepository

__all__ = ["TaskRepository"]
