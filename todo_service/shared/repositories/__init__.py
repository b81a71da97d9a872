"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]      ← Generic CRUD operations, soft-delete aware
         │
         └── TodoRepository        ← Todo-specific queries (toggle, stats, pending)
"""

from todo_service.shared.repositories.base import BaseRepository
from todo_service.shared.repositories.todo_repository import TodoRepository

__all__ = [
    "BaseRepository",
    "TodoRepository",
]
