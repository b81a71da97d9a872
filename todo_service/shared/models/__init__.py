"""
SQLAlchemy Models

Models Overview:
================
- Base: Base class and mixins (timestamps, soft delete)
- Todo: A single task on the todo list

Usage:
======
    from todo_service.shared.models import Todo

    todo = await repo.save("buy milk")
    todo.done  # False
"""

from todo_service.shared.models.base import Base, TimestampMixin, SoftDeleteMixin
from todo_service.shared.models.todo import Todo

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    "SoftDeleteMixin",
    # Models
    "Todo",
]
