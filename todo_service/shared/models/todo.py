"""
Todo Entity Model

A single task on the todo list.

SAMPLE TODO RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id          │ 1                                                              │
│ task        │ "buy milk"                                                     │
│ done        │ false                                                          │
│ created_at  │ 2024-12-20T10:00:00Z                                           │
│ updated_at  │ 2024-12-20T10:05:00Z                                           │
│ deleted_at  │ null                                                           │
└──────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
- Created by TodoRepository.save() with done=false
- `done` only ever changes through TodoRepository.toggle()
- Removed logically by TodoRepository.soft_delete() (deleted_at is set)
- There is no field-level edit; `id` never changes once assigned
"""

from sqlalchemy import Boolean, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from todo_service.shared.models.base import Base, SoftDeleteMixin, TimestampMixin


class Todo(Base, TimestampMixin, SoftDeleteMixin):
    """
    Todo model.

    Attributes:
        id: Integer identity assigned by the store on insert
        task: Free-form task description (not validated)
        done: Completion flag, false on creation
    """

    __tablename__ = "todos"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    task: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )

    done: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        index=True,
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Todo(id={self.id}, done={self.done}, task={self.task!r})>"
