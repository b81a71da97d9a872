"""
Base Model Classes

This module provides the foundational classes for all SQLAlchemy models.
It includes the declarative base and common mixins for timestamps and soft deletion.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       ├── TimestampMixin   ← Automatic created_at/updated_at
       │
       └── SoftDeleteMixin  ← Soft delete with deleted_at

Usage:
======
    from todo_service.shared.models.base import Base, TimestampMixin, SoftDeleteMixin

    class Todo(Base, TimestampMixin, SoftDeleteMixin):
        __tablename__ = "todos"

        id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models in the application inherit from this class either
    directly or through one of the mixin classes. Base.metadata is what
    Database.init() uses to create the schema at startup.
    """


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    Provides two timestamp columns that are automatically managed:
    - created_at: Set when the record is first inserted
    - updated_at: Updated whenever the record is modified

    Database Behavior:
    ==================
    - created_at: Set by SQLAlchemy on INSERT
    - updated_at: Set on INSERT, refreshed by SQLAlchemy on UPDATE via onupdate
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )


class SoftDeleteMixin:
    """
    Mixin that adds soft delete capability to models.

    Instead of permanently deleting records, soft delete marks them
    as deleted by setting a timestamp.

    Example values:
        deleted_at: None                  (record is active)
        deleted_at: 2024-01-20T09:00:00Z  (record was soft-deleted)

    Querying:
    =========
    Queries must filter out soft-deleted records:

        query.where(MyModel.deleted_at.is_(None))

    BaseRepository does this automatically for models using this mixin.
    """

    # NULL means the record is active; a timestamp means it's deleted
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        index=True,
    )
