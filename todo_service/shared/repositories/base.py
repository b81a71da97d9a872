"""
Base Repository

This module provides a generic base repository with common CRUD operations.
All entity-specific repositories inherit from this class.

What This Provides:
===================
- get(id)        → Fetch single live record by id
- list()         → List live records with optional equality filters
- count()        → Count live records with optional equality filters
- create()       → Create new record
- soft_delete()  → Set deleted_at on a live record, report whether a row changed

"Live" means not soft-deleted: for models using SoftDeleteMixin every read
adds `WHERE deleted_at IS NULL`. Models without the mixin are unaffected.

Generic Type Pattern:
=====================
    class TodoRepository(BaseRepository[Todo]):
        pass

    repo = TodoRepository(db)
    todo = await repo.get(1)  # Returns Todo, not Any!

flush() vs commit():
====================
- flush(): Sends SQL to database but doesn't commit transaction
- commit(): Permanently saves all changes; done by the caller (service or
  get_db), never by repositories
"""

from datetime import datetime, timezone
from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import Select, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from todo_service.shared.models.base import Base


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    @property
    def soft_deletes(self) -> bool:
        return hasattr(self.model, "deleted_at")

    def _live(self, query: Select) -> Select:
        """Restrict a query to records that are not soft-deleted."""
        if self.soft_deletes:
            query = query.where(self.model.deleted_at.is_(None))
        return query

    def _filtered(self, query: Select, filters: Optional[dict[str, Any]]) -> Select:
        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)
        return self._live(query)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: int) -> Optional[ModelType]:
        """
        Get a single live record by id.

        Returns:
            The model instance if found and not soft-deleted, None otherwise

        SQL Generated:
            SELECT * FROM todos WHERE id = 1 AND deleted_at IS NULL
        """
        query = self._live(select(self.model).where(self.model.id == record_id))
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def list(self, filters: Optional[dict[str, Any]] = None) -> list[ModelType]:
        """
        List live records with optional equality filters.

        No ORDER BY is applied: row order is whatever the store returns and
        callers must not rely on it.

        SQL Generated:
            SELECT * FROM todos WHERE done = 0 AND deleted_at IS NULL
        """
        result = await self.session.execute(self._filtered(select(self.model), filters))
        return list(result.scalars().all())

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """
        Count live records with optional equality filters.

        SQL Generated:
            SELECT COUNT(*) FROM todos WHERE deleted_at IS NULL
        """
        query = self._filtered(select(sql_count()).select_from(self.model), filters)
        result = await self.session.execute(query)
        return result.scalar() or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Adds the instance to the session and flushes to obtain the generated
        id and defaults.

        SQL Generated:
            INSERT INTO todos (task, done, created_at, updated_at, deleted_at)
            VALUES ('buy milk', 0, ..., ..., NULL)
        """
        instance = self.model(**kwargs)
        self.session.add(instance)

        # Flush: send INSERT to database (but don't commit yet)
        await self.session.flush()
        await self.session.refresh(instance)

        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def soft_delete(self, record_id: int) -> bool:
        """
        Soft delete a live record by setting its deleted_at timestamp.

        Returns:
            True if a row was affected; False if the id never existed or the
            record was already deleted

        SQL Generated:
            UPDATE todos SET deleted_at = NOW()
            WHERE id = 1 AND deleted_at IS NULL
        """
        if not self.soft_deletes:
            raise TypeError(f"{self.model.__name__} does not support soft delete")

        result = await self.session.execute(
            update(self.model)
            .where(self.model.id == record_id, self.model.deleted_at.is_(None))
            .values(deleted_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        return (result.rowcount or 0) > 0
