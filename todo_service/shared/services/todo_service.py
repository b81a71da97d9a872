"""
Todo Service

Business logic for todo operations.

ARCHITECTURE:
=============
    Handler → TodoService → TodoRepository → Todo

The service is the single place where store errors are classified:
- Missing / soft-deleted records → TodoNotFoundError (404)
- Any SQLAlchemyError           → StoreFailureError (500)

Each write is committed on its own, so every operation is atomic at the
single-row level. Nothing is retried.

Usage:
======
    from todo_service.shared.services.todo_service import TodoService

    service = TodoService(db)
    todo = await service.create_todo("buy milk")
    todo = await service.toggle_todo(todo.id)
"""

from contextlib import contextmanager
from typing import Iterator, List, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_service.shared.core.exceptions import StoreFailureError, TodoNotFoundError
from todo_service.shared.core.logging import get_logger
from todo_service.shared.models.todo import Todo
from todo_service.shared.repositories.todo_repository import TodoRepository


logger = get_logger("todo_service")


class TodoService:
    """
    Service for todo-related business logic.

    Handles:
    - Creating todos (done forced to false)
    - Listing all / pending todos
    - Toggling completion
    - Soft deleting
    - Dashboard statistics
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.todo_repo = TodoRepository(session)

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            logger.error("Store operation failed", operation=operation, error=str(e))
            raise StoreFailureError(operation, cause=e) from e

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise

    # ═══════════════════════════════════════════════════════════════════════════
    # READS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_todos(self) -> List[Todo]:
        with self._store_errors("list todos"):
            return await self.todo_repo.get_all()

    async def get_pending_todos(self) -> List[Todo]:
        with self._store_errors("list pending todos"):
            return await self.todo_repo.get_pending_todos()

    async def get_stats(self) -> Tuple[int, int]:
        """Return (total, done) over live todos."""
        with self._store_errors("load stats"):
            return await self.todo_repo.get_stats()

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITES
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_todo(self, task: str) -> Todo:
        """
        Create a new todo.

        Args:
            task: Task description, stored as given

        Returns:
            The stored todo with its assigned id and done=False

        Raises:
            StoreFailureError: If the insert fails
        """
        with self._store_errors("save todo"):
            todo = await self.todo_repo.save(task)
            await self._commit()

        logger.info("Todo created", todo_id=todo.id)
        return todo

    async def toggle_todo(self, todo_id: int) -> Todo:
        """
        Flip the completion flag of a todo.

        Raises:
            TodoNotFoundError: If the todo does not exist or was deleted
            StoreFailureError: If the update fails
        """
        with self._store_errors("update todo"):
            todo = await self.todo_repo.toggle(todo_id)
            if not todo:
                raise TodoNotFoundError(todo_id)
            await self._commit()

        logger.info("Todo toggled", todo_id=todo.id, done=todo.done)
        return todo

    async def delete_todo(self, todo_id: int) -> None:
        """
        Soft delete a todo.

        Raises:
            TodoNotFoundError: If no live row was affected
            StoreFailureError: If the update fails
        """
        with self._store_errors("delete todo"):
            deleted = await self.todo_repo.soft_delete(todo_id)
            if not deleted:
                raise TodoNotFoundError(todo_id)
            await self._commit()

        logger.info("Todo deleted", todo_id=todo_id)
