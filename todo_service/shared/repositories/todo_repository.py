"""
Todo Repository

Database operations for Todo records.

Common Operations:
==================
- save()               → Insert a new todo (always done=false)
- get_all()            → All live todos, store-defined order
- toggle()             → Flip `done` on a live todo
- soft_delete()        → Inherited; True when a row was affected
- get_stats()          → (total, done) counts over live todos
- get_pending_todos()  → Live todos with done=false
"""

from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from todo_service.shared.models.todo import Todo
from todo_service.shared.repositories.base import BaseRepository


class TodoRepository(BaseRepository[Todo]):
    """Repository for Todo database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Todo, session)

    async def save(self, task: str) -> Todo:
        """Insert a todo. `done` starts false regardless of caller input."""
        return await self.create(task=task, done=False)

    async def get_all(self) -> List[Todo]:
        return await self.list()

    async def toggle(self, todo_id: int) -> Optional[Todo]:
        """
        Flip the completion flag of a live todo.

        Returns:
            The post-toggle record, or None if absent or soft-deleted
        """
        todo = await self.get(todo_id)
        if not todo:
            return None

        todo.done = not todo.done

        await self.session.flush()
        await self.session.refresh(todo)
        return todo

    async def get_stats(self) -> Tuple[int, int]:
        """
        Count live todos and completed live todos.

        The two counts are independent reads and may disagree slightly under
        concurrent writes.
        """
        total = await self.count()
        done = await self.count(filters={"done": True})
        return total, done

    async def get_pending_todos(self) -> List[Todo]:
        return await self.list(filters={"done": False})
