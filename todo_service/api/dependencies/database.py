"""
Database Dependency

FastAPI dependency for database sessions.

The Database instance lives on app.state (created by the application
factory). get_db yields one request-scoped session from it; the session is
committed on success, rolled back on error and always closed.

Usage:
======
    from todo_service.api.dependencies.database import DbSession

    @router.get("/todos")
    async def list_todos(db: DbSession):
        return await TodoService(db).list_todos()
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from todo_service.shared.db.session import Database


def get_database(request: Request) -> Database:
    """The application's Database instance."""
    return request.app.state.database


async def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Yields:
        AsyncSession: Database session for the current request
    """
    async for session in database.session_scope():
        yield session


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
