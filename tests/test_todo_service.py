"""Tests for TodoService error mapping and persistence."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from todo_service.shared.core.exceptions import StoreFailureError, TodoNotFoundError
from todo_service.shared.services.todo_service import TodoService


@pytest.fixture
def failing_session():
    session = AsyncMock()
    session.execute.side_effect = OperationalError("SELECT", {}, Exception("disk I/O error"))
    return session


@pytest.mark.asyncio
async def test_create_is_committed(database):
    async with database.session() as session:
        created = await TodoService(session).create_todo("buy milk")

    async with database.session() as session:
        todos = await TodoService(session).list_todos()

    assert [t.id for t in todos] == [created.id]


@pytest.mark.asyncio
async def test_toggle_missing_raises_not_found(database):
    async with database.session() as session:
        with pytest.raises(TodoNotFoundError) as exc_info:
            await TodoService(session).toggle_todo(42)

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_delete_twice_raises_not_found(database):
    async with database.session() as session:
        service = TodoService(session)
        todo = await service.create_todo("buy milk")
        await service.delete_todo(todo.id)

        with pytest.raises(TodoNotFoundError):
            await service.delete_todo(todo.id)


@pytest.mark.asyncio
async def test_list_store_failure(failing_session):
    with pytest.raises(StoreFailureError) as exc_info:
        await TodoService(failing_session).list_todos()

    assert exc_info.value.status_code == 500
    assert exc_info.value.to_dict() == {
        "code": 500,
        "message": exc_info.value.message,
        "data": None,
    }


@pytest.mark.asyncio
async def test_toggle_store_failure(failing_session):
    with pytest.raises(StoreFailureError):
        await TodoService(failing_session).toggle_todo(1)


@pytest.mark.asyncio
async def test_stats_store_failure(failing_session):
    with pytest.raises(StoreFailureError):
        await TodoService(failing_session).get_stats()
