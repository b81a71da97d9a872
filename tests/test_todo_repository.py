"""Tests for TodoRepository against a real SQLite file."""

import pytest

from todo_service.shared.repositories.todo_repository import TodoRepository


@pytest.mark.asyncio
async def test_save_assigns_id_and_starts_pending(database):
    async with database.session() as session:
        repo = TodoRepository(session)
        first = await repo.save("buy milk")
        second = await repo.save("walk dog")

        assert first.id == 1
        assert second.id == 2
        assert first.done is False
        assert first.deleted_at is None
        assert first.created_at is not None


@pytest.mark.asyncio
async def test_save_accepts_empty_task(database):
    async with database.session() as session:
        todo = await TodoRepository(session).save("")
        assert todo.task == ""


@pytest.mark.asyncio
async def test_toggle_flips_and_twice_restores(database):
    async with database.session() as session:
        repo = TodoRepository(session)
        todo = await repo.save("buy milk")

        toggled = await repo.toggle(todo.id)
        assert toggled.done is True

        toggled = await repo.toggle(todo.id)
        assert toggled.done is False


@pytest.mark.asyncio
async def test_toggle_missing_returns_none(database):
    async with database.session() as session:
        assert await TodoRepository(session).toggle(999) is None


@pytest.mark.asyncio
async def test_soft_delete_hides_row(database):
    async with database.session() as session:
        repo = TodoRepository(session)
        keep = await repo.save("keep")
        gone = await repo.save("gone")

        assert await repo.soft_delete(gone.id) is True

        remaining = await repo.get_all()
        assert [t.id for t in remaining] == [keep.id]
        assert await repo.get(gone.id) is None


@pytest.mark.asyncio
async def test_soft_delete_is_not_repeatable(database):
    async with database.session() as session:
        repo = TodoRepository(session)
        todo = await repo.save("buy milk")

        assert await repo.soft_delete(todo.id) is True
        assert await repo.soft_delete(todo.id) is False
        assert await repo.soft_delete(999) is False


@pytest.mark.asyncio
async def test_toggle_deleted_returns_none(database):
    async with database.session() as session:
        repo = TodoRepository(session)
        todo = await repo.save("buy milk")
        await repo.soft_delete(todo.id)

        assert await repo.toggle(todo.id) is None


@pytest.mark.asyncio
async def test_stats_count_live_rows_only(database):
    async with database.session() as session:
        repo = TodoRepository(session)
        a = await repo.save("a")
        await repo.save("b")
        c = await repo.save("c")
        await repo.toggle(a.id)
        await repo.toggle(c.id)
        await repo.soft_delete(c.id)

        total, done = await repo.get_stats()

        assert total == 2
        assert done == 1
        assert total == len(await repo.get_all())


@pytest.mark.asyncio
async def test_stats_empty_store(database):
    async with database.session() as session:
        assert await TodoRepository(session).get_stats() == (0, 0)


@pytest.mark.asyncio
async def test_pending_todos(database):
    async with database.session() as session:
        repo = TodoRepository(session)
        done = await repo.save("done already")
        await repo.toggle(done.id)
        deleted = await repo.save("deleted")
        await repo.soft_delete(deleted.id)
        await repo.save("still open")

        pending = await repo.get_pending_todos()

        assert [t.task for t in pending] == ["still open"]
