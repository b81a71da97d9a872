"""Tests for the periodic stats reporter."""

import asyncio

import pytest

from todo_service.shared.core.gate import AdmissionGate, ServerMode
from todo_service.shared.services.todo_service import TodoService
from todo_service.worker.stats_reporter import StatsReporter


@pytest.mark.asyncio
async def test_tick_skipped_in_standby(database, monkeypatch):
    gate = AdmissionGate(ServerMode.STANDBY)
    reporter = StatsReporter(database, gate)
    opened = []
    open_session = database.session

    def counting_session():
        opened.append(1)
        return open_session()

    monkeypatch.setattr(database, "session", counting_session)

    assert await reporter.tick() is None
    assert opened == []

    gate.promote()
    assert await reporter.tick() == "Todos: total 0 / done 0"
    assert opened == [1]


@pytest.mark.asyncio
async def test_tick_reports_when_active(database):
    async with database.session() as session:
        service = TodoService(session)
        await service.create_todo("a")
        todo = await service.create_todo("b")
        await service.toggle_todo(todo.id)

    reporter = StatsReporter(database, AdmissionGate(ServerMode.ACTIVE))

    assert await reporter.tick() == "Todos: total 2 / done 1"


@pytest.mark.asyncio
async def test_tick_follows_gate_changes(database):
    gate = AdmissionGate()
    reporter = StatsReporter(database, gate)

    assert await reporter.tick() is None
    gate.promote()
    assert await reporter.tick() == "Todos: total 0 / done 0"


@pytest.mark.asyncio
async def test_tick_failure_returns_none(broken_database):
    reporter = StatsReporter(broken_database, AdmissionGate(ServerMode.ACTIVE))

    assert await reporter.tick() is None


@pytest.mark.asyncio
async def test_loop_survives_crashing_tick(database, monkeypatch):
    reporter = StatsReporter(database, AdmissionGate(ServerMode.ACTIVE), interval_seconds=0.01)
    calls = []

    async def crashing_tick():
        calls.append(1)
        raise RuntimeError("tick crashed")

    monkeypatch.setattr(reporter, "tick", crashing_tick)

    reporter.start()
    await asyncio.sleep(0.1)
    await reporter.stop()

    assert len(calls) >= 2
    assert reporter.running is False


@pytest.mark.asyncio
async def test_start_and_stop(database):
    reporter = StatsReporter(database, AdmissionGate(), interval_seconds=3600)

    reporter.start()
    assert reporter.running is True

    await reporter.stop()
    assert reporter.running is False
