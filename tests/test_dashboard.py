"""Tests for the fan-out aggregator and the dashboard."""

import asyncio

import pytest

from todo_service.shared.services.dashboard_service import (
    PROFILE_SUMMARY,
    DashboardService,
    completion_rate,
    format_stats,
)
from todo_service.worker.fan_out import FanOutAggregator


def delayed(value, seconds):
    async def unit():
        await asyncio.sleep(seconds)
        return value

    unit.__name__ = f"unit_{value}"
    return unit


class TestFanOutAggregator:
    @pytest.mark.asyncio
    async def test_results_in_completion_order(self):
        aggregator = FanOutAggregator([delayed("slow", 0.1), delayed("fast", 0)])

        assert await aggregator.run() == ["fast", "slow"]

    @pytest.mark.asyncio
    async def test_units_run_concurrently(self):
        aggregator = FanOutAggregator([delayed("a", 0.2), delayed("b", 0.2)])

        loop = asyncio.get_running_loop()
        started = loop.time()
        results = await aggregator.run()

        assert sorted(results) == ["a", "b"]
        assert loop.time() - started < 0.35

    @pytest.mark.asyncio
    async def test_failing_unit_still_reports(self):
        async def broken():
            raise RuntimeError("boom")

        results = await FanOutAggregator([delayed("ok", 0), broken]).run()

        assert len(results) == 2
        assert "ok" in results
        assert "broken error: boom" in results

    @pytest.mark.asyncio
    async def test_cancelled_run_cancels_units(self):
        started = asyncio.Event()
        cancelled = asyncio.Event()

        async def hanging():
            started.set()
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.set()
                raise
            return "never"

        run = asyncio.create_task(FanOutAggregator([hanging, delayed("fast", 0)]).run())
        await started.wait()

        run.cancel()
        with pytest.raises(asyncio.CancelledError):
            await run

        await asyncio.wait_for(cancelled.wait(), timeout=1)

    def test_requires_units(self):
        with pytest.raises(ValueError):
            FanOutAggregator([])


class TestStatsFormatting:
    def test_rate_is_zero_without_todos(self):
        assert completion_rate(0, 0) == 0.0
        assert format_stats(0, 0) == "Stats: Total 0 / Done 0 (Rate: 0%)"

    def test_rate_is_rounded_percentage(self):
        assert format_stats(4, 1) == "Stats: Total 4 / Done 1 (Rate: 25%)"
        assert format_stats(3, 2) == "Stats: Total 3 / Done 2 (Rate: 67%)"


class TestDashboardService:
    @pytest.mark.asyncio
    async def test_stats_arrive_before_profile(self, database):
        service = DashboardService(database, profile_delay_seconds=0.1)

        lines = await service.build()

        assert lines == ["Stats: Total 0 / Done 0 (Rate: 0%)", PROFILE_SUMMARY]

    @pytest.mark.asyncio
    async def test_stats_failure_becomes_error_line(self, broken_database):
        service = DashboardService(broken_database, profile_delay_seconds=0)

        lines = await service.build()

        assert len(lines) == 2
        assert PROFILE_SUMMARY in lines
        assert any(line.startswith("Stats Error:") for line in lines)


def test_dashboard_endpoint(client):
    client.post("/todos", json={"task": "a"})
    client.post("/todos", json={"task": "b"})
    client.patch("/todos/1")

    response = client.get("/dashboard")

    assert response.status_code == 200
    dashboard = response.json()["data"]["dashboard"]
    assert len(dashboard) == 2
    assert "Stats: Total 2 / Done 1 (Rate: 50%)" in dashboard
    assert PROFILE_SUMMARY in dashboard
