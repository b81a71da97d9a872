"""
Dashboard Service

Builds the dashboard by running two independent lookups concurrently:

    ┌──────────────────────┐     ┌──────────────────────────────────────────┐
    │ profile lookup       │     │ stats lookup                             │
    │ (simulated latency)  │     │ TodoService.get_stats() on own session   │
    └──────────┬───────────┘     └────────────────────┬─────────────────────┘
               └──────────────┬───────────────────────┘
                              ▼
                      FanOutAggregator
                              ▼
               ["Stats: ...", "User Profile: ..."]   (completion order)

The stats line reports the completion rate; with no todos the rate is 0%.
A failed stats lookup yields an error line instead of failing the dashboard.
"""

import asyncio
from typing import List

from todo_service.shared.core.logging import get_logger
from todo_service.shared.db.session import Database
from todo_service.shared.services.todo_service import TodoService
from todo_service.worker.fan_out import FanOutAggregator


logger = get_logger("dashboard")

PROFILE_SUMMARY = "User Profile: Gyong97 (Level 99)"


def completion_rate(total: int, done: int) -> float:
    """Percentage of done todos; 0 when there are none."""
    if total <= 0:
        return 0.0
    return done / total * 100


def format_stats(total: int, done: int) -> str:
    return f"Stats: Total {total} / Done {done} (Rate: {completion_rate(total, done):.0f}%)"


class DashboardService:
    """Concurrent aggregation of the profile and stats lookups."""

    def __init__(self, database: Database, profile_delay_seconds: float = 1.0) -> None:
        self.database = database
        self.profile_delay_seconds = profile_delay_seconds

    async def profile_lookup(self) -> str:
        await asyncio.sleep(self.profile_delay_seconds)
        logger.info("Profile lookup finished")
        return PROFILE_SUMMARY

    async def stats_lookup(self) -> str:
        try:
            async with self.database.session() as session:
                total, done = await TodoService(session).get_stats()
        except Exception as e:
            logger.error("Stats lookup failed", error=str(e))
            return f"Stats Error: {e}"

        return format_stats(total, done)

    async def build(self) -> List[str]:
        """Run both lookups and return their lines in completion order."""
        aggregator = FanOutAggregator([self.profile_lookup, self.stats_lookup])
        return await aggregator.run()
