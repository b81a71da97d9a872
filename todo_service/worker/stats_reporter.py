"""
Periodic Stats Reporter

Every STATS_JOB_INTERVAL_SECONDS, while the admission gate is ACTIVE, reads
the todo statistics and emits a summary notification. The notification sink
is the log; a chat/webhook integration would plug in at _notify().

Tick Behavior:
==============
    gate STANDBY  → skip, no query
    stats fail    → log error, wait for the next tick
    stats ok      → emit "Todos: total N / done M"

The loop starts once at application startup and lives as long as the process.
stop() exists only for application shutdown.
"""

import asyncio
from typing import Optional

from todo_service.shared.core.gate import AdmissionGate
from todo_service.shared.core.logging import get_logger
from todo_service.shared.db.session import Database
from todo_service.shared.services.todo_service import TodoService


logger = get_logger("stats_reporter")


class StatsReporter:
    """Fixed-interval stats job gated by the admission gate."""

    def __init__(
        self,
        database: Database,
        gate: AdmissionGate,
        interval_seconds: float = 60.0,
    ) -> None:
        self.database = database
        self.gate = gate
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start the background loop on the running event loop."""
        if self.running:
            logger.warning("Stats reporter is already running")
            return

        self._task = asyncio.create_task(self._run_loop(), name="stats-reporter")
        logger.info("Stats reporter started", interval_seconds=self.interval_seconds)

    async def stop(self) -> None:
        if not self.running:
            return

        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Stats reporter stopped")

    async def _run_loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                await self.tick()
            except Exception as e:
                # A single bad tick never ends the loop
                logger.error("Stats tick crashed", error=str(e), exc_info=True)

    async def tick(self) -> Optional[str]:
        """
        Run one iteration.

        Returns:
            The emitted summary, or None when skipped or failed
        """
        if not self.gate.is_active():
            logger.debug("Stats tick skipped", mode=self.gate.mode.value)
            return None

        try:
            async with self.database.session() as session:
                total, done = await TodoService(session).get_stats()
        except Exception as e:
            logger.error("Stats query failed", error=str(e))
            return None

        summary = f"Todos: total {total} / done {done}"
        self._notify(summary, total=total, done=done)
        return summary

    def _notify(self, summary: str, **fields: int) -> None:
        logger.info("Stats report", summary=summary, **fields)
