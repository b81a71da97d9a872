"""
Background Task Runner

Fire-and-forget execution of coroutines detached from the request that
started them.

Contract:
=========
- spawn() schedules the coroutine and returns immediately
- The caller is never told whether the job succeeded; outcomes are only
  visible in the logs (failure sink) and through the returned task
- Jobs are not cancelled or timed out while the process runs
- join() lets shutdown wait for in-flight jobs to finish

Usage:
======
    runner = BackgroundTaskRunner()
    runner.spawn(report_service.generate(), name="daily-report")
    ...
    await runner.join()
"""

import asyncio
from typing import Any, Coroutine, Optional, Set

from todo_service.shared.core.logging import get_logger


logger = get_logger("task_runner")


class BackgroundTaskRunner:
    """Tracks detached asyncio tasks and logs how each one ended."""

    def __init__(self) -> None:
        # Strong references; the event loop only keeps weak ones
        self._tasks: Set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def spawn(self, coro: Coroutine[Any, Any, Any], name: Optional[str] = None) -> asyncio.Task:
        """Schedule `coro` on the running loop without awaiting it."""
        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        logger.info("Background task started", task=task.get_name())
        return task

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)

        if task.cancelled():
            logger.warning("Background task cancelled", task=task.get_name())
            return

        error = task.exception()
        if error is not None:
            logger.error(
                "Background task failed",
                task=task.get_name(),
                error=str(error),
                error_type=type(error).__name__,
            )
        else:
            logger.info("Background task finished", task=task.get_name())

    async def join(self) -> None:
        """Wait until every task spawned so far has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
