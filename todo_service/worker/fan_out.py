"""
Fan-out Aggregator

Runs independent units of work concurrently and collects exactly one result
from each, in the order they finish.

Flow:
=====
    ┌──────────┐   put    ┌────────────────────┐
    │  unit A  │ ───────▶ │                    │
    └──────────┘          │  results queue     │  get until  ┌───────────┐
    ┌──────────┐   put    │  (maxsize = units) │ ──────────▶ │ collector │
    │  unit B  │ ───────▶ │                    │   CLOSED    └───────────┘
    └──────────┘          └────────────────────┘
          ▲                        ▲
          │ await both             │ put CLOSED
          └────── supervisor ──────┘

- The queue holds one slot per unit, so a unit never waits for the consumer.
- The supervisor waits for every unit, then closes the queue.
- The collector drains until closed; there is no timeout, so the slowest unit
  sets the latency of the whole aggregation.
- If the caller is cancelled (client disconnect), unfinished units and the
  supervisor are cancelled with it.

A unit is an async callable returning a string. Units are expected to turn
their own failures into a descriptive string; if one raises anyway, its
failure is reported as a string result so the aggregation still completes.
"""

import asyncio
from typing import Awaitable, Callable, List, Sequence

from todo_service.shared.core.logging import get_logger


logger = get_logger("fan_out")

Unit = Callable[[], Awaitable[str]]

_CLOSED = object()


class FanOutAggregator:
    """Concurrent fan-out/fan-in over a fixed set of units."""

    def __init__(self, units: Sequence[Unit]) -> None:
        if not units:
            raise ValueError("FanOutAggregator needs at least one unit")
        self.units = list(units)

    async def _run_unit(self, unit: Unit, results: asyncio.Queue) -> None:
        try:
            result = await unit()
        except Exception as e:
            name = getattr(unit, "__name__", repr(unit))
            logger.error("Fan-out unit failed", unit=name, error=str(e))
            result = f"{name} error: {e}"
        results.put_nowait(result)

    async def _supervise(self, tasks: List[asyncio.Task], results: asyncio.Queue) -> None:
        await asyncio.gather(*tasks)
        await results.put(_CLOSED)

    async def run(self) -> List[str]:
        """
        Run all units concurrently and return their results.

        Returns:
            One string per unit, ordered by completion time
        """
        results: asyncio.Queue = asyncio.Queue(maxsize=len(self.units))
        tasks = [asyncio.create_task(self._run_unit(unit, results)) for unit in self.units]
        supervisor = asyncio.create_task(self._supervise(tasks, results))

        collected: List[str] = []
        try:
            while True:
                item = await results.get()
                if item is _CLOSED:
                    break
                collected.append(item)

            await supervisor
        finally:
            # Anything still pending means the caller was cancelled
            for task in (*tasks, supervisor):
                if not task.done():
                    task.cancel()

        return collected
