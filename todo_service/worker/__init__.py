"""
Background Work

- FanOutAggregator: run units concurrently, collect results in completion order
- BackgroundTaskRunner: fire-and-forget tasks with a logging failure sink
- StatsReporter: fixed-interval stats job gated by the admission gate
"""

from todo_service.worker.fan_out import FanOutAggregator
from todo_service.worker.task_runner import BackgroundTaskRunner
from todo_service.worker.stats_reporter import StatsReporter

__all__ = [
    "FanOutAggregator",
    "BackgroundTaskRunner",
    "StatsReporter",
]
