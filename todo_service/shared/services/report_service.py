"""
Report Service

Builds the daily report of pending todos. Meant to run detached from the
request through BackgroundTaskRunner: POST /reports answers 202 right away
and the caller never learns the outcome.

Steps:
======
    1. Load pending todos (own session)       → on failure: log, stop
    2. Format the report text
    3. Simulated post-processing delay
    4. Log completion with the report body    ← e-mail / file delivery would go here

Sample Report:
==============
    === Daily Report ===
    Pending todos: 2
    - [ ] buy milk
    - [ ] write report
"""

import asyncio
from typing import Iterable, Optional

from todo_service.shared.core.logging import get_logger
from todo_service.shared.db.session import Database
from todo_service.shared.models.todo import Todo
from todo_service.shared.services.todo_service import TodoService


logger = get_logger("report")


def build_report(pending: Iterable[Todo]) -> str:
    pending = list(pending)
    lines = ["=== Daily Report ===", f"Pending todos: {len(pending)}"]
    lines.extend(f"- [ ] {todo.task}" for todo in pending)
    return "\n".join(lines) + "\n"


class ReportService:
    """Generates the pending-todos report."""

    def __init__(self, database: Database, processing_delay_seconds: float = 2.0) -> None:
        self.database = database
        self.processing_delay_seconds = processing_delay_seconds

    async def generate(self) -> Optional[str]:
        """
        Build the report.

        Returns:
            The report text, or None if the pending todos could not be loaded
        """
        logger.info("Report data collection started")

        try:
            async with self.database.session() as session:
                pending = await TodoService(session).get_pending_todos()
        except Exception as e:
            logger.error("Report generation failed", error=str(e))
            return None

        report = build_report(pending)

        await asyncio.sleep(self.processing_delay_seconds)

        logger.info("Report generated", pending=len(pending), report=report)
        return report
