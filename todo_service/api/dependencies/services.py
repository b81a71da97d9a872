"""
Service Dependencies

FastAPI dependencies for service injection.

TodoService is created per request around the request's session.
DashboardService and ReportService open their own sessions (their work runs
concurrently or outlives the request), so they are built from the shared
Database instance and the application settings.
"""

from fastapi import Depends, Request

from todo_service.api.dependencies.database import DbSession, get_database
from todo_service.shared.db.session import Database
from todo_service.shared.services.dashboard_service import DashboardService
from todo_service.shared.services.report_service import ReportService
from todo_service.shared.services.todo_service import TodoService


async def get_todo_service(db: DbSession) -> TodoService:
    """
    Dependency to get TodoService instance.

    Creates a new service instance per request with the request's db session.
    """
    return TodoService(db)


async def get_dashboard_service(
    request: Request,
    database: Database = Depends(get_database),
) -> DashboardService:
    """Dependency to get DashboardService instance."""
    settings = request.app.state.settings
    return DashboardService(
        database,
        profile_delay_seconds=settings.DASHBOARD_PROFILE_DELAY_SECONDS,
    )


async def get_report_service(
    request: Request,
    database: Database = Depends(get_database),
) -> ReportService:
    """Dependency to get ReportService instance."""
    settings = request.app.state.settings
    return ReportService(
        database,
        processing_delay_seconds=settings.REPORT_PROCESSING_DELAY_SECONDS,
    )
