"""
Report Handler

POST /reports answers 202 immediately and generates the report in a
detached background task. Failures are only visible in the logs.
"""

from fastapi import APIRouter, Depends, status

from todo_service.api.dependencies import TaskRunner
from todo_service.api.dependencies.services import get_report_service
from todo_service.shared.schemas.common import ApiResponse
from todo_service.shared.services.report_service import ReportService


router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[None],
    status_code=status.HTTP_202_ACCEPTED,
)
async def generate_daily_report(
    runner: TaskRunner,
    report_service: ReportService = Depends(get_report_service),
):
    """Queue daily report generation."""
    runner.spawn(report_service.generate(), name="daily-report")
    return ApiResponse[None].accepted("Report generation accepted (processing in background)")
