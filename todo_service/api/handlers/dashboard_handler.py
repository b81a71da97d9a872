"""
Dashboard Handler

GET /dashboard runs the profile and stats lookups concurrently and returns
both lines once both have finished. Not gated.
"""

from fastapi import APIRouter, Depends

from todo_service.api.dependencies.services import get_dashboard_service
from todo_service.shared.schemas.common import ApiResponse
from todo_service.shared.schemas.todo import DashboardResponse
from todo_service.shared.services.dashboard_service import DashboardService


router = APIRouter()


@router.get("", response_model=ApiResponse[DashboardResponse])
async def get_dashboard(
    dashboard_service: DashboardService = Depends(get_dashboard_service),
):
    """
    Aggregated dashboard.

    Entries are in completion order, which varies between calls.
    """
    lines = await dashboard_service.build()
    return ApiResponse[DashboardResponse].success(DashboardResponse(dashboard=lines))
