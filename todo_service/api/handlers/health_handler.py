"""
Health Check Handler

Provides the health check endpoint for monitoring and load balancers.
Always answers 200, in either gate mode.
"""

from fastapi import APIRouter, Request

from todo_service.api.dependencies import Gate
from todo_service.shared.schemas.common import ApiResponse, HealthResponse


router = APIRouter()


@router.get("/health", response_model=ApiResponse[HealthResponse])
async def health_check(request: Request, gate: Gate):
    """
    Basic health check endpoint.

    Returns:
        Service name, version and current gate mode
    """
    settings = request.app.state.settings
    return ApiResponse[HealthResponse].success(
        HealthResponse(
            status="healthy",
            service=settings.APP_NAME.lower().replace(" ", "-"),
            version=settings.APP_VERSION,
            mode=gate.mode.value,
        )
    )
