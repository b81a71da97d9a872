"""
Admin Handler

Switches the admission gate between STANDBY and ACTIVE. Not gated.
"""

from fastapi import APIRouter

from todo_service.api.dependencies import Gate
from todo_service.shared.schemas.common import ApiResponse
from todo_service.shared.schemas.todo import ServerModeResponse


router = APIRouter()


@router.post("/promote", response_model=ApiResponse[ServerModeResponse])
async def promote(gate: Gate):
    """Switch the server to ACTIVE."""
    mode = gate.promote()
    return ApiResponse[ServerModeResponse].success(
        ServerModeResponse(mode=mode, active=gate.is_active()),
        message="Server is now ACTIVE",
    )


@router.post("/demote", response_model=ApiResponse[ServerModeResponse])
async def demote(gate: Gate):
    """Switch the server to STANDBY."""
    mode = gate.demote()
    return ApiResponse[ServerModeResponse].success(
        ServerModeResponse(mode=mode, active=gate.is_active()),
        message="Server is now STANDBY",
    )
