"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, response envelope, health
- todo: Todo, dashboard and server mode payloads

Usage:
======
    from todo_service.shared.schemas import ApiResponse, TodoResponse
"""

from todo_service.shared.schemas.common import (
    BaseSchema,
    ApiResponse,
    HealthResponse,
)
from todo_service.shared.schemas.todo import (
    TodoCreateRequest,
    TodoResponse,
    DashboardResponse,
    ServerModeResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "ApiResponse",
    "HealthResponse",
    # Todo
    "TodoCreateRequest",
    "TodoResponse",
    "DashboardResponse",
    "ServerModeResponse",
]
