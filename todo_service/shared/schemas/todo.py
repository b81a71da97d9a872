"""
Todo Schemas

Request/response models for todo, dashboard and admin endpoints.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from todo_service.shared.core.gate import ServerMode
from todo_service.shared.schemas.common import BaseSchema


class TodoCreateRequest(BaseModel):
    """Request body for POST /todos."""

    task: str = Field(default="", description="Task description, stored as given; missing means empty")
    done: Optional[bool] = Field(
        default=None,
        description="Accepted for compatibility and ignored; new todos always start not done",
    )


class TodoResponse(BaseSchema):
    """A stored todo."""

    id: int
    task: str
    done: bool
    created_at: datetime
    updated_at: datetime


class DashboardResponse(BaseModel):
    """Aggregated dashboard lines, in completion order."""

    dashboard: List[str]


class ServerModeResponse(BaseModel):
    """Current admission gate mode."""

    mode: ServerMode
    active: bool
