"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: Base with common config (from_attributes, populate_by_name)
- ApiResponse[T]: The response envelope every endpoint returns
- HealthResponse: Health check payload

Response Envelope:
==================
    {
        "code": 200,
        "message": "Success",
        "data": <payload or null>
    }

The payload type is fixed per endpoint through the type parameter, e.g.
ApiResponse[list[TodoResponse]], ApiResponse[TodoResponse],
ApiResponse[DashboardResponse], ApiResponse[None].

Usage:
======
    return ApiResponse[TodoResponse].created(TodoResponse.model_validate(todo))
"""

from datetime import datetime, timezone
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    Provides:
    - from_attributes: Allow creating from ORM models
    - populate_by_name: Allow field population by name or alias
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# RESPONSE ENVELOPE
# ═══════════════════════════════════════════════════════════════════════════════


class ApiResponse(BaseModel, Generic[DataT]):
    """Standard response envelope for success and error responses."""

    code: int = Field(description="HTTP status code of the response")
    message: str = Field(description="Human-readable result message")
    data: Optional[DataT] = Field(default=None, description="Response payload")

    @classmethod
    def success(cls, data: Optional[DataT] = None, message: str = "Success") -> "ApiResponse[DataT]":
        return cls(code=200, message=message, data=data)

    @classmethod
    def created(cls, data: DataT, message: str = "Created") -> "ApiResponse[DataT]":
        return cls(code=201, message=message, data=data)

    @classmethod
    def accepted(cls, message: str) -> "ApiResponse[DataT]":
        return cls(code=202, message=message, data=None)


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "todo-service"
    version: str = "1.0.0"
    mode: str = Field(description="Current admission gate mode")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
