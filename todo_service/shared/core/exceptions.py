"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    TodoServiceException (base)
       │
       ├── ValidationError (400)          ← Malformed request body
       ├── NotFoundError (404)            ← Resource absent or soft-deleted
       │      └── TodoNotFoundError
       ├── StoreFailureError (500)        ← Connection / constraint errors
       └── ServiceUnavailableError (503)  ← Server cannot take the request
              └── StandbyModeError        ← Admission gate is in STANDBY

Usage:
======
    from todo_service.shared.core.exceptions import TodoNotFoundError

    raise TodoNotFoundError(todo_id)
    # Results in: {"code": 404, "message": "Todo with id '7' not found", "data": null}

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to the
    standard response envelope:
    {
        "code": 404,
        "message": "Todo with id '7' not found",
        "data": null
    }
"""

from typing import Any, Optional


class TodoServiceException(Exception):
    """
    Base exception for all Todo Service errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code (logged, not sent)
        details: Additional error context (logged, not sent)
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to the response envelope.

        Returns:
            Dictionary with code, message and an empty data payload
        """
        return {
            "code": self.status_code,
            "message": self.message,
            "data": None,
        }


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(TodoServiceException):
    """
    Validation error (400 Bad Request).

    Raised for request bodies or path parameters that cannot be parsed into
    the expected shape (see the RequestValidationError handler).
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(TodoServiceException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("Todo", 7)
        # Message: "Todo with id '7' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class TodoNotFoundError(NotFoundError):
    """Todo absent or already soft-deleted."""

    def __init__(self, todo_id: int) -> None:
        super().__init__(resource="Todo", resource_id=todo_id)


# ═══════════════════════════════════════════════════════════════════════════════
# STORE ERRORS (500)
# ═══════════════════════════════════════════════════════════════════════════════


class StoreFailureError(TodoServiceException):
    """
    Persistence failure (500 Internal Server Error).

    Wraps driver/ORM errors (connection loss, constraint violations) so that
    handlers never deal with SQLAlchemy exceptions directly.
    """

    def __init__(
        self,
        operation: str,
        cause: Optional[BaseException] = None,
    ) -> None:
        details: dict[str, Any] = {"operation": operation}
        if cause is not None:
            details["cause"] = f"{type(cause).__name__}: {cause}"
        super().__init__(
            message=f"Failed to {operation}",
            status_code=500,
            error_code="STORE_FAILURE",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE ERRORS (503)
# ═══════════════════════════════════════════════════════════════════════════════


class ServiceUnavailableError(TodoServiceException):
    """Service temporarily unavailable error (503)."""

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code="SERVICE_UNAVAILABLE",
            details=details,
        )


class StandbyModeError(ServiceUnavailableError):
    """Raised by gated routes while the server is in STANDBY mode."""

    def __init__(self) -> None:
        super().__init__(
            message="Service Unavailable (Server is in STANDBY mode)",
            details={"mode": "standby"},
        )
