"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions
- Admission gate (Standby/Active)

Usage:
======
    from todo_service.shared.core.logging import logger, get_logger
    from todo_service.shared.core.exceptions import TodoNotFoundError
    from todo_service.shared.core.gate import AdmissionGate, ServerMode
"""

from todo_service.shared.core.logging import (
    logger,
    get_logger,
)
from todo_service.shared.core.exceptions import (
    TodoServiceException,
    ValidationError,
    NotFoundError,
    TodoNotFoundError,
    StoreFailureError,
    ServiceUnavailableError,
    StandbyModeError,
)
from todo_service.shared.core.gate import AdmissionGate, ServerMode

__all__ = [
    # Logging
    "logger",
    "get_logger",
    # Exceptions
    "TodoServiceException",
    "ValidationError",
    "NotFoundError",
    "TodoNotFoundError",
    "StoreFailureError",
    "ServiceUnavailableError",
    "StandbyModeError",
    # Admission gate
    "AdmissionGate",
    "ServerMode",
]
