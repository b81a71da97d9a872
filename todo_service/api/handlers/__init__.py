"""
API Handlers

Route handlers for the Todo Service API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from todo_service.api.handlers import (
    admin_handler,
    dashboard_handler,
    health_handler,
    report_handler,
    todo_handler,
)

__all__ = [
    "admin_handler",
    "dashboard_handler",
    "health_handler",
    "report_handler",
    "todo_handler",
]
