"""
API Middleware

Custom middleware for the FastAPI application.

Components:
===========
- error_handler: Global exception handling (response envelope)
- request_logger: Structured access log

Usage:
======
    from todo_service.api.middleware import setup_exception_handlers, setup_request_logging

    app = FastAPI()
    setup_exception_handlers(app)
    setup_request_logging(app)
"""

from todo_service.api.middleware.error_handler import setup_exception_handlers
from todo_service.api.middleware.request_logger import setup_request_logging

__all__ = [
    "setup_exception_handlers",
    "setup_request_logging",
]
