"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to the standard response envelope.

Error Response Format:
======================
    {
        "code": 404,
        "message": "Todo with id '7' not found",
        "data": null
    }

Exception Handling:
===================
1. TodoServiceException subclasses → Use their status_code and to_dict()
2. Request validation errors (bad JSON, missing fields, bad path params) → 400
3. Other exceptions → 500 with generic message (details hidden). This includes
   pydantic errors raised while building a response, which are server faults.

Usage:
======
    from todo_service.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from todo_service.shared.core.exceptions import TodoServiceException, ValidationError
from todo_service.shared.core.logging import logger


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(TodoServiceException)
    async def todo_service_exception_handler(
        request: Request,
        exc: TodoServiceException,
    ) -> JSONResponse:
        """
        Handle application exceptions.

        All custom exceptions inherit from TodoServiceException and carry:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context (logged only)
        """
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            details=exc.details,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Malformed body or path parameters, answered as a ValidationError."""
        error = ValidationError(
            message="Invalid request body",
            details={"errors": jsonable_encoder(exc.errors())},
        )
        return await todo_service_exception_handler(request, error)

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "code": 500,
                "message": "An unexpected error occurred",
                "data": None,
            },
        )
