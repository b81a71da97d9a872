"""
Request Logging Middleware

Emits one structured "HTTP Request" event per request:

    status, method, path, query, ip, user_agent, latency_ms

Usage:
======
    from todo_service.api.middleware.request_logger import setup_request_logging

    setup_request_logging(app)
"""

import time

from fastapi import FastAPI, Request

from todo_service.shared.core.logging import get_logger


access_logger = get_logger("access")


def setup_request_logging(app: FastAPI) -> None:
    """Register the access log middleware."""

    @app.middleware("http")
    async def access_log_middleware(request: Request, call_next):
        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            access_logger.info(
                "HTTP Request",
                status=status,
                method=request.method,
                path=request.url.path,
                query=request.url.query,
                ip=request.client.host if request.client else None,
                user_agent=request.headers.get("user-agent"),
                latency_ms=round((time.perf_counter() - start) * 1000.0, 3),
            )
