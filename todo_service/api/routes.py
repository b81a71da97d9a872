"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health         → Health check                      (open)
    /todos          → Todo CRUD                         (gated)
    /reports        → Background report generation      (open)
    /dashboard      → Concurrent dashboard aggregation  (open)
    /admin          → Promote / demote the server       (open)

Usage:
======
    from todo_service.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from todo_service.api.handlers import (
    admin_handler,
    dashboard_handler,
    health_handler,
    report_handler,
    todo_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    # Todo endpoints (admission gate applied on the router)
    app.include_router(
        todo_handler.router,
        prefix="/todos",
        tags=["Todos"],
    )

    app.include_router(
        report_handler.router,
        prefix="/reports",
        tags=["Reports"],
    )

    app.include_router(
        dashboard_handler.router,
        prefix="/dashboard",
        tags=["Dashboard"],
    )

    app.include_router(
        admin_handler.router,
        prefix="/admin",
        tags=["Admin"],
    )
