"""
Todo Service API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           TODO SERVICE API                                  │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   Middleware:  CORS → Access log → Exception handlers                       │
│                              │                                              │
│                              ▼                                              │
│   Routers:   /health  /todos (gated)  /reports  /dashboard  /admin          │
│                              │                                              │
│                              ▼                                              │
│   app.state:  settings │ database │ gate │ task_runner │ stats_reporter     │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database connection verified and schema created (failure aborts boot)
3. Periodic stats reporter started
4. Application serves requests
5. Application stops → reporter stopped, in-flight reports awaited
6. Database connection closed

Usage:
======
    # Run with uvicorn
    uvicorn todo_service.api.main:app --host 0.0.0.0 --port 8080

    # Or programmatically
    from todo_service.api.main import create_application
    app = create_application(Settings(SERVER_ROLE="active"))
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_service.config.settings import Settings, get_settings
from todo_service.shared.core.gate import AdmissionGate
from todo_service.shared.core.logging import logger
from todo_service.shared.db.session import Database
from todo_service.api.middleware import setup_exception_handlers, setup_request_logging
from todo_service.api.routes import register_routes
from todo_service.worker.stats_reporter import StatsReporter
from todo_service.worker.task_runner import BackgroundTaskRunner


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Initialize database (connect + create schema)
    - Start the periodic stats reporter

    Shutdown:
    - Stop the stats reporter
    - Wait for in-flight background reports
    - Close database connections
    """
    settings: Settings = app.state.settings

    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting Todo Service",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        mode=app.state.gate.mode.value,
    )

    await app.state.database.init()
    app.state.stats_reporter.start()

    logger.info("Todo Service started successfully")

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down Todo Service")

    await app.state.stats_reporter.stop()
    await app.state.task_runner.join()
    await app.state.database.dispose()

    logger.info("Todo Service shutdown complete")


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Explicit settings; defaults to the cached environment settings

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings
    2. Builds the shared collaborators (database, gate, runners) on app.state
    3. Adds middleware (CORS, access log)
    4. Sets up exception handlers
    5. Registers all routes
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Todo list API with active/standby admission control",
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # SHARED STATE
    # ═══════════════════════════════════════════════════════════════════════════

    database = Database(settings.DATABASE_URL, echo=settings.DEBUG)
    gate = AdmissionGate.from_role(settings.SERVER_ROLE)

    app.state.settings = settings
    app.state.database = database
    app.state.gate = gate
    app.state.task_runner = BackgroundTaskRunner()
    app.state.stats_reporter = StatsReporter(
        database,
        gate,
        interval_seconds=settings.STATS_JOB_INTERVAL_SECONDS,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_request_logging(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Create the application instance
app = create_application()
