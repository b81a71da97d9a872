"""
Todo Service

Todo-list HTTP API with an active/standby admission gate, a concurrent
dashboard, background report generation and a periodic stats job.

Package Structure:
==================
    todo_service/
    ├── api/        ← FastAPI application
    ├── worker/     ← Fan-out aggregator, background runner, stats reporter
    ├── shared/     ← Shared code (models, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    todo-service
    # or
    uvicorn todo_service.api.main:app --port 8080
"""

__version__ = "1.0.0"
