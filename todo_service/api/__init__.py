"""
API Module

FastAPI application and route handlers.

Package Structure:
==================
    api/
    ├── main.py           ← Application factory and lifespan
    ├── routes.py         ← Route registration
    ├── run.py            ← uvicorn entry point
    ├── dependencies/     ← FastAPI dependencies
    ├── handlers/         ← Route handlers
    └── middleware/       ← Exception handlers, access log

Usage:
======
    # Run the API
    uvicorn todo_service.api.main:app --port 8080

    # Import the app
    from todo_service.api.main import app, create_application
"""
