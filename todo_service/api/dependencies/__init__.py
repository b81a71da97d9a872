"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_database(), get_db(), DbSession
- Admission gate: get_gate(), Gate, AdmissionGateRoute
- Background work: get_task_runner(), TaskRunner
- Services: get_*_service() functions

Everything is resolved from app.state, populated by create_application();
there are no module-level singletons.

Usage:
======
    from todo_service.api.dependencies import Gate

    @router.post("/promote")
    async def promote(gate: Gate):
        gate.promote()
"""

from todo_service.api.dependencies.database import (
    get_database,
    get_db,
    DbSession,
)
from todo_service.api.dependencies.gate import (
    get_gate,
    get_task_runner,
    AdmissionGateRoute,
    Gate,
    TaskRunner,
)

__all__ = [
    # Database
    "get_database",
    "get_db",
    "DbSession",
    # Admission gate
    "get_gate",
    "AdmissionGateRoute",
    "Gate",
    # Background work
    "get_task_runner",
    "TaskRunner",
]
