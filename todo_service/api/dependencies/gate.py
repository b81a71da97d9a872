"""
Admission Gate Dependencies

Gated routers are built with `route_class=AdmissionGateRoute`. The check wraps
the whole route handler, so it runs before FastAPI reads the body or resolves
any dependency: in STANDBY a request is rejected with 503 even when its body
is malformed, and no session is opened.

Usage:
======
    router = APIRouter(route_class=AdmissionGateRoute)
"""

from typing import Annotated, Any, Callable, Coroutine

from fastapi import Depends, Request, Response
from fastapi.routing import APIRoute

from todo_service.shared.core.exceptions import StandbyModeError
from todo_service.shared.core.gate import AdmissionGate
from todo_service.worker.task_runner import BackgroundTaskRunner


def get_gate(request: Request) -> AdmissionGate:
    return request.app.state.gate


def get_task_runner(request: Request) -> BackgroundTaskRunner:
    return request.app.state.task_runner


class AdmissionGateRoute(APIRoute):
    """
    Route that rejects requests unless the server is ACTIVE.

    Raises:
        StandbyModeError: If the gate is in STANDBY (503)
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        route_handler = super().get_route_handler()

        async def gated_route_handler(request: Request) -> Response:
            if not get_gate(request).is_active():
                raise StandbyModeError()
            return await route_handler(request)

        return gated_route_handler


Gate = Annotated[AdmissionGate, Depends(get_gate)]
TaskRunner = Annotated[BackgroundTaskRunner, Depends(get_task_runner)]
