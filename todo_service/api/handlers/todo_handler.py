"""
Todo Handler

CRUD endpoints for todos. Every route here sits behind the admission gate:
in STANDBY mode they answer 503 and do no work.

ARCHITECTURE:
=============
    Handler → TodoService → TodoRepository → Todo

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Not-found and store failures are raised by the service and turned into
responses by the global exception handlers.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from todo_service.api.dependencies import AdmissionGateRoute
from todo_service.api.dependencies.services import get_todo_service
from todo_service.shared.schemas.common import ApiResponse
from todo_service.shared.schemas.todo import TodoCreateRequest, TodoResponse
from todo_service.shared.services.todo_service import TodoService


router = APIRouter(route_class=AdmissionGateRoute)


@router.get("", response_model=ApiResponse[List[TodoResponse]])
async def list_todos(
    todo_service: TodoService = Depends(get_todo_service),
):
    """
    List all todos that have not been deleted.

    Order is whatever the store returns.
    """
    todos = await todo_service.list_todos()
    return ApiResponse[List[TodoResponse]].success(
        [TodoResponse.model_validate(todo) for todo in todos]
    )


@router.post(
    "",
    response_model=ApiResponse[TodoResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_todo(
    request: TodoCreateRequest,
    todo_service: TodoService = Depends(get_todo_service),
):
    """
    Create a todo.

    A `done` value in the body is ignored; new todos always start not done.
    """
    todo = await todo_service.create_todo(request.task)
    return ApiResponse[TodoResponse].created(TodoResponse.model_validate(todo))


@router.patch("/{todo_id}", response_model=ApiResponse[TodoResponse])
async def toggle_todo(
    todo_id: int,
    todo_service: TodoService = Depends(get_todo_service),
):
    """Flip the completion flag of a todo."""
    todo = await todo_service.toggle_todo(todo_id)
    return ApiResponse[TodoResponse].success(
        TodoResponse.model_validate(todo),
        message="Updated",
    )


@router.delete("/{todo_id}", response_model=ApiResponse[None])
async def delete_todo(
    todo_id: int,
    todo_service: TodoService = Depends(get_todo_service),
):
    """Soft delete a todo."""
    await todo_service.delete_todo(todo_id)
    return ApiResponse[None].success(message="Deleted")
