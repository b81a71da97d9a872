"""End-to-end tests for the /todos routes."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from todo_service.api.main import create_application
from todo_service.shared.repositories.todo_repository import TodoRepository
from todo_service.shared.schemas.todo import TodoResponse


def test_create_toggle_delete_flow(client):
    response = client.post("/todos", json={"task": "buy milk"})
    assert response.status_code == 201
    body = response.json()
    assert body["code"] == 201
    assert body["data"]["id"] == 1
    assert body["data"]["task"] == "buy milk"
    assert body["data"]["done"] is False

    response = client.patch("/todos/1")
    assert response.status_code == 200
    assert response.json()["data"]["done"] is True

    response = client.delete("/todos/1")
    assert response.status_code == 200
    assert response.json() == {"code": 200, "message": "Deleted", "data": None}

    response = client.get("/todos")
    assert response.status_code == 200
    assert response.json()["data"] == []


def test_create_ignores_client_done(client):
    response = client.post("/todos", json={"task": "already done?", "done": True})

    assert response.status_code == 201
    assert response.json()["data"]["done"] is False


def test_create_allows_empty_task(client):
    response = client.post("/todos", json={"task": ""})

    assert response.status_code == 201
    assert response.json()["data"]["task"] == ""


def test_list_returns_live_todos(client):
    for task in ("a", "b", "c"):
        client.post("/todos", json={"task": task})
    client.delete("/todos/2")

    data = client.get("/todos").json()["data"]

    assert sorted(t["id"] for t in data) == [1, 3]
    assert {"id", "task", "done", "created_at", "updated_at"} <= set(data[0])


def test_toggle_twice_restores_done(client):
    client.post("/todos", json={"task": "buy milk"})

    client.patch("/todos/1")
    response = client.patch("/todos/1")

    assert response.json()["data"]["done"] is False


def test_create_missing_task_stores_empty_text(client):
    response = client.post("/todos", json={})

    assert response.status_code == 201
    assert response.json()["data"]["task"] == ""
    assert response.json()["data"]["done"] is False


def test_create_non_string_task_is_bad_request(client):
    response = client.post("/todos", json={"task": 5})

    assert response.status_code == 400
    assert response.json() == {
        "code": 400,
        "message": "Invalid request body",
        "data": None,
    }


def test_create_malformed_json_is_bad_request(client):
    response = client.post(
        "/todos",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400


def test_non_integer_id_is_bad_request(client):
    assert client.patch("/todos/abc").status_code == 400
    assert client.delete("/todos/abc").status_code == 400


def test_toggle_missing_is_not_found(client):
    response = client.patch("/todos/999")

    assert response.status_code == 404
    assert response.json()["code"] == 404
    assert response.json()["data"] is None


def test_delete_twice_is_not_found(client):
    client.post("/todos", json={"task": "buy milk"})

    assert client.delete("/todos/1").status_code == 200
    assert client.delete("/todos/1").status_code == 404


def test_toggle_deleted_is_not_found(client):
    client.post("/todos", json={"task": "buy milk"})
    client.delete("/todos/1")

    assert client.patch("/todos/1").status_code == 404


def test_ids_are_not_reused_after_delete(client):
    client.post("/todos", json={"task": "first"})
    client.delete("/todos/1")

    response = client.post("/todos", json={"task": "second"})

    assert response.json()["data"]["id"] == 2


@pytest.mark.parametrize(
    "method, path, body, failing, message",
    [
        ("POST", "/todos", {"task": "buy milk"}, "save", "Failed to save todo"),
        ("PATCH", "/todos/1", None, "toggle", "Failed to update todo"),
        ("DELETE", "/todos/1", None, "soft_delete", "Failed to delete todo"),
    ],
)
def test_store_failure_is_server_error(client, monkeypatch, method, path, body, failing, message):
    async def unavailable(self, *args, **kwargs):
        raise OperationalError("UPDATE todos", {}, Exception("database is locked"))

    monkeypatch.setattr(TodoRepository, failing, unavailable)

    response = client.request(method, path, json=body)

    assert response.status_code == 500
    assert response.json() == {"code": 500, "message": message, "data": None}


def test_response_building_error_is_server_error(settings):
    app = create_application(settings)

    @app.get("/broken-response")
    async def broken_response():
        return TodoResponse.model_validate({"id": "not a number"})

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/broken-response")

    assert response.status_code == 500
    assert response.json()["code"] == 500
    assert response.json()["data"] is None
