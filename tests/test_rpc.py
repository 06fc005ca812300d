"""Tests for the named RPC procedures over HTTP."""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from todo_api.db import crud
from todo_api.main import app
from todo_api.schemas.tasks import TaskOut

RPC = "/api/v1/rpc"


def call(client: TestClient, procedure: str, payload: dict | None = None):
    return client.post(f"{RPC}/{procedure}", json=payload or {})


def test_get_all_empty(client: TestClient) -> None:
    response = call(client, "getAll")
    assert response.status_code == 200
    assert response.json() == []


def test_create_task(client: TestClient) -> None:
    response = call(client, "create", {"title": "Buy milk"})
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Buy milk"
    assert data["description"] is None
    assert data["completed"] is False
    assert data["created_at"] == data["updated_at"]


@pytest.mark.parametrize("payload", [{}, {"title": ""}, {"title": "   "}, {"title": None}])
def test_create_rejects_bad_title(client: TestClient, payload: dict) -> None:
    response = call(client, "create", payload)
    assert response.status_code == 422
    assert call(client, "getAll").json() == []


def test_create_rejects_unknown_fields(client: TestClient) -> None:
    response = call(client, "create", {"title": "x", "completed": True})
    assert response.status_code == 422


def test_create_then_get_one_round_trip(client: TestClient) -> None:
    created = call(client, "create", {"title": "Read", "description": "chapter 3"}).json()
    response = call(client, "getOne", {"id": created["id"]})
    assert response.status_code == 200
    assert response.json() == {"kind": "found", "task": created}


def test_get_one_not_found(client: TestClient) -> None:
    response = call(client, "getOne", {"id": 424242})
    assert response.status_code == 200
    assert response.json() == {"kind": "not_found"}


def test_get_one_requires_integer_id(client: TestClient) -> None:
    assert call(client, "getOne", {"id": "abc"}).status_code == 422
    assert call(client, "getOne", {}).status_code == 422


def test_get_all_newest_first(client: TestClient) -> None:
    for title in ("A", "B", "C"):
        call(client, "create", {"title": title})
    titles = [t["title"] for t in call(client, "getAll").json()]
    assert titles == ["C", "B", "A"]


def test_update_completed_keeps_other_fields(client: TestClient) -> None:
    created = call(client, "create", {"title": "Walk", "description": "30 min"}).json()
    response = call(client, "update", {"id": created["id"], "completed": True})
    assert response.status_code == 200
    body = response.json()
    assert body["kind"] == "found"
    task = body["task"]
    assert task["completed"] is True
    assert task["title"] == "Walk"
    assert task["description"] == "30 min"
    assert task["created_at"] == created["created_at"]
    assert TaskOut.model_validate(task).updated_at >= TaskOut.model_validate(created).updated_at


def test_update_explicit_null_clears_description(client: TestClient) -> None:
    created = call(client, "create", {"title": "Walk", "description": "30 min"}).json()
    task = call(client, "update", {"id": created["id"], "description": None}).json()["task"]
    assert task["description"] is None
    stored = call(client, "getOne", {"id": created["id"]}).json()["task"]
    assert stored["description"] is None
    assert stored["title"] == "Walk"


def test_update_empty_title_rejected(client: TestClient) -> None:
    created = call(client, "create", {"title": "Keep"}).json()
    response = call(client, "update", {"id": created["id"], "title": "  "})
    assert response.status_code == 422
    stored = call(client, "getOne", {"id": created["id"]}).json()["task"]
    assert stored == created


def test_update_not_found(client: TestClient) -> None:
    response = call(client, "update", {"id": 999, "title": "Nope"})
    assert response.status_code == 200
    assert response.json() == {"kind": "not_found"}
    assert call(client, "getAll").json() == []


def test_task_can_go_back_to_pending(client: TestClient) -> None:
    created = call(client, "create", {"title": "Flip"}).json()
    call(client, "update", {"id": created["id"], "completed": True})
    task = call(client, "update", {"id": created["id"], "completed": False}).json()["task"]
    assert task["completed"] is False


def test_delete(client: TestClient) -> None:
    created = call(client, "create", {"title": "Delete me"}).json()
    response = call(client, "delete", {"id": created["id"]})
    assert response.status_code == 200
    assert response.json() is True
    assert call(client, "getOne", {"id": created["id"]}).json() == {"kind": "not_found"}


def test_delete_missing(client: TestClient) -> None:
    created = call(client, "create", {"title": "Stay"}).json()
    response = call(client, "delete", {"id": created["id"] + 100})
    assert response.status_code == 200
    assert response.json() is False
    assert call(client, "getAll").json() == [created]


def test_buy_milk_scenario(client: TestClient) -> None:
    created = call(client, "create", {"title": "Buy milk"}).json()
    assert created["id"] == 1
    assert created["title"] == "Buy milk"
    assert created["description"] is None
    assert created["completed"] is False

    updated = call(client, "update", {"id": 1, "completed": True}).json()["task"]
    assert updated["id"] == 1
    assert updated["title"] == "Buy milk"
    assert updated["completed"] is True

    assert call(client, "delete", {"id": 1}).json() is True
    assert call(client, "getOne", {"id": 1}).json() == {"kind": "not_found"}


def test_store_failure_is_a_server_error(client: TestClient, monkeypatch) -> None:
    def boom(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(crud, "list_tasks", boom)
    response = TestClient(app, raise_server_exceptions=False).post(f"{RPC}/getAll", json={})
    assert response.status_code == 500


def test_timestamps_are_utc_on_the_wire(client: TestClient) -> None:
    created = call(client, "create", {"title": "Zoned"}).json()
    task = TaskOut.model_validate(created)
    assert task.created_at.utcoffset() == timedelta(0)
    assert task.updated_at.utcoffset() == timedelta(0)
