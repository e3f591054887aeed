# tests/test_api_tasks.py

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from task_tracker.main import create_app
from task_tracker.services.task_store import TaskStore
from task_tracker.utils.errors import PersistenceError

from .fakes import FailingSink


def _create(client: TestClient, **fields) -> dict:
    body = {"title": "Buy milk", "dueDate": "2024-12-01", **fields}
    resp = client.post("/api/tasks", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_create_task_from_json(client: TestClient) -> None:
    task = _create(client, description="2 litres", user=2)

    assert task["id"]
    assert task["title"] == "Buy milk"
    assert task["status"] == "Pending"
    assert task["dueDate"] == "2024-12-01"
    assert task["description"] == "2 litres"
    assert task["user"] == "2"


def test_create_task_from_form(client: TestClient) -> None:
    resp = client.post(
        "/api/tasks",
        data={"title": "Walk the dog", "dueDate": "2024-12-03", "status": "Completed", "category": ""},
    )
    assert resp.status_code == 201
    task = resp.json()
    assert task["status"] == "Completed"
    assert task["category"] is None


@pytest.mark.parametrize(
    "body, reason",
    [
        ({"title": "x", "dueDate": "2024-12-02"}, "title invalid."),
        ({"title": "Buy milk"}, "due date invalid."),
        ({"title": "Buy milk", "dueDate": "2024-12-01", "status": "Done"}, "status invalid."),
    ],
)
def test_create_task_validation_errors(client: TestClient, body: dict, reason: str) -> None:
    resp = client.post("/api/tasks", json=body)
    assert resp.status_code == 400
    assert resp.json()["detail"] == reason
    assert client.get("/api/tasks").json() == []


def test_create_task_rejects_malformed_json(client: TestClient) -> None:
    resp = client.post("/api/tasks", content="[1, 2", headers={"content-type": "application/json"})
    assert resp.status_code == 400

    resp = client.post("/api/tasks", json=["not", "an", "object"])
    assert resp.status_code == 400


def test_list_tasks_with_filters(client: TestClient) -> None:
    a = _create(client, title="Task A", status="Completed")
    _create(client, title="Task B")
    c = _create(client, title="Task C", status="Completed", dueDate="2024-12-09")

    all_ids = [t["id"] for t in client.get("/api/tasks").json()]
    assert len(all_ids) == 3

    completed = client.get("/api/tasks", params={"status": "Completed"}).json()
    assert [t["id"] for t in completed] == [a["id"], c["id"]]

    due = client.get("/api/tasks", params={"status": "Completed", "dueDate": "2024-12-09"}).json()
    assert [t["id"] for t in due] == [c["id"]]


def test_list_tasks_rejects_bad_filter(client: TestClient) -> None:
    resp = client.get("/api/tasks", params={"status": "Done"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "status invalid."

    resp = client.get("/api/tasks", params={"dueDate": "someday"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "due date invalid."


def test_get_task(client: TestClient) -> None:
    task = _create(client)
    resp = client.get(f"/api/tasks/{task['id']}")
    assert resp.status_code == 200
    assert resp.json() == task


def test_get_missing_task(client: TestClient) -> None:
    resp = client.get("/api/tasks/nope")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Task nope not found"


def test_update_task_partially(client: TestClient) -> None:
    task = _create(client, description="2 litres")

    resp = client.put(f"/api/tasks/{task['id']}", json={"status": "Completed"})
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["status"] == "Completed"
    assert {k: v for k, v in updated.items() if k != "status"} == {
        k: v for k, v in task.items() if k != "status"
    }


def test_update_task_with_form_body(client: TestClient) -> None:
    task = _create(client)
    resp = client.put(f"/api/tasks/{task['id']}", data={"title": "Buy oat milk", "description": ""})
    assert resp.status_code == 200
    assert resp.json()["title"] == "Buy oat milk"
    assert resp.json()["description"] is None


def test_update_task_errors(client: TestClient) -> None:
    task = _create(client)

    resp = client.put(f"/api/tasks/{task['id']}", json={"dueDate": "31/12/2024"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "due date invalid."
    assert client.get(f"/api/tasks/{task['id']}").json() == task

    resp = client.put("/api/tasks/missing", json={"title": "Anything"})
    assert resp.status_code == 404


def test_delete_task(client: TestClient) -> None:
    task = _create(client)

    resp = client.delete(f"/api/tasks/{task['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Task deleted", "id": task["id"]}

    assert client.get(f"/api/tasks/{task['id']}").status_code == 404
    assert client.delete(f"/api/tasks/{task['id']}").status_code == 404


def test_tasks_survive_restart(settings, client: TestClient) -> None:
    task = _create(client)

    app = create_app(settings)
    with TestClient(app) as restarted:
        assert restarted.get(f"/api/tasks/{task['id']}").json() == task


def test_persistence_failure_is_reported(settings, reference) -> None:
    store = TaskStore(FailingSink())
    app = create_app(settings, task_store=store, reference_service=reference)

    with TestClient(app) as c:
        resp = c.post("/api/tasks", json={"title": "Buy milk", "dueDate": "2024-12-01"})
        assert resp.status_code == 500
        detail = resp.json()["detail"]
        assert detail["error"] == "persistence_error"
        assert detail["task_id"]

        # The in-memory change is kept.
        assert c.get(f"/api/tasks/{detail['task_id']}").status_code == 200


def test_corrupt_task_file_stops_startup(settings) -> None:
    settings.tasks_file.write_text("{broken", encoding="utf-8")
    app = create_app(settings)

    with pytest.raises(PersistenceError):
        with TestClient(app):
            pass


def test_reference_data_endpoints(client: TestClient) -> None:
    users = client.get("/api/users").json()
    categories = client.get("/api/categories").json()

    assert [u["name"] for u in users] == ["Alice Johnson", "Bob Smith"]
    assert [c["name"] for c in categories] == ["Work", "Personal"]
