# tests/test_routes.py

from __future__ import annotations

import json
import uuid

from fastapi.testclient import TestClient


def create(client: TestClient, task_name: str, **fields):
    body = {"taskName": task_name, "taskType": "task", "taskStatus": "backlog", **fields}
    return client.post("/log", json=body)


def test_ping(client: TestClient) -> None:
    response = client.get("/ping")
    assert response.status_code == 200
    assert response.text == "pong"


def test_create_and_fetch(client: TestClient) -> None:
    response = create(client, "Ship v1", startedAt="2024-04-01T10:00:00+02:00")
    assert response.status_code == 201
    log = response.json()["log"]
    assert log["priority"] == 1
    assert log["notes"] == "N/A"

    fetched = client.get(f"/log/{log['logId']}")
    assert fetched.status_code == 200
    assert fetched.json() == {"message": "Ok", "log": log}


def test_create_validation_messages(client: TestClient) -> None:
    response = create(client, "Bad priority", priority=3)
    assert response.status_code == 422
    assert response.json() == {"message": "Invalid priority value"}

    response = create(client, "Bad type", taskType="epic")
    assert response.json() == {"message": "Invalid task type"}

    response = client.post("/log", json={"taskType": "task", "taskStatus": "backlog"})
    assert response.json() == {"message": "Task name is required"}

    response = create(client, "Not a number", priority="high")
    assert response.status_code == 422
    assert response.json() == {"message": "Invalid priority value"}

    response = create(client, "Boolean priority", priority=True)
    assert response.status_code == 422
    assert response.json() == {"message": "Invalid priority value"}

    assert client.get("/logs").json() == {"logs": []}


def test_duplicate_name_is_rejected(client: TestClient) -> None:
    assert create(client, "Unique").status_code == 201

    response = create(client, "Unique")
    assert response.status_code == 409
    assert response.json()["message"] == "Task name already exists"
    assert len(client.get("/logs").json()["logs"]) == 1


def test_fetch_unknown_and_malformed_ids(client: TestClient) -> None:
    missing = str(uuid.uuid4())
    response = client.get(f"/log/{missing}")
    assert response.status_code == 404
    assert response.json() == {"message": "No records found", "logId": missing}

    response = client.get("/log/not-a-uuid")
    assert response.status_code == 422
    assert response.json() == {"message": "Invalid log_id value"}


def test_partial_update(client: TestClient) -> None:
    log = create(client, "Patch me", priority=5).json()["log"]

    response = client.put("/log", json={"logId": log["logId"], "notes": "halfway", "taskStatus": "progress"})
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Log updated successfully"
    assert body["log"]["notes"] == "halfway"
    assert body["log"]["taskStatus"] == "progress"
    assert body["log"]["priority"] == 5
    assert body["log"]["taskName"] == "Patch me"


def test_update_errors(client: TestClient) -> None:
    log = create(client, "Stable").json()["log"]

    response = client.put("/log", json={"logId": log["logId"], "notes": ""})
    assert response.status_code == 400
    assert response.json() == {"message": "No valid fields to update"}

    response = client.put("/log", json={"notes": "orphan"})
    assert response.status_code == 422
    assert response.json() == {"message": "Log id is required"}

    missing = str(uuid.uuid4())
    response = client.put("/log", json={"logId": missing, "notes": "orphan"})
    assert response.status_code == 404
    assert response.json()["logId"] == missing

    response = client.put("/log", json={"logId": log["logId"], "priority": 4})
    assert response.status_code == 422

    response = client.put("/log", json={"logId": log["logId"], "priority": False})
    assert response.status_code == 422
    assert response.json() == {"message": "Invalid priority value"}

    assert client.get(f"/log/{log['logId']}").json()["log"] == log


def test_delete_single(client: TestClient) -> None:
    log = create(client, "Short lived").json()["log"]

    response = client.delete(f"/log/{log['logId']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Successfully deleted the log"}

    response = client.delete(f"/log/{log['logId']}")
    assert response.status_code == 404
    assert response.json()["message"] == "No log found"


def test_bulk_delete(client: TestClient) -> None:
    ids = [create(client, f"bulk-{i}").json()["log"]["logId"] for i in range(3)]

    response = client.delete("/logs", params={"logIds": json.dumps(ids[:2] + [str(uuid.uuid4())])})
    assert response.status_code == 200
    assert response.json() == {"message": "Logs deleted successfully", "rowCount": 2}
    assert [log["logId"] for log in client.get("/logs").json()["logs"]] == [ids[2]]


def test_bulk_delete_input_errors(client: TestClient) -> None:
    response = client.delete("/logs")
    assert response.status_code == 422
    assert response.json() == {"message": "At least 1 log id is required."}

    response = client.delete("/logs", params={"logIds": "1,2,3"})
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid logIds format"}


def test_listing_pagination_and_validation(client: TestClient) -> None:
    for i in range(12):
        create(client, f"item-{i:02d}")

    page = client.get("/logs", params={"sortBy": "taskName", "sortOrder": "asc", "limit": 5, "page": 2}).json()["logs"]
    assert [log["taskName"] for log in page] == ["item-10", "item-11"]
    assert all(log["totalPages"] == 3 for log in page)

    response = client.get("/logs", params={"limit": "ten"})
    assert response.status_code == 422
    assert response.json() == {"message": "Invalid limit value"}

    response = client.get("/logs", params={"sortBy": "nope"})
    assert response.status_code == 422
    assert response.json() == {"message": "Invalid sortBy value"}

    response = client.get("/logs", params={"s": "item", "sortOrder": "sideways"})
    assert response.status_code == 422
    assert response.json() == {"message": "Invalid sortOrder value"}


def test_listing_rejects_out_of_range_windows(client: TestClient) -> None:
    create(client, "only-one")

    response = client.get("/logs", params={"limit": str(10**20)})
    assert response.status_code == 422
    assert response.json() == {"message": "Invalid limit value"}

    response = client.get("/logs", params={"limit": 10, "page": str(2**62)})
    assert response.status_code == 422
    assert response.json() == {"message": "Invalid page value"}


def test_summaries(client: TestClient) -> None:
    create(client, "a", taskType="bug", taskStatus="progress", priority=10)
    create(client, "b", taskStatus="progress")

    status_summary = client.get("/status-summary").json()["statusSummary"]
    assert status_summary == [{"taskStatus": "progress", "statusCount": 2, "percentage": 100.0}]

    type_summary = {item["taskType"]: item["percentage"] for item in client.get("/type-summary").json()["typeSummary"]}
    assert type_summary == {"bug": 50.0, "task": 50.0}

    assert client.get("/task-summary").json() == {
        "taskSummary": {"totalTasks": 2, "totalBugs": 1, "totalProgressTasks": 2, "highestPriorityTasks": 1}
    }


def test_completed_count_rejects_bad_parameters(client: TestClient) -> None:
    response = client.get("/completed-task-count", params={"v": "year"})
    assert response.status_code == 422

    response = client.get("/completed-task-count", params={"d": "1 month'; delete from logs; --"})
    assert response.status_code == 422


def test_cors_allow_list(client: TestClient) -> None:
    allowed = client.get("/ping", headers={"Origin": "http://localhost:5173"})
    assert allowed.headers["access-control-allow-origin"] == "http://localhost:5173"

    blocked = client.get("/ping", headers={"Origin": "https://evil.example"})
    assert "access-control-allow-origin" not in blocked.headers
