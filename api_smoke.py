#!/usr/bin/env python3
"""
Simple smoke script to verify the work log API endpoints
Run this after starting the backend server (it creates and removes one log)
"""

import json
import os
import uuid

import requests

BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")

def check(label, response, expected_status):
    marker = "✓" if response.status_code == expected_status else "✗"
    print(f"{marker} {label}: {response.status_code} - {response.text[:200]}")
    return response

def smoke_endpoints():
    """Exercise the main API endpoints against a running server"""

    print("Testing Work Log API endpoints...")
    print("=" * 50)

    try:
        check("Ping", requests.get(f"{BASE_URL}/ping"), 200)
        check("Health", requests.get(f"{BASE_URL}/health"), 200)

        task_name = f"smoke-{uuid.uuid4().hex[:8]}"
        created = check("Create log", requests.post(f"{BASE_URL}/log", json={
            "taskName": task_name,
            "taskType": "task",
            "taskStatus": "backlog",
            "priority": 5,
        }), 201)
        log_id = created.json()["log"]["logId"]

        check("Duplicate log", requests.post(f"{BASE_URL}/log", json={
            "taskName": task_name,
            "taskType": "task",
            "taskStatus": "backlog",
        }), 409)
        check("Fetch log", requests.get(f"{BASE_URL}/log/{log_id}"), 200)
        check("Update notes", requests.put(f"{BASE_URL}/log", json={"logId": log_id, "notes": "smoke"}), 200)
        check("List logs", requests.get(f"{BASE_URL}/logs", params={"limit": 10, "page": 0}), 200)
        check("Search logs", requests.get(f"{BASE_URL}/logs", params={"s": task_name}), 200)

        for path in ("/status-summary", "/type-summary", "/daily-task-count", "/task-summary"):
            check(path, requests.get(f"{BASE_URL}{path}"), 200)
        check("/completed-task-count", requests.get(f"{BASE_URL}/completed-task-count", params={"v": "week", "d": "1 months"}), 200)

        check("Bulk delete", requests.delete(f"{BASE_URL}/logs", params={"logIds": json.dumps([log_id])}), 200)
        check("Deleted log is gone", requests.get(f"{BASE_URL}/log/{log_id}"), 404)
    except requests.RequestException as e:
        print(f"✗ Request failed: {e}")

    print("\n" + "=" * 50)
    print("API smoke run completed!")

if __name__ == "__main__":
    smoke_endpoints()
