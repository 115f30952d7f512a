import pytest

from taskhub.config import Settings
from tests.conftest import TEST_SECRET

STRICT_WORKFLOW = Settings(
    database_url="sqlite://",
    jwt_secret=TEST_SECRET,
    run_migrations=False,
    log_level="WARNING",
    status_transitions={"OPEN": {"IN_PROGRESS"}, "IN_PROGRESS": {"DONE"}, "DONE": set()},
)


def test_create_task_then_patch_status(client, alice, project):
    _, headers = alice
    resp = client.post(
        f"/api/projects/{project['id']}/tasks",
        json={"title": "Write launch plan", "priority": "HIGH"},
        headers=headers,
    )
    assert resp.status_code == 201
    task = resp.json()["data"]
    assert task["status"] == "OPEN"
    assert task["priority"] == "HIGH"
    assert task["project_id"] == project["id"]

    resp = client.patch(f"/api/tasks/{task['id']}/status", json={"status": "DONE"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Task status updated successfully"
    assert resp.json()["data"]["status"] == "DONE"
    assert resp.json()["data"]["priority"] == "HIGH"


def test_create_task_defaults(client, alice, make_task):
    user, _ = alice
    task = make_task("Plain")
    assert task["priority"] == "MEDIUM"
    assert task["description"] == ""
    assert task["assignee"] is None
    assert task["assigned_by"] is None
    assert task["created_by"]["id"] == user["id"]


def test_create_task_validation(client, alice, project):
    _, headers = alice
    url = f"/api/projects/{project['id']}/tasks"

    resp = client.post(url, json={"title": "  "}, headers=headers)
    assert resp.json()["code"] == "empty_title"

    resp = client.post(url, json={"title": "x", "priority": "URGENT"}, headers=headers)
    assert resp.json()["code"] == "invalid_priority"

    resp = client.post(url, json={"title": "x", "due_date": "next tuesday"}, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid_input"

    resp = client.post("/api/projects/missing/tasks", json={"title": "x"}, headers=headers)
    assert resp.status_code == 404
    assert resp.json()["code"] == "project_not_found"


def test_due_date_formats(make_task):
    assert make_task("d1", due_date="2025-01-31")["due_date"].startswith("2025-01-31T00:00:00")
    assert make_task("d2", due_date="2025-01-31T10:30:00Z")["due_date"].startswith("2025-01-31T10:30:00")
    assert make_task("d3", due_date="2025-01-31T12:30:00+02:00")["due_date"].startswith("2025-01-31T10:30:00")
    assert make_task("d4", due_date="")["due_date"] is None


def test_create_with_assignee_records_assigner(client, alice, bob, make_task):
    alice_user, _ = alice
    bob_user, bob_headers = bob
    task = make_task("Delegated", assignee_id=bob_user["id"])
    assert task["assignee"]["id"] == bob_user["id"]
    assert task["assigned_by"]["id"] == alice_user["id"]

    resp = client.get("/api/tasks/assigned", headers=bob_headers)
    assert resp.json()["total"] == 1
    assert resp.json()["data"][0]["id"] == task["id"]


def test_create_with_unknown_assignee(client, alice, project):
    _, headers = alice
    resp = client.post(
        f"/api/projects/{project['id']}/tasks", json={"title": "x", "assignee_id": "ghost"}, headers=headers
    )
    assert resp.status_code == 404
    assert resp.json()["code"] == "user_not_found"


def test_list_tasks_rejects_bad_filters(client, alice, project, make_task):
    _, headers = alice
    make_task("One")
    resp = client.get(f"/api/projects/{project['id']}/tasks", params={"status": "BOGUS"}, headers=headers)
    assert resp.status_code == 400
    body = resp.json()
    assert body["code"] == "invalid_status"
    assert "data" not in body

    resp = client.get(f"/api/projects/{project['id']}/tasks", params={"priority": "NOPE"}, headers=headers)
    assert resp.json()["code"] == "invalid_priority"


def test_list_tasks_filters(client, alice, project, make_task):
    _, headers = alice
    make_task("Low one", priority="LOW")
    high = make_task("High one", priority="HIGH")
    client.patch(f"/api/tasks/{high['id']}/status", json={"status": "IN_PROGRESS"}, headers=headers)

    url = f"/api/projects/{project['id']}/tasks"
    assert client.get(url, headers=headers).json()["total"] == 2

    resp = client.get(url, params={"status": "IN_PROGRESS"}, headers=headers)
    assert [t["id"] for t in resp.json()["data"]] == [high["id"]]

    resp = client.get(url, params={"priority": "LOW", "status": "IN_PROGRESS"}, headers=headers)
    assert resp.json()["total"] == 0
    assert resp.json()["pages"] == 1


def test_partial_update_only_touches_supplied_fields(client, alice, bob, make_task):
    _, headers = alice
    bob_user, _ = bob
    task = make_task("Kickoff", description="keep me", priority="HIGH", assignee_id=bob_user["id"])

    resp = client.put(f"/api/tasks/{task['id']}", json={"status": "IN_PROGRESS"}, headers=headers)
    assert resp.status_code == 200
    updated = resp.json()["data"]
    assert updated["status"] == "IN_PROGRESS"
    assert updated["title"] == "Kickoff"
    assert updated["description"] == "keep me"
    assert updated["priority"] == "HIGH"
    assert updated["assignee_id"] == bob_user["id"]

    resp = client.put(f"/api/tasks/{task['id']}", json={"priority": "LOW"}, headers=headers)
    updated = resp.json()["data"]
    assert updated["priority"] == "LOW"
    assert updated["status"] == "IN_PROGRESS"
    assert updated["assignee_id"] == bob_user["id"]


def test_update_can_clear_description_and_due_date(client, alice, make_task):
    _, headers = alice
    task = make_task("Dated", description="notes", due_date="2025-03-01")

    resp = client.put(f"/api/tasks/{task['id']}", json={"description": "", "due_date": None}, headers=headers)
    updated = resp.json()["data"]
    assert updated["description"] == ""
    assert updated["due_date"] is None
    assert updated["title"] == "Dated"


def test_update_rejects_empty_title(client, alice, make_task):
    _, headers = alice
    task = make_task()
    resp = client.put(f"/api/tasks/{task['id']}", json={"title": ""}, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["code"] == "empty_title"


def test_unassign_clears_assignee_and_assigner(client, alice, bob, make_task):
    _, headers = alice
    bob_user, _ = bob
    task = make_task("Assigned", assignee_id=bob_user["id"])

    resp = client.put(f"/api/tasks/{task['id']}", json={"assignee_id": None}, headers=headers)
    assert resp.status_code == 200

    fetched = client.get(f"/api/tasks/{task['id']}", headers=headers).json()["data"]
    assert fetched["assignee_id"] is None
    assert fetched["assignee"] is None
    assert fetched["assigned_by_id"] is None


def test_patch_assignee_and_assign(client, alice, bob, make_task):
    alice_user, headers = alice
    bob_user, bob_headers = bob
    task = make_task()

    resp = client.patch(f"/api/tasks/{task['id']}/assignee", json={"assignee_id": bob_user["id"]}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["assignee"]["email"] == "bob@example.com"
    assert resp.json()["data"]["assigned_by"]["id"] == alice_user["id"]

    resp = client.patch(f"/api/tasks/{task['id']}/assignee", json={}, headers=headers)
    assert resp.json()["data"]["assignee_id"] is None

    # bob picks it up
    resp = client.post(f"/api/tasks/{task['id']}/assign", json={"user_id": bob_user["id"]}, headers=bob_headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Task assigned successfully"
    assert resp.json()["data"]["assigned_by_id"] == bob_user["id"]

    resp = client.post(f"/api/tasks/{task['id']}/assign", json={}, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid_input"


def test_patch_priority(client, alice, make_task):
    _, headers = alice
    task = make_task(priority="LOW")
    resp = client.patch(f"/api/tasks/{task['id']}/priority", json={"priority": "HIGH"}, headers=headers)
    assert resp.json()["data"]["priority"] == "HIGH"
    assert resp.json()["data"]["status"] == "OPEN"

    resp = client.patch(f"/api/tasks/{task['id']}/priority", json={"priority": "SOON"}, headers=headers)
    assert resp.json()["code"] == "invalid_priority"

    resp = client.patch(f"/api/tasks/{task['id']}/status", json={}, headers=headers)
    assert resp.json()["code"] == "invalid_status"


def test_nested_aliases_check_project_membership(client, alice, project, make_task):
    _, headers = alice
    task = make_task()
    other = client.post("/api/projects", json={"name": "Other"}, headers=headers).json()["data"]

    nested = f"/api/projects/{project['id']}/tasks/{task['id']}"
    assert client.get(nested, headers=headers).json()["data"]["id"] == task["id"]

    resp = client.patch(f"{nested}/status", json={"status": "DONE"}, headers=headers)
    assert resp.json()["data"]["status"] == "DONE"

    wrong = f"/api/projects/{other['id']}/tasks/{task['id']}"
    for method, path, body in [
        ("GET", wrong, None),
        ("PUT", wrong, {"title": "hijack"}),
        ("PATCH", f"{wrong}/priority", {"priority": "LOW"}),
        ("DELETE", wrong, None),
    ]:
        resp = client.request(method, path, json=body, headers=headers)
        assert resp.status_code == 404, (method, path)
        assert resp.json()["code"] == "task_not_found"

    assert client.get(f"/api/tasks/{task['id']}", headers=headers).json()["data"]["title"] == task["title"]

    resp = client.delete(nested, headers=headers)
    assert resp.status_code == 200
    assert client.get(f"/api/tasks/{task['id']}", headers=headers).status_code == 404


def test_assigned_tasks_pagination_default(client, alice, bob, make_task):
    _, bob_headers = bob
    bob_user, _ = bob
    for i in range(12):
        make_task(f"T{i}", assignee_id=bob_user["id"])

    body = client.get("/api/tasks/assigned", headers=bob_headers).json()
    assert body["total"] == 12
    assert len(body["data"]) == 10
    assert body["pages"] == 2

    body = client.get("/api/tasks/assigned", params={"page_size": 0}, headers=bob_headers).json()
    assert len(body["data"]) == 10


def test_unknown_task(client, alice):
    _, headers = alice
    resp = client.get("/api/tasks/nope", headers=headers)
    assert resp.status_code == 404
    assert resp.json()["code"] == "task_not_found"


@pytest.mark.parametrize("settings", [STRICT_WORKFLOW])
def test_configured_status_workflow(client, alice, make_task):
    _, headers = alice
    task = make_task()
    url = f"/api/tasks/{task['id']}"

    resp = client.patch(f"{url}/status", json={"status": "DONE"}, headers=headers)
    assert resp.status_code == 409
    assert resp.json()["code"] == "invalid_status_transition"
    assert client.get(url, headers=headers).json()["data"]["status"] == "OPEN"

    assert client.patch(f"{url}/status", json={"status": "IN_PROGRESS"}, headers=headers).status_code == 200
    assert client.put(url, json={"status": "DONE"}, headers=headers).status_code == 200

    resp = client.put(url, json={"status": "OPEN"}, headers=headers)
    assert resp.status_code == 409
    assert resp.json()["code"] == "invalid_status_transition"
