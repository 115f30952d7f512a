def test_create_and_get_project(client, alice, project):
    user, headers = alice
    assert project["name"] == "Launch"
    assert project["description"] == ""
    assert project["user_id"] == user["id"]
    assert project["created_by"]["email"] == "alice@example.com"

    resp = client.get(f"/api/projects/{project['id']}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Project retrieved successfully"
    assert resp.json()["data"]["id"] == project["id"]


def test_project_reads_require_auth(client, project):
    assert client.get("/api/projects").status_code == 401
    assert client.get(f"/api/projects/{project['id']}").status_code == 401


def test_project_validation(client, alice):
    _, headers = alice
    resp = client.post("/api/projects", json={"name": "   "}, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["code"] == "empty_name"

    resp = client.post("/api/projects", json={"name": "Ok", "description": "d" * 1001}, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid_input"


def test_unknown_project(client, alice):
    _, headers = alice
    resp = client.get("/api/projects/does-not-exist", headers=headers)
    assert resp.status_code == 404
    assert resp.json()["code"] == "project_not_found"


def test_list_projects_paginates(client, alice):
    _, headers = alice
    for i in range(3):
        client.post("/api/projects", json={"name": f"P{i}"}, headers=headers)

    resp = client.get("/api/projects", params={"page": 2, "page_size": 2}, headers=headers)
    body = resp.json()
    assert resp.status_code == 200
    assert body["total"] == 3
    assert body["page"] == 2
    assert body["pages"] == 2
    assert len(body["data"]) == 1


def test_list_projects_clamps_bad_paging(client, alice, project):
    _, headers = alice
    resp = client.get("/api/projects", params={"page": 0, "page_size": 500}, headers=headers)
    body = resp.json()
    assert body["page"] == 1
    assert body["pages"] == 1
    assert len(body["data"]) == 1

    resp = client.get("/api/projects", params={"page": "abc"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["page"] == 1


def test_partial_project_update(client, alice):
    _, headers = alice
    created = client.post(
        "/api/projects", json={"name": "Launch", "description": "v1"}, headers=headers
    ).json()["data"]

    resp = client.put(f"/api/projects/{created['id']}", json={"name": "Relaunch"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["name"] == "Relaunch"
    assert resp.json()["data"]["description"] == "v1"

    resp = client.put(f"/api/projects/{created['id']}", json={"description": ""}, headers=headers)
    assert resp.json()["data"]["description"] == ""
    assert resp.json()["data"]["name"] == "Relaunch"

    resp = client.put(f"/api/projects/{created['id']}", json={"name": ""}, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["code"] == "empty_name"


def test_only_owner_can_modify_project(client, project, bob):
    _, bob_headers = bob
    resp = client.put(f"/api/projects/{project['id']}", json={"name": "Mine now"}, headers=bob_headers)
    assert resp.status_code == 403
    assert resp.json()["code"] == "forbidden"

    resp = client.delete(f"/api/projects/{project['id']}", headers=bob_headers)
    assert resp.status_code == 403

    # the project is visible to everyone in the workspace
    resp = client.get(f"/api/projects/{project['id']}", headers=bob_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["name"] == "Launch"


def test_missing_project_is_404_before_ownership(client, bob):
    _, bob_headers = bob
    resp = client.delete("/api/projects/nope", headers=bob_headers)
    assert resp.status_code == 404
    assert resp.json()["code"] == "project_not_found"


def test_delete_project_cascades_to_tasks_and_comments(client, alice, project, make_task):
    _, headers = alice
    task = make_task("Doomed")
    comment = client.post(
        f"/api/tasks/{task['id']}/comments", json={"content": "soon gone"}, headers=headers
    ).json()["data"]

    resp = client.delete(f"/api/projects/{project['id']}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["data"] is None

    resp = client.get(f"/api/tasks/{task['id']}", headers=headers)
    assert resp.status_code == 404
    assert resp.json()["code"] == "task_not_found"

    resp = client.get(f"/api/comments/{comment['id']}", headers=headers)
    assert resp.status_code == 404
    assert resp.json()["code"] == "comment_not_found"
