import pytest
from fastapi.testclient import TestClient

from taskhub.application import create_app
from taskhub.config import Settings

TEST_SECRET = "test-signing-secret"
DEFAULT_PASSWORD = "secret123"


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        jwt_secret=TEST_SECRET,
        run_migrations=False,
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.state.database.create_all()
    yield app
    app.state.database.drop_all()
    app.state.database.dispose()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register(client):
    """Signs a user up and returns (user, auth headers)"""

    def _register(email, password=DEFAULT_PASSWORD, name=""):
        resp = client.post("/api/auth/signup", json={"email": email, "password": password, "name": name})
        assert resp.status_code == 201, resp.text
        data = resp.json()["data"]
        return data["user"], bearer(data["token"])

    return _register


@pytest.fixture
def alice(register):
    return register("alice@example.com", name="Alice")


@pytest.fixture
def bob(register):
    return register("bob@example.com", name="Bob")


@pytest.fixture
def project(client, alice):
    _, headers = alice
    resp = client.post("/api/projects", json={"name": "Launch", "description": ""}, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


@pytest.fixture
def make_task(client, alice, project):
    _, headers = alice

    def _make_task(title="Write docs", project_id=None, **fields):
        body = {"title": title, **fields}
        resp = client.post(f"/api/projects/{project_id or project['id']}/tasks", json=body, headers=headers)
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]

    return _make_task
