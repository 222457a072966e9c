"""
Auth API tests, plus the app-level endpoints.
"""
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from jobly.api.routes import auth as auth_routes
from jobly.api.routes import companies as companies_routes
from jobly.core.security import decode_token, hash_password
from jobly.main import app


def _patch_repo(method: str, **kwargs):
    return patch.object(auth_routes.auth_service.user_repo, method, new_callable=AsyncMock, **kwargs)


class TestToken:
    def test_works(self, client, user_data):
        user = SimpleNamespace(**user_data, password=hash_password("password1"))
        with _patch_repo("get_by_key", return_value=user):
            resp = client.post("/auth/token", json={"username": "u1", "password": "password1"})

        assert resp.status_code == 200
        payload = decode_token(resp.json()["token"])
        assert payload["sub"] == "u1"
        assert payload["is_admin"] is False

    def test_wrong_password(self, client, user_data):
        user = SimpleNamespace(**user_data, password=hash_password("password1"))
        with _patch_repo("get_by_key", return_value=user):
            resp = client.post("/auth/token", json={"username": "u1", "password": "nope"})

        assert resp.status_code == 401
        assert resp.json()["message"] == "Invalid username/password"

    def test_unknown_user(self, client):
        with _patch_repo("get_by_key", return_value=None):
            resp = client.post("/auth/token", json={"username": "nope", "password": "password1"})

        assert resp.status_code == 401

    def test_missing_data(self, client):
        resp = client.post("/auth/token", json={"username": "u1"})

        assert resp.status_code == 400


class TestRegister:
    NEW = {
        "username": "new",
        "firstName": "first",
        "lastName": "last",
        "password": "password",
        "email": "new@email.com",
    }

    def test_works_for_anon(self, client):
        created = SimpleNamespace(username="new", is_admin=False)
        with _patch_repo("exists", return_value=False), \
                _patch_repo("create", return_value=created) as create:
            resp = client.post("/auth/register", json=self.NEW)

        assert resp.status_code == 201
        assert decode_token(resp.json()["token"])["sub"] == "new"
        assert create.await_args.kwargs["is_admin"] is False

    def test_cannot_register_as_admin(self, client):
        resp = client.post("/auth/register", json={**self.NEW, "isAdmin": True})

        assert resp.status_code == 400

    def test_duplicate(self, client):
        with _patch_repo("exists", return_value=True):
            resp = client.post("/auth/register", json=self.NEW)

        assert resp.status_code == 400
        assert resp.json()["message"] == "Duplicate username: new"


def test_root(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.json()["name"] == "Jobly API"


def test_request_id_echoed(client):
    resp = client.get("/", headers={"X-Request-ID": "abc-123"})

    assert resp.headers["X-Request-ID"] == "abc-123"


def test_health(client, db_session):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"
    assert resp.json()["checks"] == {"database": "healthy"}
    db_session.execute.assert_awaited_once()


def test_health_degraded(client, db_session):
    db_session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("down"))

    resp = client.get("/health")

    assert resp.status_code == 503
    assert resp.json()["status"] == "degraded"
    assert resp.json()["checks"] == {"database": "unhealthy"}


def test_unexpected_error_is_sanitized(client):
    # the catch-all handler runs in ServerErrorMiddleware, which re-raises unless told not to
    quiet_client = TestClient(app, raise_server_exceptions=False)
    with patch.object(
        companies_routes.company_service, "list_companies",
        new_callable=AsyncMock, side_effect=RuntimeError("connection string leaked"),
    ):
        resp = quiet_client.get("/companies")

    assert resp.status_code == 500
    assert resp.json() == {
        "error": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
        "details": None,
    }
