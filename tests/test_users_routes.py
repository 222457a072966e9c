"""
User API tests - mostly the admin / same-user authorization rules.
"""
from unittest.mock import AsyncMock, patch

import pytest

from jobly.api.routes import users as users_routes
from jobly.schemas.user import (
    UserDetail,
    UserListResponse,
    UserResponse,
    UserTokenResponse,
)


def _patch_service(method: str, **kwargs):
    return patch.object(users_routes.user_service, method, new_callable=AsyncMock, **kwargs)


NEW_USER = {
    "username": "u-new",
    "firstName": "First-new",
    "lastName": "Last-newL",
    "password": "password-new",
    "email": "new@email.com",
    "isAdmin": True,
}


class TestCreateUser:
    def test_admin_can_create_admin(self, client, admin_headers):
        user = UserResponse.model_validate({k: v for k, v in NEW_USER.items() if k != "password"})
        with _patch_service(
            "create_user", return_value=UserTokenResponse(user=user, token="tok"),
        ) as create:
            resp = client.post("/users", json=NEW_USER, headers=admin_headers)

        assert resp.status_code == 201
        assert resp.json()["user"]["isAdmin"] is True
        assert resp.json()["token"] == "tok"
        assert "password" not in resp.json()["user"]
        assert create.await_args.args[1].is_admin is True

    def test_unauth_for_non_admin(self, client, u1_headers):
        resp = client.post("/users", json=NEW_USER, headers=u1_headers)

        assert resp.status_code == 401

    def test_bad_email(self, client, admin_headers):
        resp = client.post(
            "/users", json={**NEW_USER, "email": "not-an-email"}, headers=admin_headers,
        )

        assert resp.status_code == 400


class TestListUsers:
    def test_admin_only(self, client, admin_headers, u1_headers, user_data):
        listing = UserListResponse(users=[UserResponse.model_validate(user_data)])
        with _patch_service("list_users", return_value=listing):
            assert client.get("/users", headers=admin_headers).status_code == 200
            assert client.get("/users", headers=u1_headers).status_code == 401
            assert client.get("/users").status_code == 401


class TestGetUser:
    @pytest.mark.parametrize("headers_fixture", ["admin_headers", "u1_headers"])
    def test_admin_or_same_user(self, client, request, headers_fixture, user_data):
        headers = request.getfixturevalue(headers_fixture)
        detail = UserDetail.model_validate({**user_data, "applications": [1]})
        with _patch_service("get_user", return_value=detail):
            resp = client.get("/users/u1", headers=headers)

        assert resp.status_code == 200
        assert resp.json()["user"]["applications"] == [1]
        assert resp.json()["user"]["firstName"] == "U1F"

    def test_other_user_unauth(self, client, u1_headers):
        with _patch_service("get_user") as get:
            resp = client.get("/users/u2", headers=u1_headers)

        assert resp.status_code == 401
        get.assert_not_called()

    def test_anon_unauth(self, client):
        assert client.get("/users/u1").status_code == 401

    def test_tampered_token_is_anon(self, client, u1_headers):
        headers = {"Authorization": u1_headers["Authorization"] + "x"}

        assert client.get("/users/u1", headers=headers).status_code == 401


class TestUpdateUser:
    def test_same_user(self, client, u1_headers, user_data):
        updated = UserResponse.model_validate({**user_data, "first_name": "New"})
        with _patch_service("update_user", return_value=updated) as update:
            resp = client.patch("/users/u1", json={"firstName": "New"}, headers=u1_headers)

        assert resp.json()["user"]["firstName"] == "New"
        assert update.await_args.args[2].to_update() == {"firstName": "New"}

    def test_cannot_make_self_admin(self, client, u1_headers):
        resp = client.patch("/users/u1", json={"isAdmin": True}, headers=u1_headers)

        assert resp.status_code == 400

    def test_other_user_unauth(self, client, u1_headers):
        resp = client.patch("/users/u2", json={"firstName": "New"}, headers=u1_headers)

        assert resp.status_code == 401

    def test_empty_body_is_bad_request(self, client, admin_headers):
        resp = client.patch("/users/u1", json={}, headers=admin_headers)

        assert resp.status_code == 400
        assert resp.json()["error"] == "BAD_REQUEST"


class TestDeleteUser:
    def test_same_user(self, client, u1_headers):
        with _patch_service("delete_user"):
            resp = client.delete("/users/u1", headers=u1_headers)

        assert resp.json() == {"deleted": "u1"}

    def test_other_user_unauth(self, client, u1_headers):
        assert client.delete("/users/u2", headers=u1_headers).status_code == 401


class TestApply:
    def test_same_user(self, client, u1_headers):
        with _patch_service("apply_to_job", return_value=3) as apply:
            resp = client.post("/users/u1/jobs/3", headers=u1_headers)

        assert resp.json() == {"applied": 3}
        assert apply.await_args.args[1:] == ("u1", 3)

    def test_admin_for_any_user(self, client, admin_headers):
        with _patch_service("apply_to_job", return_value=3):
            resp = client.post("/users/u2/jobs/3", headers=admin_headers)

        assert resp.status_code == 200

    def test_other_user_unauth(self, client, u1_headers):
        assert client.post("/users/u2/jobs/3", headers=u1_headers).status_code == 401

    def test_bad_job_id(self, client, u1_headers):
        assert client.post("/users/u1/jobs/abc", headers=u1_headers).status_code == 400
