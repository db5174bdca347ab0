"""
tests/test_users.py -- Integration tests for the user directory routes.

Coverage:
  - GET /get-users lists every user without password hashes, no auth required
  - POST /update-user requires a session and only applies allow-listed fields
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from conftest import signup
from teamboard.db.session import SessionLocal
from teamboard.models import User


class TestGetUsers:

    def test_empty_directory(self, client: TestClient) -> None:
        resp = client.get("/get-users")
        assert resp.status_code == 200
        assert resp.json() == {"users": []}

    def test_lists_users_without_hashes(self, client: TestClient, other_client: TestClient) -> None:
        signup(client, "ada@example.com")
        signup(other_client, "alan@example.com", firstName="Alan", lastName="Turing")

        resp = other_client.get("/get-users")
        assert resp.status_code == 200
        users = resp.json()["users"]
        assert [u["email"] for u in users] == ["ada@example.com", "alan@example.com"]
        for user in users:
            assert "passwordHash" not in user
            assert "password_hash" not in user
        assert "$2b$" not in resp.text


class TestUpdateUser:

    def test_requires_session(self, client: TestClient) -> None:
        resp = client.post("/update-user", json={"firstName": "Grace"})
        assert resp.status_code == 401

    def test_updates_allowed_fields(self, logged_in) -> None:
        client, user = logged_in
        resp = client.post("/update-user", json={"firstName": "Augusta", "lastName": "King"})
        assert resp.status_code == 200, resp.text
        updated = resp.json()["user"]
        assert updated["id"] == user["id"]
        assert updated["firstName"] == "Augusta"
        assert updated["lastName"] == "King"
        assert updated["email"] == user["email"]
        assert "passwordHash" not in updated

    def test_ignores_fields_outside_allow_list(self, logged_in) -> None:
        client, user = logged_in
        with SessionLocal() as db:
            original_hash = db.get(User, user["id"]).password_hash

        resp = client.post(
            "/update-user",
            json={"passwordHash": "forged", "password_hash": "forged", "id": 999},
        )
        assert resp.status_code == 200
        assert resp.json()["user"]["id"] == user["id"]

        with SessionLocal() as db:
            assert db.get(User, user["id"]).password_hash == original_hash

    def test_email_change_to_taken_address_conflicts(self, logged_in, other_client: TestClient) -> None:
        client, _user = logged_in
        signup(other_client, "alan@example.com")
        resp = client.post("/update-user", json={"email": "alan@example.com"})
        assert resp.status_code == 500
        assert "need to be unique" in resp.json()["message"]
