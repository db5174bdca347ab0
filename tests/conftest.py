"""
tests/conftest.py -- Shared fixtures for Teamboard integration tests.

Settings are read at import time, so the environment is pinned before any
teamboard module is imported: an in-memory SQLite database (StaticPool keeps
one shared connection alive across threads), cheap bcrypt rounds, and rate
limiting switched off so repeated signups don't trip the limiter.
"""

from __future__ import annotations

import os
from collections.abc import Generator

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DEBUG"] = "false"

import pytest
from fastapi.testclient import TestClient

from teamboard.db.session import SessionLocal, drop_db, init_db
from teamboard.main import app
from teamboard.models import Project, Task, Team, User

VALID_PASSWORD = "Secret123"


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    """Fresh schema and a cookie-keeping TestClient per test."""
    drop_db()
    init_db()
    with TestClient(app, raise_server_exceptions=True) as c:
        yield c


@pytest.fixture()
def other_client(client: TestClient) -> Generator[TestClient, None, None]:
    """Second client sharing the database but with its own cookie jar."""
    with TestClient(app, raise_server_exceptions=True) as c:
        yield c


def signup_payload(email: str = "ada@example.com", **overrides) -> dict:
    payload = {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": email,
        "password": VALID_PASSWORD,
    }
    payload.update(overrides)
    return payload


def signup(client: TestClient, email: str = "ada@example.com", **overrides):
    return client.post("/signup", json=signup_payload(email, **overrides))


@pytest.fixture()
def logged_in(client: TestClient) -> tuple[TestClient, dict]:
    """(client, user) after a successful signup, which also logs the user in."""
    resp = signup(client)
    assert resp.status_code == 200, resp.text
    return client, resp.json()["user"]


@pytest.fixture()
def team_id(client: TestClient) -> int:
    """Id of a team created directly in the database."""
    with SessionLocal() as db:
        team = Team(name="Core")
        db.add(team)
        db.commit()
        return team.id


def count_users(email: str) -> int:
    with SessionLocal() as db:
        return db.query(User).filter(User.email == email).count()


def team_project_ids(team_id: int) -> list[int]:
    with SessionLocal() as db:
        team = db.get(Team, team_id)
        return sorted(p.id for p in team.projects)


def add_task(project_id: int, name: str, assignee_id: int | None = None) -> int:
    with SessionLocal() as db:
        task = Task(name=name, project_id=project_id, assignee_id=assignee_id)
        db.add(task)
        db.commit()
        return task.id


def project_exists(project_id: int) -> bool:
    with SessionLocal() as db:
        return db.get(Project, project_id) is not None
