"""
tests/test_cli.py -- Tests for the teamboardctl commands that work on SQLite.
"""

from __future__ import annotations

from typer.testing import CliRunner

from teamboard.cli import app
from teamboard.db.session import SessionLocal
from teamboard.models import Project, Team, User

runner = CliRunner()


def test_seed_is_idempotent(client) -> None:
    result = runner.invoke(app, ["db", "seed"])
    assert result.exit_code == 0, result.output
    again = runner.invoke(app, ["db", "seed"])
    assert again.exit_code == 0

    with SessionLocal() as db:
        team = db.query(Team).filter(Team.name == "Demo Team").one()
        assert len(team.members) == 2
        assert sorted(p.name for p in team.projects) == ["Landing page", "Website"]
        website = db.query(Project).filter(Project.name == "Website").one()
        assert [p.name for p in website.projects] == ["Landing page"]
        assert len(website.tasks) == 2


def test_seeded_user_can_log_in(client) -> None:
    runner.invoke(app, ["db", "seed"])
    resp = client.post("/login", json={"email": "ada@teamboard.local", "password": "Passw0rd"})
    assert resp.status_code == 200


def test_teams_create_with_members(client) -> None:
    runner.invoke(app, ["db", "seed"])
    result = runner.invoke(app, ["teams", "create", "Ops", "--member", "ada@teamboard.local"])
    assert result.exit_code == 0, result.output
    with SessionLocal() as db:
        team = db.query(Team).filter(Team.name == "Ops").one()
        assert [u.email for u in team.members] == ["ada@teamboard.local"]


def test_teams_create_unknown_member(client) -> None:
    result = runner.invoke(app, ["teams", "create", "Ops", "--member", "ghost@example.com"])
    assert result.exit_code == 1
    with SessionLocal() as db:
        assert db.query(Team).count() == 0
        assert db.query(User).count() == 0


def test_db_create_refuses_sqlite(client) -> None:
    result = runner.invoke(app, ["db", "create"])
    assert result.exit_code == 1
