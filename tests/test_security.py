"""
tests/test_security.py -- Unit tests for password handling and the session context.

Coverage:
  - bcrypt hashing uses a fresh salt and the configured cost factor
  - Password policy regex
  - SessionContext login/logout and the binding failure path
  - Local-strategy lookup failures surface as infrastructure errors
"""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from teamboard.core.config import settings
from teamboard.core.exceptions import AuthenticationError, InfrastructureError
from teamboard.core.security import (
    SESSION_USER_KEY,
    SessionContext,
    hash_password,
    meets_password_policy,
    password_too_long,
    verify_password,
)
from teamboard.models import User
from teamboard.services.auth_service import auth_service


class TestPasswordHashing:

    def test_hash_round_trip(self) -> None:
        hashed = hash_password("Secret123")
        assert hashed != "Secret123"
        assert verify_password("Secret123", hashed)
        assert not verify_password("secret123", hashed)

    def test_salt_differs_per_hash(self) -> None:
        assert hash_password("Secret123") != hash_password("Secret123")

    def test_cost_factor_from_settings(self) -> None:
        hashed = hash_password("Secret123")
        assert hashed.split("$")[2] == f"{settings.BCRYPT_ROUNDS:02d}"


class TestPasswordPolicy:

    @pytest.mark.parametrize("password", ["Secret1", "aB3456", "x" * 20 + "Y1"])
    def test_accepts(self, password: str) -> None:
        assert meets_password_policy(password)

    @pytest.mark.parametrize("password", ["", "aB3", "secret1", "SECRET1", "Secrets"])
    def test_rejects(self, password: str) -> None:
        assert not meets_password_policy(password)

    def test_length_limit_counts_bytes(self) -> None:
        assert not password_too_long("a" * 72)
        assert password_too_long("a" * 73)
        # 36 two-byte characters is 72 bytes, one more crosses the limit
        assert not password_too_long("\u00e9" * 36)
        assert password_too_long("\u00e9" * 37)


class TestSessionContext:

    def test_login_binds_user_id(self) -> None:
        session: dict = {"stale": True}
        ctx = SessionContext(session)
        user = User(id=7, email="ada@example.com", password_hash="x")
        ctx.login(user)
        assert session == {SESSION_USER_KEY: 7}
        assert ctx.is_authenticated
        assert ctx.user is user

    def test_login_unsaved_user_fails(self) -> None:
        session: dict = {}
        ctx = SessionContext(session)
        with pytest.raises(InfrastructureError) as exc:
            ctx.login(User(email="ada@example.com", password_hash="x"))
        assert exc.value.message == "Something went wrong with login!"
        assert exc.value.status_code == 500
        assert session == {}

    def test_logout_clears(self) -> None:
        session: dict = {SESSION_USER_KEY: 7}
        ctx = SessionContext(session, user=User(id=7, email="ada@example.com", password_hash="x"))
        ctx.logout()
        assert session == {}
        assert not ctx.is_authenticated


class TestAuthenticate:

    def test_lookup_failure_is_infrastructure_error(self) -> None:
        db = MagicMock()
        db.query.side_effect = OperationalError("SELECT", {}, Exception("server gone away"))
        with pytest.raises(InfrastructureError) as exc:
            asyncio.run(auth_service.authenticate(db, "ada@example.com", "Secret123"))
        assert exc.value.message == "Something went wrong with database query."

    def test_missing_credentials(self) -> None:
        with pytest.raises(AuthenticationError):
            asyncio.run(auth_service.authenticate(MagicMock(), "", "Secret123"))
