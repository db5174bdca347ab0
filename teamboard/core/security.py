"""Password hashing, password policy, and session-bound identity helpers."""

import re
from typing import Optional, MutableMapping, Any

import bcrypt
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from teamboard.core.config import settings
from teamboard.core.exceptions import AuthenticationError, InfrastructureError
from teamboard.db.session import get_db
from teamboard.models.user import User

SESSION_USER_KEY = "user_id"

PASSWORD_POLICY = re.compile(r"(?=.*\d)(?=.*[a-z])(?=.*[A-Z]).{6,}")

# bcrypt only accepts passwords up to 72 bytes
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    """Hash a password using bcrypt with the configured cost factor."""
    pwd_bytes = password.encode("utf-8")
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(pwd_bytes, salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    pwd_bytes = plain_password.encode("utf-8")
    hashed_bytes = hashed_password.encode("utf-8")
    return bcrypt.checkpw(pwd_bytes, hashed_bytes)


def meets_password_policy(password: str) -> bool:
    """At least 6 chars with a digit, a lowercase and an uppercase letter."""
    return PASSWORD_POLICY.search(password) is not None


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


class SessionContext:
    """Request-scoped view of the identity bound to the session cookie."""

    def __init__(self, session: MutableMapping[str, Any], user: Optional[User] = None):
        self._session = session
        self.user = user

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def login(self, user: User) -> None:
        """Bind ``user`` to the session.

        Raises:
            InfrastructureError: If the user has not been persisted yet.
        """
        if user.id is None:
            raise InfrastructureError("Something went wrong with login!")
        self._session.clear()
        self._session[SESSION_USER_KEY] = user.id
        self.user = user

    def logout(self) -> None:
        self._session.clear()
        self.user = None


async def get_session_context(
    request: Request,
    db: Session = Depends(get_db),
) -> SessionContext:
    """Resolve the session cookie into a SessionContext.

    A session pointing at a user that no longer exists is cleared.
    """
    user = None
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is not None:
        user = db.get(User, user_id)
        if user is None:
            request.session.clear()
    return SessionContext(request.session, user)


async def require_login(
    ctx: SessionContext = Depends(get_session_context),
) -> SessionContext:
    """Route guard: reject the request unless an identity is bound."""
    if not ctx.is_authenticated:
        raise AuthenticationError("Unauthorized access!")
    return ctx
