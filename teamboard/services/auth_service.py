"""Auth service — signup, local-strategy login, user directory."""

import logging
from typing import Optional, Dict, Any, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from starlette.concurrency import run_in_threadpool

from teamboard.models.user import User
from teamboard.db.session import translate_errors
from teamboard.core.security import (
    MAX_PASSWORD_BYTES, hash_password, verify_password, meets_password_policy,
    password_too_long,
)
from teamboard.core.exceptions import (
    AuthenticationError, InfrastructureError, MissingFieldsError,
    PasswordPolicyError, ResourceNotFoundError,
)

logger = logging.getLogger("teamboard")

MISSING_FIELDS_MESSAGE = (
    "All fields are mandatory. Please provide your username, email and password."
)
PASSWORD_POLICY_MESSAGE = (
    "Password needs to have at least 6 chars and must contain at least one number, "
    "one lowercase and one uppercase letter."
)
DUPLICATE_USER_MESSAGE = (
    "Username and email need to be unique. Either username or email is already used."
)
PASSWORD_TOO_LONG_MESSAGE = f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes."
BAD_CREDENTIALS_MESSAGE = "Incorrect email or password."


class AuthService:
    """Handles signup, authentication and user management."""

    @staticmethod
    async def signup(
        db: Session,
        first_name: Optional[str],
        last_name: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> User:
        """Validate the signup fields and create the user.

        The caller is responsible for binding the returned user to the session.

        Raises:
            MissingFieldsError: If any field is missing or empty.
            PasswordPolicyError: If the password is too weak or too long for bcrypt.
            ValidationError: If the user record fails model validation.
            ConflictError: If the email is already registered.
        """
        if not first_name or not last_name or not email or not password:
            raise MissingFieldsError(MISSING_FIELDS_MESSAGE)

        if not meets_password_policy(password):
            raise PasswordPolicyError(PASSWORD_POLICY_MESSAGE)

        if password_too_long(password):
            raise PasswordPolicyError(PASSWORD_TOO_LONG_MESSAGE)

        # bcrypt is CPU bound, keep it off the event loop
        hashed = await run_in_threadpool(hash_password, password)

        with translate_errors(db, conflict_message=DUPLICATE_USER_MESSAGE):
            user = User(
                first_name=first_name,
                last_name=last_name,
                email=email,
                password_hash=hashed,
            )
            db.add(user)
            db.commit()
        db.refresh(user)
        logger.info("New user signed up: %s (id=%s)", user.email, user.id)
        return user

    @staticmethod
    async def authenticate(db: Session, email: Optional[str], password: Optional[str]) -> User:
        """Local strategy: look the user up by email and check the password.

        Raises:
            AuthenticationError: Missing credentials, unknown email or bad password.
            InfrastructureError: If the lookup itself fails.
        """
        if not email or not password:
            raise AuthenticationError("Missing credentials")

        try:
            user = db.query(User).filter(User.email == email.strip().lower()).first()
        except SQLAlchemyError as e:
            logger.exception("User lookup failed during login")
            raise InfrastructureError("Something went wrong with database query.") from e

        if not user:
            logger.info("Login failed: unknown email %s", email)
            raise AuthenticationError(BAD_CREDENTIALS_MESSAGE)

        if password_too_long(password):
            logger.info("Login failed: over-long password for user id=%s", user.id)
            raise AuthenticationError(BAD_CREDENTIALS_MESSAGE)

        if not await run_in_threadpool(verify_password, password, user.password_hash):
            logger.info("Login failed: wrong password for user id=%s", user.id)
            raise AuthenticationError(BAD_CREDENTIALS_MESSAGE)

        logger.info("User logged in: id=%s", user.id)
        return user

    @staticmethod
    def get_user(db: Session, user_id: int) -> User:
        """Get a user by id with teams and tasks loaded."""
        user = (
            db.query(User)
            .options(selectinload(User.teams), selectinload(User.tasks))
            .filter(User.id == user_id)
            .first()
        )
        if not user:
            raise ResourceNotFoundError(f"User {user_id} not found")
        return user

    @staticmethod
    def list_users(db: Session) -> List[User]:
        """List all users, oldest first."""
        return db.query(User).order_by(User.id).all()

    @staticmethod
    def update_user(db: Session, user: User, changes: Dict[str, Any]) -> User:
        """Apply allow-listed profile changes to ``user``.

        ``changes`` must already be restricted to updatable fields.
        """
        with translate_errors(db, conflict_message=DUPLICATE_USER_MESSAGE):
            for field, value in changes.items():
                setattr(user, field, value)
            db.commit()
        db.refresh(user)
        return user


auth_service = AuthService()
