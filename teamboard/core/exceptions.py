"""Custom exception classes for Teamboard.

Every error carries the HTTP status it is rendered with, so route handlers
can simply let them propagate to the exception handler in ``main``.
"""

from typing import Optional

from fastapi import status


class TeamboardError(Exception):
    """Base exception for Teamboard."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "An error occurred", status_code: Optional[int] = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(TeamboardError):
    """Raised when a record fails model-level validation."""
    pass


class ConflictError(TeamboardError):
    """Raised when a write violates a uniqueness constraint."""
    pass


class InfrastructureError(TeamboardError):
    """Raised when the database (or another backing service) fails."""
    pass


class AuthenticationError(TeamboardError):
    """Raised when credentials are missing or invalid."""

    status_code = status.HTTP_401_UNAUTHORIZED


class ResourceNotFoundError(TeamboardError):
    """Raised when a requested resource is not found."""

    status_code = status.HTTP_404_NOT_FOUND


class MissingFieldsError(TeamboardError):
    """Raised when signup is missing one of its mandatory fields."""

    status_code = status.HTTP_401_UNAUTHORIZED


class PasswordPolicyError(TeamboardError):
    """Raised when a password does not satisfy the password policy.

    Rendered as a 500 to keep the status clients already depend on.
    """
    pass
