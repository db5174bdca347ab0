"""Auth API router — signup, login, logout, isLoggedIn."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from teamboard.db.session import get_db
from teamboard.schemas.schemas import (
    SignupRequest, LoginRequest, AuthResponse, CurrentUserResponse,
    UserOut, UserDetailOut, MessageResponse,
)
from teamboard.services.auth_service import auth_service
from teamboard.core.config import settings
from teamboard.core.rate_limiter import limiter
from teamboard.core.security import SessionContext, get_session_context, require_login
from teamboard.core.exceptions import AuthenticationError

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=AuthResponse)
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def signup(
    request: Request,
    body: SignupRequest,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_session_context),
):
    """Create an account and log it in."""
    user = await auth_service.signup(
        db, body.first_name, body.last_name, body.email, body.password,
    )
    ctx.login(user)
    return AuthResponse(message="Login successful!", user=UserOut.model_validate(user))


@router.post("/login", response_model=AuthResponse)
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def login(
    request: Request,
    body: LoginRequest,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_session_context),
):
    """Check credentials and bind the user to the session."""
    user = await auth_service.authenticate(db, body.email, body.password)
    ctx.login(user)
    return AuthResponse(message="Login successful!", user=UserOut.model_validate(user))


@router.post("/logout", response_model=MessageResponse)
async def logout(ctx: SessionContext = Depends(require_login)):
    """Clear the session."""
    ctx.logout()
    return MessageResponse(message="Logout successful!")


@router.get("/isLoggedIn", response_model=CurrentUserResponse)
async def is_logged_in(
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_session_context),
):
    """Return the logged-in user with teams and tasks expanded."""
    if not ctx.is_authenticated:
        raise AuthenticationError("Unauthorized access!")
    user = auth_service.get_user(db, ctx.user.id)
    return CurrentUserResponse(user=UserDetailOut.model_validate(user))
