"""Users API router."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from teamboard.db.session import get_db
from teamboard.schemas.schemas import (
    UserOut, UserUpdateRequest, UserResponse, UserListResponse,
)
from teamboard.services.auth_service import auth_service
from teamboard.core.security import SessionContext, require_login

router = APIRouter(tags=["users"])


@router.get("/get-users", response_model=UserListResponse)
async def get_users(db: Session = Depends(get_db)):
    """List all users."""
    users = auth_service.list_users(db)
    return UserListResponse(users=[UserOut.model_validate(u) for u in users])


@router.post("/update-user", response_model=UserResponse)
async def update_user(
    body: UserUpdateRequest,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(require_login),
):
    """Update the logged-in user's name or email."""
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    user = auth_service.update_user(db, ctx.user, changes)
    return UserResponse(user=UserOut.model_validate(user))
