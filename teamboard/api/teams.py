"""Teams API router."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from teamboard.db.session import get_db
from teamboard.schemas.schemas import (
    TeamCreate, TeamOut, TeamDetailOut, TeamMemberAdd,
    TeamResponse, TeamDetailResponse,
)
from teamboard.services.team_service import team_service
from teamboard.core.security import SessionContext, require_login

router = APIRouter(prefix="/teams", tags=["teams"])


@router.post("", response_model=TeamResponse)
async def create_team(
    body: TeamCreate,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(require_login),
):
    """Create a new team with the current user as its first member."""
    team = team_service.create(db, body.name, creator=ctx.user)
    return TeamResponse(team=TeamOut.model_validate(team))


@router.get("/{team_id}", response_model=TeamDetailResponse)
async def get_team(team_id: int, db: Session = Depends(get_db)):
    """Team with members and projects expanded."""
    team = team_service.get_detail(db, team_id)
    return TeamDetailResponse(team=TeamDetailOut.model_validate(team))


@router.post("/{team_id}/members", response_model=TeamResponse)
async def add_member(
    team_id: int,
    body: TeamMemberAdd,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(require_login),
):
    """Add a member to a team."""
    team = team_service.add_member(db, team_id, body.user_id)
    return TeamResponse(team=TeamOut.model_validate(team))
