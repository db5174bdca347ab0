"""Team service — team creation, lookup and membership."""

import logging

from sqlalchemy.orm import Session, selectinload

from teamboard.models.team import Team
from teamboard.models.user import User
from teamboard.db.session import translate_errors
from teamboard.core.exceptions import ResourceNotFoundError

logger = logging.getLogger("teamboard")


class TeamService:
    """Handles teams and their members."""

    @staticmethod
    def create(db: Session, name: str, creator: User = None) -> Team:
        """Create a team; the creator (if any) becomes its first member."""
        with translate_errors(db, failure_message="Could not create team"):
            team = Team(name=name)
            if creator is not None:
                team.members.append(creator)
            db.add(team)
            db.commit()
        db.refresh(team)
        logger.info("Created team id=%s", team.id)
        return team

    @staticmethod
    def get_detail(db: Session, team_id: int) -> Team:
        """Get a team with members and projects loaded."""
        team = (
            db.query(Team)
            .options(selectinload(Team.members), selectinload(Team.projects))
            .filter(Team.id == team_id)
            .first()
        )
        if not team:
            raise ResourceNotFoundError("Team not found")
        return team

    @staticmethod
    def add_member(db: Session, team_id: int, user_id: int) -> Team:
        """Add a user to a team. Adding an existing member is a no-op."""
        team = TeamService.get_detail(db, team_id)
        user = db.get(User, user_id)
        if not user:
            raise ResourceNotFoundError(f"User {user_id} not found")
        if user not in team.members:
            with translate_errors(db, failure_message="Could not add member"):
                team.members.append(user)
                db.commit()
            db.refresh(team)
        return team


team_service = TeamService()
