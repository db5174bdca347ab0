"""Project service — CRUD over projects and their team references."""

import logging
from typing import Optional, Dict, Any, List, Tuple

from sqlalchemy.orm import Session, selectinload

from teamboard.models.project import Project
from teamboard.models.team import Team
from teamboard.models.user import User
from teamboard.db.session import translate_errors
from teamboard.core.exceptions import ResourceNotFoundError

logger = logging.getLogger("teamboard")


class ProjectService:
    """Creates, reads, updates and deletes projects."""

    @staticmethod
    def create(
        db: Session,
        name: Optional[str],
        description: Optional[str] = None,
        team_id: Optional[int] = None,
    ) -> Tuple[Project, Optional[Team]]:
        """Create a project and link it to ``team_id`` in one transaction.

        Raises:
            ValidationError: If the project has no name.
            ResourceNotFoundError: If ``team_id`` does not exist. Nothing is written.
        """
        with translate_errors(db, failure_message="Could not create project"):
            project = Project(name=name, description=description)

            team = None
            if team_id is not None:
                team = db.get(Team, team_id)
                if team is None:
                    raise ResourceNotFoundError("Team not found")

            db.add(project)
            if team is not None:
                team.projects.append(project)
            db.commit()

        db.refresh(project)
        if team is not None:
            db.refresh(team)
        logger.info("Created project id=%s (team=%s)", project.id, team_id)
        return project, team

    @staticmethod
    def list_projects(db: Session) -> List[Project]:
        return db.query(Project).order_by(Project.id).all()

    @staticmethod
    def list_by_team(db: Session, team_id: int) -> List[Project]:
        """Projects referenced by the given team."""
        return (
            db.query(Project)
            .join(Project.teams)
            .filter(Team.id == team_id)
            .order_by(Project.id)
            .all()
        )

    @staticmethod
    def get(db: Session, project_id: int) -> Project:
        project = db.get(Project, project_id)
        if not project:
            raise ResourceNotFoundError("Project not found")
        return project

    @staticmethod
    def get_detail(db: Session, project_id: int) -> Project:
        """Get a project with tasks, teams, members and sub-projects loaded."""
        project = (
            db.query(Project)
            .options(
                selectinload(Project.tasks),
                selectinload(Project.teams),
                selectinload(Project.members),
                selectinload(Project.projects),
            )
            .filter(Project.id == project_id)
            .first()
        )
        if not project:
            raise ResourceNotFoundError("Project not found")
        return project

    @staticmethod
    def update(db: Session, project_id: int, changes: Dict[str, Any]) -> Project:
        """Apply allow-listed changes to a project.

        ``members`` is a list of user ids and replaces the current members.
        """
        project = ProjectService.get(db, project_id)

        member_ids = changes.pop("members", None)
        members = None
        if member_ids is not None:
            members = db.query(User).filter(User.id.in_(member_ids)).all() if member_ids else []
            missing = set(member_ids) - {u.id for u in members}
            if missing:
                raise ResourceNotFoundError(
                    f"Users not found: {', '.join(str(i) for i in sorted(missing))}"
                )

        with translate_errors(db, failure_message="Could not update project"):
            for field, value in changes.items():
                setattr(project, field, value)
            if members is not None:
                project.members = members
            db.commit()
        db.refresh(project)
        return project

    @staticmethod
    def delete(db: Session, project_id: int) -> None:
        """Delete a project.

        Its team, member and sub-project links are removed with it, and its
        tasks are deleted.
        """
        project = ProjectService.get(db, project_id)
        with translate_errors(db, failure_message="Could not delete project"):
            db.delete(project)
            db.commit()
        logger.info("Deleted project id=%s", project_id)


project_service = ProjectService()
