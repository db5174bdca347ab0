"""Models package — import all models so the metadata knows every table."""

from teamboard.models.user import User
from teamboard.models.team import Team, team_members
from teamboard.models.project import Project, team_projects, project_members, project_links
from teamboard.models.task import Task

__all__ = [
    "User", "Team", "Project", "Task",
    "team_members", "team_projects", "project_members", "project_links",
]
