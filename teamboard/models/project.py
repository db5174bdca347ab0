"""Project model with team, member, and sub-project associations."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Table, func
from sqlalchemy.orm import relationship, validates
from teamboard.db.base import Base


team_projects = Table(
    "team_projects",
    Base.metadata,
    Column("team_id", Integer, ForeignKey("teams.id", ondelete="CASCADE"), primary_key=True),
    Column("project_id", Integer, ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True),
)

project_members = Table(
    "project_members",
    Base.metadata,
    Column("project_id", Integer, ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
)

project_links = Table(
    "project_links",
    Base.metadata,
    Column("parent_id", Integer, ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True),
    Column("child_id", Integer, ForeignKey("projects.id", ondelete="CASCADE"), primary_key=True),
)


class Project(Base):
    """Project owned by one or more teams."""
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    teams = relationship("Team", secondary=team_projects, back_populates="projects")
    members = relationship("User", secondary=project_members)
    # Sub-projects
    projects = relationship(
        "Project",
        secondary=project_links,
        primaryjoin=id == project_links.c.parent_id,
        secondaryjoin=id == project_links.c.child_id,
        backref="parent_projects",
    )
    tasks = relationship(
        "Task",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="Task.id",
    )

    @validates("name")
    def validate_name(self, key, value):
        value = (value or "").strip()
        if not value:
            raise ValueError("Project validation failed: name is required.")
        return value
