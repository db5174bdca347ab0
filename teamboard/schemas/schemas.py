"""Pydantic schemas for API request/response serialization.

JSON keys are camelCase (``firstName``, ``createdAt``); Python attributes stay
snake_case. No schema declares ``password_hash``, so it can never be
serialized.
"""

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Any
from datetime import datetime


class CamelModel(BaseModel):
    class Config:
        from_attributes = True
        populate_by_name = True
        alias_generator = to_camel


def _ids(value: Any) -> Any:
    """Collapse a collection of related records into their ids."""
    if value is None:
        return []
    return [getattr(item, "id", item) for item in value]


class MessageResponse(CamelModel):
    message: str


# ---- Auth ----
class SignupRequest(CamelModel):
    # Presence is checked by the signup flow so a missing field gets its own message
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


# ---- Task ----
class TaskOut(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    done: bool = False
    project_id: int
    assignee_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ---- User ----
class UserOut(CamelModel):
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class TeamSummary(CamelModel):
    id: int
    name: str

class UserDetailOut(UserOut):
    """User with teams and tasks expanded."""
    teams: List[TeamSummary] = []
    tasks: List[TaskOut] = []

class UserUpdateRequest(CamelModel):
    """Fields a user may change on their own profile."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None

class AuthResponse(CamelModel):
    message: str
    user: UserOut

class UserResponse(CamelModel):
    user: UserOut

class CurrentUserResponse(CamelModel):
    user: UserDetailOut

class UserListResponse(CamelModel):
    users: List[UserOut]


# ---- Team ----
class TeamCreate(CamelModel):
    name: str = Field(..., min_length=1)

class TeamMemberAdd(CamelModel):
    user_id: int

class TeamOut(CamelModel):
    id: int
    name: str
    members: List[int] = []
    projects: List[int] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("members", "projects", mode="before")
    @classmethod
    def collapse_ids(cls, value):
        return _ids(value)


# ---- Project ----
class ProjectCreate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    team: Optional[int] = None

class ProjectUpdate(CamelModel):
    """Fields that may be changed on an existing project."""
    name: Optional[str] = None
    description: Optional[str] = None
    members: Optional[List[int]] = None

class ProjectOut(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    teams: List[int] = []
    members: List[int] = []
    projects: List[int] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("teams", "members", "projects", mode="before")
    @classmethod
    def collapse_ids(cls, value):
        return _ids(value)

class ProjectSummary(CamelModel):
    id: int
    name: str

class ProjectDetailOut(CamelModel):
    """Project with teams, members, sub-projects and tasks expanded."""
    id: int
    name: str
    description: Optional[str] = None
    teams: List[TeamSummary] = []
    members: List[UserOut] = []
    projects: List[ProjectSummary] = []
    tasks: List[TaskOut] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class TeamDetailOut(CamelModel):
    """Team with members and projects expanded."""
    id: int
    name: str
    members: List[UserOut] = []
    projects: List[ProjectOut] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class ProjectCreateResponse(CamelModel):
    project: ProjectOut
    team: Optional[TeamOut] = None

class ProjectResponse(CamelModel):
    project: ProjectOut

class ProjectDetailResponse(CamelModel):
    project: ProjectDetailOut

class ProjectListResponse(CamelModel):
    projects: List[ProjectOut]

class TeamResponse(CamelModel):
    team: TeamOut

class TeamDetailResponse(CamelModel):
    team: TeamDetailOut
