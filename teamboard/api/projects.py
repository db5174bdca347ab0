"""Projects API router."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from teamboard.db.session import get_db
from teamboard.schemas.schemas import (
    ProjectCreate, ProjectUpdate, ProjectOut, ProjectDetailOut, TeamOut,
    ProjectCreateResponse, ProjectResponse, ProjectDetailResponse,
    ProjectListResponse, MessageResponse,
)
from teamboard.services.project_service import project_service

router = APIRouter(tags=["projects"])


@router.post("/projects", response_model=ProjectCreateResponse)
async def create_project(body: ProjectCreate, db: Session = Depends(get_db)):
    """Create a project, linking it to its team when one is given."""
    project, team = project_service.create(db, body.name, body.description, body.team)
    return ProjectCreateResponse(
        project=ProjectOut.model_validate(project),
        team=TeamOut.model_validate(team) if team is not None else None,
    )


@router.get("/projects", response_model=ProjectListResponse)
async def list_projects(db: Session = Depends(get_db)):
    """List all projects."""
    projects = project_service.list_projects(db)
    return ProjectListResponse(projects=[ProjectOut.model_validate(p) for p in projects])


@router.get("/team-projects/{team_id}", response_model=ProjectListResponse)
async def list_team_projects(team_id: int, db: Session = Depends(get_db)):
    """List the projects of one team."""
    projects = project_service.list_by_team(db, team_id)
    return ProjectListResponse(projects=[ProjectOut.model_validate(p) for p in projects])


@router.get("/projects/{project_id}", response_model=ProjectDetailResponse)
async def get_project(project_id: int, db: Session = Depends(get_db)):
    """Project details with tasks and teams expanded."""
    project = project_service.get_detail(db, project_id)
    return ProjectDetailResponse(project=ProjectDetailOut.model_validate(project))


@router.post("/projects/{project_id}/update", response_model=ProjectResponse)
async def update_project(
    project_id: int,
    body: ProjectUpdate,
    db: Session = Depends(get_db),
):
    """Update a project's name, description or members."""
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    project = project_service.update(db, project_id, changes)
    return ProjectResponse(project=ProjectOut.model_validate(project))


@router.post("/projects/{project_id}/delete", response_model=MessageResponse)
async def delete_project(project_id: int, db: Session = Depends(get_db)):
    """Delete a project."""
    project_service.delete(db, project_id)
    return MessageResponse(message="Successfully removed!")
