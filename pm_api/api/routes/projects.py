"""Project routes: /api/v1/projects.

Invariants:
    - Listing requires ?owner_id=; projects are never listed globally
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from pm_api.infrastructure.database import get_db
from pm_api.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from pm_api.services import projects as project_service
from pm_api.services.common import DEFAULT_LIMIT, MAX_LIMIT

router = APIRouter(prefix="/api/v1/projects", tags=["projects"])


@router.get("", response_model=list[ProjectResponse])
async def list_projects(
    owner_id: str = Query(...),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    """List active projects of one owner."""
    return await project_service.list_projects_by_owner(
        db, owner_id, limit=limit, offset=offset,
    )


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(project_id: str, db: AsyncSession = Depends(get_db)):
    return await project_service.get_project(db, project_id)


@router.post(
    "", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED,
)
async def create_project(body: ProjectCreate, db: AsyncSession = Depends(get_db)):
    return await project_service.create_project(db, body)


@router.patch("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: str, body: ProjectUpdate, db: AsyncSession = Depends(get_db),
):
    return await project_service.update_project(db, project_id, body)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(project_id: str, db: AsyncSession = Depends(get_db)):
    await project_service.delete_project(db, project_id)
