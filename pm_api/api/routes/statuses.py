"""Status routes: /api/v1/statuses."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from pm_api.infrastructure.database import get_db
from pm_api.schemas.status import StatusCreate, StatusResponse, StatusUpdate
from pm_api.services import statuses as status_service
from pm_api.services.common import DEFAULT_LIMIT, MAX_LIMIT

router = APIRouter(prefix="/api/v1/statuses", tags=["statuses"])


@router.get("", response_model=list[StatusResponse])
async def list_statuses(
    project_id: str = Query(...),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    """List active statuses of one project."""
    return await status_service.list_statuses_by_project(
        db, project_id, limit=limit, offset=offset,
    )


@router.get("/{status_id}", response_model=StatusResponse)
async def get_status(status_id: str, db: AsyncSession = Depends(get_db)):
    return await status_service.get_status(db, status_id)


@router.post(
    "", response_model=StatusResponse, status_code=status.HTTP_201_CREATED,
)
async def create_status(body: StatusCreate, db: AsyncSession = Depends(get_db)):
    return await status_service.create_status(db, body)


@router.patch("/{status_id}", response_model=StatusResponse)
async def update_status(
    status_id: str, body: StatusUpdate, db: AsyncSession = Depends(get_db),
):
    return await status_service.update_status(db, status_id, body)


@router.delete("/{status_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_status(status_id: str, db: AsyncSession = Depends(get_db)):
    await status_service.delete_status(db, status_id)
