"""Task routes: /api/v1/tasks.

Invariants:
    - Listing requires ?project_id=; adding ?status_id= narrows to one column
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from pm_api.infrastructure.database import get_db
from pm_api.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from pm_api.services import tasks as task_service
from pm_api.services.common import DEFAULT_LIMIT, MAX_LIMIT

router = APIRouter(prefix="/api/v1/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    project_id: str = Query(...),
    status_id: str | None = Query(None),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    """List active tasks of a project, optionally of one status."""
    if status_id:
        return await task_service.list_tasks_by_project_and_status(
            db, project_id, status_id, limit=limit, offset=offset,
        )
    return await task_service.list_tasks_by_project(
        db, project_id, limit=limit, offset=offset,
    )


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(task_id: str, db: AsyncSession = Depends(get_db)):
    return await task_service.get_task(db, task_id)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(body: TaskCreate, db: AsyncSession = Depends(get_db)):
    return await task_service.create_task(db, body)


@router.patch("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str, body: TaskUpdate, db: AsyncSession = Depends(get_db),
):
    """Partially update a task. The window is validated on merged values."""
    return await task_service.update_task(db, task_id, body)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: str, db: AsyncSession = Depends(get_db)):
    await task_service.delete_task(db, task_id)
