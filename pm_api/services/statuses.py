"""Status data access. Statuses are the columns of a project board."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from pm_api.core.errors import InsertFailedError
from pm_api.models.project import Project
from pm_api.models.status import Status
from pm_api.schemas.status import StatusCreate, StatusUpdate
from pm_api.services.common import (
    DEFAULT_LIMIT, apply_update, changed_fields, exists_active, get_active,
    list_active, parse_id, require_text, soft_delete, write_transaction,
)

logger = logging.getLogger(__name__)

RESOURCE = "Status"


async def get_status(db: AsyncSession, status_id: str) -> Status:
    return await get_active(db, Status, parse_id(status_id, "id"), RESOURCE)


async def list_statuses_by_project(
    db: AsyncSession, project_id: str, limit: int = DEFAULT_LIMIT, offset: int = 0,
) -> list[Status]:
    project = parse_id(project_id, "project_id")
    return await list_active(
        db, Status, Status.project_id == project, limit=limit, offset=offset,
    )


async def create_status(db: AsyncSession, data: StatusCreate) -> Status:
    name = require_text(data.name, "name")
    project_id = parse_id(data.project_id, "project_id")
    if not await exists_active(db, Project, project_id):
        raise InsertFailedError(RESOURCE, f"project '{project_id}' does not exist")

    status = Status(name=name, project_id=project_id)
    async with write_transaction(
        db, InsertFailedError(RESOURCE, "constraint violated"),
    ):
        db.add(status)
    await db.refresh(status)
    logger.info(
        f"Status {status.id} created in project {project_id}",
        extra={"resource": RESOURCE, "resource_id": str(status.id)},
    )
    return status


async def update_status(
    db: AsyncSession, status_id: str, data: StatusUpdate,
) -> Status:
    entity_id = parse_id(status_id, "id")
    await apply_update(db, Status, entity_id, changed_fields(data), RESOURCE)
    return await get_active(db, Status, entity_id, RESOURCE)


async def delete_status(db: AsyncSession, status_id: str) -> None:
    await soft_delete(db, Status, parse_id(status_id, "id"), RESOURCE)
