"""Project data access.

Invariants:
    - A project is created only for an active (non-deleted) owner account
    - Listing is always scoped to one owner
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from pm_api.core.errors import InsertFailedError
from pm_api.models.account import Account
from pm_api.models.project import Project
from pm_api.schemas.project import ProjectCreate, ProjectUpdate
from pm_api.services.common import (
    DEFAULT_LIMIT, apply_update, changed_fields, exists_active, get_active,
    list_active, parse_id, require_text, soft_delete, write_transaction,
)

logger = logging.getLogger(__name__)

RESOURCE = "Project"


async def get_project(db: AsyncSession, project_id: str) -> Project:
    return await get_active(db, Project, parse_id(project_id, "id"), RESOURCE)


async def list_projects_by_owner(
    db: AsyncSession, owner_id: str, limit: int = DEFAULT_LIMIT, offset: int = 0,
) -> list[Project]:
    owner = parse_id(owner_id, "owner_id")
    return await list_active(
        db, Project, Project.owner_id == owner, limit=limit, offset=offset,
    )


async def create_project(db: AsyncSession, data: ProjectCreate) -> Project:
    name = require_text(data.name, "name")
    owner_id = parse_id(data.owner_id, "owner_id")
    if not await exists_active(db, Account, owner_id):
        raise InsertFailedError(RESOURCE, f"owner account '{owner_id}' does not exist")

    project = Project(name=name, description=data.description, owner_id=owner_id)
    async with write_transaction(
        db, InsertFailedError(RESOURCE, "constraint violated"),
    ):
        db.add(project)
    await db.refresh(project)
    logger.info(
        f"Project {project.id} created for owner {owner_id}",
        extra={"resource": RESOURCE, "resource_id": str(project.id)},
    )
    return project


async def update_project(
    db: AsyncSession, project_id: str, data: ProjectUpdate,
) -> Project:
    entity_id = parse_id(project_id, "id")
    await apply_update(db, Project, entity_id, changed_fields(data), RESOURCE)
    return await get_active(db, Project, entity_id, RESOURCE)


async def delete_project(db: AsyncSession, project_id: str) -> None:
    await soft_delete(db, Project, parse_id(project_id, "id"), RESOURCE)
