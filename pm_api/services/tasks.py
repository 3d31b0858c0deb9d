"""Task data access.

Invariants:
    - end >= start, checked on create and on the merged values of an update
    - A task's status belongs to the task's project
    - start/end stored as UTC
    - ck_tasks_window in the schema rejects any write that stores end < start

Design Decisions:
    - update_task reads the current row first: a partial window change can only
      be validated against the stored bound. The read takes FOR UPDATE, and the
      check constraint still rejects a window broken by a concurrent writer
    - Parent project and status rows are read FOR SHARE, so they cannot be
      soft-deleted or moved before the task commits
"""

import logging
import uuid
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from pm_api.core.errors import (
    InsertFailedError, UpdateFailedError, ValidationFailedError,
)
from pm_api.core.timestamps import as_utc
from pm_api.models.project import Project
from pm_api.models.status import Status
from pm_api.models.task import Task
from pm_api.schemas.task import TaskCreate, TaskUpdate
from pm_api.services.common import (
    DEFAULT_LIMIT, apply_update, changed_fields, exists_active, find_active,
    get_active, list_active, parse_id, require_text, soft_delete,
    write_transaction,
)

logger = logging.getLogger(__name__)

RESOURCE = "Task"


def _window_error() -> ValidationFailedError:
    return ValidationFailedError("'end' must not precede 'start'", "end")


def check_window(start: datetime, end: datetime) -> None:
    if as_utc(end) < as_utc(start):
        raise _window_error()


async def _status_in_project(
    db: AsyncSession, status_id: uuid.UUID, project_id: uuid.UUID,
) -> bool | None:
    """None if the status is missing, else whether it belongs to the project."""
    status = await find_active(db, Status, status_id, lock="share")
    if status is None:
        return None
    return status.project_id == project_id


async def get_task(db: AsyncSession, task_id: str) -> Task:
    return await get_active(db, Task, parse_id(task_id, "id"), RESOURCE)


async def list_tasks_by_project(
    db: AsyncSession, project_id: str, limit: int = DEFAULT_LIMIT, offset: int = 0,
) -> list[Task]:
    project = parse_id(project_id, "project_id")
    return await list_active(
        db, Task, Task.project_id == project, limit=limit, offset=offset,
    )


async def list_tasks_by_project_and_status(
    db: AsyncSession,
    project_id: str,
    status_id: str,
    limit: int = DEFAULT_LIMIT,
    offset: int = 0,
) -> list[Task]:
    project = parse_id(project_id, "project_id")
    status = parse_id(status_id, "status_id")
    return await list_active(
        db, Task, Task.project_id == project, Task.status_id == status,
        limit=limit, offset=offset,
    )


async def create_task(db: AsyncSession, data: TaskCreate) -> Task:
    name = require_text(data.name, "name")
    project_id = parse_id(data.project_id, "project_id")
    status_id = parse_id(data.status_id, "status_id")
    start, end = as_utc(data.start), as_utc(data.end)
    check_window(start, end)

    if not await exists_active(db, Project, project_id, lock="share"):
        raise InsertFailedError(RESOURCE, f"project '{project_id}' does not exist")
    in_project = await _status_in_project(db, status_id, project_id)
    if in_project is None:
        raise InsertFailedError(RESOURCE, f"status '{status_id}' does not exist")
    if not in_project:
        raise ValidationFailedError(
            "status does not belong to the task's project", "status_id",
        )

    task = Task(
        name=name, project_id=project_id, status_id=status_id,
        start=start, end=end,
    )
    async with write_transaction(
        db, InsertFailedError(RESOURCE, "constraint violated"),
    ):
        db.add(task)
    await db.refresh(task)
    logger.info(
        f"Task {task.id} created in project {project_id}",
        extra={"resource": RESOURCE, "resource_id": str(task.id)},
    )
    return task


async def update_task(db: AsyncSession, task_id: str, data: TaskUpdate) -> Task:
    """Patch name, window and status; absent fields keep stored values."""
    entity_id = parse_id(task_id, "id")
    values = changed_fields(data)
    if "status_id" in values:
        values["status_id"] = parse_id(values["status_id"], "status_id")

    current = await find_active(db, Task, entity_id, lock="update")
    if current is None:
        raise UpdateFailedError(RESOURCE, str(entity_id))

    if "start" in values:
        values["start"] = as_utc(values["start"])
    if "end" in values:
        values["end"] = as_utc(values["end"])
    check_window(
        values.get("start", current.start), values.get("end", current.end),
    )

    if "status_id" in values:
        in_project = await _status_in_project(
            db, values["status_id"], current.project_id,
        )
        if not in_project:
            raise ValidationFailedError(
                "status does not exist in the task's project", "status_id",
            )

    await apply_update(
        db, Task, entity_id, values, RESOURCE, on_conflict=_window_error(),
    )
    return await get_active(db, Task, entity_id, RESOURCE)


async def delete_task(db: AsyncSession, task_id: str) -> None:
    await soft_delete(db, Task, parse_id(task_id, "id"), RESOURCE)
