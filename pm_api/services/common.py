"""Shared data-access helpers: id parsing, active-row lookup, rowcount-checked writes.

Invariants:
    - Every query filters soft-deleted rows (deleted = false)
    - Every UPDATE sets updated_at and checks the affected-row count
    - A failed write always rolls the session back before raising
    - SQLAlchemy exceptions never escape: IntegrityError -> caller-supplied
      sentinel error, anything else -> DatabaseError

Design Decisions:
    - Lookups that guard a later write take a row lock (FOR UPDATE, or FOR SHARE
      for parents) held until write_transaction commits; SQLite ignores it
    - Core update() with synchronize_session=False: one parameterized statement,
      rowcount tells us whether the target existed
    - get_active() uses populate_existing so a row re-read after a Core UPDATE
      reflects the new values even when the session already holds it
"""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pm_api.core.errors import (
    DatabaseError, PmError, ResourceNotFoundError, UpdateFailedError,
    ValidationFailedError,
)
from pm_api.core.timestamps import utcnow
from pm_api.db.base import EntityMixin

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 100
MAX_LIMIT = 500

ModelT = TypeVar("ModelT", bound=EntityMixin)


def parse_id(value: str | uuid.UUID, field: str) -> uuid.UUID:
    """Parse a UUID or raise ValidationFailedError naming the field."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise ValidationFailedError(f"'{field}' must be a valid UUID", field)


def require_text(value: str | None, field: str) -> str:
    """Return the stripped value or raise if it is empty."""
    value = (value or "").strip()
    if not value:
        raise ValidationFailedError(f"'{field}' cannot be empty", field)
    return value


def changed_fields(data: BaseModel) -> dict[str, Any]:
    """Fields of a partial update that carry a value.

    None and blank strings mean "keep the stored value".
    """
    values = {}
    for key, value in data.model_dump(exclude_none=True).items():
        if isinstance(value, str):
            value = value.strip()
            if not value:
                continue
        values[key] = value
    return values


def active_row(
    model: type[EntityMixin], entity_id: uuid.UUID, lock: str | None = None,
) -> Select:
    """SELECT one non-deleted row; lock is None, "share" or "update"."""
    query = (
        select(model)
        .where(model.id == entity_id, model.deleted.is_(False))
        .execution_options(populate_existing=True)
    )
    if lock is not None:
        query = query.with_for_update(read=lock == "share")
    return query


async def find_active(
    db: AsyncSession,
    model: type[ModelT],
    entity_id: uuid.UUID,
    lock: str | None = None,
) -> ModelT | None:
    result = await db.execute(active_row(model, entity_id, lock))
    return result.scalar_one_or_none()


async def get_active(
    db: AsyncSession, model: type[ModelT], entity_id: uuid.UUID, resource: str,
) -> ModelT:
    """Get a non-deleted row or raise ResourceNotFoundError."""
    row = await find_active(db, model, entity_id)
    if row is None:
        raise ResourceNotFoundError(resource, str(entity_id))
    return row


async def exists_active(
    db: AsyncSession,
    model: type[EntityMixin],
    entity_id: uuid.UUID,
    lock: str | None = None,
) -> bool:
    return await find_active(db, model, entity_id, lock) is not None


async def list_active(
    db: AsyncSession,
    model: type[ModelT],
    *criteria,
    limit: int = DEFAULT_LIMIT,
    offset: int = 0,
) -> list[ModelT]:
    """Non-deleted rows matching criteria, oldest first."""
    query = (
        select(model)
        .where(model.deleted.is_(False), *criteria)
        .order_by(model.created_at, model.id)
        .limit(limit)
        .offset(offset)
    )
    result = await db.execute(query)
    return list(result.scalars().all())


@asynccontextmanager
async def write_transaction(
    db: AsyncSession, on_conflict: PmError,
) -> AsyncGenerator[None, None]:
    """Run writes and commit; map failures to sentinel errors with rollback."""
    try:
        yield
        await db.commit()
    except PmError:
        await db.rollback()
        raise
    except IntegrityError as e:
        await db.rollback()
        logger.warning(
            f"Integrity error: {e.orig}", extra={"error_code": on_conflict.code},
        )
        raise on_conflict from e
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Database write failed: {e}", exc_info=True)
        raise DatabaseError("changes were not saved", "write") from e


async def apply_update(
    db: AsyncSession,
    model: type[EntityMixin],
    entity_id: uuid.UUID,
    values: dict[str, Any],
    resource: str,
    on_conflict: PmError | None = None,
) -> None:
    """UPDATE one active row; zero affected rows -> UpdateFailedError.

    A constraint violation raises on_conflict, or UpdateFailedError if unset.
    """
    failed = UpdateFailedError(resource, str(entity_id))
    async with write_transaction(db, on_conflict or failed):
        result = await db.execute(
            update(model)
            .where(model.id == entity_id, model.deleted.is_(False))
            .values(**values, updated_at=utcnow())
            .execution_options(synchronize_session=False),
        )
        if result.rowcount < 1:
            raise failed


async def soft_delete(
    db: AsyncSession, model: type[EntityMixin], entity_id: uuid.UUID, resource: str,
) -> None:
    """Flag a row deleted; it disappears from every subsequent read."""
    await apply_update(db, model, entity_id, {"deleted": True}, resource)
    logger.info(
        f"{resource} {entity_id} soft-deleted",
        extra={"resource": resource, "resource_id": str(entity_id)},
    )
