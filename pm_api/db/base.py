"""SQLAlchemy Declarative Base: shared base class and columns for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - Every entity carries id, deleted, created_at, updated_at (EntityMixin)

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - Timestamps set application-side in UTC so SQLite tests and PostgreSQL agree
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Uuid, false
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from pm_api.core.timestamps import utcnow


class Base(DeclarativeBase):
    """Base class for all pm-api ORM models."""
    pass


class EntityMixin:
    """Identity, soft-delete flag and timestamps shared by every entity."""

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
