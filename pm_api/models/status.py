"""Status ORM: a workflow column ("todo", "in progress", ...) scoped to a project."""

import uuid

from sqlalchemy import String, Uuid, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from pm_api.db.base import Base, EntityMixin


class Status(EntityMixin, Base):
    """Status entity."""
    __tablename__ = "statuses"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    project_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("projects.id"), nullable=False, index=True,
    )
