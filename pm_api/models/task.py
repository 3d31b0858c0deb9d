"""Task ORM: a unit of work placed in a project under one status.

Invariants:
    - project_id and status_id both set; the status belongs to the same project
    - end >= start: checked by services/tasks.py and by ck_tasks_window

Design Decisions:
    - status_id denormalized next to project_id: lists by project and by
      (project, status) need no JOIN
"""

import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, String, DateTime, Uuid, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column

from pm_api.db.base import Base, EntityMixin


class Task(EntityMixin, Base):
    """Task entity."""
    __tablename__ = "tasks"
    __table_args__ = (
        Index("ix_tasks_project_id_status_id", "project_id", "status_id"),
        CheckConstraint('"end" >= "start"', name="ck_tasks_window"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    start: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    project_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("projects.id"), nullable=False,
    )
    status_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("statuses.id"), nullable=False, index=True,
    )
