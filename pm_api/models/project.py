"""Project ORM: a board owned by one account.

Invariants:
    - Always belongs to an Account (owner_id FK)
    - description is never NULL (empty string when unset)
"""

import uuid

from sqlalchemy import String, Text, Uuid, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from pm_api.db.base import Base, EntityMixin


class Project(EntityMixin, Base):
    """Project entity."""
    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(
        Text, nullable=False, default="", server_default="",
    )
    owner_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("accounts.id"), nullable=False, index=True,
    )
