"""Account ORM: a user who owns projects.

Invariants:
    - email is unique across all rows, including soft-deleted ones
    - avatar is never NULL (empty string when unset)
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from pm_api.db.base import Base, EntityMixin


class Account(EntityMixin, Base):
    """Account entity."""
    __tablename__ = "accounts"

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    avatar: Mapped[str] = mapped_column(
        String(1024), nullable=False, default="", server_default="",
    )
