"""Shared response base: identity, soft-delete flag, UTC timestamps."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from pm_api.core.timestamps import as_utc


class EntityResponse(BaseModel):
    """Fields every entity response carries; built from ORM rows."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    deleted: bool
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def normalize_timestamps(cls, v: datetime) -> datetime:
        return as_utc(v)
