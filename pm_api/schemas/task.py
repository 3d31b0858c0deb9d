"""Task Schemas.

Invariants:
    - start/end accept ISO 8601 or "YYYY-MM-DD HH:MM:SS"; naive values are UTC
    - The end >= start rule is checked by services/tasks.py, where stored
      values are available for partial updates
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from pm_api.core.timestamps import as_utc
from pm_api.schemas.base import EntityResponse


class TaskCreate(BaseModel):
    name: str = Field(max_length=255)
    project_id: str
    status_id: str
    start: datetime
    end: datetime

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()


class TaskUpdate(BaseModel):
    name: str | None = Field(None, max_length=255)
    status_id: str | None = None
    start: datetime | None = None
    end: datetime | None = None


class TaskResponse(EntityResponse):
    name: str
    project_id: UUID
    status_id: UUID
    start: datetime
    end: datetime

    @field_validator("start", "end")
    @classmethod
    def normalize_window(cls, v: datetime) -> datetime:
        return as_utc(v)
