"""Status Schemas."""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from pm_api.schemas.base import EntityResponse


class StatusCreate(BaseModel):
    name: str = Field(max_length=255)
    project_id: str

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()


class StatusUpdate(BaseModel):
    name: str | None = Field(None, max_length=255)


class StatusResponse(EntityResponse):
    name: str
    project_id: UUID
