"""Project Schemas."""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from pm_api.schemas.base import EntityResponse


class ProjectCreate(BaseModel):
    name: str = Field(max_length=255)
    description: str = Field("", max_length=10_000)
    owner_id: str

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()


class ProjectUpdate(BaseModel):
    name: str | None = Field(None, max_length=255)
    description: str | None = Field(None, max_length=10_000)


class ProjectResponse(EntityResponse):
    name: str
    description: str
    owner_id: UUID
