"""Account Schemas.

Invariants:
    - AccountUpdate fields are all optional; None or "" leaves the stored value
"""

from pydantic import BaseModel, Field, field_validator

from pm_api.schemas.base import EntityResponse


class AccountCreate(BaseModel):
    email: str = Field(max_length=255)
    name: str = Field(max_length=255)
    avatar: str = Field("", max_length=1024)

    @field_validator("email", "name", "avatar")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


class AccountUpdate(BaseModel):
    email: str | None = Field(None, max_length=255)
    name: str | None = Field(None, max_length=255)
    avatar: str | None = Field(None, max_length=1024)


class AccountResponse(EntityResponse):
    email: str
    name: str
    avatar: str
