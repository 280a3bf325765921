"""Schemas for release endpoints."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from .ticket import TicketRead


class ReleaseBase(BaseModel):
    version: str | None = Field(default=None, max_length=50)
    target: date | None = Field(default=None, description="Planned deployment date")
    description: str | None = None
    stakeholder_summary: str | None = None


class ReleaseCreate(ReleaseBase):
    id: str | None = Field(
        default=None,
        max_length=32,
        description="Optional identifier; a RELEASE-N id is generated when omitted",
    )
    name: str = Field(..., min_length=1, max_length=255)
    status: str = Field(default="Planning", max_length=50)


class ReleaseUpdate(ReleaseBase):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    status: str | None = Field(default=None, max_length=50)

    model_config = ConfigDict(extra="forbid")


class ReleaseRead(BaseModel):
    id: str
    name: str
    version: str | None
    target: date | None
    status: str
    description: str | None
    stakeholder_summary: str | None
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class ReleaseDetailRead(BaseModel):
    release: ReleaseRead
    tickets: list[TicketRead]

    model_config = ConfigDict(from_attributes=True)


__all__ = ["ReleaseCreate", "ReleaseDetailRead", "ReleaseRead", "ReleaseUpdate"]
