"""Schemas for ticket endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from releasetrack.domain.entities import (
    TICKET_PRIORITIES,
    TICKET_STATUSES,
    TICKET_SUPPORT_AREAS,
    TICKET_TYPES,
)

from .notification import NotificationResultRead

_STATUS_DESCRIPTION = "One of: " + ", ".join(TICKET_STATUSES)
_PRIORITY_DESCRIPTION = "One of: " + ", ".join(TICKET_PRIORITIES)
_TYPE_DESCRIPTION = "One of: " + ", ".join(TICKET_TYPES)
_SUPPORT_AREA_DESCRIPTION = "One of: " + ", ".join(TICKET_SUPPORT_AREAS)


class TicketBase(BaseModel):
    description: str | None = None
    priority: str | None = Field(default=None, max_length=20, description=_PRIORITY_DESCRIPTION)
    type: str | None = Field(default=None, max_length=50, description=_TYPE_DESCRIPTION)
    support_area: str | None = Field(
        default=None, max_length=50, description=_SUPPORT_AREA_DESCRIPTION
    )
    requester_id: int | None = None
    assignee_id: int | None = None
    release_id: str | None = Field(default=None, max_length=32)
    solution: str | None = None
    test_notes: str | None = None


class TicketCreate(TicketBase):
    id: str | None = Field(
        default=None,
        max_length=32,
        description="Optional identifier; a SUP-##### id is generated when omitted",
    )
    title: str = Field(..., min_length=1, max_length=255)
    status: str = Field(default="Backlog", max_length=50, description=_STATUS_DESCRIPTION)


class TicketUpdate(TicketBase):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    status: str | None = Field(default=None, max_length=50, description=_STATUS_DESCRIPTION)

    model_config = ConfigDict(extra="forbid")


class TicketRead(BaseModel):
    id: str
    title: str
    description: str | None
    status: str
    priority: str | None
    type: str | None
    support_area: str | None
    requester_id: int | None
    assignee_id: int | None
    release_id: str | None
    solution: str | None
    test_notes: str | None
    closed_date: datetime | None
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class TicketUpdateRead(BaseModel):
    ticket: TicketRead
    notifications: list[NotificationResultRead]

    model_config = ConfigDict(from_attributes=True)


__all__ = ["TicketCreate", "TicketRead", "TicketUpdate", "TicketUpdateRead"]
