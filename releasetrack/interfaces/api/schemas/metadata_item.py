"""Schemas for Salesforce metadata endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from releasetrack.domain.entities import METADATA_ACTIONS, METADATA_TYPES

_TYPE_DESCRIPTION = "One of: " + ", ".join(METADATA_TYPES)
_ACTION_DESCRIPTION = "One of: " + ", ".join(METADATA_ACTIONS)


class MetadataItemBase(BaseModel):
    api_name: str | None = Field(default=None, max_length=255)
    object: str | None = Field(default=None, max_length=255)
    description: str | None = None
    technical_details: str | None = None
    ticket_id: str | None = Field(default=None, max_length=32)
    release_id: str | None = Field(default=None, max_length=32)


class MetadataItemCreate(MetadataItemBase):
    id: str | None = Field(
        default=None,
        max_length=32,
        description="Optional identifier; a META-##### id is generated when omitted",
    )
    name: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., max_length=50, description=_TYPE_DESCRIPTION)
    action: str = Field(..., max_length=20, description=_ACTION_DESCRIPTION)


class MetadataItemUpdate(MetadataItemBase):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    type: str | None = Field(default=None, max_length=50, description=_TYPE_DESCRIPTION)
    action: str | None = Field(default=None, max_length=20, description=_ACTION_DESCRIPTION)

    model_config = ConfigDict(extra="forbid")


class MetadataItemRead(BaseModel):
    id: str
    name: str
    type: str
    action: str
    api_name: str | None
    object: str | None
    description: str | None
    technical_details: str | None
    ticket_id: str | None
    release_id: str | None
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["MetadataItemCreate", "MetadataItemRead", "MetadataItemUpdate"]
