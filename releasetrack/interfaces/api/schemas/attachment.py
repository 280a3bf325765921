"""Schemas for ticket attachment endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AttachmentCreate(BaseModel):
    file_name: str = Field(..., min_length=1, max_length=255)
    file_path: str = Field(..., min_length=1, max_length=512)
    file_size: int = Field(..., ge=0)
    mime_type: str = Field(..., min_length=1, max_length=127)
    original_size: int | None = Field(default=None, ge=0)


class AttachmentRead(BaseModel):
    id: int
    ticket_id: str
    file_name: str
    file_path: str
    file_size: int
    file_type: str | None
    mime_type: str
    original_size: int | None
    compressed: bool
    compression_ratio: int
    uploaded_by: int | None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["AttachmentCreate", "AttachmentRead"]
