"""Schemas for comment endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .notification import NotificationResultRead


class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1)
    mentions: list[int] = Field(default_factory=list)


class CommentRead(BaseModel):
    id: int
    ticket_id: str
    author_id: int | None
    content: str
    mentions: list[int]
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class CommentCreateRead(BaseModel):
    comment: CommentRead
    notification: NotificationResultRead | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["CommentCreate", "CommentCreateRead", "CommentRead"]
