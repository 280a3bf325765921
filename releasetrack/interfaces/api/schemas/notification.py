"""Schemas describing notification outcomes, logs and preferences."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class NotificationSummaryRead(BaseModel):
    sent: int
    skipped: int
    failed: int

    model_config = ConfigDict(from_attributes=True)


class NotificationResultRead(BaseModel):
    kind: str
    success: bool
    skipped: bool
    reason: str | None
    error: str | None
    recipient_ids: list[int]
    summary: NotificationSummaryRead | None = None

    model_config = ConfigDict(from_attributes=True)


class NotificationLogRead(BaseModel):
    """Representation of a notification log entry returned by the API."""

    id: int
    type: str
    ticket_id: str | None
    recipients: list[int]
    sender_id: int | None
    metadata: dict[str, Any]
    sent_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class NotificationPreferenceRead(BaseModel):
    user_id: int
    email_notifications_enabled: bool
    notify_on_status_change: bool
    notify_on_assignee_change: bool
    notify_on_comments: bool
    notify_on_mentions: bool
    daily_digest: bool

    model_config = ConfigDict(from_attributes=True)


class NotificationPreferenceUpdate(BaseModel):
    email_notifications_enabled: bool | None = None
    notify_on_status_change: bool | None = None
    notify_on_assignee_change: bool | None = None
    notify_on_comments: bool | None = None
    notify_on_mentions: bool | None = None
    daily_digest: bool | None = None

    model_config = ConfigDict(extra="forbid")


class SystemSettingsRead(BaseModel):
    email_notifications_enabled: bool
    notify_on_status_change: bool
    notify_on_assignee_change: bool
    notify_on_comments: bool
    notify_on_mentions: bool
    daily_digest: bool

    model_config = ConfigDict(from_attributes=True)


class SystemSettingsUpdate(NotificationPreferenceUpdate):
    pass


__all__ = [
    "NotificationLogRead",
    "NotificationPreferenceRead",
    "NotificationPreferenceUpdate",
    "NotificationResultRead",
    "NotificationSummaryRead",
    "SystemSettingsRead",
    "SystemSettingsUpdate",
]
