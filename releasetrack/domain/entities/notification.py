"""Domain types shared by the email notification pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

NOTIFICATION_KIND_STATUS_CHANGE = "status_change"
NOTIFICATION_KIND_ASSIGNEE_CHANGE = "assignee_change"
NOTIFICATION_KIND_COMMENT = "comment"
NOTIFICATION_KIND_MENTION = "mention"

NOTIFICATION_KINDS: tuple[str, ...] = (
    NOTIFICATION_KIND_STATUS_CHANGE,
    NOTIFICATION_KIND_ASSIGNEE_CHANGE,
    NOTIFICATION_KIND_COMMENT,
    NOTIFICATION_KIND_MENTION,
)


@dataclass
class NotificationLogEntry:
    """Append-only record of a notification delivery attempt."""

    id: int | None
    type: str
    ticket_id: str | None
    recipients: list[int] = field(default_factory=list)
    sender_id: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    sent_at: datetime | None = None


@dataclass
class NotificationSummary:
    """Per-recipient counters for fan-out notifications such as mentions."""

    sent: int = 0
    skipped: int = 0
    failed: int = 0


@dataclass
class NotificationResult:
    """Outcome of a notification event returned to the caller.

    ``success`` is ``False`` only when the provider rejected (or could not be
    reached for) at least one delivery. Skipped events are successful.
    """

    kind: str
    success: bool
    skipped: bool = False
    reason: str | None = None
    error: str | None = None
    recipient_ids: list[int] = field(default_factory=list)
    summary: NotificationSummary | None = None

    @classmethod
    def skip(cls, kind: str, reason: str) -> "NotificationResult":
        return cls(kind=kind, success=True, skipped=True, reason=reason)


__all__ = [
    "NOTIFICATION_KINDS",
    "NOTIFICATION_KIND_ASSIGNEE_CHANGE",
    "NOTIFICATION_KIND_COMMENT",
    "NOTIFICATION_KIND_MENTION",
    "NOTIFICATION_KIND_STATUS_CHANGE",
    "NotificationLogEntry",
    "NotificationResult",
    "NotificationSummary",
]
