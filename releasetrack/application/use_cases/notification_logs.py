"""Use cases for inspecting the email notification audit trail."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from releasetrack.domain.entities import NotificationLogEntry
from releasetrack.infrastructure.repositories import NotificationLogRepository


def list_notification_logs(
    session: Session,
    *,
    type: str | None = None,
    ticket_id: str | None = None,
    limit: int = 50,
) -> Sequence[NotificationLogEntry]:
    """Return the most recent log entries, optionally filtered."""

    return NotificationLogRepository(session).list(type=type, ticket_id=ticket_id, limit=limit)


def get_notification_log(session: Session, entry_id: int) -> NotificationLogEntry:
    """Return a log entry identified by ``entry_id`` or raise an error."""

    entry = NotificationLogRepository(session).get(entry_id)
    if entry is None:
        raise ValueError("Notification log entry not found")
    return entry


__all__ = ["get_notification_log", "list_notification_logs"]
