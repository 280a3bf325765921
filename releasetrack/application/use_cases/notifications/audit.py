"""Best-effort audit trail for notification delivery attempts."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from releasetrack.domain.entities import NotificationLogEntry
from releasetrack.infrastructure.repositories import NotificationLogRepository
from releasetrack.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def record_notification(
    session: Session,
    *,
    kind: str,
    ticket_id: str | None,
    recipient_ids: Iterable[int | None],
    sender_id: int | None,
    metadata: dict[str, Any] | None = None,
) -> bool:
    """Append a row to ``email_notification_logs`` after a delivery attempt.

    Returns ``False`` when the row could not be written. Errors never propagate
    so a logging failure cannot turn a delivered email into a failure.
    """

    entry = NotificationLogEntry(
        id=None,
        type=kind,
        ticket_id=ticket_id,
        recipients=[user_id for user_id in recipient_ids if user_id is not None],
        sender_id=sender_id,
        metadata=metadata or {},
        sent_at=now_in_app_timezone(),
    )
    try:
        NotificationLogRepository(session).create(entry)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.warning(
            "Failed to record %s notification for ticket %s: %s", kind, ticket_id, exc
        )
        return False
    return True


__all__ = ["record_notification"]
