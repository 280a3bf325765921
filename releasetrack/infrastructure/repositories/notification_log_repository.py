"""Persistence helpers for the email notification audit trail."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from releasetrack.domain.entities import NotificationLogEntry
from releasetrack.infrastructure.models import EmailNotificationLogModel
from releasetrack.utils import ensure_app_timezone, now_in_app_timezone


class NotificationLogRepository:
    """Append and read :class:`NotificationLogEntry` rows.

    The trail is append-only: there is no update or delete helper.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, entry: NotificationLogEntry) -> NotificationLogEntry:
        model = EmailNotificationLogModel(
            type=entry.type,
            ticket_id=entry.ticket_id,
            recipients=[int(user_id) for user_id in entry.recipients],
            sender_id=entry.sender_id,
            details=dict(entry.metadata or {}),
            sent_at=entry.sent_at or now_in_app_timezone(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def get(self, entry_id: int) -> NotificationLogEntry | None:
        model = self.session.get(EmailNotificationLogModel, entry_id)
        return self._to_entity(model) if model else None

    def list(
        self,
        *,
        type: str | None = None,
        ticket_id: str | None = None,
        limit: int | None = 50,
    ) -> Sequence[NotificationLogEntry]:
        query = self.session.query(EmailNotificationLogModel)
        if type is not None:
            query = query.filter(EmailNotificationLogModel.type == type)
        if ticket_id is not None:
            query = query.filter(EmailNotificationLogModel.ticket_id == ticket_id)
        query = query.order_by(
            EmailNotificationLogModel.sent_at.desc(), EmailNotificationLogModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: EmailNotificationLogModel) -> NotificationLogEntry:
        return NotificationLogEntry(
            id=model.id,
            type=model.type,
            ticket_id=model.ticket_id,
            recipients=list(model.recipients or []),
            sender_id=model.sender_id,
            metadata=dict(model.details or {}),
            sent_at=ensure_app_timezone(model.sent_at),
        )


__all__ = ["NotificationLogRepository"]
