"""Routes for inspecting the email notification audit trail.

The trail is append-only, so there is no delete endpoint.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from releasetrack.application.use_cases.notification_logs import (
    get_notification_log as get_notification_log_uc,
    list_notification_logs as list_notification_logs_uc,
)
from releasetrack.domain.entities import NOTIFICATION_KINDS, NotificationLogEntry
from releasetrack.infrastructure.database import get_db
from releasetrack.interfaces.api.schemas import NotificationLogRead

router = APIRouter(prefix="/notification-logs", tags=["notification_logs"])


def _log_to_read_model(entry: NotificationLogEntry) -> NotificationLogRead:
    return NotificationLogRead.model_validate(entry)


@router.get("/", response_model=list[NotificationLogRead])
def list_notification_logs(
    type: str | None = Query(None, description="One of: " + ", ".join(NOTIFICATION_KINDS)),
    ticket_id: str | None = None,
    limit: int = Query(50, ge=1, le=500),
    db: Session = Depends(get_db),
) -> list[NotificationLogRead]:
    """Return the most recent notification log entries."""

    entries = list_notification_logs_uc(db, type=type, ticket_id=ticket_id, limit=limit)
    return [_log_to_read_model(entry) for entry in entries]


@router.get("/{entry_id}", response_model=NotificationLogRead)
def read_notification_log(entry_id: int, db: Session = Depends(get_db)) -> NotificationLogRead:
    try:
        entry = get_notification_log_uc(db, entry_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _log_to_read_model(entry)


__all__ = ["router"]
