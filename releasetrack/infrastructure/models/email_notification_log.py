"""SQLAlchemy model for the email notification audit trail."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import JSON

from releasetrack.infrastructure.database import Base
from releasetrack.utils import now_in_app_timezone

_log_json_type = JSONB().with_variant(JSON(), "sqlite")


class EmailNotificationLogModel(Base):
    """Database representation of a notification delivery attempt."""

    __tablename__ = "email_notification_logs"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String(50), nullable=False, index=True)
    ticket_id = Column(String(32), nullable=True, index=True)
    recipients = Column(_log_json_type, nullable=False, default=list)
    sender_id = Column(Integer, nullable=True)
    # ``metadata`` is reserved on declarative classes.
    details = Column("metadata", _log_json_type, nullable=False, default=dict)
    sent_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )


__all__ = ["EmailNotificationLogModel"]
