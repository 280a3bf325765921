"""SQLAlchemy model for per-user notification preferences."""

from sqlalchemy import Boolean, Column, DateTime, Integer
from sqlalchemy.sql import expression

from releasetrack.infrastructure.database import Base
from releasetrack.utils import now_in_app_timezone


def _flag(default: bool) -> Column:
    return Column(
        Boolean,
        nullable=False,
        default=default,
        server_default=expression.true() if default else expression.false(),
    )


class UserPreferenceModel(Base):
    """Database representation of the ``user_preferences`` table."""

    __tablename__ = "user_preferences"

    user_id = Column(Integer, primary_key=True)
    email_notifications_enabled = _flag(True)
    notify_on_status_change = _flag(True)
    notify_on_assignee_change = _flag(True)
    notify_on_comments = _flag(True)
    notify_on_mentions = _flag(True)
    daily_digest = _flag(False)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=now_in_app_timezone,
        onupdate=now_in_app_timezone,
    )


__all__ = ["UserPreferenceModel"]
