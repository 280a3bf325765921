"""SQLAlchemy model for key/value system settings."""

from sqlalchemy import Column, DateTime, String

from releasetrack.infrastructure.database import Base
from releasetrack.utils import now_in_app_timezone


class SystemSettingModel(Base):
    """A single application-wide setting stored as text."""

    __tablename__ = "system_settings"

    key = Column(String(100), primary_key=True)
    value = Column(String(255), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=now_in_app_timezone,
        onupdate=now_in_app_timezone,
    )


__all__ = ["SystemSettingModel"]
