"""SQLAlchemy model for the releases table."""

from sqlalchemy import Column, Date, DateTime, String, Text

from releasetrack.infrastructure.database import Base
from releasetrack.utils import now_in_app_timezone


class ReleaseModel(Base):
    """Database representation of a release."""

    __tablename__ = "releases"

    id = Column(String(32), primary_key=True)
    name = Column(String(255), nullable=False)
    version = Column(String(50), nullable=True)
    target = Column(Date, nullable=True)
    status = Column(String(50), nullable=False, index=True)
    description = Column(Text, nullable=True)
    stakeholder_summary = Column(Text, nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True), nullable=True, onupdate=now_in_app_timezone
    )


__all__ = ["ReleaseModel"]
