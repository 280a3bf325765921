"""SQLAlchemy model for the metadata table."""

from sqlalchemy import Column, DateTime, String, Text

from releasetrack.infrastructure.database import Base
from releasetrack.utils import now_in_app_timezone


class MetadataItemModel(Base):
    """Database representation of a Salesforce metadata change."""

    __tablename__ = "metadata"

    id = Column(String(32), primary_key=True)
    name = Column(String(255), nullable=False)
    type = Column(String(50), nullable=False)
    action = Column(String(20), nullable=False)
    api_name = Column(String(255), nullable=True)
    object = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    technical_details = Column(Text, nullable=True)
    ticket_id = Column(String(32), nullable=True, index=True)
    release_id = Column(String(32), nullable=True, index=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True), nullable=True, onupdate=now_in_app_timezone
    )


__all__ = ["MetadataItemModel"]
