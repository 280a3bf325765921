"""SQLAlchemy model for the tickets table."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from releasetrack.infrastructure.database import Base
from releasetrack.utils import now_in_app_timezone


class TicketModel(Base):
    """Database representation of a support ticket."""

    __tablename__ = "tickets"

    id = Column(String(32), primary_key=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(50), nullable=False, index=True)
    priority = Column(String(20), nullable=True)
    type = Column(String(50), nullable=True)
    support_area = Column(String(50), nullable=True)
    # References are plain integers; integrity belongs to the store's own constraints.
    requester_id = Column(Integer, nullable=True, index=True)
    assignee_id = Column(Integer, nullable=True, index=True)
    release_id = Column(String(32), nullable=True, index=True)
    solution = Column(Text, nullable=True)
    test_notes = Column(Text, nullable=True)
    closed_date = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True), nullable=True, onupdate=now_in_app_timezone
    )


__all__ = ["TicketModel"]
