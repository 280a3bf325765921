"""SQLAlchemy model for ticket comments."""

from sqlalchemy import Column, DateTime, Integer, JSON, String, Text

from releasetrack.infrastructure.database import Base
from releasetrack.utils import now_in_app_timezone


class CommentModel(Base):
    """Database representation of a comment left on a ticket."""

    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    ticket_id = Column(String(32), nullable=False, index=True)
    author_id = Column(Integer, nullable=True)
    content = Column(Text, nullable=False)
    mentions = Column(JSON, nullable=False, default=list)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )


__all__ = ["CommentModel"]
