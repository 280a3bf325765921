"""SQLAlchemy model for ticket attachments."""

from sqlalchemy import BigInteger, Boolean, Column, DateTime, Integer, String
from sqlalchemy.sql import expression

from releasetrack.infrastructure.database import Base
from releasetrack.utils import now_in_app_timezone


class AttachmentModel(Base):
    """Database representation of an uploaded file's metadata."""

    __tablename__ = "ticket_attachments"

    id = Column(Integer, primary_key=True, index=True)
    ticket_id = Column(String(32), nullable=False, index=True)
    file_name = Column(String(255), nullable=False)
    file_path = Column(String(512), nullable=False)
    file_size = Column(BigInteger, nullable=False)
    file_type = Column(String(20), nullable=True)
    mime_type = Column(String(127), nullable=False)
    original_size = Column(BigInteger, nullable=True)
    compressed = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    uploaded_by = Column(Integer, nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )


__all__ = ["AttachmentModel"]
