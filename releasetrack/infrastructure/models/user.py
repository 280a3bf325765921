"""SQLAlchemy model for the users table."""

from sqlalchemy import Column, DateTime, Integer, String

from releasetrack.infrastructure.database import Base
from releasetrack.utils import now_in_app_timezone


class UserModel(Base):
    """Database representation of an application user."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(80), nullable=False, default="")
    last_name = Column(String(80), nullable=False, default="")
    # Stored as given; addresses are validated when emails are built.
    email = Column(String(254), nullable=True, index=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )


__all__ = ["UserModel"]
