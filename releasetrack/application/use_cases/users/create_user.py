"""Use case for creating users."""

from sqlalchemy.orm import Session

from releasetrack.domain.entities import User
from releasetrack.infrastructure.repositories import UserRepository
from releasetrack.utils import now_in_app_timezone


def create_user(
    session: Session,
    *,
    first_name: str,
    last_name: str,
    email: str,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)
    normalized_email = email.strip()

    if repository.get_by_email(normalized_email):
        raise ValueError("Email address is already registered")

    user = User(
        id=None,
        first_name=first_name.strip(),
        last_name=last_name.strip(),
        email=normalized_email,
        created_at=now_in_app_timezone(),
    )
    return repository.create(user)
