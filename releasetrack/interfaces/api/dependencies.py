"""FastAPI dependency utilities."""

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from releasetrack.config import get_settings
from releasetrack.domain.entities import User
from releasetrack.infrastructure.database import get_db
from releasetrack.infrastructure.email import EmailDeliveryClient, build_delivery_client
from releasetrack.infrastructure.repositories import UserRepository


def get_delivery_client() -> EmailDeliveryClient:
    """Return the email backend selected by the current settings."""

    return build_delivery_client(get_settings())


def get_acting_user(
    x_actor_id: int | None = Header(
        default=None,
        description="Identifier of the user performing the change",
    ),
    db: Session = Depends(get_db),
) -> User | None:
    """Resolve the optional ``X-Actor-Id`` header into a user.

    Authentication is handled in front of this API; the header only tells the
    notification pipeline who made the change.
    """

    if x_actor_id is None:
        return None

    user = UserRepository(db).get(x_actor_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Unknown acting user",
        )
    return user
