"""Routes for managing users and their notification preferences."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from releasetrack.application.use_cases.preferences import (
    get_notification_preferences as get_notification_preferences_uc,
    update_notification_preferences as update_notification_preferences_uc,
)
from releasetrack.application.use_cases.users import (
    create_user as create_user_uc,
    get_user as get_user_uc,
    list_users as list_users_uc,
)
from releasetrack.domain.entities import NotificationPreference, User
from releasetrack.infrastructure.database import get_db
from releasetrack.interfaces.api.schemas import (
    NotificationPreferenceRead,
    NotificationPreferenceUpdate,
    UserCreate,
    UserRead,
)

router = APIRouter(prefix="/users", tags=["users"])


def _to_read_model(user: User) -> UserRead:
    return UserRead.model_validate(user)


def _preference_to_read_model(preference: NotificationPreference) -> NotificationPreferenceRead:
    return NotificationPreferenceRead.model_validate(preference)


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)) -> UserRead:
    """Create a user that can be referenced by tickets and comments."""

    try:
        user = create_user_uc(
            db,
            first_name=user_in.first_name,
            last_name=user_in.last_name,
            email=user_in.email,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(user)


@router.get("/", response_model=list[UserRead])
def list_users(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)) -> list[UserRead]:
    """Return registered users."""

    return [_to_read_model(user) for user in list_users_uc(db, skip=skip, limit=limit)]


@router.get("/{user_id}", response_model=UserRead)
def read_user(user_id: int, db: Session = Depends(get_db)) -> UserRead:
    try:
        user = get_user_uc(db, user_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _to_read_model(user)


@router.get("/{user_id}/preferences", response_model=NotificationPreferenceRead)
def read_preferences(user_id: int, db: Session = Depends(get_db)) -> NotificationPreferenceRead:
    """Return the user's email preferences; users without a record get the defaults."""

    try:
        preference = get_notification_preferences_uc(db, user_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _preference_to_read_model(preference)


@router.put("/{user_id}/preferences", response_model=NotificationPreferenceRead)
def update_preferences(
    user_id: int,
    preferences_in: NotificationPreferenceUpdate,
    db: Session = Depends(get_db),
) -> NotificationPreferenceRead:
    """Change some of the user's email preferences."""

    flags = preferences_in.model_dump(exclude_unset=True, exclude_none=True)
    try:
        preference = update_notification_preferences_uc(db, user_id, **flags)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _preference_to_read_model(preference)


__all__ = ["router"]
