"""Use cases for reading and changing a user's notification preferences."""

from __future__ import annotations

from dataclasses import replace

from sqlalchemy.orm import Session

from releasetrack.domain.entities import NotificationPreference
from releasetrack.infrastructure.repositories import PreferenceRepository, UserRepository


def _ensure_user(session: Session, user_id: int) -> None:
    if UserRepository(session).get(user_id) is None:
        raise ValueError("User not found")


def get_notification_preferences(session: Session, user_id: int) -> NotificationPreference:
    """Return the stored preferences, or the opted-in defaults when none exist."""

    _ensure_user(session, user_id)
    stored = PreferenceRepository(session).get(user_id)
    return stored or NotificationPreference(user_id=user_id)


def update_notification_preferences(
    session: Session, user_id: int, **flags: bool
) -> NotificationPreference:
    """Upsert the given flags, keeping the current value of the others."""

    current = get_notification_preferences(session, user_id)
    try:
        updated = replace(current, **flags)
    except TypeError as exc:
        raise ValueError(f"Unknown preference: {exc}") from exc
    updated.user_id = user_id
    return PreferenceRepository(session).save(updated)


__all__ = ["get_notification_preferences", "update_notification_preferences"]
