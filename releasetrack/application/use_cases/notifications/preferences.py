"""Filter candidate recipients by their stored notification preferences."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from releasetrack.domain.entities import SystemSettings, User
from releasetrack.infrastructure.repositories import (
    PreferenceRepository,
    SystemSettingsRepository,
)
from releasetrack.utils import is_valid_email_address

logger = logging.getLogger(__name__)


def filter_recipients_by_preference(
    session: Session, recipients: Sequence[User], kind: str
) -> list[User]:
    """Return the recipients that accept emails of ``kind``.

    Users without a preference row are opted in. When the preferences cannot be
    read every recipient with a usable address is returned (fail-open).
    """

    candidates = [user for user in recipients if is_valid_email_address(user.email)]
    dropped = len(recipients) - len(candidates)
    if dropped:
        logger.warning("Ignoring %d recipient(s) without a valid email address", dropped)
    if not candidates:
        return []

    try:
        preferences = PreferenceRepository(session).get_map_by_user_ids(
            user.id for user in candidates if user.id is not None
        )
    except SQLAlchemyError as exc:
        session.rollback()
        logger.warning(
            "Could not read notification preferences, notifying everyone: %s", exc
        )
        return candidates

    allowed: list[User] = []
    for user in candidates:
        preference = preferences.get(user.id)
        if preference is None or preference.allows(kind):
            allowed.append(user)
        else:
            logger.info("User %s opted out of %s emails", user.id, kind)
    return allowed


def load_system_settings(session: Session) -> SystemSettings:
    """Return the global switches, falling back to the defaults on read errors."""

    try:
        return SystemSettingsRepository(session).get()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.warning("Could not read system settings, using defaults: %s", exc)
        return SystemSettings()


__all__ = ["filter_recipients_by_preference", "load_system_settings"]
