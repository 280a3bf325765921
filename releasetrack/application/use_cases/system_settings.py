"""Use cases for the application-wide notification switches."""

from sqlalchemy.orm import Session

from releasetrack.domain.entities import SystemSettings
from releasetrack.infrastructure.repositories import SystemSettingsRepository


def get_system_settings(session: Session) -> SystemSettings:
    """Return the current switches; missing keys use their defaults."""

    return SystemSettingsRepository(session).get()


def update_system_settings(session: Session, values: dict[str, bool]) -> SystemSettings:
    """Persist ``values`` and return the resulting settings."""

    return SystemSettingsRepository(session).save(values)


__all__ = ["get_system_settings", "update_system_settings"]
