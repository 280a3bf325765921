"""Persistence layer for application-wide settings."""

from __future__ import annotations

from sqlalchemy.orm import Session

from releasetrack.domain.entities import SystemSettings
from releasetrack.infrastructure.models import SystemSettingModel

_TRUE_VALUES = {"true", "1", "yes", "on"}


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


class SystemSettingsRepository:
    """Map the key/value ``system_settings`` rows onto :class:`SystemSettings`."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self) -> SystemSettings:
        keys = SystemSettings.keys()
        rows = (
            self.session.query(SystemSettingModel)
            .filter(SystemSettingModel.key.in_(keys))
            .all()
        )
        stored = {row.key: row.value for row in rows}
        defaults = SystemSettings()
        return SystemSettings(
            **{key: _parse_bool(stored.get(key), getattr(defaults, key)) for key in keys}
        )

    def save(self, values: dict[str, bool]) -> SystemSettings:
        allowed = set(SystemSettings.keys())
        for key, value in values.items():
            if key not in allowed:
                msg = f"Unknown system setting '{key}'"
                raise ValueError(msg)
            model = self.session.get(SystemSettingModel, key)
            if model is None:
                model = SystemSettingModel(key=key)
            model.value = "true" if value else "false"
            self.session.add(model)
        self.session.commit()
        return self.get()


__all__ = ["SystemSettingsRepository"]
