"""Domain entity for application-wide notification switches."""

from __future__ import annotations

from dataclasses import dataclass, fields

from .notification_preference import preference_flag_for


@dataclass
class SystemSettings:
    """Global switches that apply before any per-user preference."""

    email_notifications_enabled: bool = True
    notify_on_status_change: bool = True
    notify_on_assignee_change: bool = True
    notify_on_comments: bool = True
    notify_on_mentions: bool = True
    daily_digest: bool = False

    @classmethod
    def keys(cls) -> list[str]:
        return [item.name for item in fields(cls)]

    def allows(self, kind: str) -> bool:
        if not self.email_notifications_enabled:
            return False
        flag = preference_flag_for(kind)
        if flag is None:
            return True
        return bool(getattr(self, flag))


__all__ = ["SystemSettings"]
