"""Domain entity describing which emails a user wants to receive."""

from __future__ import annotations

from dataclasses import dataclass

from .notification import (
    NOTIFICATION_KIND_ASSIGNEE_CHANGE,
    NOTIFICATION_KIND_COMMENT,
    NOTIFICATION_KIND_MENTION,
    NOTIFICATION_KIND_STATUS_CHANGE,
)

_KIND_TO_FLAG = {
    NOTIFICATION_KIND_STATUS_CHANGE: "notify_on_status_change",
    NOTIFICATION_KIND_ASSIGNEE_CHANGE: "notify_on_assignee_change",
    NOTIFICATION_KIND_COMMENT: "notify_on_comments",
    NOTIFICATION_KIND_MENTION: "notify_on_mentions",
}


def preference_flag_for(kind: str) -> str | None:
    """Return the boolean attribute gating ``kind`` or ``None`` if unknown."""

    return _KIND_TO_FLAG.get(kind)


@dataclass
class NotificationPreference:
    """Per-user opt-in flags. A missing record means every flag is ``True``."""

    user_id: int
    email_notifications_enabled: bool = True
    notify_on_status_change: bool = True
    notify_on_assignee_change: bool = True
    notify_on_comments: bool = True
    notify_on_mentions: bool = True
    daily_digest: bool = False

    def allows(self, kind: str) -> bool:
        """Return ``True`` when the user accepts emails of ``kind``.

        Unknown kinds are allowed as long as email is enabled at all.
        """

        if not self.email_notifications_enabled:
            return False
        flag = preference_flag_for(kind)
        if flag is None:
            return True
        return bool(getattr(self, flag))


__all__ = ["NotificationPreference", "preference_flag_for"]
