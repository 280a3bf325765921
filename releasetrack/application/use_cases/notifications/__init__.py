"""Public helpers for emitting ticket notification emails."""

from .audit import record_notification
from .events import notify_assignee_change, notify_mentions, notify_status_change
from .preferences import filter_recipients_by_preference, load_system_settings
from .recipients import resolve_mentioned_users, resolve_ticket_recipients

__all__ = [
    "filter_recipients_by_preference",
    "load_system_settings",
    "notify_assignee_change",
    "notify_mentions",
    "notify_status_change",
    "record_notification",
    "resolve_mentioned_users",
    "resolve_ticket_recipients",
]
