"""Domain entities exposed by the application."""

from .attachment import (
    MAX_ATTACHMENT_SIZES,
    Attachment,
    attachment_category,
    compression_ratio,
    is_supported_mime_type,
)
from .comment import Comment
from .metadata_item import (
    METADATA_ACTIONS,
    METADATA_ID_PREFIX,
    METADATA_TYPES,
    MetadataItem,
    canonical_choice,
)
from .notification import (
    NOTIFICATION_KIND_ASSIGNEE_CHANGE,
    NOTIFICATION_KIND_COMMENT,
    NOTIFICATION_KIND_MENTION,
    NOTIFICATION_KIND_STATUS_CHANGE,
    NOTIFICATION_KINDS,
    NotificationLogEntry,
    NotificationResult,
    NotificationSummary,
)
from .notification_preference import NotificationPreference, preference_flag_for
from .release import RELEASE_ID_PREFIX, RELEASE_STATUS_PLANNING, Release
from .system_settings import SystemSettings
from .ticket import (
    TERMINAL_TICKET_STATUSES,
    TICKET_ID_PREFIX,
    TICKET_PRIORITIES,
    TICKET_STATUS_BACKLOG,
    TICKET_STATUS_CANCELLED,
    TICKET_STATUS_RELEASED,
    TICKET_STATUSES,
    TICKET_SUPPORT_AREAS,
    TICKET_TYPES,
    Ticket,
    is_terminal_status,
)
from .user import User

__all__ = [
    "Attachment",
    "Comment",
    "MAX_ATTACHMENT_SIZES",
    "METADATA_ACTIONS",
    "METADATA_ID_PREFIX",
    "METADATA_TYPES",
    "MetadataItem",
    "NOTIFICATION_KINDS",
    "NOTIFICATION_KIND_ASSIGNEE_CHANGE",
    "NOTIFICATION_KIND_COMMENT",
    "NOTIFICATION_KIND_MENTION",
    "NOTIFICATION_KIND_STATUS_CHANGE",
    "NotificationLogEntry",
    "NotificationPreference",
    "NotificationResult",
    "NotificationSummary",
    "RELEASE_ID_PREFIX",
    "RELEASE_STATUS_PLANNING",
    "Release",
    "SystemSettings",
    "TERMINAL_TICKET_STATUSES",
    "TICKET_ID_PREFIX",
    "TICKET_PRIORITIES",
    "TICKET_STATUS_BACKLOG",
    "TICKET_STATUS_CANCELLED",
    "TICKET_STATUS_RELEASED",
    "TICKET_STATUSES",
    "TICKET_SUPPORT_AREAS",
    "TICKET_TYPES",
    "Ticket",
    "User",
    "attachment_category",
    "canonical_choice",
    "compression_ratio",
    "is_supported_mime_type",
    "preference_flag_for",
]
