"""Repository implementations for infrastructure layer."""

from .attachment_repository import AttachmentRepository
from .comment_repository import CommentRepository
from .metadata_repository import MetadataItemRepository
from .notification_log_repository import NotificationLogRepository
from .preference_repository import PreferenceRepository
from .release_repository import ReleaseRepository
from .system_settings_repository import SystemSettingsRepository
from .ticket_repository import TicketRepository
from .user_repository import UserRepository

__all__ = [
    "AttachmentRepository",
    "CommentRepository",
    "MetadataItemRepository",
    "NotificationLogRepository",
    "PreferenceRepository",
    "ReleaseRepository",
    "SystemSettingsRepository",
    "TicketRepository",
    "UserRepository",
]
