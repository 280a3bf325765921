"""ORM models used by the application infrastructure."""

from .attachment import AttachmentModel
from .comment import CommentModel
from .email_notification_log import EmailNotificationLogModel
from .metadata_item import MetadataItemModel
from .release import ReleaseModel
from .system_setting import SystemSettingModel
from .ticket import TicketModel
from .user import UserModel
from .user_preference import UserPreferenceModel

__all__ = [
    "AttachmentModel",
    "CommentModel",
    "EmailNotificationLogModel",
    "MetadataItemModel",
    "ReleaseModel",
    "SystemSettingModel",
    "TicketModel",
    "UserModel",
    "UserPreferenceModel",
]
