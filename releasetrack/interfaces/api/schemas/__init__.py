from .attachment import AttachmentCreate, AttachmentRead
from .comment import CommentCreate, CommentCreateRead, CommentRead
from .metadata_item import MetadataItemCreate, MetadataItemRead, MetadataItemUpdate
from .notification import (
    NotificationLogRead,
    NotificationPreferenceRead,
    NotificationPreferenceUpdate,
    NotificationResultRead,
    NotificationSummaryRead,
    SystemSettingsRead,
    SystemSettingsUpdate,
)
from .relay import RelayEmailRequest, RelayEmailResponse, RelayHealthRead
from .release import ReleaseCreate, ReleaseDetailRead, ReleaseRead, ReleaseUpdate
from .ticket import TicketCreate, TicketRead, TicketUpdate, TicketUpdateRead
from .user import UserCreate, UserRead

__all__ = [
    "AttachmentCreate",
    "AttachmentRead",
    "CommentCreate",
    "CommentCreateRead",
    "CommentRead",
    "MetadataItemCreate",
    "MetadataItemRead",
    "MetadataItemUpdate",
    "NotificationLogRead",
    "NotificationPreferenceRead",
    "NotificationPreferenceUpdate",
    "NotificationResultRead",
    "NotificationSummaryRead",
    "RelayEmailRequest",
    "RelayEmailResponse",
    "RelayHealthRead",
    "ReleaseCreate",
    "ReleaseDetailRead",
    "ReleaseRead",
    "ReleaseUpdate",
    "SystemSettingsRead",
    "SystemSettingsUpdate",
    "TicketCreate",
    "TicketRead",
    "TicketUpdate",
    "TicketUpdateRead",
    "UserCreate",
    "UserRead",
]
