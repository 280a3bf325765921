"""Domain entity representing a file attached to a ticket."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

ATTACHMENT_CATEGORY_IMAGE = "image"
ATTACHMENT_CATEGORY_DOCUMENT = "document"
ATTACHMENT_CATEGORY_OTHER = "other"

SUPPORTED_IMAGE_MIME_TYPES: tuple[str, ...] = (
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/webp",
)
SUPPORTED_DOCUMENT_MIME_TYPES: tuple[str, ...] = (
    "application/pdf",
    "text/plain",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "text/csv",
)

MAX_ATTACHMENT_SIZES: dict[str, int] = {
    ATTACHMENT_CATEGORY_IMAGE: 5 * 1024 * 1024,
    ATTACHMENT_CATEGORY_DOCUMENT: 10 * 1024 * 1024,
    ATTACHMENT_CATEGORY_OTHER: 5 * 1024 * 1024,
}


def attachment_category(mime_type: str | None) -> str:
    """Return the size-limit category for ``mime_type``."""

    if mime_type in SUPPORTED_IMAGE_MIME_TYPES:
        return ATTACHMENT_CATEGORY_IMAGE
    if mime_type in SUPPORTED_DOCUMENT_MIME_TYPES:
        return ATTACHMENT_CATEGORY_DOCUMENT
    return ATTACHMENT_CATEGORY_OTHER


def is_supported_mime_type(mime_type: str | None) -> bool:
    return attachment_category(mime_type) != ATTACHMENT_CATEGORY_OTHER


def compression_ratio(original_size: int | None, stored_size: int | None) -> int:
    """Return the percentage saved by compression, rounded half up."""

    if not original_size:
        return 0
    saved = (original_size - (stored_size or 0)) / original_size * 100
    return int(math.floor(saved + 0.5))


@dataclass
class Attachment:
    """Metadata describing a stored ticket attachment."""

    id: int | None
    ticket_id: str
    file_name: str
    file_path: str
    file_size: int
    mime_type: str
    file_type: str | None = None
    original_size: int | None = None
    compressed: bool = False
    uploaded_by: int | None = None
    created_at: datetime | None = None

    @property
    def compression_ratio(self) -> int:
        return compression_ratio(self.original_size, self.file_size)


__all__ = [
    "ATTACHMENT_CATEGORY_DOCUMENT",
    "ATTACHMENT_CATEGORY_IMAGE",
    "ATTACHMENT_CATEGORY_OTHER",
    "Attachment",
    "MAX_ATTACHMENT_SIZES",
    "SUPPORTED_DOCUMENT_MIME_TYPES",
    "SUPPORTED_IMAGE_MIME_TYPES",
    "attachment_category",
    "compression_ratio",
    "is_supported_mime_type",
]
