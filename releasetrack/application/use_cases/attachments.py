"""Use cases for ticket attachment metadata.

File bytes live in external storage; these helpers only validate and record
what was uploaded.
"""

from __future__ import annotations

import os
from collections.abc import Sequence

from sqlalchemy.orm import Session

from releasetrack.domain.entities import (
    MAX_ATTACHMENT_SIZES,
    Attachment,
    attachment_category,
    is_supported_mime_type,
)
from releasetrack.infrastructure.repositories import AttachmentRepository, TicketRepository
from releasetrack.utils import now_in_app_timezone


def format_file_size(size: int) -> str:
    """Return ``size`` in a human readable unit."""

    if size == 0:
        return "0 Bytes"
    value = float(size)
    for unit in ("Bytes", "KB", "MB", "GB"):
        if value < 1024 or unit == "GB":
            return f"{value:.2f}".rstrip("0").rstrip(".") + f" {unit}"
        value /= 1024
    return f"{size} Bytes"


def validate_attachment(mime_type: str, size: int) -> None:
    """Raise ``ValueError`` when the file type or size is not accepted."""

    if not is_supported_mime_type(mime_type):
        raise ValueError(f"File type {mime_type} is not supported")
    if size < 0:
        raise ValueError("File size cannot be negative")
    limit = MAX_ATTACHMENT_SIZES[attachment_category(mime_type)]
    if size > limit:
        raise ValueError(f"File size exceeds the maximum limit of {format_file_size(limit)}")


def register_attachment(
    session: Session,
    *,
    ticket_id: str,
    file_name: str,
    file_path: str,
    file_size: int,
    mime_type: str,
    original_size: int | None = None,
    uploaded_by: int | None = None,
) -> Attachment:
    """Record metadata for a file already uploaded to storage."""

    if not TicketRepository(session).exists(ticket_id):
        raise ValueError("Ticket not found")

    original = original_size if original_size is not None else file_size
    validate_attachment(mime_type, original)

    extension = os.path.splitext(file_name)[1].lstrip(".").lower() or None
    attachment = Attachment(
        id=None,
        ticket_id=ticket_id,
        file_name=file_name,
        file_path=file_path,
        file_size=file_size,
        mime_type=mime_type,
        file_type=extension,
        original_size=original,
        compressed=file_size < original,
        uploaded_by=uploaded_by,
        created_at=now_in_app_timezone(),
    )
    return AttachmentRepository(session).create(attachment)


def list_attachments(session: Session, ticket_id: str) -> Sequence[Attachment]:
    """Return attachments of a ticket, newest first."""

    return AttachmentRepository(session).list_for_ticket(ticket_id)


def delete_attachment(session: Session, ticket_id: str, attachment_id: int) -> None:
    """Remove an attachment record belonging to ``ticket_id``."""

    repository = AttachmentRepository(session)
    attachment = repository.get(attachment_id)
    if attachment is None or attachment.ticket_id != ticket_id:
        raise ValueError("Attachment not found")
    repository.delete(attachment_id)


__all__ = [
    "delete_attachment",
    "format_file_size",
    "list_attachments",
    "register_attachment",
    "validate_attachment",
]
