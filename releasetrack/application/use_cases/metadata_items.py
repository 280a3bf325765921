"""Use cases for tracking Salesforce metadata changes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from releasetrack.domain.entities import (
    METADATA_ACTIONS,
    METADATA_TYPES,
    MetadataItem,
    canonical_choice,
)
from releasetrack.infrastructure.repositories import MetadataItemRepository, TicketRepository
from releasetrack.utils import now_in_app_timezone

from .releases import ensure_release_exists

UPDATABLE_FIELDS = frozenset(
    {
        "name",
        "type",
        "action",
        "api_name",
        "object",
        "description",
        "technical_details",
        "ticket_id",
        "release_id",
    }
)


def _check_choice(value: str | None, choices: tuple[str, ...], label: str) -> str:
    matched = canonical_choice(value or "", choices)
    if matched is None:
        raise ValueError(f"Unsupported metadata {label}: {value}")
    return matched


def _check_references(session: Session, ticket_id: str | None, release_id: str | None) -> None:
    if ticket_id is not None and not TicketRepository(session).exists(ticket_id):
        raise ValueError(f"Ticket {ticket_id} not found")
    ensure_release_exists(session, release_id)


def create_metadata_item(
    session: Session,
    *,
    name: str,
    type: str,
    action: str,
    item_id: str | None = None,
    api_name: str | None = None,
    object: str | None = None,
    description: str | None = None,
    technical_details: str | None = None,
    ticket_id: str | None = None,
    release_id: str | None = None,
) -> MetadataItem:
    """Record a metadata change, generating a ``META-#####`` id when none is given.

    ``type`` and ``action`` are matched case-insensitively against the known
    values and stored in their canonical spelling.
    """

    if not name or not name.strip():
        raise ValueError("Metadata name is required")

    repository = MetadataItemRepository(session)
    if item_id:
        item_id = item_id.strip()
        if repository.exists(item_id):
            raise ValueError(f"Metadata item {item_id} already exists")
    else:
        item_id = repository.next_item_id()

    _check_references(session, ticket_id, release_id)
    item = MetadataItem(
        id=item_id,
        name=name.strip(),
        type=_check_choice(type, METADATA_TYPES, "type"),
        action=_check_choice(action, METADATA_ACTIONS, "action"),
        api_name=api_name,
        object=object,
        description=description,
        technical_details=technical_details,
        ticket_id=ticket_id,
        release_id=release_id,
        created_at=now_in_app_timezone(),
    )
    return repository.create(item)


def list_metadata_items(
    session: Session,
    *,
    ticket_id: str | None = None,
    release_id: str | None = None,
    type: str | None = None,
) -> Sequence[MetadataItem]:
    """Return metadata items, newest first, optionally filtered."""

    if type is not None:
        type = canonical_choice(type, METADATA_TYPES) or type
    return MetadataItemRepository(session).list(
        ticket_id=ticket_id, release_id=release_id, type=type
    )


def get_metadata_item(session: Session, item_id: str) -> MetadataItem:
    item = MetadataItemRepository(session).get(item_id)
    if item is None:
        raise ValueError("Metadata item not found")
    return item


def update_metadata_item(
    session: Session, *, item_id: str, changes: dict[str, Any]
) -> MetadataItem:
    unknown = set(changes) - UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Unsupported metadata fields: {', '.join(sorted(unknown))}")

    repository = MetadataItemRepository(session)
    current = repository.get(item_id)
    if current is None:
        raise ValueError("Metadata item not found")
    if "name" in changes and not (changes["name"] or "").strip():
        raise ValueError("Metadata name is required")

    updated = replace(current, **changes)
    if "type" in changes:
        updated.type = _check_choice(changes["type"], METADATA_TYPES, "type")
    if "action" in changes:
        updated.action = _check_choice(changes["action"], METADATA_ACTIONS, "action")
    _check_references(
        session,
        changes.get("ticket_id"),
        changes.get("release_id"),
    )
    updated.updated_at = now_in_app_timezone()
    return repository.update(updated)


def delete_metadata_item(session: Session, item_id: str) -> None:
    if not MetadataItemRepository(session).delete(item_id):
        raise ValueError("Metadata item not found")


__all__ = [
    "create_metadata_item",
    "delete_metadata_item",
    "get_metadata_item",
    "list_metadata_items",
    "update_metadata_item",
]
