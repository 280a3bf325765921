"""Domain entity representing a Salesforce metadata change."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

METADATA_ID_PREFIX = "META-"

METADATA_TYPES: tuple[str, ...] = (
    "Apex Class",
    "Apex Trigger",
    "Custom Field",
    "Custom Metadata",
    "Dashboard",
    "Email Template",
    "Flexi Page",
    "Flow",
    "LWC",
    "Other",
    "Permission Set",
    "Report",
    "Standard Field",
    "Validation Rule",
)
METADATA_ACTIONS: tuple[str, ...] = ("Create", "Update", "Delete")


def canonical_choice(value: str, choices: tuple[str, ...]) -> str | None:
    """Return the entry of ``choices`` matching ``value`` ignoring case, if any."""

    wanted = value.strip().lower()
    for choice in choices:
        if choice.lower() == wanted:
            return choice
    return None


@dataclass
class MetadataItem:
    """A component created, updated or deleted in the Salesforce org."""

    id: str | None
    name: str
    type: str
    action: str
    api_name: str | None = None
    object: str | None = None
    description: str | None = None
    technical_details: str | None = None
    ticket_id: str | None = None
    release_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "METADATA_ACTIONS",
    "METADATA_ID_PREFIX",
    "METADATA_TYPES",
    "MetadataItem",
    "canonical_choice",
]
