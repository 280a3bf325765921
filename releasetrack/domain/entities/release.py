"""Domain entity representing a software release."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

RELEASE_ID_PREFIX = "RELEASE-"
RELEASE_STATUS_PLANNING = "Planning"


@dataclass
class Release:
    """A scheduled deployment grouping the tickets that ship together."""

    id: str | None
    name: str
    version: str | None = None
    target: date | None = None
    status: str = RELEASE_STATUS_PLANNING
    description: str | None = None
    stakeholder_summary: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["RELEASE_ID_PREFIX", "RELEASE_STATUS_PLANNING", "Release"]
