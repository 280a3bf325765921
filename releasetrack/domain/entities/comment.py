"""Domain entity representing a ticket comment."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Comment:
    """Free text left on a ticket, optionally mentioning other users."""

    id: int | None
    ticket_id: str
    author_id: int | None
    content: str
    mentions: list[int] = field(default_factory=list)
    created_at: datetime | None = None


__all__ = ["Comment"]
