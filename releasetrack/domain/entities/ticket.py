"""Domain entity representing a support ticket."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

TICKET_STATUS_BACKLOG = "Backlog"
TICKET_STATUS_CANCELLED = "Cancelled"
TICKET_STATUS_REQUIREMENTS_GATHERING = "Requirements Gathering"
TICKET_STATUS_IN_TECHNICAL_DESIGN = "In Technical Design"
TICKET_STATUS_IN_DEVELOPMENT = "In Development"
TICKET_STATUS_BLOCKED_USER = "Blocked - User"
TICKET_STATUS_BLOCKED_DEV = "Blocked - Dev"
TICKET_STATUS_IN_TESTING_DEV = "In Testing - Dev"
TICKET_STATUS_IN_TESTING_UAT = "In Testing - UAT"
TICKET_STATUS_READY_FOR_RELEASE = "Ready For Release"
TICKET_STATUS_RELEASED = "Released"

TICKET_STATUSES: tuple[str, ...] = (
    TICKET_STATUS_BACKLOG,
    TICKET_STATUS_CANCELLED,
    TICKET_STATUS_REQUIREMENTS_GATHERING,
    TICKET_STATUS_IN_TECHNICAL_DESIGN,
    TICKET_STATUS_IN_DEVELOPMENT,
    TICKET_STATUS_BLOCKED_USER,
    TICKET_STATUS_BLOCKED_DEV,
    TICKET_STATUS_IN_TESTING_DEV,
    TICKET_STATUS_IN_TESTING_UAT,
    TICKET_STATUS_READY_FOR_RELEASE,
    TICKET_STATUS_RELEASED,
)
TERMINAL_TICKET_STATUSES: frozenset[str] = frozenset(
    {TICKET_STATUS_RELEASED, TICKET_STATUS_CANCELLED}
)

TICKET_PRIORITIES: tuple[str, ...] = ("Low", "Medium", "High")
TICKET_TYPES: tuple[str, ...] = ("Enhancement", "Issue", "New Feature", "Request")
TICKET_SUPPORT_AREAS: tuple[str, ...] = ("CRM", "Customer Support", "Marketing")

TICKET_ID_PREFIX = "SUP-"


def is_terminal_status(status: str | None) -> bool:
    """Return ``True`` when ``status`` closes the ticket."""

    return status in TERMINAL_TICKET_STATUSES


@dataclass
class Ticket:
    """Unit of support or release work tracked by the application."""

    id: str | None
    title: str
    description: str | None = None
    status: str = TICKET_STATUS_BACKLOG
    priority: str | None = None
    type: str | None = None
    support_area: str | None = None
    requester_id: int | None = None
    assignee_id: int | None = None
    release_id: str | None = None
    solution: str | None = None
    test_notes: str | None = None
    closed_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_closed(self) -> bool:
        return is_terminal_status(self.status)


__all__ = [
    "TERMINAL_TICKET_STATUSES",
    "TICKET_ID_PREFIX",
    "TICKET_PRIORITIES",
    "TICKET_STATUSES",
    "TICKET_STATUS_BACKLOG",
    "TICKET_STATUS_BLOCKED_DEV",
    "TICKET_STATUS_BLOCKED_USER",
    "TICKET_STATUS_CANCELLED",
    "TICKET_STATUS_IN_DEVELOPMENT",
    "TICKET_STATUS_IN_TECHNICAL_DESIGN",
    "TICKET_STATUS_IN_TESTING_DEV",
    "TICKET_STATUS_IN_TESTING_UAT",
    "TICKET_STATUS_READY_FOR_RELEASE",
    "TICKET_STATUS_RELEASED",
    "TICKET_STATUS_REQUIREMENTS_GATHERING",
    "TICKET_SUPPORT_AREAS",
    "TICKET_TYPES",
    "Ticket",
    "is_terminal_status",
]
