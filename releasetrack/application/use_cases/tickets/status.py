"""Rules tied to ticket status transitions."""

from __future__ import annotations

import logging
from datetime import datetime

from releasetrack.domain.entities import TICKET_STATUSES, is_terminal_status
from releasetrack.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def check_status(status: str) -> str:
    """Return ``status`` stripped; values outside the workstates are only logged."""

    normalized = status.strip()
    if not normalized:
        raise ValueError("Ticket status cannot be empty")
    if normalized not in TICKET_STATUSES:
        logger.warning("Ticket status '%s' is not a known workstate", normalized)
    return normalized


def resolve_closed_date(
    previous_status: str | None,
    new_status: str,
    current_closed_date: datetime | None,
    *,
    now: datetime | None = None,
) -> datetime | None:
    """Return the ``closed_date`` a ticket should carry after a status change.

    Entering Released or Cancelled stamps the date, moving between those two
    keeps it, and any other status clears it.
    """

    if previous_status == new_status:
        return current_closed_date
    if not is_terminal_status(new_status):
        return None
    if is_terminal_status(previous_status) and current_closed_date is not None:
        return current_closed_date
    return now or now_in_app_timezone()


__all__ = ["check_status", "resolve_closed_date"]
