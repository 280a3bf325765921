"""Use case for listing tickets."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from releasetrack.domain.entities import Ticket
from releasetrack.infrastructure.repositories import TicketRepository


def list_tickets(
    session: Session,
    *,
    status: str | None = None,
    assignee_id: int | None = None,
    requester_id: int | None = None,
    release_id: str | None = None,
    skip: int = 0,
    limit: int = 100,
) -> Sequence[Ticket]:
    """Return tickets, newest first, optionally filtered."""

    return TicketRepository(session).list(
        status=status,
        assignee_id=assignee_id,
        requester_id=requester_id,
        release_id=release_id,
        skip=skip,
        limit=limit,
    )
