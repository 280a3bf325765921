"""Use case for creating tickets."""

from __future__ import annotations

from sqlalchemy.orm import Session

from releasetrack.application.use_cases.releases import ensure_release_exists
from releasetrack.domain.entities import TICKET_STATUS_BACKLOG, Ticket, is_terminal_status
from releasetrack.infrastructure.repositories import TicketRepository
from releasetrack.utils import now_in_app_timezone

from .status import check_status


def create_ticket(
    session: Session,
    *,
    title: str,
    ticket_id: str | None = None,
    description: str | None = None,
    status: str = TICKET_STATUS_BACKLOG,
    priority: str | None = None,
    type: str | None = None,
    support_area: str | None = None,
    requester_id: int | None = None,
    assignee_id: int | None = None,
    release_id: str | None = None,
    solution: str | None = None,
    test_notes: str | None = None,
) -> Ticket:
    """Persist a new ticket, generating a ``SUP-#####`` id when none is given."""

    if not title or not title.strip():
        raise ValueError("Ticket title is required")

    repository = TicketRepository(session)
    if ticket_id:
        ticket_id = ticket_id.strip()
        if repository.exists(ticket_id):
            raise ValueError(f"Ticket {ticket_id} already exists")
    else:
        ticket_id = repository.next_ticket_id()

    ensure_release_exists(session, release_id)

    status = check_status(status)
    now = now_in_app_timezone()
    ticket = Ticket(
        id=ticket_id,
        title=title.strip(),
        description=description,
        status=status,
        priority=priority,
        type=type,
        support_area=support_area,
        requester_id=requester_id,
        assignee_id=assignee_id,
        release_id=release_id,
        solution=solution,
        test_notes=test_notes,
        closed_date=now if is_terminal_status(status) else None,
        created_at=now,
    )
    return repository.create(ticket)
