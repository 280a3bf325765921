"""Use case for retrieving a single ticket."""

from sqlalchemy.orm import Session

from releasetrack.domain.entities import Ticket
from releasetrack.infrastructure.repositories import TicketRepository


def get_ticket(session: Session, ticket_id: str) -> Ticket:
    """Return the requested ticket or raise an error if it does not exist."""

    ticket = TicketRepository(session).get(ticket_id)
    if ticket is None:
        raise ValueError("Ticket not found")
    return ticket
