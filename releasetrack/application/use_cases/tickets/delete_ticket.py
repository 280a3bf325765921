"""Use case for deleting tickets."""

from sqlalchemy.orm import Session

from releasetrack.infrastructure.repositories import TicketRepository


def delete_ticket(session: Session, ticket_id: str) -> None:
    """Remove a ticket or raise an error if it does not exist.

    Comments, attachments and notification logs are left to the store's own
    cascade rules.
    """

    if not TicketRepository(session).delete(ticket_id):
        raise ValueError("Ticket not found")
