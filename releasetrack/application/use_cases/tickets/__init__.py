"""Use cases for managing tickets."""

from .create_ticket import create_ticket
from .delete_ticket import delete_ticket
from .get_ticket import get_ticket
from .list_tickets import list_tickets
from .status import check_status, resolve_closed_date
from .update_ticket import TicketUpdateOutcome, update_ticket

__all__ = [
    "TicketUpdateOutcome",
    "check_status",
    "create_ticket",
    "delete_ticket",
    "get_ticket",
    "list_tickets",
    "resolve_closed_date",
    "update_ticket",
]
