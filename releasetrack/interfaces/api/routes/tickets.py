"""Routes for managing tickets."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from releasetrack.application.use_cases.tickets import (
    TicketUpdateOutcome,
    create_ticket as create_ticket_uc,
    delete_ticket as delete_ticket_uc,
    get_ticket as get_ticket_uc,
    list_tickets as list_tickets_uc,
    update_ticket as update_ticket_uc,
)
from releasetrack.domain.entities import Ticket, User
from releasetrack.infrastructure.database import get_db
from releasetrack.infrastructure.email import EmailDeliveryClient
from releasetrack.interfaces.api.dependencies import get_acting_user, get_delivery_client
from releasetrack.interfaces.api.schemas import (
    TicketCreate,
    TicketRead,
    TicketUpdate,
    TicketUpdateRead,
)

router = APIRouter(prefix="/tickets", tags=["tickets"])
logger = logging.getLogger(__name__)


def _to_read_model(ticket: Ticket) -> TicketRead:
    return TicketRead.model_validate(ticket)


def _outcome_to_read_model(outcome: TicketUpdateOutcome) -> TicketUpdateRead:
    return TicketUpdateRead.model_validate(outcome)


@router.post("/", response_model=TicketRead, status_code=status.HTTP_201_CREATED)
def create_ticket(ticket_in: TicketCreate, db: Session = Depends(get_db)) -> TicketRead:
    """Create a ticket; the id is generated when the request omits it."""

    try:
        ticket = create_ticket_uc(
            db,
            ticket_id=ticket_in.id,
            **ticket_in.model_dump(exclude={"id"}),
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(ticket)


@router.get("/", response_model=list[TicketRead])
def list_tickets(
    status_filter: str | None = Query(None, alias="status"),
    assignee_id: int | None = None,
    requester_id: int | None = None,
    release_id: str | None = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
) -> list[TicketRead]:
    """Return tickets, newest first."""

    tickets = list_tickets_uc(
        db,
        status=status_filter,
        assignee_id=assignee_id,
        requester_id=requester_id,
        release_id=release_id,
        skip=skip,
        limit=limit,
    )
    return [_to_read_model(ticket) for ticket in tickets]


@router.get("/{ticket_id}", response_model=TicketRead)
def read_ticket(ticket_id: str, db: Session = Depends(get_db)) -> TicketRead:
    try:
        ticket = get_ticket_uc(db, ticket_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _to_read_model(ticket)


@router.patch("/{ticket_id}", response_model=TicketUpdateRead)
def update_ticket(
    ticket_id: str,
    ticket_in: TicketUpdate,
    db: Session = Depends(get_db),
    actor: User | None = Depends(get_acting_user),
    client: EmailDeliveryClient = Depends(get_delivery_client),
) -> TicketUpdateRead:
    """Update a ticket and email the people affected by status or assignee changes.

    Email failures never fail the request; they are reported in ``notifications``.
    """

    try:
        get_ticket_uc(db, ticket_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    changes = ticket_in.model_dump(exclude_unset=True)
    try:
        outcome = update_ticket_uc(
            db,
            ticket_id=ticket_id,
            changes=changes,
            actor=actor,
            client=client,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    for result in outcome.notifications:
        if not result.success:
            logger.warning(
                "Ticket %s updated but %s email failed: %s",
                ticket_id,
                result.kind,
                result.error,
            )
    return _outcome_to_read_model(outcome)


@router.delete("/{ticket_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_ticket(ticket_id: str, db: Session = Depends(get_db)) -> Response:
    try:
        delete_ticket_uc(db, ticket_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
