"""Persistence layer for tickets."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from releasetrack.domain.entities import TICKET_ID_PREFIX, Ticket
from releasetrack.infrastructure.models import TicketModel
from releasetrack.utils import ensure_app_timezone, now_in_app_timezone

from .identifiers import next_prefixed_id


class TicketRepository:
    """Provide CRUD operations for :class:`Ticket` entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(
        self,
        *,
        status: str | None = None,
        assignee_id: int | None = None,
        requester_id: int | None = None,
        release_id: str | None = None,
        skip: int = 0,
        limit: int | None = 100,
    ) -> Sequence[Ticket]:
        query = self.session.query(TicketModel)
        if status is not None:
            query = query.filter(TicketModel.status == status)
        if assignee_id is not None:
            query = query.filter(TicketModel.assignee_id == assignee_id)
        if requester_id is not None:
            query = query.filter(TicketModel.requester_id == requester_id)
        if release_id is not None:
            query = query.filter(TicketModel.release_id == release_id)
        query = query.order_by(TicketModel.created_at.desc(), TicketModel.id.desc())
        query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, ticket_id: str) -> Ticket | None:
        model = self.session.get(TicketModel, ticket_id)
        return self._to_entity(model) if model else None

    def exists(self, ticket_id: str) -> bool:
        return self.session.get(TicketModel, ticket_id) is not None

    def next_ticket_id(self) -> str:
        """Return the next ``SUP-00001`` style identifier."""

        return next_prefixed_id(self.session, TicketModel.id, TICKET_ID_PREFIX, width=5)

    def create(self, ticket: Ticket) -> Ticket:
        if ticket.id is None:
            raise ValueError("Ticket id is required")
        model = TicketModel(id=ticket.id)
        self._apply_entity_to_model(model, ticket)
        model.created_at = ticket.created_at or now_in_app_timezone()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, ticket: Ticket) -> Ticket:
        model = self.session.get(TicketModel, ticket.id)
        if model is None:
            msg = f"Ticket with id {ticket.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, ticket)
        model.updated_at = ticket.updated_at or now_in_app_timezone()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, ticket_id: str) -> bool:
        model = self.session.get(TicketModel, ticket_id)
        if model is None:
            return False
        self.session.delete(model)
        self.session.commit()
        return True

    @staticmethod
    def _apply_entity_to_model(model: TicketModel, ticket: Ticket) -> None:
        model.title = ticket.title
        model.description = ticket.description
        model.status = ticket.status
        model.priority = ticket.priority
        model.type = ticket.type
        model.support_area = ticket.support_area
        model.requester_id = ticket.requester_id
        model.assignee_id = ticket.assignee_id
        model.release_id = ticket.release_id
        model.solution = ticket.solution
        model.test_notes = ticket.test_notes
        model.closed_date = ticket.closed_date

    @staticmethod
    def _to_entity(model: TicketModel) -> Ticket:
        return Ticket(
            id=model.id,
            title=model.title,
            description=model.description,
            status=model.status,
            priority=model.priority,
            type=model.type,
            support_area=model.support_area,
            requester_id=model.requester_id,
            assignee_id=model.assignee_id,
            release_id=model.release_id,
            solution=model.solution,
            test_notes=model.test_notes,
            closed_date=ensure_app_timezone(model.closed_date),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["TicketRepository"]
