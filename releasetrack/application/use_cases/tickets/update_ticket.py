"""Use case for updating tickets and notifying the people involved."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from sqlalchemy.orm import Session

from releasetrack.application.use_cases.notifications import (
    notify_assignee_change,
    notify_status_change,
)
from releasetrack.application.use_cases.releases import ensure_release_exists
from releasetrack.domain.entities import NotificationResult, Ticket, User
from releasetrack.infrastructure.email import EmailDeliveryClient
from releasetrack.infrastructure.repositories import TicketRepository
from releasetrack.utils import now_in_app_timezone

from .status import check_status, resolve_closed_date

UPDATABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "status",
        "priority",
        "type",
        "support_area",
        "requester_id",
        "assignee_id",
        "release_id",
        "solution",
        "test_notes",
    }
)


@dataclass
class TicketUpdateOutcome:
    """The saved ticket together with the notifications it triggered."""

    ticket: Ticket
    notifications: list[NotificationResult] = field(default_factory=list)


def update_ticket(
    session: Session,
    *,
    ticket_id: str,
    changes: dict[str, Any],
    actor: User | None = None,
    client: EmailDeliveryClient | None = None,
) -> TicketUpdateOutcome:
    """Apply ``changes`` to a ticket, then send status and assignee emails.

    Emails are only attempted after the ticket is committed, and their failures
    are reported in the outcome rather than raised. Without ``client`` no email
    is sent.
    """

    unknown = set(changes) - UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Unsupported ticket fields: {', '.join(sorted(unknown))}")

    repository = TicketRepository(session)
    current = repository.get(ticket_id)
    if current is None:
        raise ValueError("Ticket not found")

    if "title" in changes and not (changes["title"] or "").strip():
        raise ValueError("Ticket title is required")
    ensure_release_exists(session, changes.get("release_id"))

    updated = replace(current, **changes)
    now = now_in_app_timezone()
    if "status" in changes:
        if changes["status"] is None:
            raise ValueError("Ticket status cannot be empty")
        updated.status = check_status(changes["status"])
        updated.closed_date = resolve_closed_date(
            current.status, updated.status, current.closed_date, now=now
        )
    updated.updated_at = now

    saved = repository.update(updated)
    outcome = TicketUpdateOutcome(ticket=saved)
    if client is None:
        return outcome

    if saved.status != current.status:
        outcome.notifications.append(
            notify_status_change(
                session,
                ticket=saved,
                previous_status=current.status,
                actor=actor,
                client=client,
            )
        )
    if saved.assignee_id != current.assignee_id:
        outcome.notifications.append(
            notify_assignee_change(
                session,
                ticket=saved,
                previous_assignee_id=current.assignee_id,
                actor=actor,
                client=client,
            )
        )
    return outcome


__all__ = ["TicketUpdateOutcome", "UPDATABLE_FIELDS", "update_ticket"]
