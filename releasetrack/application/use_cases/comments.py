"""Use cases for ticket comments and the mention emails they trigger."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from releasetrack.application.use_cases.notifications import notify_mentions
from releasetrack.domain.entities import Comment, NotificationResult, User
from releasetrack.infrastructure.email import EmailDeliveryClient
from releasetrack.infrastructure.repositories import CommentRepository, TicketRepository
from releasetrack.utils import now_in_app_timezone


@dataclass
class CommentCreationOutcome:
    comment: Comment
    notification: NotificationResult | None = None


def _unique_mentions(mentions: Iterable[int]) -> list[int]:
    seen: set[int] = set()
    ordered: list[int] = []
    for user_id in mentions:
        if user_id in seen:
            continue
        seen.add(user_id)
        ordered.append(user_id)
    return ordered


def create_comment(
    session: Session,
    *,
    ticket_id: str,
    content: str,
    author: User | None,
    mentions: Iterable[int] = (),
    client: EmailDeliveryClient | None = None,
) -> CommentCreationOutcome:
    """Store a comment and email every mentioned user."""

    if not content or not content.strip():
        raise ValueError("Comment content is required")

    ticket = TicketRepository(session).get(ticket_id)
    if ticket is None:
        raise ValueError("Ticket not found")

    comment = CommentRepository(session).create(
        Comment(
            id=None,
            ticket_id=ticket.id,
            author_id=author.id if author is not None else None,
            content=content.strip(),
            mentions=_unique_mentions(mentions),
            created_at=now_in_app_timezone(),
        )
    )
    outcome = CommentCreationOutcome(comment=comment)
    if client is not None and comment.mentions:
        outcome.notification = notify_mentions(
            session, comment=comment, ticket=ticket, commenter=author, client=client
        )
    return outcome


def list_comments(session: Session, ticket_id: str) -> Sequence[Comment]:
    """Return the comments of a ticket in chronological order."""

    if not TicketRepository(session).exists(ticket_id):
        raise ValueError("Ticket not found")
    return CommentRepository(session).list_for_ticket(ticket_id)


__all__ = ["CommentCreationOutcome", "create_comment", "list_comments"]
