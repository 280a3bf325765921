"""Dispatch ticket notification emails through the configured delivery client."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from releasetrack.config import get_settings
from releasetrack.domain.entities import (
    NOTIFICATION_KIND_ASSIGNEE_CHANGE,
    NOTIFICATION_KIND_MENTION,
    NOTIFICATION_KIND_STATUS_CHANGE,
    Comment,
    NotificationResult,
    NotificationSummary,
    Ticket,
    User,
)
from releasetrack.infrastructure.email import (
    DeliveryResult,
    EmailDeliveryClient,
    EmailMessage,
)
from releasetrack.infrastructure.repositories import UserRepository
from releasetrack.utils import extract_valid_emails

from .audit import record_notification
from .preferences import filter_recipients_by_preference, load_system_settings
from .recipients import resolve_mentioned_users, resolve_ticket_recipients
from .templates import (
    assignee_change_subject,
    mention_subject,
    render_assignee_change_html,
    render_mention_html,
    render_plain_text,
    render_status_change_html,
    status_change_subject,
)

logger = logging.getLogger(__name__)


def _actor_id(actor: User | None) -> int | None:
    return actor.id if actor is not None else None


def _actor_name(actor: User | None) -> str | None:
    return actor.display_name if actor is not None else None


def _deliver(
    client: EmailDeliveryClient,
    *,
    recipients: list[User],
    subject: str,
    html: str,
) -> DeliveryResult:
    message = EmailMessage(
        sender=get_settings().sendgrid_sender,
        to=extract_valid_emails(recipients),
        subject=subject,
        html=html,
        text=render_plain_text(html),
    )
    return client.send(message)


def _dispatch_ticket_email(
    session: Session,
    *,
    kind: str,
    ticket: Ticket,
    actor: User | None,
    client: EmailDeliveryClient,
    subject: str,
    html: str,
    metadata: dict[str, Any],
    extra_user_ids: tuple[int | None, ...] = (),
) -> NotificationResult:
    """Run a single-email notification through the whole pipeline."""

    if not load_system_settings(session).allows(kind):
        logger.info("%s notifications are disabled system-wide", kind)
        return NotificationResult.skip(kind, f"{kind} notifications are disabled")

    candidates = resolve_ticket_recipients(
        session, ticket, actor_id=_actor_id(actor), extra_user_ids=extra_user_ids
    )
    if not candidates:
        return NotificationResult.skip(kind, "No recipients for this ticket")

    recipients = filter_recipients_by_preference(session, candidates, kind)
    if not recipients:
        return NotificationResult.skip(kind, "All recipients opted out")

    recipient_ids = [user.id for user in recipients]
    result = _deliver(client, recipients=recipients, subject=subject, html=html)
    if result.success:
        logger.info(
            "Sent %s email for ticket %s to %d recipient(s)",
            kind,
            ticket.id,
            len(recipient_ids),
        )
    else:
        logger.error(
            "Failed to send %s email for ticket %s: %s", kind, ticket.id, result.error
        )

    record_notification(
        session,
        kind=kind,
        ticket_id=ticket.id,
        recipient_ids=recipient_ids,
        sender_id=_actor_id(actor),
        metadata={
            **metadata,
            "subject": subject,
            "delivered": result.success,
            "error": result.error,
            "provider": getattr(client, "name", None),
        },
    )
    return NotificationResult(
        kind=kind,
        success=result.success,
        error=result.error,
        recipient_ids=recipient_ids,
    )


def _guard(kind: str, ticket_id: str | None, session: Session, exc: SQLAlchemyError) -> NotificationResult:
    session.rollback()
    logger.error("Could not prepare %s notification for ticket %s: %s", kind, ticket_id, exc)
    return NotificationResult(kind=kind, success=False, error=str(exc))


def notify_status_change(
    session: Session,
    *,
    ticket: Ticket,
    previous_status: str | None,
    actor: User | None,
    client: EmailDeliveryClient,
) -> NotificationResult:
    """Email the assignee and requester that ``ticket`` changed status."""

    kind = NOTIFICATION_KIND_STATUS_CHANGE
    html = render_status_change_html(
        ticket_id=ticket.id,
        ticket_title=ticket.title,
        old_status=previous_status,
        new_status=ticket.status,
        actor_name=_actor_name(actor),
    )
    try:
        return _dispatch_ticket_email(
            session,
            kind=kind,
            ticket=ticket,
            actor=actor,
            client=client,
            subject=status_change_subject(ticket.id, previous_status, ticket.status),
            html=html,
            metadata={"previous_status": previous_status, "new_status": ticket.status},
        )
    except SQLAlchemyError as exc:
        return _guard(kind, ticket.id, session, exc)


def notify_assignee_change(
    session: Session,
    *,
    ticket: Ticket,
    previous_assignee_id: int | None,
    actor: User | None,
    client: EmailDeliveryClient,
) -> NotificationResult:
    """Email the new and previous assignee plus the requester about a reassignment."""

    kind = NOTIFICATION_KIND_ASSIGNEE_CHANGE
    try:
        users = UserRepository(session).get_map_by_ids(
            [previous_assignee_id, ticket.assignee_id]
        )
        previous = users.get(previous_assignee_id) if previous_assignee_id else None
        current = users.get(ticket.assignee_id) if ticket.assignee_id else None
        html = render_assignee_change_html(
            ticket_id=ticket.id,
            ticket_title=ticket.title,
            old_assignee=previous.display_name if previous else None,
            new_assignee=current.display_name if current else None,
            actor_name=_actor_name(actor),
        )
        return _dispatch_ticket_email(
            session,
            kind=kind,
            ticket=ticket,
            actor=actor,
            client=client,
            subject=assignee_change_subject(ticket.id),
            html=html,
            metadata={
                "previous_assignee": previous_assignee_id,
                "new_assignee": ticket.assignee_id,
            },
            extra_user_ids=(previous_assignee_id,),
        )
    except SQLAlchemyError as exc:
        return _guard(kind, ticket.id, session, exc)


def notify_mentions(
    session: Session,
    *,
    comment: Comment,
    ticket: Ticket,
    commenter: User | None,
    client: EmailDeliveryClient,
) -> NotificationResult:
    """Send one email per user mentioned in ``comment``.

    The commenter never receives a mention email. Every attempt is logged
    separately and the counters are returned in ``summary``.
    """

    kind = NOTIFICATION_KIND_MENTION
    if not comment.mentions:
        return NotificationResult.skip(kind, "No mentions to process")

    try:
        if not load_system_settings(session).allows(kind):
            logger.info("Mention notifications are disabled system-wide")
            return NotificationResult.skip(kind, "mention notifications are disabled")

        author_id = comment.author_id if comment.author_id is not None else _actor_id(commenter)
        mentioned = [
            user
            for user in resolve_mentioned_users(session, comment, actor_id=author_id)
            if user.id != author_id
        ]
        if not mentioned:
            return NotificationResult.skip(kind, "No valid mentioned users found")

        allowed = filter_recipients_by_preference(session, mentioned, kind)
    except SQLAlchemyError as exc:
        return _guard(kind, ticket.id, session, exc)

    summary = NotificationSummary(skipped=len(mentioned) - len(allowed))
    errors: list[str] = []
    delivered_ids: list[int] = []
    ticket_url = f"{get_settings().app_base_url.rstrip('/')}/tickets/{ticket.id}"
    commenter_name = _actor_name(commenter)

    for user in allowed:
        html = render_mention_html(
            mentioned_name=user.display_name,
            commenter_name=commenter_name,
            ticket_id=ticket.id,
            ticket_title=ticket.title,
            comment_content=comment.content,
            ticket_url=ticket_url,
        )
        result = _deliver(client, recipients=[user], subject=mention_subject(ticket.id), html=html)
        if result.success:
            summary.sent += 1
            delivered_ids.append(user.id)
        else:
            summary.failed += 1
            errors.append(f"{user.email}: {result.error}")
            logger.error(
                "Failed to send mention email to user %s for ticket %s: %s",
                user.id,
                ticket.id,
                result.error,
            )
        record_notification(
            session,
            kind=kind,
            ticket_id=ticket.id,
            recipient_ids=[user.id],
            sender_id=author_id,
            metadata={
                "comment_id": comment.id,
                "delivered": result.success,
                "error": result.error,
                "provider": getattr(client, "name", None),
            },
        )

    logger.info(
        "Mention notifications for ticket %s: %d sent, %d skipped, %d failed",
        ticket.id,
        summary.sent,
        summary.skipped,
        summary.failed,
    )
    if not allowed:
        return NotificationResult(
            kind=kind,
            success=True,
            skipped=True,
            reason="All mentioned users opted out",
            summary=summary,
        )
    return NotificationResult(
        kind=kind,
        success=summary.failed == 0,
        error="; ".join(errors) or None,
        recipient_ids=delivered_ids,
        summary=summary,
    )


__all__ = ["notify_assignee_change", "notify_mentions", "notify_status_change"]
