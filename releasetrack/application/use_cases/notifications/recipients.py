"""Resolve which users are candidates for a ticket notification."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from releasetrack.config import get_settings
from releasetrack.domain.entities import Comment, Ticket, User
from releasetrack.infrastructure.repositories import UserRepository


def _ordered_unique_ids(user_ids: Iterable[int | None]) -> list[int]:
    seen: set[int] = set()
    ordered: list[int] = []
    for user_id in user_ids:
        if user_id is None or user_id in seen:
            continue
        seen.add(user_id)
        ordered.append(user_id)
    return ordered


def _load_users(
    session: Session, user_ids: Iterable[int | None], *, actor_id: int | None
) -> list[User]:
    ordered_ids = _ordered_unique_ids(user_ids)
    if actor_id is not None and not get_settings().notify_actor:
        ordered_ids = [user_id for user_id in ordered_ids if user_id != actor_id]

    users = UserRepository(session).get_map_by_ids(ordered_ids)
    # Unknown references simply drop out.
    return [users[user_id] for user_id in ordered_ids if user_id in users]


def resolve_ticket_recipients(
    session: Session,
    ticket: Ticket,
    *,
    actor_id: int | None,
    extra_user_ids: Iterable[int | None] = (),
) -> list[User]:
    """Return the assignee, the requester and ``extra_user_ids`` without duplicates.

    The acting user is left out unless ``NOTIFY_ACTOR`` is enabled.
    """

    candidate_ids = [ticket.assignee_id, ticket.requester_id, *extra_user_ids]
    return _load_users(session, candidate_ids, actor_id=actor_id)


def resolve_mentioned_users(
    session: Session, comment: Comment, *, actor_id: int | None
) -> list[User]:
    """Return the users mentioned in ``comment`` except its author."""

    return _load_users(session, comment.mentions, actor_id=actor_id)


__all__ = ["resolve_mentioned_users", "resolve_ticket_recipients"]
