"""Use cases for managing releases."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any

from sqlalchemy.orm import Session

from releasetrack.domain.entities import RELEASE_STATUS_PLANNING, Release, Ticket
from releasetrack.infrastructure.repositories import ReleaseRepository, TicketRepository
from releasetrack.utils import now_in_app_timezone

UPDATABLE_FIELDS = frozenset(
    {"name", "version", "target", "status", "description", "stakeholder_summary"}
)


@dataclass
class ReleaseOverview:
    """A release together with the tickets scheduled in it."""

    release: Release
    tickets: list[Ticket] = field(default_factory=list)


def ensure_release_exists(session: Session, release_id: str | None) -> None:
    """Raise ``ValueError`` when ``release_id`` is set but unknown."""

    if release_id is not None and not ReleaseRepository(session).exists(release_id):
        raise ValueError(f"Release {release_id} not found")


def create_release(
    session: Session,
    *,
    name: str,
    release_id: str | None = None,
    version: str | None = None,
    target: date | None = None,
    status: str | None = None,
    description: str | None = None,
    stakeholder_summary: str | None = None,
) -> Release:
    """Persist a new release, generating a ``RELEASE-N`` id when none is given."""

    if not name or not name.strip():
        raise ValueError("Release name is required")

    repository = ReleaseRepository(session)
    if release_id:
        release_id = release_id.strip()
        if repository.exists(release_id):
            raise ValueError(f"Release {release_id} already exists")
    else:
        release_id = repository.next_release_id()

    release = Release(
        id=release_id,
        name=name.strip(),
        version=version,
        target=target,
        status=(status or "").strip() or RELEASE_STATUS_PLANNING,
        description=description,
        stakeholder_summary=stakeholder_summary,
        created_at=now_in_app_timezone(),
    )
    return repository.create(release)


def list_releases(session: Session, *, status: str | None = None) -> Sequence[Release]:
    """Return releases, latest target date first."""

    return ReleaseRepository(session).list(status=status)


def get_release(session: Session, release_id: str) -> ReleaseOverview:
    """Return a release with its tickets or raise an error if it does not exist."""

    release = ReleaseRepository(session).get(release_id)
    if release is None:
        raise ValueError("Release not found")
    tickets = TicketRepository(session).list(release_id=release_id, limit=None)
    return ReleaseOverview(release=release, tickets=list(tickets))


def update_release(session: Session, *, release_id: str, changes: dict[str, Any]) -> Release:
    unknown = set(changes) - UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Unsupported release fields: {', '.join(sorted(unknown))}")

    repository = ReleaseRepository(session)
    current = repository.get(release_id)
    if current is None:
        raise ValueError("Release not found")
    if "name" in changes and not (changes["name"] or "").strip():
        raise ValueError("Release name is required")
    if "status" in changes and not (changes["status"] or "").strip():
        raise ValueError("Release status cannot be empty")

    updated = replace(current, **changes)
    updated.updated_at = now_in_app_timezone()
    return repository.update(updated)


def delete_release(session: Session, release_id: str) -> None:
    """Remove a release; tickets keep their reference to it."""

    if not ReleaseRepository(session).delete(release_id):
        raise ValueError("Release not found")


__all__ = [
    "ReleaseOverview",
    "create_release",
    "delete_release",
    "ensure_release_exists",
    "get_release",
    "list_releases",
    "update_release",
]
