"""Tests for ticket status rules and ticket persistence."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from releasetrack.application.use_cases.tickets import (
    check_status,
    create_ticket,
    resolve_closed_date,
    update_ticket,
)

NOW = datetime(2025, 7, 11, 12, 0, tzinfo=timezone.utc)
EARLIER = datetime(2025, 7, 1, 9, 30, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("previous", "new", "current", "expected"),
    [
        ("In Development", "Released", None, NOW),
        ("Backlog", "Cancelled", None, NOW),
        ("Released", "Cancelled", EARLIER, EARLIER),
        ("Cancelled", "Released", None, NOW),
        ("Released", "Released", EARLIER, EARLIER),
        ("Released", "In Development", EARLIER, None),
        ("Backlog", "In Testing - UAT", None, None),
        (None, "Released", None, NOW),
    ],
)
def test_resolve_closed_date(previous, new, current, expected) -> None:
    assert resolve_closed_date(previous, new, current, now=NOW) == expected


def test_check_status_accepts_unknown_values_with_warning(caplog) -> None:
    with caplog.at_level("WARNING"):
        assert check_status("  Open ") == "Open"
    assert "not a known workstate" in caplog.text


def test_check_status_rejects_empty_values() -> None:
    with pytest.raises(ValueError):
        check_status("   ")


def test_create_ticket_generates_sequential_ids(session) -> None:
    first = create_ticket(session, title="First")
    second = create_ticket(session, title="Second", status="Released")

    assert first.id == "SUP-00001"
    assert second.id == "SUP-00002"
    assert first.closed_date is None
    assert second.closed_date is not None


def test_create_ticket_rejects_duplicate_ids(session) -> None:
    create_ticket(session, title="Imported", ticket_id="SUP-00100")

    with pytest.raises(ValueError, match="already exists"):
        create_ticket(session, title="Again", ticket_id="SUP-00100")
    assert create_ticket(session, title="Next").id == "SUP-00101"


def test_closed_date_follows_status_changes(session) -> None:
    ticket = create_ticket(session, title="Legacy", status="Open")
    assert ticket.closed_date is None

    released = update_ticket(session, ticket_id=ticket.id, changes={"status": "Released"}).ticket
    assert released.closed_date is not None

    cancelled = update_ticket(session, ticket_id=ticket.id, changes={"status": "Cancelled"}).ticket
    assert cancelled.closed_date == released.closed_date

    reopened = update_ticket(
        session, ticket_id=ticket.id, changes={"status": "In Development"}
    ).ticket
    assert reopened.closed_date is None


def test_update_ticket_without_client_sends_nothing(session) -> None:
    ticket = create_ticket(session, title="Quiet")

    outcome = update_ticket(session, ticket_id=ticket.id, changes={"status": "Blocked - Dev"})

    assert outcome.ticket.status == "Blocked - Dev"
    assert outcome.notifications == []


def test_update_ticket_rejects_unknown_fields(session) -> None:
    ticket = create_ticket(session, title="Strict")

    with pytest.raises(ValueError, match="Unsupported ticket fields"):
        update_ticket(session, ticket_id=ticket.id, changes={"closed_date": NOW})
