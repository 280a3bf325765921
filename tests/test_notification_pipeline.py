"""Tests for recipient resolution, preference filtering and notification dispatch."""

from __future__ import annotations

import httpx
import pytest
from sqlalchemy.exc import OperationalError

from releasetrack.application.use_cases.comments import create_comment
from releasetrack.application.use_cases.notifications import (
    audit,
    filter_recipients_by_preference,
    notify_assignee_change,
    notify_mentions,
    notify_status_change,
    resolve_ticket_recipients,
)
from releasetrack.application.use_cases.notifications import preferences as preferences_module
from releasetrack.application.use_cases.preferences import update_notification_preferences
from releasetrack.application.use_cases.system_settings import update_system_settings
from releasetrack.application.use_cases.tickets import create_ticket, update_ticket
from releasetrack.config import reset_settings_cache
from releasetrack.domain.entities import Comment, User
from releasetrack.infrastructure.email import DeliveryResult, RelayDeliveryClient
from releasetrack.infrastructure.repositories import NotificationLogRepository


@pytest.fixture()
def people(make_user):
    return {
        "actor": make_user("Ada", last_name="Lovelace"),
        "assignee": make_user("Grace", last_name="Hopper"),
        "requester": make_user("Linus"),
    }


@pytest.fixture()
def ticket(session, people):
    return create_ticket(
        session,
        title="Checkout page times out",
        assignee_id=people["assignee"].id,
        requester_id=people["requester"].id,
    )


def _log_entries(session, **filters):
    return NotificationLogRepository(session).list(**filters)


def _failing(_session, _user_ids):
    raise OperationalError("SELECT", {}, Exception("database is locked"))


def test_recipients_are_deduplicated_and_exclude_the_actor(session, people, ticket) -> None:
    recipients = resolve_ticket_recipients(
        session,
        ticket,
        actor_id=people["requester"].id,
        extra_user_ids=(people["assignee"].id, 9999, None),
    )

    assert [user.id for user in recipients] == [people["assignee"].id]


def test_actor_is_notified_when_enabled(session, settings_env, people, ticket) -> None:
    settings_env.setenv("NOTIFY_ACTOR", "true")
    reset_settings_cache()

    recipients = resolve_ticket_recipients(session, ticket, actor_id=people["requester"].id)

    assert [user.id for user in recipients] == [people["assignee"].id, people["requester"].id]


def test_users_without_preferences_are_opted_in(session, people) -> None:
    users = [people["assignee"], people["requester"]]

    assert filter_recipients_by_preference(session, users, "status_change") == users


def test_opted_out_users_are_filtered(session, people) -> None:
    update_notification_preferences(session, people["assignee"].id, notify_on_status_change=False)
    update_notification_preferences(
        session, people["requester"].id, email_notifications_enabled=False
    )
    users = [people["assignee"], people["requester"], people["actor"]]

    assert filter_recipients_by_preference(session, users, "status_change") == [people["actor"]]
    assert filter_recipients_by_preference(session, users, "assignee_change") == [
        people["assignee"],
        people["actor"],
    ]


def test_preference_read_failure_fails_open(
    session, people, monkeypatch: pytest.MonkeyPatch, caplog
) -> None:
    monkeypatch.setattr(
        preferences_module.PreferenceRepository, "get_map_by_user_ids", _failing
    )
    users = [people["assignee"], User(id=99, first_name="No", last_name="Mail", email="nope")]

    with caplog.at_level("WARNING"):
        allowed = filter_recipients_by_preference(session, users, "mention")

    assert allowed == [people["assignee"]]
    assert "notifying everyone" in caplog.text


def test_status_change_emails_everyone_who_accepts(
    session, people, ticket, delivery_client
) -> None:
    update_notification_preferences(session, people["requester"].id, notify_on_status_change=False)

    result = notify_status_change(
        session,
        ticket=ticket,
        previous_status="In Development",
        actor=people["actor"],
        client=delivery_client,
    )

    assert result.success is True
    assert result.skipped is False
    assert result.recipient_ids == [people["assignee"].id]
    [message] = delivery_client.messages
    assert message.to == ["grace@example.com"]
    assert message.subject.endswith(f"Ticket {ticket.id} Status Changed: In Development → Backlog")
    assert "Ada Lovelace" in message.html
    assert message.text and "<" not in message.text

    [entry] = _log_entries(session, ticket_id=ticket.id)
    assert entry.type == "status_change"
    assert entry.recipients == [people["assignee"].id]
    assert entry.sender_id == people["actor"].id
    assert entry.metadata["delivered"] is True
    assert entry.metadata["provider"] == "recording"


def test_status_change_is_skipped_when_everyone_opted_out(
    session, people, ticket, delivery_client
) -> None:
    for key in ("assignee", "requester"):
        update_notification_preferences(session, people[key].id, notify_on_status_change=False)

    result = notify_status_change(
        session, ticket=ticket, previous_status="Backlog", actor=people["actor"], client=delivery_client
    )

    assert result.success is True
    assert result.skipped is True
    assert result.reason == "All recipients opted out"
    assert delivery_client.messages == []
    assert _log_entries(session) == []


def test_system_switch_disables_a_kind(
    session, people, ticket, delivery_client
) -> None:
    update_system_settings(session, {"notify_on_status_change": False})

    result = notify_status_change(
        session, ticket=ticket, previous_status="Backlog", actor=people["actor"], client=delivery_client
    )

    assert result.skipped is True
    assert delivery_client.messages == []


def test_provider_failure_is_returned_and_logged(
    session, people, ticket, make_delivery_client
) -> None:
    client = make_delivery_client(
        [DeliveryResult(success=False, error="Email relay responded with status 502: Bad Gateway")]
    )

    result = notify_status_change(
        session, ticket=ticket, previous_status="Backlog", actor=people["actor"], client=client
    )

    assert result.success is False
    assert "502" in result.error
    [entry] = _log_entries(session)
    assert entry.metadata["delivered"] is False
    assert "502" in entry.metadata["error"]


def test_relay_server_error_fails_the_notification(session, people, ticket) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"success": False, "error": "SendGrid unavailable"})

    client = RelayDeliveryClient(
        "http://relay.test/api/send-email",
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )

    result = notify_status_change(
        session, ticket=ticket, previous_status="Backlog", actor=people["actor"], client=client
    )

    assert result.success is False
    assert "500" in result.error
    assert "SendGrid unavailable" in result.error
    [entry] = _log_entries(session, ticket_id=ticket.id)
    assert entry.metadata["delivered"] is False
    assert entry.metadata["provider"] == "relay"


def test_users_sharing_an_address_get_one_copy(session, make_user, delivery_client) -> None:
    requester = make_user("Bob", email="Bob@example.com")
    assignee = make_user("Robert", email="bob@example.com")
    shared = create_ticket(
        session, title="Duplicate inbox", assignee_id=assignee.id, requester_id=requester.id
    )

    result = notify_status_change(
        session, ticket=shared, previous_status="In Development", actor=None, client=delivery_client
    )

    assert result.success is True
    assert result.recipient_ids == [assignee.id, requester.id]
    [message] = delivery_client.messages
    assert message.to == ["bob@example.com"]


def test_audit_failure_does_not_fail_a_delivered_email(
    session, people, ticket, delivery_client, monkeypatch: pytest.MonkeyPatch
) -> None:
    def _broken_create(self, entry):
        raise OperationalError("INSERT", {}, Exception("no such table"))

    monkeypatch.setattr(audit.NotificationLogRepository, "create", _broken_create)

    result = notify_status_change(
        session, ticket=ticket, previous_status="Backlog", actor=people["actor"], client=delivery_client
    )

    assert result.success is True
    assert len(delivery_client.messages) == 1


def test_assignee_change_notifies_previous_assignee(
    session, people, make_user, ticket, delivery_client
) -> None:
    newcomer = make_user("Margaret", last_name="Hamilton")

    outcome = update_ticket(
        session,
        ticket_id=ticket.id,
        changes={"assignee_id": newcomer.id},
        actor=people["actor"],
        client=delivery_client,
    )

    [result] = outcome.notifications
    assert result.kind == "assignee_change"
    assert result.success is True
    assert result.recipient_ids == [newcomer.id, people["requester"].id, people["assignee"].id]
    [message] = delivery_client.messages
    assert "Grace Hopper" in message.html
    assert "Margaret Hamilton" in message.html


def test_status_and_assignee_change_send_two_emails(
    session, people, make_user, ticket, delivery_client
) -> None:
    newcomer = make_user("Margaret")

    outcome = update_ticket(
        session,
        ticket_id=ticket.id,
        changes={"status": "In Development", "assignee_id": newcomer.id},
        actor=people["actor"],
        client=delivery_client,
    )

    assert [result.kind for result in outcome.notifications] == [
        "status_change",
        "assignee_change",
    ]
    assert len(delivery_client.messages) == 2


def test_unassigning_notifies_previous_assignee(
    session, people, ticket, delivery_client
) -> None:
    result = notify_assignee_change(
        session,
        ticket=update_ticket(session, ticket_id=ticket.id, changes={"assignee_id": None}).ticket,
        previous_assignee_id=people["assignee"].id,
        actor=people["actor"],
        client=delivery_client,
    )

    assert result.recipient_ids == [people["requester"].id, people["assignee"].id]
    assert "Unassigned" in delivery_client.messages[0].html


def test_mentions_send_one_email_per_user_and_skip_the_author(
    session, people, make_user, ticket, make_delivery_client
) -> None:
    muted = make_user("Muted")
    update_notification_preferences(session, muted.id, notify_on_mentions=False)
    client = make_delivery_client(
        [DeliveryResult(success=True), DeliveryResult(success=False, error="rejected")]
    )

    outcome = create_comment(
        session,
        ticket_id=ticket.id,
        content="@Grace @Linus please check",
        author=people["actor"],
        mentions=[
            people["assignee"].id,
            people["actor"].id,
            people["requester"].id,
            muted.id,
            people["assignee"].id,
        ],
        client=client,
    )

    result = outcome.notification
    assert outcome.comment.mentions == [
        people["assignee"].id,
        people["actor"].id,
        people["requester"].id,
        muted.id,
    ]
    assert [message.to for message in client.messages] == [
        ["grace@example.com"],
        ["linus@example.com"],
    ]
    assert client.messages[0].subject == f"You've been mentioned in {ticket.id}"
    assert result.summary.sent == 1
    assert result.summary.failed == 1
    assert result.summary.skipped == 1
    assert result.success is False
    assert result.recipient_ids == [people["assignee"].id]

    entries = _log_entries(session, type="mention")
    assert len(entries) == 2
    assert {entry.metadata["delivered"] for entry in entries} == {True, False}
    assert all(entry.metadata["comment_id"] == outcome.comment.id for entry in entries)


def test_mentions_without_targets_are_skipped(
    session, people, ticket, delivery_client
) -> None:
    comment = Comment(
        id=1, ticket_id=ticket.id, author_id=people["actor"].id, content="hi", mentions=[]
    )

    result = notify_mentions(
        session, comment=comment, ticket=ticket, commenter=people["actor"], client=delivery_client
    )

    assert result.skipped is True
    assert result.reason == "No mentions to process"
    assert delivery_client.messages == []


def test_self_mention_sends_nothing(
    session, people, ticket, delivery_client
) -> None:
    comment = Comment(
        id=1,
        ticket_id=ticket.id,
        author_id=people["actor"].id,
        content="note to self",
        mentions=[people["actor"].id],
    )

    result = notify_mentions(
        session, comment=comment, ticket=ticket, commenter=people["actor"], client=delivery_client
    )

    assert result.skipped is True
    assert delivery_client.messages == []
