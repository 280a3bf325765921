"""Integration tests for the ReleaseTrack Pro API endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient


def _create_user(client: TestClient, first_name: str, last_name: str = "") -> dict:
    response = client.post(
        "/users/",
        json={
            "first_name": first_name,
            "last_name": last_name,
            "email": f"{first_name.lower()}@example.com",
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture()
def team(client: TestClient) -> dict[str, dict]:
    return {
        "actor": _create_user(client, "Ada", "Lovelace"),
        "assignee": _create_user(client, "Grace", "Hopper"),
        "requester": _create_user(client, "Linus"),
    }


@pytest.fixture()
def ticket(client: TestClient, team) -> dict:
    response = client.post(
        "/tickets/",
        json={
            "title": "Export to CSV is empty",
            "priority": "High",
            "type": "Issue",
            "support_area": "CRM",
            "assignee_id": team["assignee"]["id"],
            "requester_id": team["requester"]["id"],
        },
    )
    assert response.status_code == 201
    return response.json()


def test_user_registration_and_lookup(client: TestClient) -> None:
    user = _create_user(client, "Ada", "Lovelace")
    assert user["display_name"] == "Ada Lovelace"

    duplicate = client.post(
        "/users/", json={"first_name": "Other", "email": "ada@example.com"}
    )
    assert duplicate.status_code == 400

    invalid = client.post("/users/", json={"first_name": "Bad", "email": "not-an-email"})
    assert invalid.status_code == 422

    assert client.get(f"/users/{user['id']}").json()["email"] == "ada@example.com"
    assert client.get("/users/9999").status_code == 404
    assert [item["id"] for item in client.get("/users/").json()] == [user["id"]]


def test_ticket_crud(client: TestClient, ticket) -> None:
    assert ticket["id"] == "SUP-00001"
    assert ticket["status"] == "Backlog"
    assert ticket["closed_date"] is None

    listed = client.get("/tickets/", params={"status": "Backlog"}).json()
    assert [item["id"] for item in listed] == [ticket["id"]]
    assert client.get("/tickets/", params={"status": "Released"}).json() == []

    assert client.get(f"/tickets/{ticket['id']}").json()["title"] == "Export to CSV is empty"

    assert client.delete(f"/tickets/{ticket['id']}").status_code == 204
    assert client.get(f"/tickets/{ticket['id']}").status_code == 404
    assert client.delete(f"/tickets/{ticket['id']}").status_code == 404


def test_status_change_emails_assignee_and_requester(
    client: TestClient, team, ticket, delivery_client
) -> None:
    response = client.patch(
        f"/tickets/{ticket['id']}",
        json={"status": "Released"},
        headers={"X-Actor-Id": str(team["actor"]["id"])},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["ticket"]["status"] == "Released"
    assert body["ticket"]["closed_date"] is not None
    [notification] = body["notifications"]
    assert notification["kind"] == "status_change"
    assert notification["success"] is True
    assert notification["recipient_ids"] == [team["assignee"]["id"], team["requester"]["id"]]

    [message] = delivery_client.messages
    assert message.to == ["grace@example.com", "linus@example.com"]
    assert "Backlog → Released" in message.subject

    logs = client.get("/notification-logs/", params={"ticket_id": ticket["id"]}).json()
    assert len(logs) == 1
    assert logs[0]["type"] == "status_change"
    assert logs[0]["sender_id"] == team["actor"]["id"]
    assert client.get(f"/notification-logs/{logs[0]['id']}").status_code == 200
    assert client.get("/notification-logs/9999").status_code == 404


def test_failed_email_does_not_fail_the_update(
    client: TestClient, team, ticket, delivery_client
) -> None:
    from releasetrack.infrastructure.email import DeliveryResult

    delivery_client.results.append(
        DeliveryResult(success=False, error="Email relay unreachable: connection refused")
    )

    response = client.patch(f"/tickets/{ticket['id']}", json={"status": "Cancelled"})

    assert response.status_code == 200
    assert response.json()["ticket"]["status"] == "Cancelled"
    [notification] = response.json()["notifications"]
    assert notification["success"] is False
    assert "unreachable" in notification["error"]


def test_update_validation(client: TestClient, team, ticket) -> None:
    assert client.patch("/tickets/SUP-99999", json={"status": "Released"}).status_code == 404
    assert client.patch(f"/tickets/{ticket['id']}", json={"status": None}).status_code == 400
    assert client.patch(f"/tickets/{ticket['id']}", json={"closed_date": None}).status_code == 422
    unknown_actor = client.patch(
        f"/tickets/{ticket['id']}", json={"title": "New"}, headers={"X-Actor-Id": "9999"}
    )
    assert unknown_actor.status_code == 400


def test_comment_mentions_notify_users(
    client: TestClient, team, ticket, delivery_client
) -> None:
    response = client.post(
        f"/tickets/{ticket['id']}/comments/",
        json={
            "content": "@Grace can you take a look?",
            "mentions": [team["assignee"]["id"], team["actor"]["id"]],
        },
        headers={"X-Actor-Id": str(team["actor"]["id"])},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["comment"]["author_id"] == team["actor"]["id"]
    assert body["notification"]["summary"] == {"sent": 1, "skipped": 0, "failed": 0}
    assert [message.to for message in delivery_client.messages] == [["grace@example.com"]]

    comments = client.get(f"/tickets/{ticket['id']}/comments/").json()
    assert [comment["content"] for comment in comments] == ["@Grace can you take a look?"]
    assert client.get("/tickets/SUP-99999/comments/").status_code == 404


def test_preferences_round_trip_and_opt_out(
    client: TestClient, team, ticket, delivery_client
) -> None:
    user_id = team["requester"]["id"]
    defaults = client.get(f"/users/{user_id}/preferences").json()
    assert defaults["notify_on_status_change"] is True
    assert defaults["daily_digest"] is False

    updated = client.put(
        f"/users/{user_id}/preferences", json={"notify_on_status_change": False}
    )
    assert updated.status_code == 200
    assert updated.json()["notify_on_status_change"] is False
    assert updated.json()["notify_on_mentions"] is True

    client.patch(f"/tickets/{ticket['id']}", json={"status": "In Development"})

    [message] = delivery_client.messages
    assert message.to == ["grace@example.com"]
    assert client.get("/users/9999/preferences").status_code == 404


def test_system_settings_switch_off_emails(
    client: TestClient, ticket, delivery_client
) -> None:
    assert client.get("/system-settings/").json()["email_notifications_enabled"] is True

    response = client.put("/system-settings/", json={"email_notifications_enabled": False})
    assert response.status_code == 200
    assert response.json()["email_notifications_enabled"] is False

    patched = client.patch(f"/tickets/{ticket['id']}", json={"status": "Blocked - User"})
    [notification] = patched.json()["notifications"]
    assert notification["skipped"] is True
    assert delivery_client.messages == []


def test_attachment_metadata(client: TestClient, ticket) -> None:
    url = f"/tickets/{ticket['id']}/attachments/"
    response = client.post(
        url,
        json={
            "file_name": "screenshot.PNG",
            "file_path": f"tickets/{ticket['id']}/screenshot.png",
            "file_size": 250_000,
            "original_size": 1_000_000,
            "mime_type": "image/png",
        },
    )

    assert response.status_code == 201
    attachment = response.json()
    assert attachment["file_type"] == "png"
    assert attachment["compressed"] is True
    assert attachment["compression_ratio"] == 75

    rejected = client.post(
        url,
        json={
            "file_name": "tool.exe",
            "file_path": "tickets/tool.exe",
            "file_size": 10,
            "mime_type": "application/x-msdownload",
        },
    )
    assert rejected.status_code == 400

    assert [item["id"] for item in client.get(url).json()] == [attachment["id"]]
    assert client.delete(f"{url}{attachment['id']}").status_code == 204
    assert client.delete(f"{url}{attachment['id']}").status_code == 404
