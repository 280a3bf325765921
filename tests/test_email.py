"""Unit tests for the email delivery backends."""

from __future__ import annotations

import json
import types

import httpx
import pytest

from releasetrack.config import Settings
from releasetrack.infrastructure import email as email_module
from releasetrack.infrastructure.email import (
    NO_RECIPIENTS_ERROR,
    NO_VALID_RECIPIENTS_ERROR,
    EmailMessage,
    RelayDeliveryClient,
    SendGridDeliveryClient,
    build_delivery_client,
)

RELAY_URL = "http://relay.test/api/send-email"


def _message(to: list[str] | None = None) -> EmailMessage:
    return EmailMessage(
        sender="sender@example.com",
        to=["user@example.com"] if to is None else to,
        subject="Subject",
        html="<p>Body</p>",
        text="Body",
    )


class _RecordingSendGridClient:
    """Stand-in for ``SendGridAPIClient`` returning an accepted response."""

    sent: list = []

    def __init__(self, api_key: str):
        self.api_key = api_key

    def send(self, message):
        type(self).sent.append(message)
        return types.SimpleNamespace(
            status_code=202, body=None, headers={"X-Message-Id": "abc123"}
        )


def test_sendgrid_without_api_key_is_not_sent(monkeypatch: pytest.MonkeyPatch) -> None:
    """Missing configuration should fail without calling SendGrid."""

    def _unexpected(api_key):
        raise AssertionError("SendGrid must not be called")

    monkeypatch.setattr(email_module, "SendGridAPIClient", _unexpected)
    client = SendGridDeliveryClient(None, "sender@example.com")

    result = client.send(_message())

    assert result.success is False
    assert "not configured" in result.error


def test_sendgrid_success_reports_message_id(monkeypatch: pytest.MonkeyPatch) -> None:
    _RecordingSendGridClient.sent = []
    monkeypatch.setattr(email_module, "SendGridAPIClient", _RecordingSendGridClient)
    client = SendGridDeliveryClient("SG.fake", "sender@example.com")

    result = client.send(_message(["a@example.com", "broken", "b@example.com"]))

    assert result.success is True
    assert result.data["status_code"] == 202
    assert result.data["message_id"] == "abc123"
    assert result.data["recipients"] == ["a@example.com", "b@example.com"]
    assert len(_RecordingSendGridClient.sent) == 1


def test_sendgrid_sends_each_address_once(monkeypatch: pytest.MonkeyPatch) -> None:
    _RecordingSendGridClient.sent = []
    monkeypatch.setattr(email_module, "SendGridAPIClient", _RecordingSendGridClient)
    client = SendGridDeliveryClient("SG.fake", "sender@example.com")

    result = client.send(_message(["Bob@example.com", "bob@example.com", "ann@example.com"]))

    assert result.success is True
    assert result.data["recipients"] == ["Bob@example.com", "ann@example.com"]


def test_sendgrid_logs_forbidden_error(monkeypatch: pytest.MonkeyPatch, caplog) -> None:
    """Forbidden responses from SendGrid should surface meaningful log details."""

    class FakeForbiddenError(Exception):
        status_code = 403
        body = json.dumps(
            {
                "errors": [
                    {
                        "message": "The provided authorization grant is invalid.",
                        "help": "https://sendgrid.com/docs/for-developers/sending-email/api-getting-started/",
                    }
                ]
            }
        ).encode()

    class FailingClient(_RecordingSendGridClient):
        def send(self, message):
            raise FakeForbiddenError()

    monkeypatch.setattr(email_module, "SendGridAPIClient", FailingClient)
    client = SendGridDeliveryClient("SG.fake", "sender@example.com")

    with caplog.at_level("ERROR"):
        result = client.send(_message())

    assert result.success is False
    assert "status 403" in result.error
    assert "status 403" in caplog.text
    assert "authorization grant is invalid" in caplog.text


def test_sendgrid_non_success_status_is_a_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    class RejectingClient(_RecordingSendGridClient):
        def send(self, message):
            return types.SimpleNamespace(
                status_code=400,
                body=b'{"errors": [{"message": "Invalid from address"}]}',
                headers={},
            )

    monkeypatch.setattr(email_module, "SendGridAPIClient", RejectingClient)
    client = SendGridDeliveryClient("SG.fake", "sender@example.com")

    result = client.send(_message())

    assert result.success is False
    assert result.error == "SendGrid responded with status 400: Invalid from address"


@pytest.mark.parametrize(
    ("recipients", "expected_error"),
    [
        ([], NO_RECIPIENTS_ERROR),
        (["not-an-address", None], NO_VALID_RECIPIENTS_ERROR),
    ],
)
def test_clients_reject_unusable_recipients(recipients, expected_error) -> None:
    sendgrid = SendGridDeliveryClient("SG.fake", "sender@example.com")
    relay = RelayDeliveryClient(
        RELAY_URL,
        client=httpx.Client(transport=httpx.MockTransport(lambda request: pytest.fail())),
    )

    for client in (sendgrid, relay):
        result = client.send(_message(recipients))
        assert result.success is False
        assert result.error == expected_error


def test_relay_posts_payload_and_returns_data() -> None:
    captured: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["payload"] = json.loads(request.content)
        return httpx.Response(200, json={"success": True, "data": {"status_code": 202}})

    client = RelayDeliveryClient(
        RELAY_URL, client=httpx.Client(transport=httpx.MockTransport(handler))
    )

    result = client.send(_message(["a@example.com", "nope"]))

    assert result.success is True
    assert result.data == {"status_code": 202}
    assert captured["url"] == RELAY_URL
    assert captured["payload"] == {
        "from": "sender@example.com",
        "to": ["a@example.com"],
        "subject": "Subject",
        "html": "<p>Body</p>",
        "text": "Body",
    }


def test_relay_error_status_is_reported_not_raised() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            500, json={"success": False, "error": "Email provider API key is not configured"}
        )

    client = RelayDeliveryClient(
        RELAY_URL, client=httpx.Client(transport=httpx.MockTransport(handler))
    )

    result = client.send(_message())

    assert result.success is False
    assert result.error == (
        "Email relay responded with status 500: Email provider API key is not configured"
    )


def test_relay_unreachable_is_reported_not_raised() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = RelayDeliveryClient(
        RELAY_URL, client=httpx.Client(transport=httpx.MockTransport(handler))
    )

    result = client.send(_message())

    assert result.success is False
    assert result.error.startswith("Email relay unreachable")


def test_build_delivery_client_follows_delivery_mode() -> None:
    direct = build_delivery_client(Settings(sendgrid_api_key="SG.fake"))
    relay = build_delivery_client(
        Settings(email_delivery_mode="relay", relay_url=RELAY_URL, relay_timeout_seconds=2.5)
    )

    assert isinstance(direct, SendGridDeliveryClient)
    assert direct.is_configured
    assert isinstance(relay, RelayDeliveryClient)
    assert relay.url == RELAY_URL
    assert relay.timeout == 2.5
