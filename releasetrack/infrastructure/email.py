"""Delivery backends for transactional email: SendGrid directly or the local relay."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

import httpx
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from releasetrack.config import Settings
from releasetrack.utils import deliverable_addresses

logger = logging.getLogger(__name__)

NO_RECIPIENTS_ERROR = "No recipients provided"
NO_VALID_RECIPIENTS_ERROR = "No valid email addresses provided"


@dataclass
class EmailMessage:
    """A rendered email ready to be handed to a delivery backend."""

    sender: str
    to: list[str]
    subject: str
    html: str
    text: str | None = None


@dataclass
class DeliveryResult:
    """Uniform ``{success, data|error}`` outcome shared by every backend."""

    success: bool
    data: dict[str, Any] = field(default_factory=dict)
    error: str | None = None


class EmailDeliveryClient(Protocol):
    """Capability to submit one email, making exactly one attempt."""

    name: str

    def send(self, message: EmailMessage) -> DeliveryResult:
        """Submit ``message`` and report the outcome without raising."""


def _prepare_recipients(message: EmailMessage) -> tuple[list[str], str | None]:
    """Return the deliverable addresses of ``message`` or a validation error."""

    if not message.to:
        return [], NO_RECIPIENTS_ERROR
    recipients = deliverable_addresses(message.to)
    if not recipients:
        return [], NO_VALID_RECIPIENTS_ERROR
    return recipients, None


def _sendgrid_error_messages(payload: Any) -> list[str]:
    if isinstance(payload, list):
        return [str(item) for item in payload]
    if not isinstance(payload, dict):
        return []
    messages = []
    for item in payload.get("errors") or []:
        if isinstance(item, dict) and item.get("message"):
            help_link = item.get("help")
            messages.append(
                f"{item['message']} (help: {help_link})" if help_link else str(item["message"])
            )
    return messages or [json.dumps(payload, default=str)]


def _describe_sendgrid_failure(status_code: Any, body: Any) -> str:
    """Log a rejected SendGrid call and return a short description of it.

    ``body`` may be raw bytes, a JSON string or already decoded JSON; the
    ``errors[].message`` entries SendGrid returns are joined when present.
    """

    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if isinstance(body, str):
        try:
            body = json.loads(body) if body.strip() else None
        except json.JSONDecodeError:
            body = body.strip()
    details = body if isinstance(body, str) else "; ".join(_sendgrid_error_messages(body))

    if status_code and details:
        logger.error("SendGrid API request failed with status %s: %s", status_code, details)
        return f"SendGrid responded with status {status_code}: {details}"
    if status_code:
        logger.error("SendGrid API request failed with status %s", status_code)
        return f"SendGrid responded with status {status_code}"
    if details:
        logger.error("SendGrid API request failed: %s", details)
    return details


def _response_header(response: Any, name: str) -> str | None:
    headers = getattr(response, "headers", None)
    if headers is None:
        return None
    try:
        return headers.get(name)
    except AttributeError:
        return None


class SendGridDeliveryClient:
    """Submit emails straight to SendGrid using the official SDK."""

    name = "sendgrid"

    def __init__(self, api_key: str | None, sender: str) -> None:
        self.api_key = api_key
        self.sender = sender

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.sender)

    def send(self, message: EmailMessage) -> DeliveryResult:
        recipients, error = _prepare_recipients(message)
        if error:
            logger.warning("Email '%s' not sent: %s", message.subject, error)
            return DeliveryResult(success=False, error=error)

        if not self.is_configured:
            logger.info("SendGrid configuration incomplete; skipping email delivery")
            return DeliveryResult(success=False, error="SendGrid API key is not configured")

        mail = Mail(
            from_email=message.sender or self.sender,
            to_emails=recipients,
            subject=message.subject,
            html_content=message.html,
            plain_text_content=message.text,
        )

        try:
            response = SendGridAPIClient(self.api_key).send(mail)
        except Exception as exc:
            error = _describe_sendgrid_failure(
                getattr(exc, "status_code", None), getattr(exc, "body", None)
            )
            if not error:
                logger.exception("Error sending email via SendGrid: %s", exc)
                error = str(exc) or exc.__class__.__name__
            return DeliveryResult(success=False, error=error)

        status_code = getattr(response, "status_code", None)
        if not isinstance(status_code, int) or not 200 <= status_code < 300:
            return DeliveryResult(
                success=False,
                error=_describe_sendgrid_failure(status_code, getattr(response, "body", None))
                or f"SendGrid responded with status {status_code}",
            )

        logger.info(
            "Email '%s' accepted by SendGrid for %d recipient(s)",
            message.subject,
            len(recipients),
        )
        return DeliveryResult(
            success=True,
            data={
                "status_code": status_code,
                "message_id": _response_header(response, "X-Message-Id"),
                "recipients": recipients,
            },
        )


class RelayDeliveryClient:
    """POST emails to the relay process, which forwards them to the provider."""

    name = "relay"

    def __init__(
        self,
        url: str,
        *,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._client = client

    def _post(self, payload: dict[str, Any]) -> httpx.Response:
        options: dict[str, Any] = {"json": payload}
        if self.timeout is not None:
            options["timeout"] = self.timeout
        if self._client is not None:
            return self._client.post(self.url, **options)
        with httpx.Client() as client:
            return client.post(self.url, **options)

    def send(self, message: EmailMessage) -> DeliveryResult:
        recipients, error = _prepare_recipients(message)
        if error:
            logger.warning("Email '%s' not sent: %s", message.subject, error)
            return DeliveryResult(success=False, error=error)

        payload: dict[str, Any] = {
            "from": message.sender,
            "to": recipients,
            "subject": message.subject,
            "html": message.html,
        }
        if message.text:
            payload["text"] = message.text

        try:
            response = self._post(payload)
        except httpx.HTTPError as exc:
            logger.error("Email relay request to %s failed: %s", self.url, exc)
            return DeliveryResult(success=False, error=f"Email relay unreachable: {exc}")

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if not response.is_success:
            detail = body.get("error") or response.text or response.reason_phrase
            logger.error(
                "Email relay responded with status %s: %s", response.status_code, detail
            )
            return DeliveryResult(
                success=False,
                error=f"Email relay responded with status {response.status_code}: {detail}",
            )

        logger.info(
            "Email '%s' accepted by relay for %d recipient(s)",
            message.subject,
            len(recipients),
        )
        data = body.get("data")
        return DeliveryResult(success=True, data=data if isinstance(data, dict) else {})


def build_delivery_client(settings: Settings) -> EmailDeliveryClient:
    """Return the delivery backend selected by ``EMAIL_DELIVERY_MODE``."""

    if settings.email_delivery_mode == "relay":
        return RelayDeliveryClient(settings.relay_url, timeout=settings.relay_timeout_seconds)
    return SendGridDeliveryClient(settings.sendgrid_api_key, settings.sendgrid_sender)


__all__ = [
    "DeliveryResult",
    "EmailDeliveryClient",
    "EmailMessage",
    "NO_RECIPIENTS_ERROR",
    "NO_VALID_RECIPIENTS_ERROR",
    "RelayDeliveryClient",
    "SendGridDeliveryClient",
    "build_delivery_client",
]
