"""Routes served by the email relay process.

The relay keeps the provider key out of browser clients: they POST the
rendered email here and the relay submits it to SendGrid once.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from releasetrack.config import get_settings
from releasetrack.infrastructure.email import EmailMessage, SendGridDeliveryClient
from releasetrack.interfaces.api.schemas import (
    RelayEmailRequest,
    RelayEmailResponse,
    RelayHealthRead,
)
from releasetrack.interfaces.api.schemas.relay import (
    DEFAULT_HTML,
    DEFAULT_SUBJECT,
    DEFAULT_TEXT,
)
from releasetrack.utils import deliverable_addresses, now_in_app_timezone

router = APIRouter(prefix="/api", tags=["relay"])
logger = logging.getLogger(__name__)


def get_relay_client() -> SendGridDeliveryClient:
    settings = get_settings()
    return SendGridDeliveryClient(settings.sendgrid_api_key, settings.sendgrid_sender)


def relay_error(status_code: int, error: str) -> JSONResponse:
    """Return the relay's ``{success: false, error}`` body with ``status_code``."""

    body = RelayEmailResponse(success=False, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.get("/health", response_model=RelayHealthRead)
def health() -> RelayHealthRead:
    """Report liveness and whether the provider key is configured."""

    settings = get_settings()
    return RelayHealthRead(
        status="ok",
        message="Email relay is running",
        timestamp=now_in_app_timezone(),
        api_key_configured=bool(settings.sendgrid_api_key),
        from_email=settings.sendgrid_sender,
    )


@router.post("/send-email", response_model=RelayEmailResponse)
def send_email(
    request: RelayEmailRequest,
    client: SendGridDeliveryClient = Depends(get_relay_client),
):
    """Forward one email to the provider.

    Returns 400 for a missing or invalid ``to`` and 500 when the provider is not
    configured or rejects the message.
    """

    recipients = request.recipients()
    if not recipients:
        return relay_error(status.HTTP_400_BAD_REQUEST, "Missing required field: to")

    valid = deliverable_addresses(recipients)
    if not valid:
        return relay_error(status.HTTP_400_BAD_REQUEST, "No valid email addresses provided")

    if not client.is_configured:
        logger.error("Email relay called without SENDGRID_API_KEY")
        return relay_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Email provider API key is not configured"
        )

    message = EmailMessage(
        sender=request.sender or client.sender,
        to=valid,
        subject=request.subject or DEFAULT_SUBJECT,
        html=request.html or DEFAULT_HTML,
        text=request.text or DEFAULT_TEXT,
    )
    logger.info("Relaying '%s' to %d recipient(s)", message.subject, len(valid))
    result = client.send(message)
    if not result.success:
        return relay_error(status.HTTP_500_INTERNAL_SERVER_ERROR, result.error or "Email delivery failed")

    return RelayEmailResponse(success=True, data=result.data)


__all__ = ["get_relay_client", "relay_error", "router"]
