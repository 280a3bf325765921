"""Schemas for the email relay endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SUBJECT = "Notification from ReleaseTrack Pro"
DEFAULT_HTML = "<p>This is a notification from ReleaseTrack Pro.</p>"
DEFAULT_TEXT = "This is a notification from ReleaseTrack Pro."


class RelayEmailRequest(BaseModel):
    """Body accepted by ``POST /api/send-email``; ``to`` may be a string or a list."""

    sender: str | None = Field(default=None, alias="from")
    to: str | list[str] | None = None
    subject: str | None = None
    html: str | None = None
    text: str | None = None

    model_config = ConfigDict(populate_by_name=True)

    def recipients(self) -> list[str]:
        if self.to is None:
            return []
        if isinstance(self.to, str):
            return [self.to] if self.to.strip() else []
        return list(self.to)


class RelayEmailResponse(BaseModel):
    success: bool
    data: dict[str, Any] | None = None
    error: str | None = None


class RelayHealthRead(BaseModel):
    status: str
    message: str
    timestamp: datetime
    api_key_configured: bool
    from_email: str


__all__ = [
    "DEFAULT_HTML",
    "DEFAULT_SUBJECT",
    "DEFAULT_TEXT",
    "RelayEmailRequest",
    "RelayEmailResponse",
    "RelayHealthRead",
]
