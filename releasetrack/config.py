"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_SENDER = "notifications@sfdctest.online"
DEFAULT_RELAY_PORT = 3002


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./releasetrack.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    sendgrid_api_key: str | None = Field(
        default=None,
        description="SendGrid API key used for sending transactional emails via the REST API",
    )
    sendgrid_sender: str = Field(
        default=DEFAULT_SENDER,
        description="Email address that will appear as the sender of notification emails",
        min_length=3,
    )
    email_delivery_mode: Literal["direct", "relay"] = Field(
        default="direct",
        description=(
            "How notification emails leave the API: 'direct' calls SendGrid, "
            "'relay' posts them to the email relay process"
        ),
    )
    relay_url: str = Field(
        default=f"http://localhost:{DEFAULT_RELAY_PORT}/api/send-email",
        description="Endpoint of the email relay used when EMAIL_DELIVERY_MODE=relay",
    )
    relay_port: int = Field(
        default=DEFAULT_RELAY_PORT,
        description="Port the email relay listens on",
        gt=0,
        lt=65536,
    )
    relay_timeout_seconds: float | None = Field(
        default=None,
        description="Optional timeout for relay requests; the HTTP client default applies when unset",
        gt=0,
    )
    notify_actor: bool = Field(
        default=False,
        description="Whether the user who triggered a ticket change also receives the email",
    )
    app_base_url: str = Field(
        default="http://localhost:3000",
        description="Base URL of the web client, used to build ticket links in emails",
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone name (or UTC offset) used for timestamps",
    )
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma separated list of origins allowed to call the API",
    )

    @model_validator(mode="after")
    def _validate_email_settings(self) -> "Settings":
        if "@" not in self.sendgrid_sender:
            raise ValueError("SENDGRID_SENDER must be a valid email address")
        if self.email_delivery_mode == "relay" and not self.relay_url:
            raise ValueError("RELAY_URL is required when EMAIL_DELIVERY_MODE is 'relay'")
        return self

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["DEFAULT_SENDER", "Settings", "get_settings", "reset_settings_cache"]
