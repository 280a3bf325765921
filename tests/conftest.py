"""Shared fixtures for the ReleaseTrack Pro test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Ensure the project root (which contains ``main`` and ``releasetrack``) is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

# A shared in-memory database; must be set before the engine is created on import.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("EMAIL_DELIVERY_MODE", None)
os.environ.pop("NOTIFY_ACTOR", None)
os.environ.pop("SENDGRID_API_KEY", None)

from releasetrack.config import reset_settings_cache  # noqa: E402
from releasetrack.domain.entities import User  # noqa: E402
from releasetrack.infrastructure.email import DeliveryResult, EmailMessage  # noqa: E402

reset_settings_cache()


class RecordingDeliveryClient:
    """In-memory delivery backend that records every message it is given."""

    name = "recording"

    def __init__(self, results: list[DeliveryResult] | None = None) -> None:
        self.messages: list[EmailMessage] = []
        self.results = list(results or [])

    def send(self, message: EmailMessage) -> DeliveryResult:
        self.messages.append(message)
        if self.results:
            return self.results.pop(0)
        return DeliveryResult(success=True, data={"id": f"msg-{len(self.messages)}"})


@pytest.fixture()
def delivery_client() -> RecordingDeliveryClient:
    return RecordingDeliveryClient()


@pytest.fixture()
def make_delivery_client():
    """Return a factory for clients that replay the given delivery results."""

    return RecordingDeliveryClient


@pytest.fixture()
def settings_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Allow a test to change environment settings and reload them."""

    reset_settings_cache()
    yield monkeypatch
    monkeypatch.undo()
    reset_settings_cache()


@pytest.fixture()
def session():
    """Return a session bound to freshly created tables."""

    from releasetrack.infrastructure import database, models  # noqa: F401

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.Base.metadata.create_all(bind=database.engine)

    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_user(session):
    """Create users through the use case, numbering their addresses."""

    from releasetrack.application.use_cases.users import create_user

    def _make_user(first_name: str, email: str | None = None, last_name: str = "") -> User:
        return create_user(
            session,
            first_name=first_name,
            last_name=last_name,
            email=email or f"{first_name.lower()}@example.com",
        )

    return _make_user


@pytest.fixture()
def client(delivery_client: RecordingDeliveryClient):
    """Return a test client for the main API with email delivery recorded."""

    from fastapi.testclient import TestClient

    from main import create_app
    from releasetrack.infrastructure import database
    from releasetrack.interfaces.api.dependencies import get_delivery_client

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)

    app = create_app()
    app.dependency_overrides[get_delivery_client] = lambda: delivery_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
