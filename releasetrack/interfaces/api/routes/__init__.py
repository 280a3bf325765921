from fastapi import FastAPI

from .attachments import router as attachments_router
from .comments import router as comments_router
from .metadata_items import router as metadata_items_router
from .notification_logs import router as notification_logs_router
from .relay import router as relay_router
from .releases import router as releases_router
from .system_settings import router as system_settings_router
from .tickets import router as tickets_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the main FastAPI application."""

    app.include_router(users_router)
    app.include_router(releases_router)
    app.include_router(tickets_router)
    app.include_router(comments_router)
    app.include_router(attachments_router)
    app.include_router(metadata_items_router)
    app.include_router(notification_logs_router)
    app.include_router(system_settings_router)


def register_relay_routes(app: FastAPI) -> None:
    """Register the email relay endpoints on the relay application."""

    app.include_router(relay_router)
