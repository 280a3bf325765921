import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from releasetrack.config import get_settings
from releasetrack.infrastructure.database import engine, initialize_database
from releasetrack.interfaces.api.routes import register_relay_routes, register_routes
from releasetrack.interfaces.api.routes.relay import relay_error

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the tables on startup and release the connection pool on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the ReleaseTrack Pro API."""

    settings = get_settings()
    app = FastAPI(title="ReleaseTrack Pro API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    logger.info("Email delivery mode: %s", settings.email_delivery_mode)
    return app


async def _relay_validation_error(request: Request, exc: RequestValidationError):
    errors = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in exc.errors()
    )
    return relay_error(400, errors or "Invalid request body")


def create_relay_app() -> FastAPI:
    """Create the standalone email relay used by browser clients."""

    settings = get_settings()
    app = FastAPI(title="ReleaseTrack Pro email relay")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _relay_validation_error)

    register_relay_routes(app)
    if not settings.sendgrid_api_key:
        logger.warning("SENDGRID_API_KEY is not set; the relay will reject every email")
    return app


app = create_app()
