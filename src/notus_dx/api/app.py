"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notus_dx import __version__
from notus_dx.config import Settings, get_settings
from notus_dx.storage.database import Database
from notus_dx.webhooks.dispatcher import WebhookDispatcher

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    database: Optional[Database] = app.state.database
    # Startup
    if database is not None:
        await database.init()
        logger.info("Webhook event store initialized")
    if not app.state.settings.has_webhook_secret:
        logger.warning("WEBHOOK_SECRET not set - webhook deliveries will be rejected")
    yield
    # Shutdown
    if database is not None:
        await database.close()


def create_app(
    settings: Optional[Settings] = None,
    dispatcher: Optional[WebhookDispatcher] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Defaults to the cached environment settings
        dispatcher: Event dispatcher; applications pass one with their handlers
        database: Event store; created from ``database_url`` when persistence
            is enabled and none is given
    """
    settings = settings or get_settings()

    if database is None and settings.persist_webhook_events:
        database = Database(settings.database_url)
    if dispatcher is None:
        dispatcher = WebhookDispatcher(
            database=database, persist_unknown=settings.persist_unknown_events
        )

    app = FastAPI(
        title="Notus DX API",
        description="Signed webhook receiver for the Notus smart wallet API",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.dispatcher = dispatcher

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routes
    from notus_dx.api.routers import webhook
    from notus_dx.api.routes import health

    app.include_router(health.router, tags=["Health"])
    app.include_router(webhook.router)

    return app
