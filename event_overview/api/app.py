"""FastAPI application configuration module."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Internal imports
from ..config.environment import IS_PRODUCTION_ENVIRONMENT  # Environment must be imported first
from ..config.cors import CORS_CONFIG
from .. import __version__
from ..store import EventStore, create_event_store
from .routes import events, health

logger = logging.getLogger(__name__)


def create_application(store: Optional[EventStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Event store to serve; built from configuration when omitted
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load cached events, then refresh from the repository."""
        event_store = app.state.event_store
        event_store.hydrate()
        await event_store.refresh()
        if event_store.error:
            logger.warning(f"Started with stale or bundled events: {event_store.error}")
        else:
            logger.info(f"Started with {len(event_store.events)} events")
        yield

    app = FastAPI(
        title="Event Overview API",
        description="Community tech events with lifecycle status, filtering and pagination",
        version=__version__,
        docs_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/docs',
        redoc_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/redoc',
        lifespan=lifespan
    )
    app.state.event_store = store if store is not None else create_event_store()

    # Configure CORS
    app.add_middleware(CORSMiddleware, **CORS_CONFIG)

    # Include health check router without prefix
    app.include_router(health.router)

    # Include routers with prefix
    app.include_router(events.router, prefix="/api")

    return app
