"""Health check routes for the FastAPI application."""

from fastapi import APIRouter, Depends

from ... import __version__
from ...config.environment import ENVIRONMENT
from ...store import EventStore
from ..deps import get_event_store

router = APIRouter(tags=["health"])


@router.get("/")
async def health_check(store: EventStore = Depends(get_event_store)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "environment": ENVIRONMENT,
        "version": __version__,
        "mode": "live" if store.is_ready() else "mock",
        "events": len(store.events),
        "error": store.error,
    }
