"""Request dependencies shared by the routers."""

from typing import Optional

from fastapi import Request

from ..repository import EventRepository
from ..store import EventStore


def get_event_store(request: Request) -> EventStore:
    """Get the event store attached to the application."""
    return request.app.state.event_store


def get_event_repository(request: Request) -> Optional[EventRepository]:
    """Get the configured repository, None when running on bundled data only."""
    store: EventStore = request.app.state.event_store
    return store.repository if store.is_ready() else None
