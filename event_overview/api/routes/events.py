"""Events router module."""

import logging
from enum import Enum
from typing import Dict, Optional, Type

from fastapi import APIRouter, Depends, HTTPException, Query

from ...config.constants import DEFAULT_PAGE_SIZE, FILTER_ALL, MAX_PAGE_SIZE
from ...filters import (
    SEARCH_DESCRIPTION,
    SEARCH_ORGANIZER,
    EventFilterCriteria,
    filter_events,
    get_active_events_paginated,
    get_event_stats,
    get_historical_events_paginated,
    sort_events_by_start,
)
from ...models.event import Event, EventStatus, EventType
from ...pagination import paginate
from ...repository import EventRepository, RepositoryError, RepositoryNotConfiguredError
from ...store import EventStore
from ...submission import submit_event
from ..deps import get_event_repository, get_event_store
from ..schemas import EventSubmissionRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["events"])

VIEWS = ('all', 'active', 'historical')
SEARCH_FIELDS = {'description': SEARCH_DESCRIPTION, 'organizer': SEARCH_ORGANIZER}


def _parse_enum(enum_cls: Type[Enum], value: Optional[str], name: str):
    if value is None or value == FILTER_ALL:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ', '.join(member.value for member in enum_cls)
        raise HTTPException(status_code=400, detail=f"Invalid {name} '{value}'. Expected one of: {allowed}")


def _serialize(event: Event) -> Dict:
    return event.to_dict()


@router.get("/events", response_model=Dict)
async def list_events(
    view: str = Query('all', description="all, active or historical"),
    status: Optional[str] = Query(None),
    event_type: Optional[str] = Query(None, alias="type"),
    vendor: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    search_field: str = Query('description', description="description or organizer"),
    page: int = Query(1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    store: EventStore = Depends(get_event_store)
):
    """Get a filtered page of events."""
    if view not in VIEWS:
        raise HTTPException(status_code=400, detail=f"Invalid view '{view}'. Expected one of: {', '.join(VIEWS)}")
    if search_field not in SEARCH_FIELDS:
        raise HTTPException(status_code=400, detail=f"Invalid search_field '{search_field}'")

    criteria = EventFilterCriteria(
        status=_parse_enum(EventStatus, status, 'status'),
        event_type=_parse_enum(EventType, event_type, 'type'),
        vendor=vendor if vendor != FILTER_ALL else None,
        search=search,
        search_field=SEARCH_FIELDS[search_field],
    )
    filtered = filter_events(store.events, criteria)

    if view == 'active':
        result = get_active_events_paginated(filtered, page, page_size)
    elif view == 'historical':
        result = get_historical_events_paginated(filtered, page, page_size)
    else:
        result = paginate(sort_events_by_start(filtered), page, page_size)

    return result.to_dict(_serialize)


@router.get("/events/stats", response_model=Dict)
async def event_stats(store: EventStore = Depends(get_event_store)):
    """Get event counts overall, per category and per status."""
    return get_event_stats(store.events).to_dict()


@router.post("/events/refresh", response_model=Dict)
async def refresh_events(store: EventStore = Depends(get_event_store)):
    """Reload events from the repository."""
    await store.refresh()
    return {
        "events": len(store.events),
        "error": store.error,
        "mode": "live" if store.is_ready() else "mock",
    }


@router.get("/events/{event_id}", response_model=Dict)
async def get_event(event_id: str, store: EventStore = Depends(get_event_store)):
    """Get a single event by ID."""
    event = store.get_by_id(event_id)
    if event is None:
        raise HTTPException(status_code=404, detail="Event not found")
    return _serialize(event)


@router.post("/events", response_model=Dict, status_code=201)
async def create_event(
    payload: EventSubmissionRequest,
    store: EventStore = Depends(get_event_store),
    repository: Optional[EventRepository] = Depends(get_event_repository)
):
    """Submit a new event."""
    try:
        created = await submit_event(payload.to_submission(), repository, store)
    except RepositoryNotConfiguredError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except RepositoryError as e:
        logger.error(f"Event submission failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    return _serialize(created)
