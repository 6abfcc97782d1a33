"""Event filtering and categorization.

Categorization works on the stored status only; it never looks at dates.
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .config.constants import (
    ACTIVE_EVENT_STATUSES,
    DEFAULT_PAGE_SIZE,
    FILTER_ALL,
    HISTORICAL_EVENT_STATUSES,
)
from .models.event import Event, EventStatus, EventType, Vendor, classify_vendor
from .pagination import PaginatedResult, paginate
from .utils.timezone import parse_instant

# Secondary field searched alongside title and tags
SEARCH_DESCRIPTION = 'description'
SEARCH_ORGANIZER = 'organizer_name'


@dataclass
class EventFilterCriteria:
    """
    Filter options. None or "All" means no constraint for that criterion.

    Fields:
        status: Only events with this stored status
        event_type: Only events of this type
        vendor: Known vendor bucket or exact free-text vendor name
        search: Case-insensitive text matched against title, the secondary field and tags
        search_field: Secondary field for text search ('description' or 'organizer_name')
    """
    status: Optional[Union[EventStatus, str]] = None
    event_type: Optional[Union[EventType, str]] = None
    vendor: Optional[Union[Vendor, str]] = None
    search: Optional[str] = None
    search_field: str = SEARCH_DESCRIPTION


def _is_set(value) -> bool:
    return value is not None and value != FILTER_ALL and value != ''


def is_active_event(event: Event) -> bool:
    """Check if an event is considered active (not completed or cancelled)."""
    return event.status in ACTIVE_EVENT_STATUSES


def is_historical_event(event: Event) -> bool:
    """Check if an event is historical (completed or cancelled)."""
    return event.status in HISTORICAL_EVENT_STATUSES


def categorize_events(events: Iterable[Event]) -> Tuple[List[Event], List[Event]]:
    """
    Separate events into active and historical lists.

    Every event lands in exactly one list and input order is preserved.

    Returns:
        Tuple containing:
        - List of active events
        - List of historical events
    """
    active = []
    historical = []

    for event in events:
        if is_historical_event(event):
            historical.append(event)
        else:
            active.append(event)

    return active, historical


def _matches_vendor(event: Event, vendor: Union[Vendor, str]) -> bool:
    try:
        bucket = Vendor(vendor)
    except ValueError:
        # Free-text vendor names only match exactly
        return event.vendor == vendor
    return classify_vendor(event.vendor) == bucket


def _matches_search(event: Event, query: str, search_field: str) -> bool:
    secondary = getattr(event, search_field, None) or ''
    return (
        query in event.title.lower()
        or query in secondary.lower()
        or any(query in tag.lower() for tag in event.tags)
    )


def filter_events(events: Iterable[Event], criteria: EventFilterCriteria) -> List[Event]:
    """
    Filter events by status, type, vendor and search text.

    Criteria compose with AND; within the search text any matching field is
    enough. Relative order of the input is preserved.

    Args:
        events: Events to filter
        criteria: Filter options

    Returns:
        List[Event]: Matching events
    """
    filtered = list(events)

    if _is_set(criteria.status):
        status = EventStatus(criteria.status)
        filtered = [e for e in filtered if e.status == status]

    if _is_set(criteria.event_type):
        event_type = EventType(criteria.event_type)
        filtered = [e for e in filtered if e.event_type == event_type]

    if _is_set(criteria.vendor):
        filtered = [e for e in filtered if _matches_vendor(e, criteria.vendor)]

    if criteria.search and criteria.search.strip():
        query = criteria.search.strip().lower()
        filtered = [e for e in filtered if _matches_search(e, query, criteria.search_field)]

    return filtered


def _timestamp(value: Optional[str]) -> Optional[float]:
    parsed = parse_instant(value)
    return parsed.timestamp() if parsed is not None else None


def sort_active_events(events: Iterable[Event]) -> List[Event]:
    """Sort by event start, soonest first. Events without a start go last."""
    def key(event: Event) -> float:
        ts = _timestamp(event.event_start)
        return ts if ts is not None else math.inf
    return sorted(events, key=key)


def sort_historical_events(events: Iterable[Event]) -> List[Event]:
    """Sort by event end, most recent first. Events without an end go last."""
    def key(event: Event) -> float:
        ts = _timestamp(event.event_end)
        return ts if ts is not None else 0.0
    return sorted(events, key=key, reverse=True)


def sort_events_by_start(events: Iterable[Event]) -> List[Event]:
    """Sort by event start, falling back to the creation time when there is none."""
    def key(event: Event) -> float:
        ts = _timestamp(event.event_start)
        if ts is None:
            ts = _timestamp(event.created_at)
        return ts if ts is not None else math.inf
    return sorted(events, key=key)


def get_active_events_paginated(
    events: Iterable[Event],
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE
) -> PaginatedResult[Event]:
    """Get one page of active events, upcoming first."""
    active = [e for e in events if is_active_event(e)]
    return paginate(sort_active_events(active), page, page_size)


def get_historical_events_paginated(
    events: Iterable[Event],
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE
) -> PaginatedResult[Event]:
    """Get one page of historical events, most recently ended first."""
    historical = [e for e in events if is_historical_event(e)]
    return paginate(sort_historical_events(historical), page, page_size)


@dataclass(frozen=True)
class EventStats:
    total: int
    active: int
    historical: int
    by_status: Dict[EventStatus, int]

    def to_dict(self) -> Dict:
        return {
            'total': self.total,
            'active': self.active,
            'historical': self.historical,
            'by_status': {status.value: count for status, count in self.by_status.items()},
        }


def get_event_stats(events: Iterable[Event]) -> EventStats:
    """Count events overall, per category and per status."""
    by_status: Dict[EventStatus, int] = {}
    total = active = historical = 0

    for event in events:
        total += 1
        by_status[event.status] = by_status.get(event.status, 0) + 1
        if is_active_event(event):
            active += 1
        else:
            historical += 1

    return EventStats(total=total, active=active, historical=historical, by_status=by_status)
