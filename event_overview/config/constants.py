"""Application constants and enumerations."""

from ..models.event import EventStatus, EventType, Vendor

# All supported event types
EVENT_TYPES = list(EventType)

# Known vendor/platform providers
KNOWN_VENDORS = list(Vendor)

EVENT_STATUSES = list(EventStatus)

# Statuses considered as "active" (non-historical)
ACTIVE_EVENT_STATUSES = frozenset({
    EventStatus.UPCOMING,
    EventStatus.OPEN_FOR_REGISTRATION,
    EventStatus.REGISTRATION_CLOSED,
    EventStatus.ONGOING,
    EventStatus.IN_REVIEW,
    EventStatus.POSTPONED,
})

# Statuses considered as "historical"
HISTORICAL_EVENT_STATUSES = frozenset({
    EventStatus.COMPLETED,
    EventStatus.CANCELLED,
})

# Sentinel used by filters for "no constraint"
FILTER_ALL = 'All'

# Pagination
DEFAULT_PAGE_SIZE = 12
MAX_PAGE_SIZE = 50

# Key of the local event cache
EVENT_CACHE_STORAGE_KEY = 'event-overview-data'
