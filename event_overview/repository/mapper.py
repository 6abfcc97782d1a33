"""Mapping between storage rows and domain events.

Storage rows use snake_case column names and None for absent values. The
domain Event defaults collections (tags is never None) and uses enums.
"""

import logging
import uuid
from enum import Enum
from typing import Any, Dict, Type, TypeVar

from ..models.event import (
    DATE_FIELDS,
    Event,
    EventStatus,
    EventType,
    LocationType,
    OrganizerType,
)
from ..utils.timezone import now_utc, to_iso_string

logger = logging.getLogger(__name__)

E = TypeVar('E', bound=Enum)

EventRow = Dict[str, Any]

# Optional text fields copied as-is (None stays None)
_OPTIONAL_TEXT_FIELDS = (
    'subtitle',
    'vendor',
    'location_detail',
    'poster_url',
    'postponed_reason',
    'organizer_avatar_url',
    'organizer_contact',
    'registration_url',
    'official_site_url',
    'livestream_url',
    'recording_url',
)


def _to_enum(enum_cls: Type[E], value: Any, default: E, field_name: str) -> E:
    """Read an enum column, falling back to a default for unknown values."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        logger.warning(f"Unknown {field_name} value {value!r}, using {default.value}")
        return default


def row_to_event(row: EventRow) -> Event:
    """
    Map a storage row to a domain Event.

    Args:
        row: Dictionary with snake_case storage columns

    Returns:
        Event: Domain event; missing tags become [] and a NULL is_postponed becomes False
    """
    values = {
        'id': row.get('id'),
        'title': row.get('title') or '',
        'description': row.get('description') or '',
        'event_type': _to_enum(EventType, row.get('event_type'), EventType.OTHER, 'event_type'),
        'location_type': _to_enum(LocationType, row.get('location_type'), LocationType.ONLINE, 'location_type'),
        'status': _to_enum(EventStatus, row.get('status'), EventStatus.UPCOMING, 'status'),
        'organizer_name': row.get('organizer_name') or '',
        'organizer_type': _to_enum(OrganizerType, row.get('organizer_type'), OrganizerType.INDIVIDUAL, 'organizer_type'),
        'tags': list(row.get('tags') or []),
        'is_postponed': bool(row.get('is_postponed')),
        'created_at': row.get('created_at'),
        'updated_at': row.get('updated_at'),
    }
    for name in _OPTIONAL_TEXT_FIELDS + DATE_FIELDS:
        values[name] = row.get(name)

    return Event(**values)


def event_to_row(event: Event) -> EventRow:
    """
    Map a domain Event (or creation input) to an insertable storage row.

    A missing id gets a random UUID and missing timestamps default to now.
    Date fields are normalized to ISO strings; invalid dates become None.

    Args:
        event: Event whose id and timestamps may still be None

    Returns:
        EventRow: Row dictionary ready for insertion
    """
    now = to_iso_string(now_utc())

    row = {
        'id': event.id or str(uuid.uuid4()),
        'title': event.title,
        'description': event.description,
        'event_type': EventType(event.event_type).value,
        'location_type': LocationType(event.location_type).value,
        'status': EventStatus(event.status).value,
        'organizer_name': event.organizer_name,
        'organizer_type': OrganizerType(event.organizer_type).value,
        'created_at': event.created_at or now,
        'updated_at': event.updated_at or now,
        'tags': list(event.tags or []),
        'is_postponed': bool(event.is_postponed),
    }
    for name in _OPTIONAL_TEXT_FIELDS:
        row[name] = getattr(event, name)
    for name in DATE_FIELDS:
        row[name] = to_iso_string(getattr(event, name))

    return row
