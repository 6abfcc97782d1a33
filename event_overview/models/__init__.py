"""Models package initialization."""

from .base import Base
from .event import (
    Event,
    EventStatus,
    EventType,
    LocationType,
    OrganizerType,
    Vendor,
    VendorValue,
    classify_vendor,
)
from .record import EventRecord

__all__ = [
    'Base',
    'Event',
    'EventRecord',
    'EventStatus',
    'EventType',
    'LocationType',
    'OrganizerType',
    'Vendor',
    'VendorValue',
    'classify_vendor',
]
