"""Event store package."""

from .cache import EventCache
from .event_store import EventStore, create_event_store
from .mock_data import MOCK_EVENTS

__all__ = ['EventCache', 'EventStore', 'create_event_store', 'MOCK_EVENTS']
