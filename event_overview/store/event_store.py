"""In-session event store.

The store owns the canonical event collection for a process. It is created
once (see ``create_event_store``) and handed to whoever needs it.
"""

import asyncio
import logging
from typing import Callable, Iterable, List, Optional

from ..config.settings import Config, is_repository_configured
from ..models.event import Event
from ..repository import EventRepository, create_event_repository
from .cache import EventCache
from .mock_data import MOCK_EVENTS

logger = logging.getLogger(__name__)

Mutation = Callable[[List[Event]], List[Event]]


def _insert_front(event: Event) -> Mutation:
    def apply(events: List[Event]) -> List[Event]:
        return [event] + [existing for existing in events if existing.id != event.id]
    return apply


def _replace(event: Event) -> Mutation:
    def apply(events: List[Event]) -> List[Event]:
        return [event if existing.id == event.id else existing for existing in events]
    return apply


def _remove(event_id: str) -> Mutation:
    def apply(events: List[Event]) -> List[Event]:
        return [existing for existing in events if existing.id != event_id]
    return apply


class EventStore:
    """
    Holds the event collection and keeps it in sync with the repository.

    Local mutations are applied immediately. Mutations made while a refresh
    is in flight are also queued and replayed onto the refreshed collection,
    so a full-collection refresh never drops a local add or update.

    Attributes:
        events: Current collection, newest local additions first
        is_loading: True until the first data (cache, repository or fallback) is available
        is_syncing: True while a refresh is in flight
        error: Message of the last failed refresh, None after a successful one
    """

    def __init__(
        self,
        repository: Optional[EventRepository] = None,
        cache: Optional[EventCache] = None,
        fallback_events: Optional[Iterable[Event]] = None,
        is_ready: Optional[Callable[[], bool]] = None
    ):
        self._repository = repository
        self._cache = cache
        self._fallback = list(fallback_events) if fallback_events is not None else list(MOCK_EVENTS)
        self._is_ready = is_ready or (lambda: self._repository is not None)

        self.events: List[Event] = []
        self.is_loading = True
        self.is_syncing = False
        self.error: Optional[str] = None

        self._initialized = False
        self._pending: List[Mutation] = []

    @property
    def repository(self) -> Optional[EventRepository]:
        return self._repository

    def is_ready(self) -> bool:
        """Whether the repository can be used (live mode) or the fallback applies."""
        return self._repository is not None and self._is_ready()

    def _set_events(self, events: List[Event]) -> None:
        self.events = events
        self._initialized = True

    def _persist(self) -> None:
        if self._cache is not None:
            self._cache.save(self.events)

    def _mutate(self, mutation: Mutation) -> None:
        self._set_events(mutation(self.events))
        if self.is_syncing:
            self._pending.append(mutation)
        self._persist()

    def hydrate(self) -> bool:
        """
        Load the cached collection before the first refresh.

        Returns:
            bool: True if cached events were loaded
        """
        if self._cache is None:
            return False
        cached = self._cache.load()
        if not cached:
            return False
        self._set_events(cached)
        self.is_loading = False
        logger.info(f"Loaded {len(cached)} events from cache")
        return True

    async def refresh(self) -> None:
        """
        Replace the collection with the repository's current events.

        Only one refresh runs at a time; calling this while one is in flight
        does nothing. Failures never raise: the previous data is kept and the
        message is stored in ``error``.
        """
        if self.is_syncing:
            logger.debug("Refresh already in progress, skipping")
            return

        if not self.is_ready():
            if not self._initialized:
                logger.info(f"No repository configured, using {len(self._fallback)} bundled events")
                self._set_events(list(self._fallback))
            self.error = None
            self.is_loading = False
            return

        self.is_syncing = True
        try:
            fresh = await asyncio.to_thread(self._repository.list_events)
        except Exception as e:
            self.error = str(e) or "Failed to fetch events"
            logger.error(f"Failed to refresh events: {self.error}")
            if not self._initialized:
                self._set_events(list(self._fallback))
        else:
            for mutation in self._pending:
                fresh = mutation(fresh)
            self._set_events(fresh)
            self._persist()
            self.error = None
            logger.info(f"Refreshed {len(fresh)} events")
        finally:
            self._pending.clear()
            self.is_loading = False
            self.is_syncing = False

    def add(self, event: Event) -> None:
        """Insert an event at the front, replacing any event with the same id."""
        self._mutate(_insert_front(event))

    def update(self, event: Event) -> None:
        """Replace the event with the same id; unknown ids leave the collection unchanged."""
        self._mutate(_replace(event))

    def remove(self, event_id: str) -> None:
        self._mutate(_remove(event_id))

    def get_by_id(self, event_id: str) -> Optional[Event]:
        """Look up an event by id, None if it is not in the collection."""
        return next((event for event in self.events if event.id == event_id), None)


def create_event_store(config=Config) -> EventStore:
    """Build the store from configuration: repository, readiness probe and cache."""
    return EventStore(
        repository=create_event_repository(config),
        cache=EventCache(config.EVENT_CACHE_DIR),
        is_ready=lambda: is_repository_configured(config),
    )
