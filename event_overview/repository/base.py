"""Base interface that all event repositories must implement."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.event import Event


class RepositoryError(Exception):
    """Raised when the event repository cannot complete an operation."""
    pass


class RepositoryNotConfiguredError(RepositoryError):
    """Raised when an operation needs a repository but none is configured."""
    pass


class EventRepository(ABC):
    """
    Base interface for event repositories.

    Each repository is responsible for:
    1. Reading the full event collection and single events from its storage
    2. Persisting new events, filling in id and timestamps when absent
    3. Signalling failure with RepositoryError, never with an empty result
    """

    @abstractmethod
    def list_events(self) -> List[Event]:
        """
        Fetch all events, ordered by event start.

        Raises:
            RepositoryError: If the events cannot be fetched
        """
        pass

    @abstractmethod
    def get_event_by_id(self, event_id: str) -> Optional[Event]:
        """
        Fetch a single event.

        Returns:
            Optional[Event]: The event, or None if no event has this id

        Raises:
            RepositoryError: If the lookup itself fails
        """
        pass

    @abstractmethod
    def create_event(self, event: Event) -> Event:
        """
        Persist a new event.

        Args:
            event: Event to store; id, created_at and updated_at may be None

        Returns:
            Event: The stored event as read back from storage

        Raises:
            RepositoryError: If the event cannot be stored
        """
        pass
