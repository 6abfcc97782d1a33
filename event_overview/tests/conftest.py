import threading
from typing import List, Optional

import pytest

from event_overview.db import Database, DatabaseConfig
from event_overview.models.event import Event, EventStatus, EventType, LocationType, OrganizerType
from event_overview.repository import EventRepository, RepositoryError, row_to_event, event_to_row
from event_overview.repository.sql import SQLEventRepository


def make_event(event_id: str = "evt_1", **overrides) -> Event:
    values = dict(
        id=event_id,
        title=f"Event {event_id}",
        description="A community event",
        event_type=EventType.MEETUP,
        location_type=LocationType.ONLINE,
        organizer_name="Dev Community",
        organizer_type=OrganizerType.COMMUNITY,
        created_at="2024-01-01T00:00:00.000Z",
        updated_at="2024-01-01T00:00:00.000Z",
    )
    values.update(overrides)
    return Event(**values)


class FakeRepository(EventRepository):
    """In-memory repository that can fail or block on demand."""

    def __init__(self, events: Optional[List[Event]] = None):
        self.events = list(events or [])
        self.list_calls = 0
        self.fail_with: Optional[str] = None
        self.gate: Optional[threading.Event] = None

    def list_events(self) -> List[Event]:
        self.list_calls += 1
        if self.gate is not None:
            self.gate.wait(timeout=5)
        if self.fail_with:
            raise RepositoryError(self.fail_with)
        return list(self.events)

    def get_event_by_id(self, event_id: str) -> Optional[Event]:
        return next((e for e in self.events if e.id == event_id), None)

    def create_event(self, event: Event) -> Event:
        if self.fail_with:
            raise RepositoryError(self.fail_with)
        created = row_to_event(event_to_row(event))
        self.events.append(created)
        return created


@pytest.fixture
def fake_repository():
    return FakeRepository()


@pytest.fixture
def database():
    db = Database(DatabaseConfig(database_url="sqlite://"))
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture
def sql_repository(database):
    return SQLEventRepository(database)


@pytest.fixture
def sample_events():
    """Twelve events covering every status."""
    statuses = [
        EventStatus.UPCOMING,
        EventStatus.OPEN_FOR_REGISTRATION,
        EventStatus.REGISTRATION_CLOSED,
        EventStatus.ONGOING,
        EventStatus.IN_REVIEW,
        EventStatus.COMPLETED,
        EventStatus.CANCELLED,
        EventStatus.POSTPONED,
        EventStatus.UPCOMING,
        EventStatus.COMPLETED,
        EventStatus.ONGOING,
        EventStatus.CANCELLED,
    ]
    return [
        make_event(f"evt_{i}", status=status, is_postponed=status == EventStatus.POSTPONED)
        for i, status in enumerate(statuses)
    ]
