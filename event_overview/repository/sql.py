"""Event repository backed by a SQL database through SQLAlchemy."""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from ..db import Database, DatabaseError, with_retry
from ..models.event import Event
from ..models.record import EventRecord
from .base import EventRepository, RepositoryError
from .mapper import event_to_row, row_to_event

logger = logging.getLogger(__name__)


class SQLEventRepository(EventRepository):
    """Stores events in the ``events`` table (SQLite in development, PostgreSQL in production)."""

    def __init__(self, database: Database):
        self.database = database

    @with_retry(max_attempts=3)
    def _list_rows(self) -> list:
        with self.database.session() as session:
            records = session.scalars(
                select(EventRecord).order_by(EventRecord.event_start.asc())
            ).all()
            return [record.to_dict() for record in records]

    def list_events(self) -> List[Event]:
        try:
            rows = self._list_rows()
        except (DatabaseError, SQLAlchemyError) as e:
            logger.error(f"Failed to fetch events: {e}")
            raise RepositoryError(f"Failed to fetch events: {e}") from e
        return [row_to_event(row) for row in rows]

    def get_event_by_id(self, event_id: str) -> Optional[Event]:
        try:
            with self.database.session() as session:
                record = session.get(EventRecord, event_id)
                row = record.to_dict() if record is not None else None
        except (DatabaseError, SQLAlchemyError) as e:
            raise RepositoryError(f"Failed to fetch event {event_id}: {e}") from e
        return row_to_event(row) if row is not None else None

    def create_event(self, event: Event) -> Event:
        row = event_to_row(event)
        try:
            with self.database.session() as session:
                record = EventRecord(**row)
                session.add(record)
                session.flush()
                inserted = record.to_dict()
        except (DatabaseError, SQLAlchemyError) as e:
            logger.error(f"Failed to create event {row['id']}: {e}")
            raise RepositoryError(f"Failed to create event: {e}") from e

        logger.info(f"Created event {inserted['id']}: {inserted['title']}")
        return row_to_event(inserted)

    def save_events(self, events: List[Event]) -> int:
        """
        Insert or replace several events in one transaction.

        Returns:
            int: Number of events written

        Raises:
            RepositoryError: If the events cannot be stored
        """
        try:
            with self.database.session() as session:
                for event in events:
                    session.merge(EventRecord(**event_to_row(event)))
        except (DatabaseError, SQLAlchemyError) as e:
            raise RepositoryError(f"Failed to save events: {e}") from e
        return len(events)
