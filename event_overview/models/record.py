"""ORM model for the events table."""

from typing import Any, Dict

from sqlalchemy import Boolean, Column, JSON, String, Text

from .base import Base


class EventRecord(Base):
    """
    Storage row for an event.

    Column names are the snake_case storage names; absent values are NULL.
    Dates are stored as ISO-8601 strings exactly as the mapper writes them,
    so a row read back is identical to the row inserted.
    """
    __tablename__ = 'events'

    # Required fields
    id = Column(String, primary_key=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    event_type = Column(String, nullable=False)
    location_type = Column(String, nullable=False)
    status = Column(String, nullable=False)
    organizer_name = Column(String, nullable=False)
    organizer_type = Column(String, nullable=False)
    created_at = Column(String, nullable=False)
    updated_at = Column(String, nullable=False)

    # Optional fields
    subtitle = Column(String)
    vendor = Column(String)
    tags = Column(JSON)
    location_detail = Column(String)
    poster_url = Column(String)
    registration_start = Column(String)
    registration_end = Column(String)
    event_start = Column(String, index=True)
    event_end = Column(String)
    submission_deadline = Column(String)
    review_start = Column(String)
    review_end = Column(String)
    announcement_date = Column(String)
    demo_day_date = Column(String)
    award_ceremony_date = Column(String)
    is_postponed = Column(Boolean)
    original_event_start = Column(String)
    original_event_end = Column(String)
    postponed_reason = Column(Text)
    organizer_avatar_url = Column(String)
    organizer_contact = Column(String)
    registration_url = Column(String)
    official_site_url = Column(String)
    livestream_url = Column(String)
    recording_url = Column(String)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a storage row dictionary."""
        return {column.name: getattr(self, column.name) for column in self.__table__.columns}

    def __str__(self) -> str:
        """String representation."""
        return f"EventRecord(id={self.id}, title={self.title}, status={self.status})"
