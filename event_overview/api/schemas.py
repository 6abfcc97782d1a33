"""Request models for the events API."""

from pydantic import BaseModel, Field

from ..models.event import EventType, LocationType, OrganizerType, Vendor
from ..submission import EventSubmission


class EventSubmissionRequest(BaseModel):
    """Body of POST /api/events."""
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    organizer_name: str = Field(..., min_length=1)
    event_type: EventType = EventType.MEETUP
    location_type: LocationType = LocationType.ONLINE
    organizer_type: OrganizerType = OrganizerType.INDIVIDUAL
    subtitle: str = ''
    vendor: str = Vendor.OTHER.value
    custom_vendor: str = ''
    tags: str = ''
    location_detail: str = ''
    poster_url: str = ''
    registration_start: str = ''
    registration_end: str = ''
    event_start: str = ''
    event_end: str = ''
    submission_deadline: str = ''
    review_start: str = ''
    review_end: str = ''
    announcement_date: str = ''
    demo_day_date: str = ''
    award_ceremony_date: str = ''
    organizer_contact: str = ''
    registration_url: str = ''
    official_site_url: str = ''
    livestream_url: str = ''
    recording_url: str = ''
    is_postponed: bool = False
    original_event_start: str = ''
    original_event_end: str = ''
    postponed_reason: str = ''

    def to_submission(self) -> EventSubmission:
        return EventSubmission(**self.model_dump())
