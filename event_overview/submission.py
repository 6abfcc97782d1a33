"""Event submission and update flows.

Both flows compute the status at write time; readers use the stored value.
"""

import asyncio
import dataclasses
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import List, Optional

from .models.event import Event, EventType, LocationType, OrganizerType, Vendor
from .repository import EventRepository, RepositoryNotConfiguredError
from .status import with_computed_status
from .store import EventStore
from .utils.timezone import now_utc, parse_instant, to_iso_string

logger = logging.getLogger(__name__)


@dataclass
class EventSubmission:
    """
    Raw values of a submitted event, as entered in the submission form.

    Dates are any ISO-8601 strings; empty strings mean "not set". Tags are a
    comma-separated string. When vendor is Other, custom_vendor holds the name.
    """
    title: str
    description: str
    organizer_name: str
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


def parse_tags(raw: str) -> List[str]:
    """Split a comma-separated tag string, dropping blanks."""
    return [tag.strip() for tag in (raw or '').split(',') if tag.strip()]


def resolve_vendor(vendor: str, custom_vendor: str) -> Optional[str]:
    """Use the custom name when the Other vendor is selected."""
    value = custom_vendor.strip() if vendor == Vendor.OTHER.value else (vendor or '').strip()
    return value or None


def derive_registration_end(submission: EventSubmission) -> Optional[str]:
    """
    Registration end to store for a submission.

    Meetups without an explicit registration end close registration at 23:59
    on the day before the event starts.
    """
    if submission.registration_end:
        return submission.registration_end
    if submission.event_type == EventType.MEETUP:
        start = parse_instant(submission.event_start)
        if start is not None:
            day_before = start.date() - timedelta(days=1)
            return to_iso_string(datetime.combine(day_before, time(23, 59), tzinfo=start.tzinfo))
    return None


def _optional(value: str) -> Optional[str]:
    value = (value or '').strip()
    return value or None


def build_event(submission: EventSubmission, now: Optional[datetime] = None) -> Event:
    """
    Turn a submission into a new Event with id, timestamps and computed status.

    Args:
        submission: Submitted values
        now: Creation instant (defaults to the current time)

    Returns:
        Event: The event to create
    """
    now = now or now_utc()
    timestamp = to_iso_string(now)
    location_type = LocationType(submission.location_type)

    event = Event(
        id=str(uuid.uuid4()),
        title=submission.title,
        subtitle=_optional(submission.subtitle),
        description=submission.description,
        event_type=EventType(submission.event_type),
        vendor=resolve_vendor(submission.vendor, submission.custom_vendor),
        tags=parse_tags(submission.tags),
        location_type=location_type,
        location_detail=None if location_type == LocationType.ONLINE else _optional(submission.location_detail),
        poster_url=_optional(submission.poster_url),
        registration_start=to_iso_string(submission.registration_start),
        registration_end=to_iso_string(derive_registration_end(submission)),
        event_start=to_iso_string(submission.event_start),
        event_end=to_iso_string(submission.event_end),
        submission_deadline=to_iso_string(submission.submission_deadline),
        review_start=to_iso_string(submission.review_start),
        review_end=to_iso_string(submission.review_end),
        announcement_date=to_iso_string(submission.announcement_date),
        demo_day_date=to_iso_string(submission.demo_day_date),
        award_ceremony_date=to_iso_string(submission.award_ceremony_date),
        is_postponed=submission.is_postponed,
        original_event_start=to_iso_string(submission.original_event_start),
        original_event_end=to_iso_string(submission.original_event_end),
        postponed_reason=_optional(submission.postponed_reason),
        organizer_name=submission.organizer_name,
        organizer_type=OrganizerType(submission.organizer_type),
        organizer_contact=_optional(submission.organizer_contact),
        registration_url=_optional(submission.registration_url),
        official_site_url=_optional(submission.official_site_url),
        livestream_url=_optional(submission.livestream_url),
        recording_url=_optional(submission.recording_url),
        created_at=timestamp,
        updated_at=timestamp,
    )
    return with_computed_status(event, now)


async def submit_event(
    submission: EventSubmission,
    repository: Optional[EventRepository],
    store: EventStore,
    now: Optional[datetime] = None
) -> Event:
    """
    Create a submitted event and add it to the store.

    The store is only touched after the repository confirms the creation.

    Returns:
        Event: The created event as stored by the repository

    Raises:
        RepositoryNotConfiguredError: If no repository is configured
        RepositoryError: If the repository fails to create the event
    """
    if repository is None:
        raise RepositoryNotConfiguredError("No event repository configured")
    event = build_event(submission, now)
    created = await asyncio.to_thread(repository.create_event, event)
    logger.info(f"Submitted event {created.id} with status {created.status.value}")

    store.add(created)
    await store.refresh()
    return created


def update_event(event: Event, store: EventStore, now: Optional[datetime] = None) -> Event:
    """
    Apply an edited event to the store, recomputing its status.

    Returns:
        Event: The updated event
    """
    now = now or now_utc()
    updated = with_computed_status(
        dataclasses.replace(event, updated_at=to_iso_string(now)),
        now
    )
    store.update(updated)
    return updated
