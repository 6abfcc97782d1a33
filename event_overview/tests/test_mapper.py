import uuid

from event_overview.models.event import Event, EventStatus, EventType, LocationType, OrganizerType
from event_overview.repository import event_to_row, row_to_event
from event_overview.utils.timezone import to_iso_string


def sample_row(**overrides):
    row = {
        "id": "evt_123",
        "title": "Sample Event",
        "subtitle": None,
        "description": "An example event",
        "event_type": "Meetup",
        "vendor": None,
        "tags": ["sample"],
        "location_type": "Online",
        "location_detail": None,
        "poster_url": None,
        "registration_start": None,
        "registration_end": None,
        "event_start": "2025-01-10T10:00:00.000Z",
        "event_end": "2025-01-10T12:00:00.000Z",
        "submission_deadline": None,
        "review_start": None,
        "review_end": None,
        "announcement_date": None,
        "demo_day_date": None,
        "award_ceremony_date": None,
        "status": "Upcoming",
        "is_postponed": None,
        "original_event_start": None,
        "original_event_end": None,
        "postponed_reason": None,
        "organizer_name": "Sample Org",
        "organizer_type": "Organization",
        "organizer_avatar_url": None,
        "organizer_contact": None,
        "registration_url": None,
        "official_site_url": None,
        "livestream_url": None,
        "recording_url": None,
        "created_at": "2024-12-01T00:00:00.000Z",
        "updated_at": "2024-12-01T00:00:00.000Z",
    }
    row.update(overrides)
    return row


def full_event() -> Event:
    return Event(
        id="evt_456",
        title="Another Event",
        subtitle="Sub",
        description="Details",
        event_type=EventType.HACKATHON,
        vendor="Tencent",
        tags=["hack", "ai"],
        location_type=LocationType.HYBRID,
        location_detail="Shenzhen",
        poster_url="https://example.com/poster.png",
        registration_start="2024-12-05T00:00:00.000Z",
        registration_end="2024-12-09T00:00:00.000Z",
        event_start="2024-12-10T00:00:00.000Z",
        event_end="2024-12-12T00:00:00.000Z",
        submission_deadline="2024-12-12T00:00:00.000Z",
        review_start="2024-12-13T00:00:00.000Z",
        review_end="2024-12-20T00:00:00.000Z",
        announcement_date="2024-12-21T00:00:00.000Z",
        demo_day_date="2024-12-22T00:00:00.000Z",
        award_ceremony_date="2024-12-23T00:00:00.000Z",
        status=EventStatus.POSTPONED,
        is_postponed=True,
        original_event_start="2024-11-10T00:00:00.000Z",
        original_event_end="2024-11-12T00:00:00.000Z",
        postponed_reason="Venue change",
        organizer_name="Tencent Cloud",
        organizer_type=OrganizerType.ORGANIZATION,
        organizer_avatar_url="https://example.com/avatar.png",
        organizer_contact="events@example.com",
        registration_url="https://example.com/register",
        official_site_url="https://example.com",
        livestream_url="https://example.com/live",
        recording_url="https://example.com/recording",
        created_at="2024-12-02T00:00:00.000Z",
        updated_at="2024-12-03T00:00:00.000Z",
    )


def test_row_to_event_converts_nulls_and_enums():
    event = row_to_event(sample_row())

    assert event.id == "evt_123"
    assert event.subtitle is None
    assert event.tags == ["sample"]
    assert event.event_type == EventType.MEETUP
    assert event.status == EventStatus.UPCOMING
    assert event.is_postponed is False
    assert event.organizer_type == OrganizerType.ORGANIZATION
    assert event.created_at == "2024-12-01T00:00:00.000Z"


def test_row_to_event_defaults_missing_tags():
    assert row_to_event(sample_row(tags=None)).tags == []


def test_row_to_event_unknown_enum_value_falls_back():
    event = row_to_event(sample_row(event_type="Conference"))
    assert event.event_type == EventType.OTHER


def test_event_to_row_maps_fields():
    row = event_to_row(full_event())

    assert row["id"] == "evt_456"
    assert row["event_type"] == "Hackathon"
    assert row["location_type"] == "Hybrid"
    assert row["status"] == "Postponed"
    assert row["is_postponed"] is True
    assert row["vendor"] == "Tencent"
    assert row["tags"] == ["hack", "ai"]
    assert row["organizer_contact"] == "events@example.com"
    assert row["created_at"] == "2024-12-02T00:00:00.000Z"


def test_event_to_row_generates_id_and_timestamps():
    event = row_to_event(sample_row(id=None, created_at=None, updated_at=None))
    row = event_to_row(event)

    assert uuid.UUID(row["id"])
    assert row["created_at"] is not None
    assert row["created_at"] == row["updated_at"]


def test_event_to_row_maps_absent_fields_to_none():
    row = event_to_row(row_to_event(sample_row()))
    assert row["subtitle"] is None
    assert row["review_end"] is None
    assert row["recording_url"] is None


def test_event_to_row_normalizes_dates():
    event = row_to_event(sample_row(
        registration_start="2024-06-01",
        registration_end="not a date",
        event_start="2024-06-15T18:00:00+08:00",
    ))
    row = event_to_row(event)

    assert row["registration_start"] == "2024-06-01T00:00:00.000Z"
    assert row["registration_end"] is None
    assert row["event_start"] == "2024-06-15T10:00:00.000Z"


def test_round_trip_preserves_fully_populated_event():
    event = full_event()
    assert row_to_event(event_to_row(event)) == event


def test_round_trip_preserves_sparse_event():
    event = row_to_event(sample_row())
    assert row_to_event(event_to_row(event)) == event


def test_to_iso_string_format():
    assert to_iso_string("2024-01-15T10:30:00.123456Z") == "2024-01-15T10:30:00.123Z"
    assert to_iso_string(None) is None
    assert to_iso_string("") is None
