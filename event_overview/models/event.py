"""Event model definition."""

from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Optional


class EventType(str, Enum):
    """Supported event types."""
    MEETUP = "Meetup"
    HACKATHON = "Hackathon"
    COMPETITION = "Competition"
    WORKSHOP = "Workshop"
    WEBINAR = "Webinar"
    OTHER = "Other"


class Vendor(str, Enum):
    """Known vendor/platform providers."""
    TENCENT = "Tencent"
    ALIBABA = "Alibaba"
    BYTEDANCE = "ByteDance"
    HUAWEI_CLOUD = "Huawei Cloud"
    GOOGLE = "Google"
    AMAZON = "Amazon"
    OTHER = "Other"


class EventStatus(str, Enum):
    """
    Event lifecycle status.

    Status flow: Upcoming -> OpenForRegistration -> RegistrationClosed -> Ongoing
    -> InReview -> Completed. Postponed overrides the flow; Cancelled is set by
    moderation and is terminal.
    """
    UPCOMING = "Upcoming"
    OPEN_FOR_REGISTRATION = "OpenForRegistration"
    REGISTRATION_CLOSED = "RegistrationClosed"
    ONGOING = "Ongoing"
    IN_REVIEW = "InReview"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    POSTPONED = "Postponed"


class LocationType(str, Enum):
    ONLINE = "Online"
    OFFLINE = "Offline"
    HYBRID = "Hybrid"


class OrganizerType(str, Enum):
    INDIVIDUAL = "Individual"
    ORGANIZATION = "Organization"
    COMMUNITY = "Community"


@dataclass(frozen=True)
class VendorValue:
    """
    A vendor is either one of the known providers or a free-text name.

    Fields:
        known: The known vendor, when the name matches one
        custom: The free-text vendor name otherwise
    """
    known: Optional[Vendor] = None
    custom: Optional[str] = None

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional['VendorValue']:
        """Build a vendor value from its stored string, None if empty."""
        if value is None:
            return None
        text = value.strip()
        if not text:
            return None
        try:
            return cls(known=Vendor(text))
        except ValueError:
            return cls(custom=text)

    @property
    def label(self) -> str:
        """Display name of the vendor."""
        return self.known.value if self.known is not None else self.custom

    @property
    def bucket(self) -> Vendor:
        """Filter/display bucket: the known vendor, or Other for free text."""
        return self.known if self.known is not None else Vendor.OTHER


def classify_vendor(value: Optional[str]) -> Vendor:
    """
    Map a stored vendor string to its display bucket.

    Unrecognized free-text vendors and missing vendors fall in the Other bucket.
    """
    vendor = VendorValue.parse(value)
    return vendor.bucket if vendor is not None else Vendor.OTHER


# Timeline fields, in display order
TIMELINE_FIELDS = (
    'registration_start',
    'registration_end',
    'event_start',
    'event_end',
    'submission_deadline',
    'review_start',
    'review_end',
    'announcement_date',
    'demo_day_date',
    'award_ceremony_date',
)

# All date-like fields of an event, timeline plus postponement originals
DATE_FIELDS = TIMELINE_FIELDS + ('original_event_start', 'original_event_end')

_ENUM_FIELDS = {
    'event_type': EventType,
    'location_type': LocationType,
    'status': EventStatus,
    'organizer_type': OrganizerType,
}


@dataclass
class Event:
    """
    Event model representing a community tech event.

    Dates are ISO-8601 strings in UTC. A creation input is an Event whose id,
    created_at and updated_at may still be None; the repository fills them in.

    Fields:
        id: Unique identifier
        title: Event title
        description: Event description
        event_type: Kind of event (meetup, hackathon, ...)
        location_type: Online, offline or hybrid
        organizer_name: Name of the organizing person or group
        organizer_type: Individual, organization or community
        subtitle: Short tagline (optional)
        vendor: Known vendor name or free text (optional)
        tags: Search keywords, never None
        location_detail: Venue or address when not online (optional)
        poster_url: URL of the event poster (optional)
        registration_start ... award_ceremony_date: Timeline instants (optional)
        status: Lifecycle status, computed when the event is created or updated
        is_postponed: Whether the event was postponed
        original_event_start: Start before postponement (optional)
        original_event_end: End before postponement (optional)
        postponed_reason: Why the event was postponed (optional)
        organizer_avatar_url: Organizer avatar (optional)
        organizer_contact: Organizer contact details (optional)
        registration_url: Where to register (optional)
        official_site_url: Official event site (optional)
        livestream_url: Livestream link (optional)
        recording_url: Recording link (optional)
        created_at: When the event was first stored
        updated_at: When the event was last changed
    """
    id: Optional[str]
    title: str
    description: str
    event_type: EventType
    location_type: LocationType
    organizer_name: str
    organizer_type: OrganizerType
    subtitle: Optional[str] = None
    vendor: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    location_detail: Optional[str] = None
    poster_url: Optional[str] = None
    registration_start: Optional[str] = None
    registration_end: Optional[str] = None
    event_start: Optional[str] = None
    event_end: Optional[str] = None
    submission_deadline: Optional[str] = None
    review_start: Optional[str] = None
    review_end: Optional[str] = None
    announcement_date: Optional[str] = None
    demo_day_date: Optional[str] = None
    award_ceremony_date: Optional[str] = None
    status: EventStatus = EventStatus.UPCOMING
    is_postponed: bool = False
    original_event_start: Optional[str] = None
    original_event_end: Optional[str] = None
    postponed_reason: Optional[str] = None
    organizer_avatar_url: Optional[str] = None
    organizer_contact: Optional[str] = None
    registration_url: Optional[str] = None
    official_site_url: Optional[str] = None
    livestream_url: Optional[str] = None
    recording_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary (enums as their values)."""
        data = asdict(self)
        for name in _ENUM_FIELDS:
            data[name] = data[name].value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Event':
        """
        Create an Event from a dictionary produced by to_dict.

        Unknown keys are ignored.

        Raises:
            ValueError: If an enum field holds an unknown value
            TypeError: If a required field is missing
        """
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        for name, enum_cls in _ENUM_FIELDS.items():
            if values.get(name) is not None:
                values[name] = enum_cls(values[name])
        if values.get('tags') is None:
            values['tags'] = []
        values['is_postponed'] = bool(values.get('is_postponed'))
        return cls(**values)

    def to_summary_string(self) -> str:
        """One-line description for logs and the command line."""
        when = self.event_start or 'no date'
        return f"[{self.status.value}] {self.title} ({self.event_type.value}, {when}) id={self.id}"

    def __str__(self) -> str:
        return f"Event(id={self.id}, title={self.title}, status={self.status.value})"
