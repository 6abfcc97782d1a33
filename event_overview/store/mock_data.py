"""Bundled events used when no repository is configured or reachable."""

from typing import List

from ..models.event import Event, EventStatus, EventType, LocationType, OrganizerType
from ..status import with_computed_status

_CREATED_AT = "2024-01-01T00:00:00.000Z"


def _mock_event(**kwargs) -> Event:
    kwargs.setdefault('created_at', _CREATED_AT)
    kwargs.setdefault('updated_at', _CREATED_AT)
    return with_computed_status(Event(**kwargs))


MOCK_EVENTS: List[Event] = [
    _mock_event(
        id="mock-cloud-native-meetup",
        title="Cloud Native Community Meetup",
        subtitle="Kubernetes operators in production",
        description="An evening of talks on running Kubernetes operators at scale, followed by open networking.",
        event_type=EventType.MEETUP,
        vendor="Alibaba",
        tags=["kubernetes", "cloud-native", "operators"],
        location_type=LocationType.OFFLINE,
        location_detail="Hangzhou, Cloud Town Conference Center",
        registration_start="2025-03-01T00:00:00.000Z",
        registration_end="2025-03-14T15:59:00.000Z",
        event_start="2025-03-15T10:00:00.000Z",
        event_end="2025-03-15T13:00:00.000Z",
        organizer_name="Cloud Native Hangzhou",
        organizer_type=OrganizerType.COMMUNITY,
        registration_url="https://example.org/cloud-native-meetup",
    ),
    _mock_event(
        id="mock-ai-agents-hackathon",
        title="AI Agents Hackathon",
        subtitle="48 hours to build an autonomous assistant",
        description="Teams build agent applications on large language models. Prizes for the best demos.",
        event_type=EventType.HACKATHON,
        vendor="Tencent",
        tags=["ai", "llm", "agents"],
        location_type=LocationType.HYBRID,
        location_detail="Shenzhen, Tencent Binhai Building",
        registration_start="2025-05-01T00:00:00.000Z",
        registration_end="2025-05-31T15:59:00.000Z",
        event_start="2025-06-14T01:00:00.000Z",
        event_end="2025-06-16T01:00:00.000Z",
        submission_deadline="2025-06-16T01:00:00.000Z",
        review_start="2025-06-17T00:00:00.000Z",
        review_end="2025-06-30T00:00:00.000Z",
        announcement_date="2025-07-01T02:00:00.000Z",
        demo_day_date="2025-07-05T06:00:00.000Z",
        organizer_name="Tencent Cloud Developers",
        organizer_type=OrganizerType.ORGANIZATION,
        official_site_url="https://example.org/ai-agents-hackathon",
    ),
    _mock_event(
        id="mock-open-source-summit-webinar",
        title="Open Source Maintainers Webinar",
        description="How to grow a contributor community around your open source project.",
        event_type=EventType.WEBINAR,
        vendor="Google",
        tags=["open-source", "community"],
        location_type=LocationType.ONLINE,
        event_start="2024-11-20T12:00:00.000Z",
        event_end="2024-11-20T13:30:00.000Z",
        organizer_name="Open Source Circle",
        organizer_type=OrganizerType.COMMUNITY,
        livestream_url="https://example.org/live/maintainers",
        recording_url="https://example.org/recordings/maintainers",
    ),
    _mock_event(
        id="mock-serverless-workshop",
        title="Serverless Workshop",
        subtitle="From zero to deployed function",
        description="Hands-on workshop building an event-driven serverless pipeline.",
        event_type=EventType.WORKSHOP,
        vendor="Amazon",
        tags=["serverless", "lambda", "hands-on"],
        location_type=LocationType.OFFLINE,
        location_detail="Beijing, Zhongguancun Innovation Hub",
        registration_end="2026-12-01T15:59:00.000Z",
        event_start="2026-12-05T01:00:00.000Z",
        event_end="2026-12-05T09:00:00.000Z",
        organizer_name="AWS User Group Beijing",
        organizer_type=OrganizerType.COMMUNITY,
    ),
    _mock_event(
        id="mock-data-competition",
        title="Urban Mobility Data Competition",
        description="Predict city traffic flows from anonymized sensor data.",
        event_type=EventType.COMPETITION,
        vendor="Huawei Cloud",
        tags=["data-science", "forecasting", "competition"],
        location_type=LocationType.ONLINE,
        registration_start="2026-09-01T00:00:00.000Z",
        registration_end="2026-12-31T15:59:00.000Z",
        event_start="2027-01-05T00:00:00.000Z",
        event_end="2027-03-31T15:59:00.000Z",
        submission_deadline="2027-03-31T15:59:00.000Z",
        review_end="2027-04-20T00:00:00.000Z",
        award_ceremony_date="2027-05-01T06:00:00.000Z",
        organizer_name="Huawei Cloud Developer Program",
        organizer_type=OrganizerType.ORGANIZATION,
    ),
    _mock_event(
        id="mock-rust-meetup-postponed",
        title="Rust Systems Programming Meetup",
        description="Talks on async runtimes and embedded Rust.",
        event_type=EventType.MEETUP,
        vendor="Rust China Community",
        tags=["rust", "systems"],
        location_type=LocationType.OFFLINE,
        location_detail="Shanghai, Xuhui West Bund",
        event_start="2026-11-21T06:00:00.000Z",
        event_end="2026-11-21T10:00:00.000Z",
        is_postponed=True,
        original_event_start="2026-10-10T06:00:00.000Z",
        original_event_end="2026-10-10T10:00:00.000Z",
        postponed_reason="Venue unavailable",
        organizer_name="Rust China Community",
        organizer_type=OrganizerType.COMMUNITY,
    ),
    _mock_event(
        id="mock-frontend-meetup-cancelled",
        title="Frontend Performance Meetup",
        description="Core Web Vitals deep dive.",
        event_type=EventType.MEETUP,
        vendor="ByteDance",
        tags=["frontend", "performance", "web-vitals"],
        location_type=LocationType.OFFLINE,
        location_detail="Beijing, Haidian",
        event_start="2025-09-13T06:00:00.000Z",
        event_end="2025-09-13T09:00:00.000Z",
        status=EventStatus.CANCELLED,
        organizer_name="Lin Wei",
        organizer_type=OrganizerType.INDIVIDUAL,
    ),
    _mock_event(
        id="mock-community-gathering",
        title="Developer Community Gathering",
        description="Informal gathering for local developers. Date to be announced.",
        event_type=EventType.OTHER,
        tags=["networking"],
        location_type=LocationType.OFFLINE,
        location_detail="Chengdu, Tianfu Software Park",
        organizer_name="Chengdu Dev Friends",
        organizer_type=OrganizerType.COMMUNITY,
    ),
]
