import pytest
from fastapi.testclient import TestClient

from event_overview.api import create_application
from event_overview.models.event import EventStatus, EventType
from event_overview.store import EventStore
from event_overview.tests.conftest import FakeRepository, make_event

EVENTS = [
    make_event("upcoming", status=EventStatus.UPCOMING, event_start="2030-03-01T00:00:00.000Z"),
    make_event("open", status=EventStatus.OPEN_FOR_REGISTRATION, event_start="2030-02-01T00:00:00.000Z",
               event_type=EventType.HACKATHON, vendor="Tencent", tags=["ai"]),
    make_event("done", status=EventStatus.COMPLETED, event_start="2023-01-01T00:00:00.000Z",
               event_end="2023-01-02T00:00:00.000Z"),
    make_event("cancelled", status=EventStatus.CANCELLED, event_start="2023-05-01T00:00:00.000Z",
               event_end="2023-05-02T00:00:00.000Z", vendor="Local Startup"),
]


@pytest.fixture
def repository():
    return FakeRepository(EVENTS)


@pytest.fixture
def client(repository):
    store = EventStore(repository=repository, fallback_events=[])
    with TestClient(create_application(store)) as test_client:
        yield test_client


@pytest.fixture
def mock_client():
    store = EventStore(repository=None, fallback_events=EVENTS)
    with TestClient(create_application(store)) as test_client:
        yield test_client


def ids(response):
    return [item["id"] for item in response.json()["items"]]


def test_health_reports_mode(client, mock_client):
    live = client.get("/").json()
    assert live["status"] == "healthy"
    assert live["mode"] == "live"
    assert live["events"] == 4
    assert mock_client.get("/").json()["mode"] == "mock"


def test_list_all_events_sorted_by_start(client):
    response = client.get("/api/events")

    assert response.status_code == 200
    body = response.json()
    assert ids(response) == ["done", "cancelled", "open", "upcoming"]
    assert body["total"] == 4
    assert body["page"] == 1
    assert body["total_pages"] == 1


def test_active_view(client):
    assert ids(client.get("/api/events", params={"view": "active"})) == ["open", "upcoming"]


def test_historical_view_is_most_recent_first(client):
    assert ids(client.get("/api/events", params={"view": "historical"})) == ["cancelled", "done"]


def test_filters_compose(client):
    response = client.get("/api/events", params={"type": "Hackathon", "vendor": "Tencent", "search": "AI"})
    assert ids(response) == ["open"]


def test_vendor_other_bucket(client):
    assert "cancelled" in ids(client.get("/api/events", params={"vendor": "Other"}))


def test_status_filter_and_all_sentinel(client):
    assert ids(client.get("/api/events", params={"status": "Completed"})) == ["done"]
    assert len(ids(client.get("/api/events", params={"status": "All"}))) == 4


def test_pagination_is_clamped(client):
    body = client.get("/api/events", params={"page": 9, "page_size": 3}).json()
    assert body["page"] == 2
    assert body["total_pages"] == 2
    assert len(body["items"]) == 1


@pytest.mark.parametrize("params", [
    {"status": "Bogus"},
    {"type": "Conference"},
    {"view": "archived"},
    {"search_field": "title"},
])
def test_invalid_query_values_are_rejected(client, params):
    assert client.get("/api/events", params=params).status_code == 400


def test_page_size_bounds(client):
    assert client.get("/api/events", params={"page_size": 0}).status_code == 422


def test_get_event(client):
    response = client.get("/api/events/open")
    assert response.status_code == 200
    assert response.json()["status"] == "OpenForRegistration"
    assert client.get("/api/events/missing").status_code == 404


def test_stats(client):
    body = client.get("/api/events/stats").json()
    assert body["total"] == 4
    assert body["active"] == 2
    assert body["historical"] == 2
    assert body["by_status"]["Cancelled"] == 1


def test_refresh_endpoint(client, repository):
    repository.events.append(make_event("late_arrival"))
    body = client.post("/api/events/refresh").json()
    assert body == {"events": 5, "error": None, "mode": "live"}


def test_submit_event(client, repository):
    payload = {
        "title": "New Meetup",
        "description": "Lightning talks",
        "organizer_name": "Local Devs",
        "event_start": "2030-06-15T10:00:00Z",
        "tags": "rust, wasm",
    }
    response = client.post("/api/events", json=payload)

    assert response.status_code == 201
    created = response.json()
    assert created["tags"] == ["rust", "wasm"]
    assert created["registration_end"] == "2030-06-14T23:59:00.000Z"
    assert created["status"] == "OpenForRegistration"
    assert client.get(f"/api/events/{created['id']}").status_code == 200
    assert len(repository.events) == 5


def test_submit_event_validation(client):
    response = client.post("/api/events", json={"title": "", "description": "x", "organizer_name": "y"})
    assert response.status_code == 422


def test_submit_event_repository_failure(client, repository):
    repository.fail_with = "Failed to create event: permission denied"
    payload = {"title": "T", "description": "D", "organizer_name": "O"}

    response = client.post("/api/events", json=payload)

    assert response.status_code == 502
    assert "permission denied" in response.json()["detail"]


def test_submit_event_without_repository(mock_client):
    payload = {"title": "T", "description": "D", "organizer_name": "O"}
    assert mock_client.post("/api/events", json=payload).status_code == 503
