from unittest.mock import Mock

import pytest
import requests

from event_overview.models.event import EventStatus, EventType
from event_overview.repository import RepositoryError, event_to_row
from event_overview.repository.supabase import SupabaseEventRepository
from event_overview.tests.conftest import make_event


def response_with(payload):
    response = Mock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


def make_repository(payload=None, side_effect=None):
    session = Mock(spec=requests.Session)
    if side_effect is not None:
        session.request.side_effect = side_effect
    else:
        session.request.return_value = response_with(payload)
    repository = SupabaseEventRepository("https://project.supabase.co/", "anon-key", session=session, timeout=5)
    return repository, session


def test_list_events_requests_table_ordered_by_start():
    rows = [event_to_row(make_event("a", event_type=EventType.WEBINAR))]
    repository, session = make_repository(rows)

    events = repository.list_events()

    assert [e.id for e in events] == ["a"]
    assert events[0].event_type == EventType.WEBINAR
    method, url = session.request.call_args.args
    kwargs = session.request.call_args.kwargs
    assert method == "GET"
    assert url == "https://project.supabase.co/rest/v1/events"
    assert kwargs["params"]["order"] == "event_start.asc"
    assert kwargs["headers"]["apikey"] == "anon-key"
    assert kwargs["headers"]["Authorization"] == "Bearer anon-key"
    assert kwargs["timeout"] == 5


def test_list_events_empty_table():
    repository, _ = make_repository([])
    assert repository.list_events() == []


def test_list_events_rejects_non_list_body():
    repository, _ = make_repository({"message": "unexpected"})
    with pytest.raises(RepositoryError):
        repository.list_events()


def test_network_failure_raises_repository_error():
    repository, _ = make_repository(side_effect=requests.ConnectionError("connection refused"))
    with pytest.raises(RepositoryError, match="Failed to fetch events"):
        repository.list_events()


def test_http_error_raises_repository_error():
    response = response_with([])
    response.raise_for_status.side_effect = requests.HTTPError("401 Unauthorized")
    repository, session = make_repository()
    session.request.return_value = response

    with pytest.raises(RepositoryError, match="401"):
        repository.list_events()


def test_get_event_by_id_filters_on_id():
    repository, session = make_repository([event_to_row(make_event("abc"))])

    assert repository.get_event_by_id("abc").id == "abc"
    assert session.request.call_args.kwargs["params"]["id"] == "eq.abc"


def test_get_event_by_id_missing_returns_none():
    repository, _ = make_repository([])
    assert repository.get_event_by_id("missing") is None


def test_create_event_posts_row_and_returns_stored_event():
    stored = event_to_row(make_event("new", status=EventStatus.OPEN_FOR_REGISTRATION))
    repository, session = make_repository([stored])

    created = repository.create_event(make_event("new", status=EventStatus.OPEN_FOR_REGISTRATION))

    assert created.id == "new"
    assert created.status == EventStatus.OPEN_FOR_REGISTRATION
    kwargs = session.request.call_args.kwargs
    assert session.request.call_args.args[0] == "POST"
    assert kwargs["headers"]["Prefer"] == "return=representation"
    assert kwargs["json"]["status"] == "OpenForRegistration"


def test_create_event_without_returned_row_fails():
    repository, _ = make_repository([])
    with pytest.raises(RepositoryError):
        repository.create_event(make_event("new"))
