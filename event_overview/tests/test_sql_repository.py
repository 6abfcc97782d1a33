import pytest
from sqlalchemy.exc import OperationalError

from event_overview.db import with_retry, SessionError
from event_overview.models.event import EventStatus
from event_overview.repository import RepositoryError
from event_overview.tests.conftest import make_event


def test_create_and_get(sql_repository):
    created = sql_repository.create_event(make_event(None, created_at=None, updated_at=None, tags=["x"]))

    assert created.id
    assert created.created_at == created.updated_at
    assert sql_repository.get_event_by_id(created.id) == created


def test_get_unknown_returns_none(sql_repository):
    assert sql_repository.get_event_by_id("missing") is None


def test_list_orders_by_event_start(sql_repository):
    sql_repository.create_event(make_event("late", event_start="2024-09-01T00:00:00.000Z"))
    sql_repository.create_event(make_event("early", event_start="2024-03-01T00:00:00.000Z"))

    assert [e.id for e in sql_repository.list_events()] == ["early", "late"]


def test_list_empty_is_not_an_error(sql_repository):
    assert sql_repository.list_events() == []


def test_duplicate_id_raises_repository_error(sql_repository):
    sql_repository.create_event(make_event("dup"))
    with pytest.raises(RepositoryError):
        sql_repository.create_event(make_event("dup"))


def test_save_events_upserts(sql_repository):
    sql_repository.save_events([make_event("a"), make_event("b")])
    sql_repository.save_events([make_event("a", status=EventStatus.CANCELLED)])

    assert sql_repository.get_event_by_id("a").status == EventStatus.CANCELLED
    assert len(sql_repository.list_events()) == 2


def test_with_retry_retries_wrapped_operational_errors():
    calls = []

    @with_retry(max_attempts=3, delay=0)
    def flaky():
        calls.append(1)
        if len(calls) < 3:
            try:
                raise OperationalError("SELECT 1", {}, Exception("database is locked"))
            except OperationalError as e:
                raise SessionError(f"Database session error: {e}") from e
        return "ok"

    assert flaky() == "ok"
    assert len(calls) == 3


def test_with_retry_does_not_retry_other_errors():
    calls = []

    @with_retry(max_attempts=3, delay=0)
    def broken():
        calls.append(1)
        raise ValueError("bad input")

    with pytest.raises(ValueError):
        broken()
    assert len(calls) == 1
