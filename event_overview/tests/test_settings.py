import pytest

from event_overview.config.settings import (
    REPOSITORY_NONE,
    REPOSITORY_SQL,
    REPOSITORY_SUPABASE,
    get_repository_backend,
    is_repository_configured,
    is_supabase_configured,
)


class Settings:
    SUPABASE_URL = ''
    SUPABASE_ANON_KEY = ''
    DATABASE_URL = ''
    EVENT_REPOSITORY = ''


def settings(**values):
    return type('TestSettings', (Settings,), values)


def test_nothing_configured_uses_bundled_events():
    assert get_repository_backend(Settings) == REPOSITORY_NONE
    assert is_repository_configured(Settings) is False


def test_supabase_requires_url_and_key():
    assert not is_supabase_configured(settings(SUPABASE_URL='https://x.supabase.co'))
    assert get_repository_backend(settings(SUPABASE_URL='https://x.supabase.co', SUPABASE_ANON_KEY='k')) == REPOSITORY_SUPABASE


def test_supabase_takes_precedence_over_database_url():
    config = settings(SUPABASE_URL='https://x.supabase.co', SUPABASE_ANON_KEY='k', DATABASE_URL='sqlite://')
    assert get_repository_backend(config) == REPOSITORY_SUPABASE


def test_database_url_selects_sql():
    assert get_repository_backend(settings(DATABASE_URL='sqlite://')) == REPOSITORY_SQL


def test_explicit_backend_wins():
    config = settings(SUPABASE_URL='https://x.supabase.co', SUPABASE_ANON_KEY='k', EVENT_REPOSITORY='none')
    assert get_repository_backend(config) == REPOSITORY_NONE


def test_invalid_backend_raises():
    with pytest.raises(ValueError):
        get_repository_backend(settings(EVENT_REPOSITORY='mongo'))
