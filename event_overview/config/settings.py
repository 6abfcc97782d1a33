"""Application settings read from the environment."""

import os
from pathlib import Path

from .environment import IS_PRODUCTION_ENVIRONMENT

PROJECT_ROOT = Path(__file__).parent.parent.parent

# Accepted values for EVENT_REPOSITORY
REPOSITORY_SUPABASE = 'supabase'
REPOSITORY_SQL = 'sql'
REPOSITORY_NONE = 'none'


class Config:
    # Remote event table (Supabase / PostgREST)
    SUPABASE_URL = os.getenv('SUPABASE_URL', '')
    SUPABASE_ANON_KEY = os.getenv('SUPABASE_ANON_KEY', '')
    EVENTS_TABLE = os.getenv('EVENTS_TABLE', 'events')

    # SQL database (SQLite in development, PostgreSQL in production)
    DATABASE_URL = os.getenv('DATABASE_URL', '')

    # Explicit backend choice; empty means auto-detect
    EVENT_REPOSITORY = os.getenv('EVENT_REPOSITORY', '').strip().lower()

    # HTTP client configuration
    API_TIMEOUT = int(os.getenv('API_TIMEOUT', '30'))

    # Local durable cache
    EVENT_CACHE_DIR = Path(os.getenv('EVENT_CACHE_DIR', str(PROJECT_ROOT / 'data' / 'cache')))

    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true' and not IS_PRODUCTION_ENVIRONMENT


def is_supabase_configured(config=Config) -> bool:
    """Return True if both the Supabase URL and anon key are set."""
    return bool(config.SUPABASE_URL and config.SUPABASE_ANON_KEY)


def get_repository_backend(config=Config) -> str:
    """
    Decide which event repository backend to use.

    An explicit EVENT_REPOSITORY setting wins. Otherwise Supabase is used when
    configured, then a SQL database when DATABASE_URL is set.

    Returns:
        str: One of 'supabase', 'sql' or 'none'

    Raises:
        ValueError: If EVENT_REPOSITORY holds an unknown value
    """
    explicit = config.EVENT_REPOSITORY
    if explicit:
        if explicit not in (REPOSITORY_SUPABASE, REPOSITORY_SQL, REPOSITORY_NONE):
            raise ValueError(
                f"Invalid EVENT_REPOSITORY setting: {explicit}. "
                "Must be 'supabase', 'sql' or 'none'"
            )
        return explicit
    if is_supabase_configured(config):
        return REPOSITORY_SUPABASE
    if config.DATABASE_URL:
        return REPOSITORY_SQL
    return REPOSITORY_NONE


def is_repository_configured(config=Config) -> bool:
    """Readiness probe consulted by the event store before any repository call."""
    return get_repository_backend(config) != REPOSITORY_NONE
