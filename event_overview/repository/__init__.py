"""Event repositories and the factory that picks one from configuration."""

import logging
from typing import Optional

from ..config.settings import (
    Config,
    REPOSITORY_SQL,
    REPOSITORY_SUPABASE,
    get_repository_backend,
)
from .base import EventRepository, RepositoryError, RepositoryNotConfiguredError
from .mapper import EventRow, event_to_row, row_to_event

logger = logging.getLogger(__name__)


def create_event_repository(config=Config) -> Optional[EventRepository]:
    """
    Build the event repository selected by configuration.

    Returns:
        Optional[EventRepository]: The repository, or None when no backend is configured
    """
    backend = get_repository_backend(config)

    if backend == REPOSITORY_SUPABASE:
        from .supabase import SupabaseEventRepository
        logger.info("Using Supabase event repository")
        return SupabaseEventRepository(
            base_url=config.SUPABASE_URL,
            api_key=config.SUPABASE_ANON_KEY,
            table=config.EVENTS_TABLE,
            timeout=config.API_TIMEOUT
        )

    if backend == REPOSITORY_SQL:
        from ..db import Database, DatabaseConfig
        from .sql import SQLEventRepository
        logger.info("Using SQL event repository")
        return SQLEventRepository(Database(DatabaseConfig(database_url=config.DATABASE_URL or None)))

    logger.warning("No event repository configured, falling back to bundled mock data")
    return None


__all__ = [
    'EventRepository',
    'EventRow',
    'RepositoryError',
    'RepositoryNotConfiguredError',
    'create_event_repository',
    'event_to_row',
    'row_to_event',
]
