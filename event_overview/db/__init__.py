"""SQL database access for the event repository."""

from .db_core import (
    Database,
    DatabaseConfig,
    DatabaseError,
    ConnectionError,
    SessionError,
)
from .operations import with_retry

__all__ = [
    'Database',
    'DatabaseConfig',
    'DatabaseError',
    'ConnectionError',
    'SessionError',
    'with_retry',
]
