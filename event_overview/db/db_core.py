"""Engine and session management for the SQL event repository.

Development defaults to a SQLite file under ``data/``; production requires
DATABASE_URL (PostgreSQL through psycopg).
"""

from contextlib import contextmanager
import logging
from pathlib import Path
from typing import Any, Dict, Generator, Optional

from sqlalchemy import create_engine, Engine, inspect
from sqlalchemy.orm import scoped_session, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from ..models import Base
from ..models.record import EventRecord  # noqa: F401  (registers the events table)
from ..config.environment import IS_PRODUCTION_ENVIRONMENT
from ..config.settings import Config, PROJECT_ROOT

logger = logging.getLogger(__name__)

DEFAULT_SQLITE_PATH = PROJECT_ROOT / 'data' / 'events.db'


class DatabaseError(Exception):
    """Base exception for database-related errors."""
    pass


class ConnectionError(DatabaseError):
    """The engine could not be created or is missing."""
    pass


class SessionError(DatabaseError):
    """A unit of work failed and was rolled back."""
    pass


class DatabaseConfig:
    """Where the events database lives and how its connections are pooled."""

    def __init__(
        self,
        database_url: Optional[str] = None,
        sqlite_path: Optional[Path] = None,
        echo: bool = False,
        pool_size: int = 3,
        max_overflow: int = 4,
        pool_timeout: int = 30,
        pool_recycle: int = 3600
    ):
        """
        Args:
            database_url: SQLAlchemy URL; falls back to DATABASE_URL, then to sqlite_path
            sqlite_path: SQLite file used when no URL is configured
            echo: Log every SQL statement
            pool_size: Permanent connections (server databases only)
            max_overflow: Extra connections allowed under load
            pool_timeout: Seconds to wait for a free connection
            pool_recycle: Seconds after which a connection is replaced

        Raises:
            ValueError: In production when no database URL is configured
        """
        self.database_url = database_url or Config.DATABASE_URL or None
        if IS_PRODUCTION_ENVIRONMENT and not self.database_url:
            raise ValueError("DATABASE_URL must be set in production")
        self.sqlite_path = Path(sqlite_path) if sqlite_path else DEFAULT_SQLITE_PATH
        self.echo = echo
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self.pool_recycle = pool_recycle

    @property
    def connection_url(self) -> str:
        return self.database_url or f"sqlite:///{self.sqlite_path}"

    @property
    def is_sqlite(self) -> bool:
        return self.connection_url.startswith('sqlite')

    def get_engine_args(self) -> Dict[str, Any]:
        """Keyword arguments for ``create_engine``."""
        if self.is_sqlite:
            # One shared connection so in-memory databases survive across sessions and threads
            return {
                'echo': self.echo,
                'connect_args': {'check_same_thread': False},
                'poolclass': StaticPool,
            }
        return {
            'echo': self.echo,
            'pool_size': self.pool_size,
            'max_overflow': self.max_overflow,
            'pool_timeout': self.pool_timeout,
            'pool_recycle': self.pool_recycle,
            'pool_pre_ping': True,
        }


class Database:
    """Owns one engine and hands out transactional sessions."""

    def __init__(self, config: Optional[DatabaseConfig] = None):
        self.config = config or DatabaseConfig()
        self._sessions = scoped_session(sessionmaker(expire_on_commit=False))
        self._schema_ready = False
        self.engine: Engine = self._create_engine()
        self._sessions.configure(bind=self.engine)

    def _create_engine(self) -> Engine:
        if self.config.is_sqlite and self.config.database_url is None:
            self.config.sqlite_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            return create_engine(self.config.connection_url, **self.config.get_engine_args())
        except Exception as e:
            raise ConnectionError(f"Failed to create database engine: {e}") from e

    def init_db(self) -> None:
        """Create the events table if needed."""
        try:
            Base.metadata.create_all(self.engine)
        except Exception as e:
            raise DatabaseError(f"Failed to initialize database schema: {e}") from e
        self._schema_ready = True
        logger.info("Database schema initialized")

    def ensure_tables_exist(self) -> None:
        """Create missing tables once per Database instance."""
        if self._schema_ready:
            return
        try:
            missing = set(Base.metadata.tables) - set(inspect(self.engine).get_table_names())
        except Exception as e:
            raise DatabaseError(f"Failed to inspect database schema: {e}") from e
        if missing:
            logger.info(f"Creating missing tables: {', '.join(sorted(missing))}")
            self.init_db()
        self._schema_ready = True

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Run a unit of work: commit on success, roll back on any error.

        Example:
            with db.session() as session:
                record = session.get(EventRecord, event_id)

        Raises:
            SessionError: If anything inside the block fails
        """
        self.ensure_tables_exist()
        session = self._sessions()
        try:
            yield session
            session.commit()
        except Exception as e:
            session.rollback()
            raise SessionError(f"Database session error: {e}") from e
        finally:
            self._sessions.remove()

    def dispose(self) -> None:
        """Close every pooled connection."""
        self.engine.dispose()
