"""Retry helper for transient database failures."""

import logging
import time
from functools import wraps
from typing import Any, Callable, Tuple, Type, TypeVar

from sqlalchemy.exc import OperationalError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _is_retryable(error: BaseException, retry_on: Tuple[Type[BaseException], ...]) -> bool:
    # Session errors carry the driver error as their cause
    return isinstance(error, retry_on) or isinstance(error.__cause__, retry_on)


def with_retry(
    max_attempts: int = 3,
    delay: float = 0.1,
    backoff: float = 2,
    retry_on: Tuple[Type[BaseException], ...] = (OperationalError,)
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Retry a database call when it fails with a transient error.

    Args:
        max_attempts: Total number of calls before giving up
        delay: Seconds to wait before the second call
        backoff: Factor applied to the wait after each failure
        retry_on: Errors (raised directly or as the cause) worth retrying

    Example:
        @with_retry(max_attempts=3)
        def count_events(db: Database) -> int:
            with db.session() as session:
                return session.query(EventRecord).count()
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            wait = delay
            for attempt in range(1, max_attempts + 1):
                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    if attempt == max_attempts or not _is_retryable(e, retry_on):
                        raise
                    logger.warning(
                        f"{func.__name__} failed (attempt {attempt}/{max_attempts}): {e}. "
                        f"Retrying in {wait}s"
                    )
                    time.sleep(wait)
                    wait *= backoff
            raise RuntimeError(f"{func.__name__} called with max_attempts={max_attempts}")

        return wrapper
    return decorator
