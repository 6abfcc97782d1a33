"""Date and time helpers.

All instants are handled as timezone-aware UTC datetimes. Naive values are
assumed to already be in UTC. Parsing never raises: anything that cannot be
read as an ISO-8601 instant is treated as absent.
"""

from datetime import date, datetime, timezone
from typing import Optional, Union

DateInput = Union[str, datetime, date, None]


def now_utc() -> datetime:
    """Get the current time in UTC."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """
    Ensure a datetime is timezone-aware and expressed in UTC.

    Args:
        dt: Datetime to convert

    Returns:
        datetime: UTC datetime (naive input is assumed to be UTC)
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_instant(value: DateInput) -> Optional[datetime]:
    """
    Parse a date-like value into a UTC datetime.

    Accepts ISO-8601 strings (with or without time and offset, a trailing 'Z'
    is understood), datetime and date objects.

    Returns:
        Optional[datetime]: The parsed instant, or None if the value is empty or invalid
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
        except ValueError:
            return None
    else:
        return None

    # Offsets near year 1 or 9999 can shift the instant out of range
    try:
        return ensure_utc(parsed)
    except (OverflowError, ValueError):
        return None


def to_iso_string(value: DateInput) -> Optional[str]:
    """
    Normalize any date-like input to an ISO-8601 UTC string.

    The format has millisecond precision and a 'Z' suffix,
    e.g. "2024-01-15T10:30:00.000Z".

    Returns:
        Optional[str]: ISO string, or None if the input is empty or invalid
    """
    parsed = parse_instant(value)
    if parsed is None:
        return None
    return parsed.isoformat(timespec='milliseconds').replace('+00:00', 'Z')
