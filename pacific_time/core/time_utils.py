"""Instant normalization and clock access.

Every instant is reduced to an aware UTC datetime, and from there to the
four UTC calendar fields the daylight decision reads. The clock is only
consulted at this boundary, when no instant is given.
"""
import logging
from datetime import date, datetime, timezone
from typing import Optional, Union

from pacific_time.core.config import get_settings
from pacific_time.core.schemas import UTCFields

logger = logging.getLogger(__name__)

Instant = Union[datetime, date, int, float, str]


def get_current_time() -> datetime:
    """Return the current time in UTC.

    Returns the pinned PACIFIC_TIME_FIXED_NOW instead when it is configured.
    """
    fixed_now = get_settings().fixed_now
    if fixed_now is not None:
        logger.debug(f"Using pinned clock {fixed_now.isoformat()}")
        return to_utc_datetime(fixed_now)
    return datetime.now(timezone.utc)


def to_utc_datetime(instant: Instant) -> datetime:
    """Normalize an instant to an aware UTC datetime.

    - aware datetime: converted to UTC
    - naive datetime: taken as UTC
    - date: midnight UTC
    - int/float: POSIX timestamp in seconds
    - str: ISO 8601, a trailing 'Z' meaning UTC

    Construction errors (bad ISO strings, out-of-range timestamps) propagate
    unchanged.
    """
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            return instant.replace(tzinfo=timezone.utc)
        return instant.astimezone(timezone.utc)

    if isinstance(instant, date):
        return datetime(instant.year, instant.month, instant.day, tzinfo=timezone.utc)

    # bool is an int subclass but never a timestamp
    if isinstance(instant, (int, float)) and not isinstance(instant, bool):
        return datetime.fromtimestamp(instant, tz=timezone.utc)

    if isinstance(instant, str):
        text = instant.strip()
        if text[-1:] in ("Z", "z"):
            text = text[:-1] + "+00:00"
        return to_utc_datetime(datetime.fromisoformat(text))

    raise TypeError(
        f"Unsupported instant type: {type(instant).__name__!r}. "
        "Supported: datetime, date, int, float, str"
    )


def resolve_instant(instant: Optional[Instant] = None) -> datetime:
    """Return the given instant in UTC, or the current time if none is given."""
    if instant is None:
        return get_current_time()
    return to_utc_datetime(instant)


def utc_fields(utc: datetime) -> UTCFields:
    """Extract calendar fields from a UTC datetime."""
    return UTCFields(
        month=utc.month,
        day=utc.day,
        weekday=utc.isoweekday() % 7,
        hour=utc.hour,
    )


def to_utc_fields(instant: Instant) -> UTCFields:
    """Normalize an instant straight to its UTC calendar fields."""
    return utc_fields(to_utc_datetime(instant))
