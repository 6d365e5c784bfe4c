"""Pacific Standard Time vs. Pacific Daylight Time.

Handles ONLY the U.S. Pacific Time policy effective 2007 (Energy Policy Act
of 2005): clocks go from 02:00 PST to 03:00 PDT on the second Sunday in
March, and from 02:00 PDT back to 01:00 PST on the first Sunday in November.
The rule is applied to every instant, including ones before 2007. No other
jurisdictions or historical rules are accounted for.

Offsets are minutes behind UTC, the convention of JavaScript's
Date.getTimezoneOffset(): 480 for PST, 420 for PDT. utc_offset_minutes()
gives the negated value used by datetime.utcoffset().

Import the public API from this module:

    from pacific_time.core.offset import (
        STANDARD_OFFSET, DAYLIGHT_OFFSET, is_daylight_time, pacific_time_offset,
    )
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from pacific_time.core.schemas import PacificTimeInfo, UTCFields
from pacific_time.core.time_utils import Instant, resolve_instant, utc_fields

logger = logging.getLogger(__name__)

STANDARD_OFFSET = 480
DAYLIGHT_OFFSET = 420

PST = timezone(timedelta(minutes=-STANDARD_OFFSET), "PST")
PDT = timezone(timedelta(minutes=-DAYLIGHT_OFFSET), "PDT")

MARCH = 3
NOVEMBER = 11
SUNDAY = 0

# 02:00 local on transition day, in UTC. Only exact because both offsets are
# whole hours.
SPRING_FORWARD_UTC_HOUR = 2 + STANDARD_OFFSET // 60  # 10:00 UTC
FALL_BACK_UTC_HOUR = 2 + DAYLIGHT_OFFSET // 60  # 09:00 UTC


def is_daylight_fields(fields: UTCFields) -> bool:
    """Return True if the UTC calendar fields fall within Pacific Daylight Time."""
    month = fields.month
    # Date of the most recent Sunday; zero or negative if there hasn't been
    # one yet this month.
    prev_sunday = fields.day - fields.weekday

    if month < MARCH:
        return False

    if month == MARCH:
        if prev_sunday < 8:
            # One or fewer Sundays so far
            return False
        if fields.weekday == SUNDAY and prev_sunday < 15:
            # Second Sunday
            logger.debug(f"Spring-forward day, hour {fields.hour} UTC")
            return fields.hour >= SPRING_FORWARD_UTC_HOUR
        return True

    if month < NOVEMBER:
        return True

    if month == NOVEMBER:
        if prev_sunday < 1:
            return True
        if fields.weekday == SUNDAY and prev_sunday < 8:
            # First Sunday
            logger.debug(f"Fall-back day, hour {fields.hour} UTC")
            return fields.hour < FALL_BACK_UTC_HOUR
        return False

    return False


def is_daylight_time(instant: Optional[Instant] = None) -> bool:
    """Return True if the given (or by default, current) instant is within
    Pacific Daylight Time per the U.S. policy effective 2007.
    """
    return is_daylight_fields(utc_fields(resolve_instant(instant)))


def pacific_time_offset(instant: Optional[Instant] = None) -> int:
    """Return 480 (PST) or 420 (PDT), in minutes behind UTC."""
    return DAYLIGHT_OFFSET if is_daylight_time(instant) else STANDARD_OFFSET


def utc_offset_minutes(instant: Optional[Instant] = None) -> int:
    """Return -480 (PST) or -420 (PDT), in minutes to add to UTC."""
    return -pacific_time_offset(instant)


def get_pacific_offset_str(instant: Optional[Instant] = None) -> str:
    """Return '-08:00' during PST or '-07:00' during PDT."""
    return "-07:00" if is_daylight_time(instant) else "-08:00"


def get_pacific_abbreviation(instant: Optional[Instant] = None) -> str:
    return "PDT" if is_daylight_time(instant) else "PST"


def to_pacific_time(instant: Optional[Instant] = None) -> datetime:
    """Return the instant as Pacific wall-clock time with a fixed PST/PDT offset."""
    utc = resolve_instant(instant)
    tz = PDT if is_daylight_fields(utc_fields(utc)) else PST
    return utc.astimezone(tz)


def pacific_time_info(instant: Optional[Instant] = None) -> PacificTimeInfo:
    """Evaluate everything about one instant from a single clock read."""
    utc = resolve_instant(instant)
    daylight = is_daylight_fields(utc_fields(utc))
    tz = PDT if daylight else PST
    return PacificTimeInfo(
        is_daylight=daylight,
        offset_minutes=DAYLIGHT_OFFSET if daylight else STANDARD_OFFSET,
        utc_offset="-07:00" if daylight else "-08:00",
        abbreviation=tz.tzname(None),
        local_time=utc.astimezone(tz),
    )
