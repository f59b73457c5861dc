"""
Time-of-day arithmetic.

Schedule math works on integer minutes since midnight. Values are only
wrapped into the 0-1439 range when formatted for display, never while a
schedule is being generated.
"""

import math
from datetime import datetime, time

import pytz

from .errors import TimeParseError

MINUTES_PER_DAY = 24 * 60
DEFAULT_TIMEZONE = "UTC"


def parse_time(time_str: str) -> time:
    """Parse "HH:MM" string to time object."""
    if not isinstance(time_str, str):
        raise TimeParseError(f"Time must be an 'HH:MM' string, got {time_str!r}")

    parts = time_str.strip().split(":")
    if (
        len(parts) != 2
        or not all(p.isascii() and p.isdigit() for p in parts)
        or len(parts[0]) > 2
        or len(parts[1]) != 2
    ):
        raise TimeParseError(f"Invalid time format: {time_str!r}")

    hour, minute = int(parts[0]), int(parts[1])
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise TimeParseError(f"Time out of range: {time_str!r}")
    return time(hour, minute)


def time_to_minutes(t: time) -> int:
    """Convert time to minutes since midnight."""
    return t.hour * 60 + t.minute


def minutes_to_time(minutes: int) -> time:
    """Convert minutes since midnight to time (handles wrap-around)."""
    minutes = int(minutes) % MINUTES_PER_DAY
    return time(minutes // 60, minutes % 60)


def parse_minutes(time_str: str) -> int:
    """Parse "HH:MM" straight to minutes since midnight."""
    return time_to_minutes(parse_time(time_str))


def format_time(t: time) -> str:
    """Format time as "HH:MM" (24-hour format for data fields)."""
    return f"{t.hour:02d}:{t.minute:02d}"


def format_minutes(minutes: int) -> str:
    """Format minutes since midnight as "HH:MM", wrapping past midnight."""
    return format_time(minutes_to_time(minutes))


def format_time_12h(t: time) -> str:
    """Format time as "H:MM AM/PM" (12-hour format for user-facing text)."""
    hour = t.hour
    period = "AM" if hour < 12 else "PM"
    if hour == 0:
        hour = 12
    elif hour > 12:
        hour -= 12
    return f"{hour}:{t.minute:02d} {period}"


def format_time_range(start_minutes: int, end_minutes: int) -> str:
    """Format an interval for display, e.g. "08:05–08:35"."""
    return f"{format_minutes(start_minutes)}–{format_minutes(end_minutes)}"


def hours_to_minutes(hours: float) -> int:
    """Convert a policy duration in hours to whole minutes."""
    return int(round(hours * 60))


def add_hours(minutes: int, hours: float) -> int:
    """
    Add hours to minutes since midnight (no wrap-around).

    The hours are rounded to whole minutes first, so the result is always an
    integer minute value.
    """
    return minutes + hours_to_minutes(hours)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def round_to_nearest_5(minutes: float) -> int:
    """Round minutes to the nearest 5-minute increment (ties round up)."""
    return _round_half_up(minutes / 5) * 5


def format_duration(minutes: float) -> str:
    """
    Format a duration for display.

    Under an hour renders as whole minutes ("30 min"); otherwise hours plus
    remaining minutes ("1h 30m"), dropping the minutes when zero ("2h").
    """
    total = _round_half_up(minutes)
    if total < 60:
        return f"{total} min"

    hours, mins = divmod(total, 60)
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"


def get_current_datetime_in_tz(tz_name: str = DEFAULT_TIMEZONE) -> datetime:
    """
    Get current datetime in the specified timezone.

    datetime.now() on a serverless host is UTC; "now" for a household is
    wherever the household lives.

    Args:
        tz_name: IANA timezone name (e.g., "America/Los_Angeles")

    Returns:
        Current datetime in the specified timezone (naive, for local comparisons)
    """
    tz = pytz.timezone(tz_name)
    now_utc = datetime.now(pytz.UTC)
    now_local = now_utc.astimezone(tz)
    return now_local.replace(tzinfo=None)


def get_current_minutes(tz_name: str = DEFAULT_TIMEZONE) -> int:
    """Current local time as minutes since midnight."""
    now = get_current_datetime_in_tz(tz_name)
    return now.hour * 60 + now.minute


def get_today_iso(tz_name: str = DEFAULT_TIMEZONE) -> str:
    """Today's local date as "YYYY-MM-DD"."""
    return get_current_datetime_in_tz(tz_name).date().isoformat()
