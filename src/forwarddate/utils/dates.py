"""Human-readable rendering of Telegram timestamps."""
from __future__ import annotations

from datetime import datetime, timezone

# Locale-independent names so the output does not depend on LC_TIME.
_WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_timestamp(timestamp: int) -> str | None:
    """
    Format a Unix timestamp as a UTC date string.

    Args:
        timestamp: Seconds since the Unix epoch

    Returns:
        e.g. ``Thursday, January 01, 1970 at 00:00:00 UTC``, or None when the
        timestamp is outside the range a calendar date can represent
    """
    try:
        moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None

    return (
        f"{_WEEKDAYS[moment.weekday()]}, {_MONTHS[moment.month - 1]} "
        f"{moment.day:02d}, {moment.year:04d} at {moment:%H:%M:%S} UTC"
    )
