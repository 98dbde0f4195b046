"""Date utility functions for clockiReport."""
from datetime import datetime, date, time, timezone, timedelta
from typing import Optional, Tuple


def rfc3339(dt: date, t: time) -> str:
    """Format a UTC date and time of day as an RFC 3339 timestamp.

    Args:
        dt: Date to format
        t: Time of day (seconds precision)

    Returns:
        Timestamp string such as 2024-05-15T00:00:00Z
    """
    return datetime.combine(dt, t).strftime("%Y-%m-%dT%H:%M:%SZ")


def day_window(offset: int = 0, now: Optional[datetime] = None) -> Tuple[date, str, str]:
    """Get the UTC day `offset` days away from now and its boundaries.

    The offset moves the wall-clock date, so a shift across a DST change keeps
    the time of day. Naive datetimes are system local time.

    Args:
        offset: Signed number of days from today (0 = today, -1 = yesterday)
        now: Reference instant (optional, defaults to the current local time)

    Returns:
        Tuple of (day, start, end) where start is 00:00:00 and end is 23:59:59
        of that day, both RFC 3339 in UTC
    """
    if now is None:
        now = datetime.now()
    # Aware arithmetic is wall-clock arithmetic within now's tzinfo
    shifted = now + timedelta(days=offset)
    if shifted.tzinfo is None:
        shifted = shifted.astimezone()
    target = shifted.astimezone(timezone.utc).date()
    return target, rfc3339(target, time(0, 0, 0)), rfc3339(target, time(23, 59, 59))


def report_date_str(dt: date) -> str:
    """Format a date for the report header, e.g. 'May 05, 2024'."""
    return dt.strftime("%B %d, %Y")
