"""
UTC clock helpers.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def utc_now_ms() -> int:
    """
    Return the current Unix time in whole milliseconds.
    Used where storage keys embed a millisecond timestamp.

    Returns:
        Milliseconds since the epoch
    """
    return int(utc_now().timestamp() * 1000)
