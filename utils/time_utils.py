"""
utils/time_utils.py

Purpose: Time helpers

- Local completion timestamps for notifications
- Timestamp formatting
"""

from datetime import datetime
from typing import Optional

COMPLETION_TIME_FORMAT = "%Y-%m-%d %I:%M %p"


def format_timestamp(dt: Optional[datetime], format_str: str = "%Y-%m-%d %H:%M:%S") -> str:
    """
    Formats a datetime object to string.
    """
    if not dt:
        return "N/A"
    return dt.strftime(format_str)


def local_completion_time(now: Optional[datetime] = None) -> str:
    """
    Returns the current local time formatted for an SMS, e.g. "2025-01-05 02:30 PM".
    """
    return format_timestamp(now or datetime.now(), COMPLETION_TIME_FORMAT)
