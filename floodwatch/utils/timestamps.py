"""
Timestamp parsing shared by the station store records and NWPS series.
"""

from datetime import datetime
from typing import Any, Optional


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp, accepting a trailing "Z" for UTC.

    Args:
        value: ISO string, datetime (returned as-is) or None

    Returns:
        datetime, or None if the value is empty or not a valid timestamp.
    """
    if value is None or isinstance(value, datetime):
        return value
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None
