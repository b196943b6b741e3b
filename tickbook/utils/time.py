"""
Timestamp helpers for opaque, lexicographically ordered record times.

Records keep their timestamps as strings so that the original text is
preserved and the index can compare them directly. These helpers parse
them into datetimes only to validate the format or to check that string
order and chronological order agree.
"""

from datetime import datetime
from typing import Iterable, Optional

DEFAULT_TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S.%f"

# Accepted when no explicit format is given
FALLBACK_TIMESTAMP_FORMATS = (
    DEFAULT_TIMESTAMP_FORMAT,
    "%Y/%m/%d %H:%M:%S",
)


def matches_format(timestamp: str, fmt: str) -> bool:
    """
    Check whether a timestamp is exactly the given format's rendering.

    The timestamp must parse with fmt and render back to the same text, so
    unpadded fields such as "2020/1/9" are rejected.

    Args:
        timestamp: Record timestamp
        fmt: strptime format string

    Returns:
        True if the timestamp matches the format exactly
    """
    try:
        parsed = datetime.strptime(timestamp, fmt)
    except (TypeError, ValueError):
        return False

    # strptime accepts unpadded fields, which break string ordering
    return parsed.strftime(fmt) == timestamp


def to_datetime(timestamp: str, fmt: Optional[str] = None) -> datetime:
    """
    Parse a record timestamp into a naive datetime.

    Args:
        timestamp: Record timestamp
        fmt: strptime format, defaults to trying the known record formats

    Returns:
        Parsed datetime

    Raises:
        ValueError: If the timestamp matches none of the formats
    """
    formats = (fmt,) if fmt is not None else FALLBACK_TIMESTAMP_FORMATS
    for candidate in formats:
        try:
            return datetime.strptime(timestamp, candidate)
        except ValueError:
            continue
    raise ValueError(f"Timestamp '{timestamp}' does not match {', '.join(formats)}")


def is_lexicographically_ordered(timestamps: Iterable[str], fmt: Optional[str] = None) -> bool:
    """
    Check that sorting timestamps as strings sorts them chronologically.

    Args:
        timestamps: Record timestamps, any order, duplicates allowed
        fmt: strptime format, defaults to the known record formats

    Returns:
        True if string order equals time order for every adjacent pair

    Raises:
        ValueError: If any timestamp cannot be parsed
    """
    ordered = sorted(set(timestamps))
    parsed = [to_datetime(ts, fmt) for ts in ordered]
    return all(earlier <= later for earlier, later in zip(parsed, parsed[1:]))
