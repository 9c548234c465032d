"""Epoch conversion utilities for dates.

This module provides functions for converting between dates and
linear day or second counts.

Functions:
    to_unix_timestamp: Convert a Date to a Unix timestamp in seconds.
    from_unix_timestamp: Create a Date from a Unix timestamp.
    to_days_since_year_zero: Convert a Date to a day count.
    from_days_since_year_zero: Create a Date from a day count.

The Unix epoch is 1970-01-01 00:00:00 UTC, which is day 719528 counted
from 0000-01-01. Leap seconds are not counted.

Examples:
    >>> from gregorian import Date
    >>> from gregorian.convert import to_unix_timestamp, from_unix_timestamp

    >>> to_unix_timestamp(Date(1970, 1, 1))
    0

    >>> from_unix_timestamp(-1)
    Date(1969, 12, 31)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gregorian.core.date import Date


def to_unix_timestamp(date: "Date") -> int:
    """Convert a Date to the Unix timestamp of its 00:00 UTC instant.

    Args:
        date: The Date to convert.

    Returns:
        Seconds since 1970-01-01 00:00:00 UTC.

    Examples:
        >>> from gregorian import Date
        >>> to_unix_timestamp(Date(1970, 1, 2))
        86400
    """
    return date.to_unix_timestamp()


def from_unix_timestamp(seconds: int) -> "Date":
    """Create a Date from a Unix timestamp.

    Args:
        seconds: Seconds since 1970-01-01 00:00:00 UTC.

    Returns:
        The Date containing that instant.

    Examples:
        >>> from_unix_timestamp(1592697599)
        Date(2020, 6, 20)
    """
    from gregorian.core.date import Date

    return Date.from_unix_timestamp(seconds)


def to_days_since_year_zero(date: "Date") -> int:
    """Convert a Date to the number of days since 0000-01-01.

    Examples:
        >>> from gregorian import Date
        >>> to_days_since_year_zero(Date(1, 1, 1))
        366
    """
    return date.days_since_year_zero()


def from_days_since_year_zero(days: int) -> "Date":
    """Create a Date from the number of days since 0000-01-01.

    Examples:
        >>> from_days_since_year_zero(365)
        Date(0, 12, 31)
    """
    from gregorian.core.date import Date

    return Date.from_days_since_year_zero(days)


__all__ = [
    "to_unix_timestamp",
    "from_unix_timestamp",
    "to_days_since_year_zero",
    "from_days_since_year_zero",
]
