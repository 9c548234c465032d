"""Calendar conversion utilities.

This module provides functions for converting calendar values to and from
other representations:
    - JSON serialization and deserialization
    - Unix timestamps and day counts since year 0

Examples:
    >>> from gregorian import Date
    >>> from gregorian.convert import to_json, from_json

    >>> d = Date(2024, 1, 15)
    >>> data = to_json(d)
    >>> restored = from_json(data)
    >>> restored == d
    True

    >>> from gregorian.convert import to_unix_timestamp, from_unix_timestamp
    >>> ts = to_unix_timestamp(d)
    >>> from_unix_timestamp(ts) == d
    True
"""

from __future__ import annotations

from gregorian.convert.json import from_json, to_json
from gregorian.convert.epoch import (
    from_days_since_year_zero,
    from_unix_timestamp,
    to_days_since_year_zero,
    to_unix_timestamp,
)

__all__ = [
    # JSON
    "to_json",
    "from_json",
    # Epoch
    "to_unix_timestamp",
    "from_unix_timestamp",
    "to_days_since_year_zero",
    "from_days_since_year_zero",
]
