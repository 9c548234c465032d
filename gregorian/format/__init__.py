"""Calendar formatting and parsing.

This module provides functions for converting calendar values to and
from their canonical ISO 8601 string representations.

Functions:
    format_date: Format a Date as YYYY-MM-DD.
    format_year_month: Format a YearMonth as YYYY-MM.
    format_year: Format a year number as YYYY.
    parse_date: Parse a YYYY-MM-DD string into a Date.

Examples:
    >>> from gregorian import Date
    >>> from gregorian.format import format_date, parse_date

    >>> parse_date("2024-01-15")
    Date(2024, 1, 15)

    >>> format_date(Date(2024, 1, 15))
    '2024-01-15'
"""

from __future__ import annotations

from gregorian.format.iso8601 import (
    format_date,
    format_year,
    format_year_month,
    parse_date,
)

__all__: list[str] = [
    "format_date",
    "format_year",
    "format_year_month",
    "parse_date",
]
