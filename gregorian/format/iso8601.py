"""ISO 8601 formatting and parsing.

This module provides functions for converting calendar values to and
from their canonical ISO 8601 string representations.

Functions:
    format_year: Format a year number as YYYY.
    format_year_month: Format a YearMonth as YYYY-MM.
    format_date: Format a Date as YYYY-MM-DD.
    parse_date: Parse a YYYY-MM-DD string into a Date.

Years are zero-padded to four digits and use more digits when needed
(|year| >= 10000). Negative years carry a leading minus sign before
the digits. Months and days are always two digits:

    2024-01-15
    0000-01-01
    -0044-03-15
    12345-06-07

Examples:
    >>> from gregorian import Date
    >>> from gregorian.format import format_date, parse_date

    >>> format_date(Date(2024, 1, 15))
    '2024-01-15'

    >>> parse_date("-0044-03-15")
    Date(-44, 3, 15)
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from gregorian._internal.constants import MAX_YEAR, MIN_YEAR
from gregorian.errors import InvalidDateSyntax

if TYPE_CHECKING:
    from gregorian.core.date import Date
    from gregorian.core.year_month import YearMonth

# Year: optional minus sign and four digits, or more without a leading zero;
# month and day: two digits
_DATE_PATTERN = re.compile(r"(-?(?:[0-9]{4}|[1-9][0-9]{4,}))-([0-9]{2})-([0-9]{2})")


def format_year(year: int) -> str:
    """Format a year number with at least four digits.

    Examples:
        >>> format_year(44)
        '0044'
        >>> format_year(-44)
        '-0044'
    """
    if year < 0:
        return f"-{-year:04d}"
    return f"{year:04d}"


def format_year_month(value: YearMonth) -> str:
    """Format a YearMonth as YYYY-MM.

    Examples:
        >>> from gregorian import YearMonth
        >>> format_year_month(YearMonth(2024, 3))
        '2024-03'
    """
    year = format_year(value.year.to_number())
    return f"{year}-{value.month.to_number():02d}"


def format_date(value: Date) -> str:
    """Format a Date as YYYY-MM-DD.

    Examples:
        >>> from gregorian import Date
        >>> format_date(Date(2024, 1, 15))
        '2024-01-15'
        >>> format_date(Date(-1, 12, 31))
        '-0001-12-31'
    """
    year = format_year(value.year.to_number())
    return f"{year}-{value.month.to_number():02d}-{value.day:02d}"


def parse_date(s: str) -> Date:
    """Parse a YYYY-MM-DD string into a Date.

    The whole string must match; surrounding whitespace, missing or
    extra fields and non-digit characters are rejected. A leading
    minus sign belongs to the year. Only the form format_date() emits
    is accepted: no signed year 0 and no extra leading zeros.

    Args:
        s: The string to parse.

    Returns:
        The parsed Date.

    Raises:
        InvalidDateSyntax: If the string does not match YYYY-MM-DD, or
            the year does not fit in the supported range.
        InvalidDate: If the components do not form a valid date
            (InvalidMonthNumber or InvalidDayOfMonth).

    Examples:
        >>> parse_date("2020-01-02")
        Date(2020, 1, 2)

        >>> parse_date("not-a-date")
        Traceback (most recent call last):
        ...
        gregorian.errors.InvalidDateSyntax: invalid date syntax: expected "YYYY-MM-DD", got 'not-a-date'

        >>> parse_date("2019-30-12")
        Traceback (most recent call last):
        ...
        gregorian.errors.InvalidMonthNumber: invalid month number: expected 1-12, got 30
    """
    # Import here to avoid circular imports
    from gregorian.core.date import Date

    if not isinstance(s, str):
        raise InvalidDateSyntax(s)

    match = _DATE_PATTERN.fullmatch(s)
    if not match:
        raise InvalidDateSyntax(s)

    year_text = match.group(1)
    year = int(year_text)
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidDateSyntax(s)
    # Year 0 is only ever written unsigned
    if year == 0 and year_text.startswith("-"):
        raise InvalidDateSyntax(s)
    month = int(match.group(2))
    day = int(match.group(3))

    return Date(year, month, day)


__all__ = [
    "format_year",
    "format_year_month",
    "format_date",
    "parse_date",
]
