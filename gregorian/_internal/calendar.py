"""Calendar utilities for gregorian.

This module provides the shared day-of-year and days-in-month tables
that every higher-level conversion is built from, plus leap year logic
on plain integers.

All functions are pure. This module is not part of the public API.
"""

from __future__ import annotations

from gregorian._internal.constants import DAYS_IN_MONTH, START_DAY_OF_MONTH
from gregorian.units.month import MONTHS, Month


def has_leap_day(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Year 0 is a leap year.

    Args:
        year: The year to check (can be 0 or negative).

    Returns:
        True if the year has a February 29.

    Examples:
        >>> has_leap_day(2000)  # Divisible by 400
        True
        >>> has_leap_day(1900)  # Divisible by 100 but not 400
        False
        >>> has_leap_day(2020)  # Divisible by 4 but not 100
        True
        >>> has_leap_day(2021)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if has_leap_day(year) else 365


def days_in_month(month: Month, leap_year: bool) -> int:
    """Return the number of days in a month.

    Args:
        month: The month.
        leap_year: Whether the month lies in a leap year.

    Returns:
        Number of days in the month (28-31).
    """
    if month is Month.FEBRUARY and leap_year:
        return 29
    return DAYS_IN_MONTH[month.to_number()]


def start_day_of_year(month: Month, leap_year: bool) -> int:
    """Return the day of year of the first day of a month.

    Args:
        month: The month.
        leap_year: Whether the month lies in a leap year.

    Returns:
        The 1-based day of year (1 for January, up to 336 for December).
    """
    result = START_DAY_OF_MONTH[month.to_number()]
    if leap_year and month.to_number() > 2:
        result += 1
    return result


def day_of_year(month: Month, day_of_month: int, leap_year: bool) -> int:
    """Return the 1-based day of year for a day of a month."""
    return start_day_of_year(month, leap_year) - 1 + day_of_month


def month_and_day_from_day_of_year(
    day_of_year: int, leap_year: bool
) -> tuple[Month, int]:
    """Convert a day of year to month and day of month.

    Args:
        day_of_year: Day of year (1-365, or 1-366 in leap years).
        leap_year: Whether the day lies in a leap year.

    Returns:
        Tuple of (month, day of month).

    Raises:
        ValueError: If day_of_year is out of range for the year.

    Examples:
        >>> month_and_day_from_day_of_year(60, leap_year=False)
        (<Month.MARCH: 3>, 1)
        >>> month_and_day_from_day_of_year(60, leap_year=True)
        (<Month.FEBRUARY: 2>, 29)
    """
    total = 366 if leap_year else 365
    if day_of_year < 1 or day_of_year > total:
        raise ValueError(f"day of year must be 1-{total}, got {day_of_year}")

    for month in reversed(MONTHS):
        start = start_day_of_year(month, leap_year)
        if day_of_year >= start:
            return (month, day_of_year - start + 1)

    # Unreachable: January starts at day 1
    raise ValueError(f"day of year must be 1-{total}, got {day_of_year}")


__all__ = [
    "has_leap_day",
    "days_in_year",
    "days_in_month",
    "start_day_of_year",
    "day_of_year",
    "month_and_day_from_day_of_year",
]
