"""Validation utilities for gregorian.

This module provides the checks that guard every validating
constructor. Each check raises the matching exception from
gregorian.errors, carrying the offending values.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gregorian._internal.constants import MAX_YEAR, MIN_YEAR
from gregorian.errors import InvalidDayOfMonth, InvalidDayOfYear, OverflowError

if TYPE_CHECKING:
    from gregorian.core.year import Year
    from gregorian.units.month import Month


def validate_year(year: int) -> None:
    """Validate that a year number fits in a signed 16-bit integer.

    Args:
        year: The year number to validate.

    Raises:
        OverflowError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OverflowError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_day(year: Year, month: Month, day: int) -> None:
    """Validate that a day exists in the given year and month.

    Args:
        year: The year.
        month: The month.
        day: The day of the month to validate.

    Raises:
        InvalidDayOfMonth: If day is outside 1 to the length of the month.
    """
    from gregorian._internal.calendar import days_in_month

    if day < 1 or day > days_in_month(month, year.has_leap_day()):
        raise InvalidDayOfMonth(year, month, day)


def validate_day_of_year(year: Year, day_of_year: int) -> None:
    """Validate that a day of year exists in the given year.

    Raises:
        InvalidDayOfYear: If day_of_year is outside 1 to year.total_days().
    """
    if day_of_year < 1 or day_of_year > year.total_days():
        raise InvalidDayOfYear(year, day_of_year)


__all__ = [
    "validate_year",
    "validate_day",
    "validate_day_of_year",
]
