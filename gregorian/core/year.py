"""Year class representing a calendar year.

This module provides the Year class: a year number of the proleptic
Gregorian calendar with leap day logic. Year 0 exists and is a leap
year.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING

from gregorian._internal.calendar import has_leap_day, month_and_day_from_day_of_year
from gregorian._internal.validation import validate_day_of_year, validate_year
from gregorian.format.iso8601 import format_year
from gregorian.units.month import MONTHS, Month

if TYPE_CHECKING:
    from gregorian.core.date import Date
    from gregorian.core.year_month import YearMonth


class Year:
    """A year of the proleptic Gregorian calendar.

    Years are signed 16-bit numbers (-32768 to 32767). Year 0 exists
    and precedes year 1; negative years precede year 0.

    A Year compares equal to the plain integer with the same value and
    supports ``year + n`` and ``year - n`` with integers.

    Examples:
        >>> Year(2020).has_leap_day()
        True
        >>> Year(1900).total_days()
        365
        >>> Year(2020) + 1
        Year(2021)
        >>> Year(2020) == 2020
        True
    """

    __slots__ = ("_year",)

    def __init__(self, year: int) -> None:
        """Create a Year from its number.

        Args:
            year: The year number.

        Raises:
            OverflowError: If year does not fit in a signed 16-bit integer.
        """
        year = operator.index(year)
        validate_year(year)
        self._year = year

    @classmethod
    def coerce(cls, year: Year | int) -> Year:
        """Return year as a Year, converting plain integers."""
        if isinstance(year, Year):
            return year
        return cls(year)

    def to_number(self) -> int:
        """Return the year number."""
        return self._year

    def has_leap_day(self) -> bool:
        """Return True if this year has a February 29.

        Examples:
            >>> Year(2000).has_leap_day()
            True
            >>> Year(2100).has_leap_day()
            False
            >>> Year(0).has_leap_day()
            True
        """
        return has_leap_day(self._year)

    def total_days(self) -> int:
        """Return the number of days in the year (365 or 366)."""
        return 366 if self.has_leap_day() else 365

    def next(self) -> Year:
        """Return the following year."""
        return self + 1

    def prev(self) -> Year:
        """Return the preceding year."""
        return self - 1

    def with_month(self, month: Month | int) -> YearMonth:
        """Combine the year with a month to create a YearMonth."""
        from gregorian.core.year_month import YearMonth

        return YearMonth(self, month)

    def with_day_of_year(self, day_of_year: int) -> Date:
        """Return the date for a day of this year.

        Args:
            day_of_year: The 1-based day of year.

        Returns:
            The Date of that day.

        Raises:
            InvalidDayOfYear: If day_of_year is outside 1 to total_days().

        Examples:
            >>> Year(2020).with_day_of_year(60)
            Date(2020, 2, 29)
            >>> Year(2021).with_day_of_year(60)
            Date(2021, 3, 1)
        """
        from gregorian.core.date import Date

        day_of_year = operator.index(day_of_year)
        validate_day_of_year(self, day_of_year)
        month, day = month_and_day_from_day_of_year(day_of_year, self.has_leap_day())
        return Date.new_unchecked(self, month, day)

    def first_month(self) -> YearMonth:
        """Return January of this year."""
        return self.with_month(Month.JANUARY)

    def last_month(self) -> YearMonth:
        """Return December of this year."""
        return self.with_month(Month.DECEMBER)

    def months(self) -> tuple[YearMonth, ...]:
        """Return all twelve months of this year in order."""
        return tuple(self.with_month(month) for month in MONTHS)

    def first_day(self) -> Date:
        """Return January 1 of this year."""
        from gregorian.core.date import Date

        return Date.new_unchecked(self, Month.JANUARY, 1)

    def last_day(self) -> Date:
        """Return December 31 of this year."""
        from gregorian.core.date import Date

        return Date.new_unchecked(self, Month.DECEMBER, 31)

    def __add__(self, other: object) -> Year:
        """Add a number of years.

        Raises:
            OverflowError: If the result leaves the 16-bit year range.
        """
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Year(self._year + other)

    def __sub__(self, other: object) -> Year:
        """Subtract a number of years."""
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return Year(self._year - other)

    def __int__(self) -> int:
        return self._year

    def __index__(self) -> int:
        return self._year

    def __eq__(self, other: object) -> bool:
        """Check equality with another Year or an integer."""
        if isinstance(other, Year):
            return self._year == other._year
        if isinstance(other, int):
            return self._year == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, (Year, int)):
            return self._year < int(other)
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, (Year, int)):
            return self._year <= int(other)
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, (Year, int)):
            return self._year > int(other)
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, (Year, int)):
            return self._year >= int(other)
        return NotImplemented

    def __hash__(self) -> int:
        """Hash like the plain integer, so Year(n) and n are interchangeable keys."""
        return hash(self._year)

    def __repr__(self) -> str:
        return f"Year({self._year})"

    def __str__(self) -> str:
        """Return the year zero-padded to four digits, like '0044' or '-0044'."""
        return format_year(self._year)


__all__ = ["Year"]
