"""YearMonth class representing a month of a specific year.

This module provides the YearMonth class, which pairs a Year with a
Month and adds month lengths and month-offset arithmetic.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING

from gregorian._internal.calendar import days_in_month, start_day_of_year
from gregorian._internal.validation import validate_day
from gregorian.core.year import Year
from gregorian.format.iso8601 import format_year_month
from gregorian.units.month import Month

if TYPE_CHECKING:
    from gregorian.core.date import Date


class YearMonth:
    """A month of a specific year.

    A YearMonth is always valid: every combination of a Year and a
    Month exists. It carries no day, so month and year arithmetic on a
    YearMonth never fails; combining the result with a day afterwards
    (with_day) may.

    Attributes:
        year: The Year.
        month: The Month.

    Examples:
        >>> YearMonth(1900, Month.FEBRUARY).total_days()
        28
        >>> YearMonth(2000, Month.FEBRUARY).total_days()
        29
        >>> YearMonth(2020, Month.DECEMBER).next()
        YearMonth(2021, 1)
        >>> str(YearMonth(2020, 3))
        '2020-03'
    """

    __slots__ = ("_year", "_month")

    def __init__(self, year: Year | int, month: Month | int) -> None:
        """Create a YearMonth.

        Args:
            year: The year, as a Year or a plain number.
            month: The month, as a Month or a month number (1-12).

        Raises:
            InvalidMonthNumber: If month is a number outside 1-12.
            OverflowError: If year is outside the 16-bit year range.
        """
        if not isinstance(month, Month):
            month = Month.from_number(month)
        self._year = Year.coerce(year)
        self._month = month

    @property
    def year(self) -> Year:
        """Return the year component."""
        return self._year

    @property
    def month(self) -> Month:
        """Return the month component."""
        return self._month

    def total_days(self) -> int:
        """Return the number of days in this month (28-31)."""
        return days_in_month(self._month, self._year.has_leap_day())

    def day_of_year(self) -> int:
        """Return the day of year of the first day of this month.

        Examples:
            >>> YearMonth(2019, Month.MARCH).day_of_year()
            60
            >>> YearMonth(2020, Month.MARCH).day_of_year()
            61
        """
        return start_day_of_year(self._month, self._year.has_leap_day())

    def next(self) -> YearMonth:
        """Return the following month, moving to January of the next year after December."""
        if self._month is Month.DECEMBER:
            return YearMonth(self._year.next(), Month.JANUARY)
        return YearMonth(self._year, self._month.next())

    def prev(self) -> YearMonth:
        """Return the preceding month, moving to December of the previous year before January."""
        if self._month is Month.JANUARY:
            return YearMonth(self._year.prev(), Month.DECEMBER)
        return YearMonth(self._year, self._month.prev())

    def add_months(self, months: int) -> YearMonth:
        """Return the YearMonth offset by the given number of months.

        Args:
            months: Number of months to add (can be negative).

        Returns:
            A new YearMonth.

        Raises:
            OverflowError: If the resulting year is out of range.

        Examples:
            >>> YearMonth(2020, Month.NOVEMBER).add_months(3)
            YearMonth(2021, 2)
            >>> YearMonth(2020, Month.JANUARY).add_months(-1)
            YearMonth(2019, 12)
        """
        # Zero-based month index relative to January of this year.
        # divmod floors, so -1 becomes (-1 year, December).
        base = self._month.to_number() - 1 + months
        year_offset, month_index = divmod(base, 12)
        return YearMonth(
            self._year + year_offset,
            Month.JANUARY.wrapping_add(month_index),
        )

    def sub_months(self, months: int) -> YearMonth:
        """Return the YearMonth offset backwards by the given number of months."""
        return self.add_months(-months)

    def add_years(self, years: int) -> YearMonth:
        """Return the same month the given number of years later."""
        return YearMonth(self._year + years, self._month)

    def sub_years(self, years: int) -> YearMonth:
        """Return the same month the given number of years earlier."""
        return YearMonth(self._year - years, self._month)

    def with_day(self, day: int) -> Date:
        """Combine this month with a day of the month.

        Args:
            day: The day of the month.

        Returns:
            The Date.

        Raises:
            InvalidDayOfMonth: If the day does not exist in this month.

        Examples:
            >>> YearMonth(2020, Month.FEBRUARY).with_day(29)
            Date(2020, 2, 29)
        """
        from gregorian.core.date import Date

        day = operator.index(day)
        validate_day(self._year, self._month, day)
        return Date.new_unchecked(self._year, self._month, day)

    def with_day_unchecked(self, day: int) -> Date:
        """Combine this month with a day without checking it.

        The caller guarantees 1 <= day <= total_days(). Never pass
        untrusted input here; use with_day() instead.
        """
        from gregorian.core.date import Date

        return Date.new_unchecked(self._year, self._month, day)

    def first_day(self) -> Date:
        """Return the first day of this month."""
        return self.with_day_unchecked(1)

    def last_day(self) -> Date:
        """Return the last day of this month."""
        return self.with_day_unchecked(self.total_days())

    def _key(self) -> tuple[int, int]:
        return (self._year.to_number(), self._month.to_number())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        """Return a detailed string representation, like 'YearMonth(2024, 1)'."""
        year, month = self._key()
        return f"YearMonth({year}, {month})"

    def __str__(self) -> str:
        """Return the canonical 'YYYY-MM' form."""
        return format_year_month(self)


__all__ = ["YearMonth"]
