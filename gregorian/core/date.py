"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates
in the proleptic Gregorian calendar, including the conversions between
dates and linear day counts that all date arithmetic is built on.

Day counts are zero-based and relative to 1 January of year 0:
``Date(0, 1, 1).days_since_year_zero() == 0``.
"""

from __future__ import annotations

import operator
from typing import overload

from gregorian._internal.calendar import day_of_year, month_and_day_from_day_of_year
from gregorian._internal.constants import (
    CENTURY_MARCH_FIRST,
    DAYS_IN_4_YEARS,
    DAYS_IN_400_YEARS,
    DAYS_IN_YEAR,
    SECONDS_PER_DAY,
    UNIX_EPOCH_DAYS,
)
from gregorian._internal.validation import validate_day
from gregorian.core.year import Year
from gregorian.core.year_month import YearMonth
from gregorian.format.iso8601 import format_date, parse_date
from gregorian.units.month import Month


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date represents a specific calendar day with year, month, and day
    components. The Gregorian rules are extended to dates before the
    calendar's adoption, and year 0 exists (it is a leap year).

    Dates are immutable, hashable and ordered chronologically.

    Attributes:
        year: The Year.
        month: The Month.
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.year
        Year(2024)
        >>> d.month
        <Month.JANUARY: 1>
        >>> d.day
        15

        >>> Date(2024, Month.FEBRUARY, 29)  # Valid leap year date
        Date(2024, 2, 29)

        >>> Date(2021, 1, 31).add_months(2)
        Date(2021, 3, 31)
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: Year | int, month: Month | int, day: int) -> None:
        """Create a Date from year, month, and day.

        The month is checked before the day, since a day can only be
        checked against a valid month.

        Args:
            year: The year, as a Year or a plain number.
            month: The month, as a Month or a month number (1-12).
            day: The day of the month.

        Raises:
            InvalidMonthNumber: If month is a number outside 1-12.
            InvalidDayOfMonth: If day does not exist in the month.
            OverflowError: If year is outside the 16-bit year range.

        Examples:
            >>> Date(2024, 1, 15)
            Date(2024, 1, 15)

            >>> Date(2023, 2, 29)  # Invalid: 2023 is not a leap year
            Traceback (most recent call last):
            ...
            gregorian.errors.InvalidDayOfMonth: invalid day for February 2023: expected 1-28, got 29
        """
        if not isinstance(month, Month):
            month = Month.from_number(month)
        year = Year.coerce(year)
        day = operator.index(day)
        validate_day(year, month, day)

        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def new_unchecked(cls, year: Year | int, month: Month, day: int) -> Date:
        """Create a Date without checking that the day exists.

        The caller guarantees that 1 <= day <= the length of the month.
        This is meant for algorithms that have already established
        validity; never pass parsed or user-supplied values here.

        Args:
            year: The year.
            month: The month.
            day: The day of the month.

        Returns:
            The Date.
        """
        date = cls.__new__(cls)
        date._year = Year.coerce(year)
        date._month = month
        date._day = day
        return date

    @classmethod
    def today(cls) -> Date:
        """Return today's date in the local timezone.

        Examples:
            >>> d = Date.today()  # Returns current date
            >>> d.year >= 2024
            True
        """
        import datetime

        now = datetime.date.today()
        return cls(now.year, now.month, now.day)

    @classmethod
    def today_utc(cls) -> Date:
        """Return today's date in UTC."""
        import time

        return cls.from_unix_timestamp(int(time.time()))

    @classmethod
    def from_unix_timestamp(cls, seconds: int) -> Date:
        """Return the date of a unix timestamp.

        The timestamp is the number of seconds since 1970-01-01 00:00
        UTC, not counting leap seconds. Negative timestamps round down
        to the earlier day.

        Args:
            seconds: The unix timestamp.

        Returns:
            The Date containing that instant.

        Raises:
            OverflowError: If the date is outside the year range.

        Examples:
            >>> Date.from_unix_timestamp(86400)
            Date(1970, 1, 2)
            >>> Date.from_unix_timestamp(-1)
            Date(1969, 12, 31)
        """
        days = seconds // SECONDS_PER_DAY
        return cls.from_days_since_year_zero(UNIX_EPOCH_DAYS + days)

    def to_unix_timestamp(self) -> int:
        """Return the unix timestamp of 00:00 UTC on this date.

        Examples:
            >>> Date(1970, 1, 1).to_unix_timestamp()
            0
            >>> Date(2020, 6, 20).to_unix_timestamp()
            1592611200
        """
        return (self.days_since_year_zero() - UNIX_EPOCH_DAYS) * SECONDS_PER_DAY

    @classmethod
    def from_days_since_year_zero(cls, days: int) -> Date:
        """Return the date a number of days after 1 January of year 0.

        This is the inverse of days_since_year_zero().

        The 400-year cycle is not uniform: years 100, 200 and 300 of
        each cycle skip their leap day. Once the day is located within
        its cycle, those skipped leap days are added back in
        ("pretend" leap days) so that the rest of the cycle is a plain
        sequence of 1461-day four-year blocks, each starting with a
        leap year.

        Args:
            days: Number of days since 0000-01-01 (can be negative).

        Returns:
            The Date.

        Raises:
            OverflowError: If the date is outside the year range.

        Examples:
            >>> Date.from_days_since_year_zero(0)
            Date(0, 1, 1)
            >>> Date.from_days_since_year_zero(-1)
            Date(-1, 12, 31)
            >>> Date.from_days_since_year_zero(719528)
            Date(1970, 1, 1)
        """
        whole_cycles, day_index = divmod(days, DAYS_IN_400_YEARS)

        pretend_leap_days = sum(
            1 for threshold in CENTURY_MARCH_FIRST if day_index >= threshold
        )

        four_year_cycles, day_of_four_year_cycle = divmod(
            day_index + pretend_leap_days, DAYS_IN_4_YEARS
        )

        # The first year of each block has 366 days: days 0-365.
        if day_of_four_year_cycle == 0:
            year_of_four_year_cycle = 0
        else:
            year_of_four_year_cycle = (day_of_four_year_cycle - 1) // DAYS_IN_YEAR

        day = day_of_four_year_cycle - year_of_four_year_cycle * DAYS_IN_YEAR
        if day_of_four_year_cycle >= 366:
            day -= 1
        # 1-based day of year
        day += 1

        year = Year(400 * whole_cycles + 4 * four_year_cycles + year_of_four_year_cycle)
        month, day_of_month = month_and_day_from_day_of_year(
            day, year_of_four_year_cycle == 0
        )
        return cls.new_unchecked(year, month, day_of_month)

    def days_since_year_zero(self) -> int:
        """Return the number of days since 1 January of year 0.

        The result is zero-based: 0000-01-01 gives 0, 0000-12-31 gives
        365 and -0001-12-31 gives -1.

        Examples:
            >>> Date(0, 1, 1).days_since_year_zero()
            0
            >>> Date(400, 1, 1).days_since_year_zero()
            146097
            >>> Date(1970, 1, 1).days_since_year_zero()
            719528
        """
        year = self._year.to_number()
        whole_cycles, years = divmod(year, 400)

        # Plus one because year 0 is a leap year, minus this year's own
        # leap day because day_of_year() already accounts for it.
        leap_days = years // 4 - years // 100 + 1
        if self._year.has_leap_day():
            leap_days -= 1

        from_years = whole_cycles * DAYS_IN_400_YEARS + years * DAYS_IN_YEAR + leap_days
        return from_years + self.day_of_year() - 1

    @classmethod
    def from_iso_format(cls, s: str) -> Date:
        """Parse a date from its canonical YYYY-MM-DD form.

        Args:
            s: The date string, like '2024-01-15' or '-0044-03-15'.

        Returns:
            The parsed Date.

        Raises:
            InvalidDateSyntax: If the string does not match YYYY-MM-DD.
            InvalidDate: If the components do not form a valid date.

        Examples:
            >>> Date.from_iso_format("2024-01-15")
            Date(2024, 1, 15)
            >>> Date.from_iso_format("-0044-03-15")
            Date(-44, 3, 15)
        """
        return parse_date(s)

    def to_iso_format(self) -> str:
        """Return the date as a YYYY-MM-DD string.

        Examples:
            >>> Date(2024, 1, 15).to_iso_format()
            '2024-01-15'
            >>> Date(-44, 3, 15).to_iso_format()
            '-0044-03-15'
        """
        return format_date(self)

    @property
    def year(self) -> Year:
        """Return the year component."""
        return self._year

    @property
    def month(self) -> Month:
        """Return the month component."""
        return self._month

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        return self._day

    @property
    def year_month(self) -> YearMonth:
        """Return the year and month as a YearMonth."""
        return YearMonth(self._year, self._month)

    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Examples:
            >>> Date(2020, 2, 1).day_of_year()
            32
            >>> Date(2020, 12, 31).day_of_year()  # Leap year
            366
            >>> Date(2019, 12, 31).day_of_year()  # Non-leap year
            365
        """
        return day_of_year(self._month, self._day, self._year.has_leap_day())

    def days_remaining_in_year(self) -> int:
        """Return the days left in the year, counting this date.

        January 1 gives 365 (366 in leap years), December 31 gives 1.
        """
        return self._year.total_days() - self.day_of_year() + 1

    def next(self) -> Date:
        """Return the following day.

        Examples:
            >>> Date(2020, 12, 31).next()
            Date(2021, 1, 1)
        """
        year_month = self.year_month
        if self._day == year_month.total_days():
            return year_month.next().first_day()
        return Date.new_unchecked(self._year, self._month, self._day + 1)

    def prev(self) -> Date:
        """Return the preceding day.

        Examples:
            >>> Date(2020, 3, 1).prev()
            Date(2020, 2, 29)
        """
        if self._day == 1:
            return self.year_month.prev().last_day()
        return Date.new_unchecked(self._year, self._month, self._day - 1)

    def add_days(self, days: int) -> Date:
        """Return a new Date offset by the given number of days.

        Args:
            days: Number of days to add (can be negative).

        Returns:
            A new Date offset by the specified days.

        Raises:
            OverflowError: If the result is outside the year range.

        Examples:
            >>> Date(2024, 1, 15).add_days(10)
            Date(2024, 1, 25)

            >>> Date(2024, 1, 15).add_days(-20)
            Date(2023, 12, 26)
        """
        return Date.from_days_since_year_zero(self.days_since_year_zero() + days)

    def sub_days(self, days: int) -> Date:
        """Return a new Date the given number of days earlier."""
        return Date.from_days_since_year_zero(self.days_since_year_zero() - days)

    def add_months(self, months: int) -> Date:
        """Return the same day of the month the given number of months later.

        Unlike clamping arithmetic, an invalid result is reported: the
        raised InvalidDayOfMonth can be rounded with its next_valid()
        or prev_valid() methods, or with or_next_valid() and
        or_prev_valid() from gregorian.arithmetic.

        Args:
            months: Number of months to add (can be negative).

        Returns:
            A new Date offset by the specified months.

        Raises:
            InvalidDayOfMonth: If the day does not exist in the target month.
            OverflowError: If the result is outside the year range.

        Examples:
            >>> Date(2021, 1, 31).add_months(2)
            Date(2021, 3, 31)

            >>> Date(2021, 1, 31).add_months(1)
            Traceback (most recent call last):
            ...
            gregorian.errors.InvalidDayOfMonth: invalid day for February 2021: expected 1-28, got 31
        """
        return self.year_month.add_months(months).with_day(self._day)

    def sub_months(self, months: int) -> Date:
        """Return the same day of the month the given number of months earlier.

        Raises:
            InvalidDayOfMonth: If the day does not exist in the target month.
        """
        return self.year_month.sub_months(months).with_day(self._day)

    def add_years(self, years: int) -> Date:
        """Return the same month and day the given number of years later.

        Raises:
            InvalidDayOfMonth: If the date is February 29 and the target
                year has no leap day.

        Examples:
            >>> Date(2000, 2, 29).add_years(400)
            Date(2400, 2, 29)
        """
        return self.year_month.add_years(years).with_day(self._day)

    def sub_years(self, years: int) -> Date:
        """Return the same month and day the given number of years earlier.

        Raises:
            InvalidDayOfMonth: If the date is February 29 and the target
                year has no leap day.
        """
        return self.year_month.sub_years(years).with_day(self._day)

    def _key(self) -> tuple[int, int, int]:
        return (self._year.to_number(), self._month.to_number(), self._day)

    def __add__(self, other: object) -> Date:
        """Add a number of days to this date.

        Examples:
            >>> Date(2024, 1, 15) + 10
            Date(2024, 1, 25)
        """
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented  # type: ignore[return-value]
        return self.add_days(other)

    @overload
    def __sub__(self, other: int) -> Date: ...

    @overload
    def __sub__(self, other: Date) -> int: ...

    def __sub__(self, other: object) -> Date | int:
        """Subtract a number of days or another Date from this date.

        When subtracting a number, returns a new Date. When subtracting
        a Date, returns the signed number of days between the two.

        Examples:
            >>> Date(2024, 1, 25) - 10
            Date(2024, 1, 15)

            >>> Date(2024, 3, 1) - Date(2024, 2, 1)
            29
        """
        if isinstance(other, Date):
            return self.days_since_year_zero() - other.days_since_year_zero()
        if isinstance(other, int) and not isinstance(other, bool):
            return self.sub_days(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        """Check equality with another date.

        Examples:
            >>> Date(2024, 1, 15) == Date(2024, 1, 15)
            True
            >>> Date(2024, 1, 15) == Date(2024, 1, 16)
            False
        """
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another.

        Examples:
            >>> Date(2024, 1, 15) < Date(2024, 1, 16)
            True
        """
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        """Check if this date is earlier than or equal to another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        """Check if this date is later than another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        """Check if this date is later than or equal to another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        """Return a detailed string representation, like 'Date(2024, 1, 15)'."""
        year, month, day = self._key()
        return f"Date({year}, {month}, {day})"

    def __str__(self) -> str:
        """Return the canonical YYYY-MM-DD representation."""
        return self.to_iso_format()


__all__ = ["Date"]
