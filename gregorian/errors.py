"""Gregorian exception hierarchy.

All gregorian-specific exceptions inherit from GregorianError. The
exceptions carry the offending values as attributes, so callers can
inspect or recover from them instead of parsing messages.

Hierarchy:
    GregorianError
        DateParseError
            InvalidDateSyntax
            InvalidDate
                InvalidMonthNumber
                InvalidDayOfMonth
        InvalidDayOfYear
        OverflowError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gregorian.core.date import Date
    from gregorian.core.year import Year
    from gregorian.units.month import Month


class GregorianError(Exception):
    """Base exception for all gregorian errors."""

    pass


class DateParseError(GregorianError):
    """Failed to turn a string into a Date.

    Raised either because the text does not have the ``YYYY-MM-DD``
    shape (InvalidDateSyntax) or because the parsed components do not
    form a valid date (InvalidDate).
    """

    pass


class InvalidDateSyntax(DateParseError):
    """Text does not match the ``YYYY-MM-DD`` pattern.

    Attributes:
        data: The rejected input.
    """

    def __init__(self, data: object) -> None:
        self.data = data
        super().__init__(f'invalid date syntax: expected "YYYY-MM-DD", got {data!r}')


class InvalidDate(DateParseError):
    """Year, month and day do not form a valid date.

    Examples:
        - Month value outside 1-12
        - Day value outside the valid range for the month
    """

    pass


class InvalidMonthNumber(InvalidDate):
    """Month number outside 1-12.

    Attributes:
        number: The rejected month number.
    """

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"invalid month number: expected 1-12, got {number}")


class InvalidDayOfMonth(InvalidDate):
    """Day outside the valid range for a month.

    Typically the result of month or year arithmetic, such as adding one
    month to January 31. The error knows how to round to a valid date:
    see next_valid() and prev_valid().

    Attributes:
        year: The Year of the invalid date.
        month: The Month of the invalid date.
        day: The rejected day of the month.

    Examples:
        >>> from gregorian import Date
        >>> try:
        ...     Date(2021, 1, 31).add_months(1)
        ... except InvalidDayOfMonth as e:
        ...     e.prev_valid(), e.next_valid()
        (Date(2021, 2, 28), Date(2021, 3, 1))
    """

    def __init__(self, year: Year, month: Month, day: int) -> None:
        from gregorian._internal.calendar import days_in_month

        self.year = year
        self.month = month
        self.day = day
        max_day = days_in_month(month, year.has_leap_day())
        super().__init__(
            f"invalid day for {month} {year}: expected 1-{max_day}, got {day}"
        )

    def next_valid(self) -> Date:
        """Return the first day of the month after the invalid date.

        Excess days are ignored: February 31 rounds to March 1.
        """
        from gregorian.core.year_month import YearMonth

        return YearMonth(self.year, self.month).next().first_day()

    def prev_valid(self) -> Date:
        """Return the last valid day of the month of the invalid date.

        February 31 rounds to February 28 or 29.
        """
        from gregorian.core.year_month import YearMonth

        return YearMonth(self.year, self.month).last_day()


class InvalidDayOfYear(GregorianError):
    """Day of year outside 1-365 (1-366 in leap years).

    Attributes:
        year: The Year the day was looked up in.
        day_of_year: The rejected day of the year.
    """

    def __init__(self, year: Year, day_of_year: int) -> None:
        self.year = year
        self.day_of_year = day_of_year
        super().__init__(
            f"invalid day of year for {year}: "
            f"expected 1-{year.total_days()}, got {day_of_year}"
        )


class OverflowError(GregorianError):
    """Arithmetic operation exceeded the representable year range.

    Years are signed 16-bit numbers. Any construction or arithmetic
    that would produce a year outside MIN_YEAR..MAX_YEAR raises this
    instead of wrapping around.

    Examples:
        - Year(40000)
        - Date(32767, 12, 31).next()
        - Date.from_unix_timestamp(2**62)
    """

    pass


__all__ = [
    "GregorianError",
    "DateParseError",
    "InvalidDateSyntax",
    "InvalidDate",
    "InvalidMonthNumber",
    "InvalidDayOfMonth",
    "InvalidDayOfYear",
    "OverflowError",
]
