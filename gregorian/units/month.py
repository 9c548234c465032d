"""Month enumeration for the Gregorian calendar.

This module provides the Month enum with its numeric codes 1-12 and
wrapping month arithmetic that cycles through the twelve months
without ever touching a year.
"""

from __future__ import annotations

import functools
from enum import Enum
from typing import TYPE_CHECKING

from gregorian._internal.decorators import deprecated
from gregorian.errors import InvalidMonthNumber

if TYPE_CHECKING:
    from gregorian.core.year import Year
    from gregorian.core.year_month import YearMonth


@functools.total_ordering
class Month(Enum):
    """A month of the Gregorian calendar.

    Months are numbered 1 (January) through 12 (December). The numeric
    code is the interchange form; use from_number() to convert a number
    into a Month and to_number() to go back.

    Examples:
        >>> Month.from_number(3)
        <Month.MARCH: 3>
        >>> Month.DECEMBER.next()
        <Month.JANUARY: 1>
        >>> str(Month.MAY)
        'May'
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def from_number(cls, number: int) -> Month:
        """Create a Month from its number.

        Args:
            number: The month number (1-12).

        Returns:
            The corresponding Month.

        Raises:
            InvalidMonthNumber: If number is not in 1-12.

        Examples:
            >>> Month.from_number(1)
            <Month.JANUARY: 1>

            >>> Month.from_number(13)
            Traceback (most recent call last):
            ...
            gregorian.errors.InvalidMonthNumber: invalid month number: expected 1-12, got 13
        """
        if not 1 <= number <= 12:
            raise InvalidMonthNumber(number)
        return MONTHS[number - 1]

    def to_number(self) -> int:
        """Return the month number (1-12)."""
        return self.value

    def with_year(self, year: Year | int) -> YearMonth:
        """Combine the month with a year to create a YearMonth."""
        from gregorian.core.year_month import YearMonth

        return YearMonth(year, self)

    def wrapping_add(self, count: int) -> Month:
        """Add a number of months, wrapping back to January after December.

        The year is never involved: adding 12 (or any multiple of 12)
        returns the same month. Negative counts move backwards.

        Args:
            count: Number of months to add (can be negative).

        Returns:
            The resulting Month.

        Examples:
            >>> Month.JANUARY.wrapping_add(13)
            <Month.FEBRUARY: 2>
            >>> Month.JANUARY.wrapping_add(-1)
            <Month.DECEMBER: 12>
        """
        # Python's % always floors, so the index is never negative
        return MONTHS[(self.value - 1 + count) % 12]

    def wrapping_sub(self, count: int) -> Month:
        """Subtract a number of months, wrapping back to December after January."""
        return self.wrapping_add(-(count % 12))

    def next(self) -> Month:
        """Return the next month, wrapping back to January after December."""
        return self.wrapping_add(1)

    def prev(self) -> Month:
        """Return the previous month, wrapping back to December after January."""
        return self.wrapping_add(-1)

    @deprecated("Month.next")
    def wrapping_next(self) -> Month:
        return self.next()

    @deprecated("Month.prev")
    def wrapping_prev(self) -> Month:
        return self.prev()

    def __eq__(self, other: object) -> bool:
        """Check equality with another Month or a month number.

        Examples:
            >>> Month.MARCH == 3
            True
        """
        if isinstance(other, Month):
            return self is other
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Month):
            return self.value < other.value
        if isinstance(other, int):
            return self.value < other
        return NotImplemented

    def __hash__(self) -> int:
        """Hash like the month number, as Year hashes like its year number."""
        return hash(self.value)

    def __str__(self) -> str:
        """Return the English month name, like 'January'."""
        return self.name.capitalize()


# All months in order
MONTHS: tuple[Month, ...] = tuple(Month)


__all__ = ["Month", "MONTHS"]
