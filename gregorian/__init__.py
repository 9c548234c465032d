"""Gregorian: a proleptic Gregorian calendar date library.

Gregorian models calendar years, months and dates, converts between
them and linear day counts or Unix timestamps, and performs
calendar-safe arithmetic. The calendar has a year 0 (a leap year)
preceding year 1, as in ISO 8601. Times and time zones are not
modelled.

Core Types:
    Date: Calendar date (year, month, day)
    Year: Calendar year with leap day logic
    YearMonth: Month of a specific year

Units:
    Month: Month enum (JANUARY..DECEMBER)

Arithmetic:
    or_next_valid: Round an invalid month/year offset up
    or_prev_valid: Round an invalid month/year offset down

Format Functions:
    parse_date: Parse a YYYY-MM-DD string
    format_date: Format a Date as YYYY-MM-DD

Exceptions:
    GregorianError: Base exception
    DateParseError: Invalid date text (syntax or value)
    InvalidDateSyntax: Text is not YYYY-MM-DD
    InvalidDate: Month or day out of range
    InvalidMonthNumber: Month number outside 1-12
    InvalidDayOfMonth: Day outside the month, with rounding helpers
    InvalidDayOfYear: Day of year outside the year
    OverflowError: Year outside the 16-bit range

Example:
    >>> from gregorian import Date, Month, Year, YearMonth
    >>> Year(2020).has_leap_day()
    True
    >>> YearMonth(1900, Month.FEBRUARY).total_days()
    28
    >>> Year(2020).with_month(Month.MARCH).last_day()
    Date(2020, 3, 31)
    >>> Date(2020, 2, 1).day_of_year()
    32
"""

from __future__ import annotations

__version__ = "0.2.4"

# Core types
from gregorian.core.date import Date
from gregorian.core.year import Year
from gregorian.core.year_month import YearMonth

# Units
from gregorian.units.month import MONTHS, Month

# Arithmetic
from gregorian.arithmetic import or_next_valid, or_prev_valid

# Exceptions
from gregorian.errors import (
    DateParseError,
    GregorianError,
    InvalidDate,
    InvalidDateSyntax,
    InvalidDayOfMonth,
    InvalidDayOfYear,
    InvalidMonthNumber,
    OverflowError,
)

# Format functions
from gregorian.format import format_date, parse_date

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "Year",
    "YearMonth",
    # Units
    "Month",
    "MONTHS",
    # Arithmetic
    "or_next_valid",
    "or_prev_valid",
    # Exceptions
    "GregorianError",
    "DateParseError",
    "InvalidDateSyntax",
    "InvalidDate",
    "InvalidMonthNumber",
    "InvalidDayOfMonth",
    "InvalidDayOfYear",
    "OverflowError",
    # Format functions
    "parse_date",
    "format_date",
]
