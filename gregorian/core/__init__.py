"""Core calendar types.

This module provides the fundamental calendar types:
    - Year: Calendar year with leap day logic
    - YearMonth: Month of a specific year
    - Date: Calendar date in the proleptic Gregorian calendar
"""

from __future__ import annotations

from gregorian.core.year import Year
from gregorian.core.year_month import YearMonth
from gregorian.core.date import Date

__all__: list[str] = [
    "Date",
    "Year",
    "YearMonth",
]
