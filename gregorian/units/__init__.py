"""Calendar units and enumerations.

This module provides:
    - Month: Gregorian month enum (JANUARY..DECEMBER)
    - MONTHS: All months in calendar order
"""

from __future__ import annotations

from gregorian.units.month import MONTHS, Month

__all__: list[str] = [
    "Month",
    "MONTHS",
]
