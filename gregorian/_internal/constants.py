"""Internal constants for gregorian.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Year limits: the range of a signed 16-bit integer
MIN_YEAR: int = -32768
MAX_YEAR: int = 32767

# Gregorian cycles
DAYS_IN_YEAR: int = 365
DAYS_IN_4_YEARS: int = 4 * DAYS_IN_YEAR + 1  # 1_461
DAYS_IN_400_YEARS: int = 400 * DAYS_IN_YEAR + 97  # 146_097

# Days since 0000-01-01 for 1970-01-01
UNIX_EPOCH_DAYS: int = 4 * DAYS_IN_400_YEARS + 370 * DAYS_IN_YEAR + 90  # 719_528

# Day index within a 400-year cycle of March 1st in years 100, 200 and 300,
# the first days after a skipped century leap day
CENTURY_MARCH_FIRST: tuple[int, int, int] = (
    100 * DAYS_IN_YEAR + 25 + 31 + 28,
    200 * DAYS_IN_YEAR + 49 + 31 + 28,
    300 * DAYS_IN_YEAR + 73 + 31 + 28,
)

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Day of year of the first day of each month (non-leap year)
START_DAY_OF_MONTH: tuple[int, ...] = (
    0,  # Placeholder for 1-indexed access
    1, 32, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335,
)


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_YEAR",
    "DAYS_IN_4_YEARS",
    "DAYS_IN_400_YEARS",
    "UNIX_EPOCH_DAYS",
    "CENTURY_MARCH_FIRST",
    "DAYS_IN_MONTH",
    "START_DAY_OF_MONTH",
]
