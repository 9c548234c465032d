"""Internal utilities for gregorian.

This module contains private implementation details:
    - Calendar tables (days in month, day of year)
    - Validation checks
    - Constants and magic numbers
    - Custom decorators (@deprecated)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from gregorian._internal.decorators import deprecated
from gregorian._internal.validation import (
    validate_day,
    validate_day_of_year,
    validate_year,
)

__all__: list[str] = [
    "deprecated",
    "validate_day",
    "validate_day_of_year",
    "validate_year",
]
