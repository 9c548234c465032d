"""Calendar arithmetic helpers.

Month and year arithmetic lives on the core classes (Date.add_months,
YearMonth.add_years, ...). This module provides the helpers that round
the invalid dates such arithmetic can produce.

Rounding Operations (from gregorian.arithmetic.rounding):
    - or_next_valid: Round an invalid day up to the next month's first day
    - or_prev_valid: Round an invalid day down to the month's last day
"""

from __future__ import annotations

from gregorian.arithmetic.rounding import or_next_valid, or_prev_valid

__all__ = [
    "or_next_valid",
    "or_prev_valid",
]
