"""Rounding of invalid dates produced by month and year arithmetic.

Adding months or years to a Date keeps the day of the month, which
does not always exist in the target month. Date.add_months() and
friends raise InvalidDayOfMonth in that case. The functions in this
module call such an operation and round the invalid result instead:

    or_next_valid: first day of the following month
    or_prev_valid: last day of the target month (clamping)

Examples:
    Date(2020, 1, 31).add_months(1)                 -> raises InvalidDayOfMonth
    or_next_valid(Date(2020, 1, 31).add_months, 1)  -> Date(2020, 3, 1)
    or_prev_valid(Date(2020, 1, 31).add_months, 1)  -> Date(2020, 2, 29)
    or_prev_valid(Date(2020, 2, 29).add_years, 1)   -> Date(2021, 2, 28)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, ParamSpec

from gregorian.errors import InvalidDayOfMonth

if TYPE_CHECKING:
    from gregorian.core.date import Date

P = ParamSpec("P")


def or_next_valid(func: Callable[P, Date], *args: P.args, **kwargs: P.kwargs) -> Date:
    """Call func and round an invalid day up to the next valid date.

    Args:
        func: A callable producing a Date, such as a bound add_months.
        *args: Positional arguments for func.
        **kwargs: Keyword arguments for func.

    Returns:
        The Date returned by func, or the first day of the month after
        the invalid date if func raised InvalidDayOfMonth.

    Examples:
        >>> from gregorian import Date
        >>> or_next_valid(Date(2020, 1, 31).add_months, 2)
        Date(2020, 3, 31)
        >>> or_next_valid(Date(2020, 1, 31).add_months, 1)
        Date(2020, 3, 1)
    """
    try:
        return func(*args, **kwargs)
    except InvalidDayOfMonth as e:
        return e.next_valid()


def or_prev_valid(func: Callable[P, Date], *args: P.args, **kwargs: P.kwargs) -> Date:
    """Call func and round an invalid day down to the last day of its month.

    Args:
        func: A callable producing a Date, such as a bound add_months.
        *args: Positional arguments for func.
        **kwargs: Keyword arguments for func.

    Returns:
        The Date returned by func, or the last day of the invalid
        date's month if func raised InvalidDayOfMonth.

    Examples:
        >>> from gregorian import Date
        >>> or_prev_valid(Date(2020, 1, 31).add_months, 1)
        Date(2020, 2, 29)
    """
    try:
        return func(*args, **kwargs)
    except InvalidDayOfMonth as e:
        return e.prev_valid()


__all__ = [
    "or_next_valid",
    "or_prev_valid",
]
