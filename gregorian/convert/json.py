"""JSON serialization and deserialization for calendar values.

This module provides functions for converting calendar values to and
from JSON-serializable dictionaries.

Functions:
    to_json: Convert a calendar value to a JSON-serializable dict.
    from_json: Create a calendar value from a JSON dict.

The JSON format uses type tags for polymorphic deserialization. Dates
and year-months are stored in their canonical string form, years and
months as numbers:

    {"_type": "Date", "value": "2024-01-15"}
    {"_type": "YearMonth", "value": "2024-01"}
    {"_type": "Year", "value": 2024}
    {"_type": "Month", "value": 1}

Examples:
    >>> from gregorian import Date
    >>> from gregorian.convert import to_json, from_json

    >>> data = to_json(Date(2024, 1, 15))
    >>> data['_type']
    'Date'

    >>> from_json(data) == Date(2024, 1, 15)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from gregorian.errors import InvalidDateSyntax

if TYPE_CHECKING:
    from gregorian.core.date import Date
    from gregorian.core.year import Year
    from gregorian.core.year_month import YearMonth
    from gregorian.units.month import Month

# Type alias for calendar values
CalendarType = Union["Date", "YearMonth", "Year", "Month"]


def to_json(value: CalendarType) -> dict[str, Any]:
    """Convert a calendar value to a JSON-serializable dictionary.

    Args:
        value: A Date, YearMonth, Year, or Month to convert.

    Returns:
        A JSON-serializable dictionary with type information.

    Raises:
        TypeError: If value is not a supported calendar type.

    Examples:
        >>> from gregorian import Date, Month, Year, YearMonth

        >>> to_json(Date(2024, 1, 15))
        {'_type': 'Date', 'value': '2024-01-15'}

        >>> to_json(YearMonth(2024, 1))
        {'_type': 'YearMonth', 'value': '2024-01'}

        >>> to_json(Year(2024))
        {'_type': 'Year', 'value': 2024}

        >>> to_json(Month.MARCH)
        {'_type': 'Month', 'value': 3}
    """
    # Import here to avoid circular imports
    from gregorian.core.date import Date
    from gregorian.core.year import Year
    from gregorian.core.year_month import YearMonth
    from gregorian.units.month import Month

    if isinstance(value, Date):
        return {"_type": "Date", "value": value.to_iso_format()}
    elif isinstance(value, YearMonth):
        return {"_type": "YearMonth", "value": str(value)}
    elif isinstance(value, Year):
        return {"_type": "Year", "value": value.to_number()}
    elif isinstance(value, Month):
        return {"_type": "Month", "value": value.to_number()}
    else:
        raise TypeError(
            f"expected Date, YearMonth, Year, or Month, got {type(value).__name__}"
        )


def from_json(data: dict[str, Any]) -> CalendarType:
    """Create a calendar value from a JSON dictionary.

    The dictionary must include a `_type` field specifying the type to create.

    Args:
        data: A dictionary with `_type` and `value` fields.

    Returns:
        A Date, YearMonth, Year, or Month based on the `_type` field.

    Raises:
        InvalidDateSyntax: If the data is missing required fields or has
            an invalid format.
        InvalidDate: If a date has an invalid month or day.
        TypeError: If `_type` is not a recognized calendar type.

    Examples:
        >>> from_json({'_type': 'Date', 'value': '2024-01-15'})
        Date(2024, 1, 15)

        >>> from_json({'_type': 'Month', 'value': 12})
        <Month.DECEMBER: 12>
    """
    # Import here to avoid circular imports
    from gregorian.core.date import Date
    from gregorian.core.year import Year
    from gregorian.units.month import Month

    if not isinstance(data, dict):
        raise InvalidDateSyntax(data)

    type_name = data.get("_type")
    if not type_name:
        raise InvalidDateSyntax(data)

    value = data.get("value")

    if type_name == "Date":
        if not isinstance(value, str):
            raise InvalidDateSyntax(value)
        return Date.from_iso_format(value)

    elif type_name == "YearMonth":
        return _year_month_from_string(value)

    elif type_name == "Year":
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidDateSyntax(value)
        return Year(value)

    elif type_name == "Month":
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidDateSyntax(value)
        return Month.from_number(value)

    else:
        raise TypeError(f"unknown calendar type: {type_name!r}")


def _year_month_from_string(value: object) -> YearMonth:
    """Parse a YYYY-MM string into a YearMonth.

    Raises:
        InvalidDateSyntax: If the string does not match YYYY-MM.
        InvalidMonthNumber: If the month is outside 1-12.
    """
    from gregorian.format.iso8601 import parse_date

    if not isinstance(value, str):
        raise InvalidDateSyntax(value)

    # Reuse the date grammar with a first-of-month day, which always
    # exists, so only the month number can make it invalid
    try:
        return parse_date(f"{value}-01").year_month
    except InvalidDateSyntax:
        raise InvalidDateSyntax(value) from None


__all__ = ["to_json", "from_json"]
