"""Tests for the exception hierarchy, messages and deprecations."""

from __future__ import annotations

import builtins
import warnings

import pytest

from gregorian import (
    Date,
    DateParseError,
    GregorianError,
    InvalidDate,
    InvalidDateSyntax,
    InvalidDayOfMonth,
    InvalidDayOfYear,
    InvalidMonthNumber,
    Month,
    OverflowError,
    Year,
)
from gregorian._internal.decorators import deprecated


class TestErrorHierarchy:
    """Tests for exception inheritance."""

    def test_parse_errors(self) -> None:
        """Test the parse error family."""
        assert issubclass(DateParseError, GregorianError)
        assert issubclass(InvalidDateSyntax, DateParseError)
        assert issubclass(InvalidDate, DateParseError)
        assert issubclass(InvalidMonthNumber, InvalidDate)
        assert issubclass(InvalidDayOfMonth, InvalidDate)

    def test_standalone_errors(self) -> None:
        """Test errors outside the parse family."""
        assert issubclass(InvalidDayOfYear, GregorianError)
        assert not issubclass(InvalidDayOfYear, DateParseError)
        assert issubclass(OverflowError, GregorianError)
        assert not issubclass(OverflowError, DateParseError)

    def test_overflow_is_not_builtin(self) -> None:
        """Test the library OverflowError is distinct from the builtin."""
        assert OverflowError is not builtins.OverflowError
        with pytest.raises(GregorianError):
            Year(32767).next()


class TestErrorMessages:
    """Tests for error messages and attributes."""

    def test_invalid_date_syntax(self) -> None:
        """Test the syntax error message quotes the input."""
        error = InvalidDateSyntax("2020/01/02")
        assert error.data == "2020/01/02"
        assert str(error) == "invalid date syntax: expected \"YYYY-MM-DD\", got '2020/01/02'"

    def test_invalid_month_number(self) -> None:
        """Test the month number message."""
        assert str(InvalidMonthNumber(13)) == "invalid month number: expected 1-12, got 13"

    def test_invalid_day_of_month(self) -> None:
        """Test the message names the month and its length."""
        error = InvalidDayOfMonth(Year(2100), Month.FEBRUARY, 29)
        assert str(error) == "invalid day for February 2100: expected 1-28, got 29"
        error = InvalidDayOfMonth(Year(-44), Month.APRIL, 31)
        assert str(error) == "invalid day for April -0044: expected 1-30, got 31"

    def test_invalid_day_of_year(self) -> None:
        """Test the message names the year length."""
        error = InvalidDayOfYear(Year(2020), 367)
        assert error.year == Year(2020)
        assert error.day_of_year == 367
        assert str(error) == "invalid day of year for 2020: expected 1-366, got 367"

    def test_rounding_low_days(self) -> None:
        """Test rounding a day below 1 uses the same month."""
        error = InvalidDayOfMonth(Year(2020), Month.MARCH, 0)
        assert error.next_valid() == Date(2020, 4, 1)
        assert error.prev_valid() == Date(2020, 3, 31)


class TestDeprecated:
    """Tests for the @deprecated decorator."""

    def test_warns_and_returns(self) -> None:
        """Test the wrapped function still runs and names its replacement."""

        @deprecated("add")
        def plus(a: int, b: int) -> int:
            """Add two numbers."""
            return a + b

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            assert plus(1, 2) == 3

        assert len(w) == 1
        assert issubclass(w[0].category, DeprecationWarning)
        assert str(w[0].message).endswith("plus() is deprecated, use add() instead")

    def test_warning_points_at_caller(self) -> None:
        """Test the warning is attributed to the calling line."""
        with pytest.warns(DeprecationWarning) as record:
            Month.JANUARY.wrapping_next()
        assert record[0].filename.endswith("test_edge_cases.py")

    def test_preserves_metadata(self) -> None:
        """Test functools.wraps metadata and the __deprecated__ attribute."""

        @deprecated("new")
        def old() -> None:
            """Old docstring."""

        assert old.__name__ == "old"
        assert old.__doc__ == "Old docstring."
        assert old.__deprecated__.endswith("old() is deprecated, use new() instead")  # type: ignore[attr-defined]

    def test_month_methods_flagged(self) -> None:
        """Test the deprecated Month methods carry their messages."""
        assert Month.wrapping_next.__deprecated__ == (  # type: ignore[attr-defined]
            "Month.wrapping_next() is deprecated, use Month.next() instead"
        )
        assert Month.wrapping_prev.__deprecated__ == (  # type: ignore[attr-defined]
            "Month.wrapping_prev() is deprecated, use Month.prev() instead"
        )
