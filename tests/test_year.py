"""Tests for the Year class."""

from __future__ import annotations

import pytest

from gregorian import Date, Month, Year, YearMonth
from gregorian.errors import InvalidDayOfYear, OverflowError


class TestYearLeapDay:
    """Tests for the leap year rule."""

    @pytest.mark.parametrize(
        "year,expected",
        [
            (2020, True),
            (2021, False),
            (1900, False),
            (2000, True),
            (2100, False),
            (2400, True),
            (0, True),
            (-4, True),
            (-100, False),
            (-400, True),
            (-1, False),
        ],
    )
    def test_has_leap_day(self, year: int, expected: bool) -> None:
        """Test the divisible-by-4, not-by-100-unless-by-400 rule."""
        assert Year(year).has_leap_day() is expected

    def test_total_days(self) -> None:
        """Test year lengths."""
        assert Year(2020).total_days() == 366
        assert Year(2021).total_days() == 365
        assert Year(1900).total_days() == 365
        assert Year(0).total_days() == 366


class TestYearConstruction:
    """Tests for Year construction and the 16-bit range."""

    def test_limits(self) -> None:
        """Test the extreme representable years."""
        assert Year(-32768).to_number() == -32768
        assert Year(32767).to_number() == 32767

    @pytest.mark.parametrize("year", [-32769, 32768, 100000])
    def test_out_of_range(self, year: int) -> None:
        """Test years outside the 16-bit range raise OverflowError."""
        with pytest.raises(OverflowError, match="year must be between"):
            Year(year)

    def test_rejects_float(self) -> None:
        """Test non-integral years are a type error."""
        with pytest.raises(TypeError):
            Year(2020.5)  # type: ignore[arg-type]

    def test_coerce(self) -> None:
        """Test coerce accepts both Years and integers."""
        year = Year(2020)
        assert Year.coerce(year) is year
        assert Year.coerce(2020) == year


class TestYearArithmetic:
    """Tests for year arithmetic and navigation."""

    def test_add_sub(self) -> None:
        """Test adding and subtracting integers."""
        assert Year(2020) + 5 == Year(2025)
        assert Year(2020) - 2021 == Year(-1)

    def test_next_prev(self) -> None:
        """Test next() and prev() cross year 0."""
        assert Year(-1).next() == Year(0)
        assert Year(0).prev() == Year(-1)

    def test_overflow(self) -> None:
        """Test arithmetic beyond the range raises instead of wrapping."""
        with pytest.raises(OverflowError):
            Year(32767).next()
        with pytest.raises(OverflowError):
            Year(-32768).prev()


class TestYearComparison:
    """Tests for equality, ordering and hashing."""

    def test_equal_to_int(self) -> None:
        """Test a Year equals the plain integer."""
        assert Year(2020) == 2020
        assert Year(2020) != 2021
        assert Year(2020) == Year(2020)

    def test_ordering(self) -> None:
        """Test ordering against Years and integers."""
        assert Year(-5) < Year(3)
        assert Year(2020) > 1999
        assert Year(2020) <= 2020
        assert Year(2020) >= Year(2020)

    def test_hash(self) -> None:
        """Test Year hashes like its number."""
        assert hash(Year(2020)) == hash(2020)
        assert len({Year(1), Year(1), Year(2)}) == 2

    def test_repr_str(self) -> None:
        """Test string representations."""
        assert repr(Year(2020)) == "Year(2020)"
        assert str(Year(2020)) == "2020"
        assert str(Year(44)) == "0044"
        assert str(Year(-44)) == "-0044"
        assert str(Year(12345)) == "12345"


class TestYearDays:
    """Tests for months and days of a year."""

    def test_first_last_day(self) -> None:
        """Test January 1 and December 31."""
        assert Year(2020).first_day() == Date(2020, 1, 1)
        assert Year(2020).last_day() == Date(2020, 12, 31)

    def test_with_month(self) -> None:
        """Test combining with a month."""
        assert Year(2020).with_month(Month.MARCH).first_day() == Date(2020, 3, 1)
        assert Year(2020).with_month(Month.MARCH).last_day() == Date(2020, 3, 31)
        assert Year(2020).first_month() == YearMonth(2020, Month.JANUARY)
        assert Year(2020).last_month() == YearMonth(2020, Month.DECEMBER)

    def test_months(self) -> None:
        """Test months() lists the twelve months in order."""
        months = Year(2021).months()
        assert len(months) == 12
        assert months[0] == YearMonth(2021, 1)
        assert months[11] == YearMonth(2021, 12)
        assert sum(m.total_days() for m in months) == 365

    def test_with_day_of_year(self) -> None:
        """Test locating days of the year."""
        assert Year(2020).with_day_of_year(1) == Date(2020, 1, 1)
        assert Year(2020).with_day_of_year(32) == Date(2020, 2, 1)
        assert Year(2020).with_day_of_year(60) == Date(2020, 2, 29)
        assert Year(2021).with_day_of_year(60) == Date(2021, 3, 1)
        assert Year(2020).with_day_of_year(366) == Date(2020, 12, 31)
        assert Year(2021).with_day_of_year(365) == Date(2021, 12, 31)

    @pytest.mark.parametrize("year,day", [(2021, 0), (2021, 366), (2020, 367), (2020, -1)])
    def test_with_day_of_year_invalid(self, year: int, day: int) -> None:
        """Test days outside the year are rejected."""
        with pytest.raises(InvalidDayOfYear) as exc_info:
            Year(year).with_day_of_year(day)
        assert exc_info.value.year == year
        assert exc_info.value.day_of_year == day

    @pytest.mark.parametrize("day", [60.5, 60.0, "60"])
    def test_with_day_of_year_requires_integer(self, day: object) -> None:
        """Test non-integral days of year are a type error."""
        with pytest.raises(TypeError):
            Year(2020).with_day_of_year(day)  # type: ignore[arg-type]

    def test_with_day_of_year_every_day(self) -> None:
        """Test every day of a year maps back to its day of year."""
        for year in (2019, 2020, 1900, 2000, 0, -1):
            for day in range(1, Year(year).total_days() + 1):
                assert Year(year).with_day_of_year(day).day_of_year() == day
