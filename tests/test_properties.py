"""Hypothesis property-based tests for date conversions and arithmetic.

Tests invariants that must hold across the whole representable range,
plus exhaustive walks over several 400-year cycles.
"""

from __future__ import annotations

import datetime

import pytest
from hypothesis import assume, event, given
from hypothesis import strategies as st

from gregorian import MONTHS, Date, Month, Year, YearMonth, or_next_valid, or_prev_valid
from gregorian._internal.constants import DAYS_IN_400_YEARS, MAX_YEAR, MIN_YEAR
from gregorian.errors import InvalidDayOfMonth
from gregorian.format import parse_date

# ============================================================================
# STRATEGIES
# ============================================================================

years = st.integers(min_value=MIN_YEAR, max_value=MAX_YEAR)
months = st.sampled_from(MONTHS)

FIRST_DAY = Date(MIN_YEAR, 1, 1).days_since_year_zero()
LAST_DAY = Date(MAX_YEAR, 12, 31).days_since_year_zero()
day_counts = st.integers(min_value=FIRST_DAY, max_value=LAST_DAY)


@st.composite
def dates(draw: st.DrawFn) -> Date:
    """Valid dates across the full year range."""
    year = draw(years)
    month = draw(months)
    day = draw(st.integers(min_value=1, max_value=YearMonth(year, month).total_days()))
    return Date(year, month, day)


# Keep month and year offsets well inside the range so results never overflow
moderate_dates = dates().filter(lambda d: -20000 <= d.year <= 20000)
month_offsets = st.integers(min_value=-12 * 1000, max_value=12 * 1000)
year_months = st.builds(YearMonth, st.integers(min_value=-20000, max_value=20000), months)


# ============================================================================
# DAY COUNT PROPERTIES
# ============================================================================


@pytest.mark.fuzz
class TestDayCountProperties:
    """Property-based tests for days_since_year_zero conversion."""

    @given(d=dates())
    def test_date_round_trip(self, d: Date) -> None:
        """Converting to a day count and back yields the same date."""
        assert Date.from_days_since_year_zero(d.days_since_year_zero()) == d

    @given(n=day_counts)
    def test_day_count_round_trip(self, n: int) -> None:
        """Converting a day count to a date and back yields the same count."""
        d = Date.from_days_since_year_zero(n)
        event(f"leap_year={d.year.has_leap_day()}")
        assert d.days_since_year_zero() == n

    @given(d=dates())
    def test_ordering_matches_day_count(self, d: Date) -> None:
        """The next day is later and exactly one day count further."""
        assume(d != Date(MAX_YEAR, 12, 31))
        following = d.next()
        assert following > d
        assert following.days_since_year_zero() == d.days_since_year_zero() + 1
        assert following.prev() == d

    @given(d=dates(), n=st.integers(min_value=-10**6, max_value=10**6))
    def test_add_days_is_day_count_addition(self, d: Date, n: int) -> None:
        """add_days moves the day count by exactly n."""
        assume(FIRST_DAY <= d.days_since_year_zero() + n <= LAST_DAY)
        shifted = d.add_days(n)
        assert shifted - d == n
        assert shifted.sub_days(n) == d

    @given(n=st.integers(min_value=366, max_value=366 + 3652058))
    def test_agrees_with_stdlib(self, n: int) -> None:
        """Dates in years 1-9999 agree with datetime.date ordinals."""
        d = Date.from_days_since_year_zero(n)
        expected = datetime.date.fromordinal(n - 365)
        assert (d.year.to_number(), d.month.to_number(), d.day) == (
            expected.year,
            expected.month,
            expected.day,
        )

    @given(d=dates())
    def test_iso_format_round_trip(self, d: Date) -> None:
        """Formatted dates parse back to themselves."""
        assert parse_date(d.to_iso_format()) == d


# ============================================================================
# MONTH AND YEAR ARITHMETIC PROPERTIES
# ============================================================================


@pytest.mark.fuzz
class TestMonthArithmeticProperties:
    """Property-based tests for month and year offsets."""

    @given(month=months, count=st.integers())
    def test_wrapping_add_sub_inverse(self, month: Month, count: int) -> None:
        """wrapping_sub undoes wrapping_add for any count."""
        assert month.wrapping_add(count).wrapping_sub(count) is month

    @given(d=moderate_dates, count=month_offsets)
    def test_add_months_keeps_day_or_raises(self, d: Date, count: int) -> None:
        """add_months keeps the day when it exists and raises otherwise."""
        target = d.year_month.add_months(count)
        if d.day <= target.total_days():
            event("outcome=valid")
            result = d.add_months(count)
            assert result.day == d.day
            assert result.year_month == target
        else:
            event("outcome=invalid_day")
            with pytest.raises(InvalidDayOfMonth):
                d.add_months(count)

    @given(ym=year_months, count=month_offsets)
    def test_year_month_add_sub_inverse(self, ym: YearMonth, count: int) -> None:
        """sub_months undoes add_months on a YearMonth."""
        assert ym.add_months(count).sub_months(count) == ym

    @given(ym=year_months, a=month_offsets, b=month_offsets)
    def test_add_months_composes(self, ym: YearMonth, a: int, b: int) -> None:
        """Adding a then b months equals adding a + b months."""
        event(f"crosses_year={(ym.month.to_number() - 1 + a) // 12 != 0}")
        assert ym.add_months(a).add_months(b) == ym.add_months(a + b)

    @given(ym=year_months, k=st.integers(min_value=-1000, max_value=1000))
    def test_twelve_months_is_one_year(self, ym: YearMonth, k: int) -> None:
        """Adding 12 * k months equals adding k years."""
        assert ym.add_months(12 * k) == ym.add_years(k)
        assert ym.sub_months(12 * k) == ym.sub_years(k)

    @given(d=moderate_dates, count=month_offsets)
    def test_rounding_brackets_target_month(self, d: Date, count: int) -> None:
        """Rounded results stay within one day of the target month's end."""
        up = or_next_valid(d.add_months, count)
        down = or_prev_valid(d.add_months, count)
        assert down <= up
        assert up - down in (0, 1)
        assert down.year_month == d.year_month.add_months(count)

    @given(d=moderate_dates, count=st.integers(min_value=-10000, max_value=10000))
    def test_add_years_is_twelve_months(self, d: Date, count: int) -> None:
        """Adding years matches adding twelve times as many months."""
        assert or_prev_valid(d.add_years, count) == or_prev_valid(d.add_months, 12 * count)


# ============================================================================
# EXHAUSTIVE WALKS
# ============================================================================


class TestExhaustiveWalks:
    """Walk every day of ten 400-year cycles on each side of year 0."""

    CYCLES = 10

    def test_walk_forward(self) -> None:
        """next() and the day count advance in lockstep from 0000-01-01."""
        d = Date(0, 1, 1)
        for n in range(self.CYCLES * DAYS_IN_400_YEARS):
            assert d.days_since_year_zero() == n
            assert Date.from_days_since_year_zero(n) == d
            d = d.next()
        assert d == Date(400 * self.CYCLES, 1, 1)

    def test_walk_backward(self) -> None:
        """prev() and the day count retreat in lockstep from 0000-01-01."""
        d = Date(0, 1, 1)
        for n in range(0, -self.CYCLES * DAYS_IN_400_YEARS, -1):
            assert d.days_since_year_zero() == n
            assert Date.from_days_since_year_zero(n) == d
            d = d.prev()
        assert d == Date(-400 * self.CYCLES, 1, 1)

    def test_cycle_shift(self) -> None:
        """Shifting by one 400-year cycle adds 400 to the year for every day of a cycle."""
        d = Year(1600).first_day()
        for _ in range(DAYS_IN_400_YEARS):
            shifted = Date.from_days_since_year_zero(d.days_since_year_zero() + DAYS_IN_400_YEARS)
            assert shifted == Date(d.year + 400, d.month, d.day)
            d = d.next()
