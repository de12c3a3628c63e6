"""Date helpers, DateRange and label formatting."""

from datetime import date, datetime

import pytest

from domain.time_ranges import (
    DateRange,
    add_years,
    format_day,
    format_range_label,
    month_bounds,
    normalize_day,
    previous_period,
    week_bounds,
)


def test_normalize_day_drops_time_of_day():
    assert normalize_day(datetime(2024, 3, 5, 23, 59)) == date(2024, 3, 5)
    assert normalize_day(date(2024, 3, 5)) == date(2024, 3, 5)


def test_week_bounds_start_on_sunday():
    # 2024-01-03 is a Wednesday
    assert week_bounds(date(2024, 1, 3)) == (date(2023, 12, 31), date(2024, 1, 6))
    # a Sunday is its own week start
    assert week_bounds(date(2024, 1, 7)) == (date(2024, 1, 7), date(2024, 1, 13))


def test_month_bounds_leap_february():
    assert month_bounds(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))


def test_add_years_clamps_leap_day():
    assert add_years(date(2024, 2, 29), 1) == date(2025, 2, 28)
    assert add_years(date(2024, 3, 1), 2) == date(2026, 3, 1)


def test_date_range_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        DateRange(date(2024, 1, 2), date(2024, 1, 1))


def test_date_range_contains_and_days():
    r = DateRange(date(2024, 1, 1), date(2024, 1, 7))
    assert r.days == 7
    assert r.contains(date(2024, 1, 1))
    assert r.contains(datetime(2024, 1, 7, 18, 0))
    assert not r.contains(date(2024, 1, 8))


def test_format_day_has_no_zero_padding():
    assert format_day(date(2024, 1, 1)) == "Jan 1, 2024"
    assert format_day(date(2024, 12, 25)) == "Dec 25, 2024"


def test_format_range_label():
    r = DateRange(date(2024, 1, 1), date(2024, 1, 7))
    assert format_range_label(r) == "Jan 1, 2024 - Jan 7, 2024"


def test_format_range_label_collapses_single_day():
    r = DateRange(date(2024, 1, 1), date(2024, 1, 1))
    assert format_range_label(r) == "Jan 1, 2024"


def test_format_range_label_none_is_empty():
    assert format_range_label(None) == ""


def test_previous_period_is_day_before_end():
    r = DateRange(date(2024, 1, 1), date(2024, 1, 7))
    assert previous_period(r) == DateRange(date(2024, 1, 6), date(2024, 1, 6))
