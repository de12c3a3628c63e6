"""Availability window gating for days, weeks and months."""

from datetime import date, datetime, timedelta

import pytest

from domain.availability import AvailabilityWindow, default_window
from domain.months import MonthKey
from domain.weeks import WeekBucket


@pytest.fixture
def window():
    return AvailabilityWindow(date(2024, 1, 1), date(2024, 3, 31))


def test_window_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        AvailabilityWindow(date(2024, 2, 1), date(2024, 1, 1))


def test_window_normalizes_datetimes():
    w = AvailabilityWindow(datetime(2024, 1, 1, 9, 30), datetime(2024, 1, 2, 23, 0))
    assert w.lower == date(2024, 1, 1)
    assert w.upper == date(2024, 1, 2)


def test_day_bounds_are_inclusive(window):
    assert window.is_available(date(2024, 1, 1))
    assert window.is_available(date(2024, 3, 31))
    assert window.is_available(datetime(2024, 3, 31, 23, 59))
    assert not window.is_available(date(2023, 12, 31))
    assert not window.is_available(date(2024, 4, 1))


def test_day_availability_never_true_outside_window(window):
    d = date(2023, 12, 1)
    while d <= date(2024, 5, 1):
        if window.is_available(d):
            assert window.lower <= d <= window.upper
        d += timedelta(days=1)


def test_week_lower_bound_is_normalized_to_week_start(window):
    # first bucket starts the Sunday before Jan 1
    first = WeekBucket(0, date(2023, 12, 31), date(2024, 1, 6))
    assert window.is_available(first)

    earlier = WeekBucket(0, date(2023, 12, 24), date(2023, 12, 30))
    assert not window.is_available(earlier)


def test_week_available_until_start_passes_upper(window):
    assert window.is_available(WeekBucket(13, date(2024, 3, 31), date(2024, 4, 6)))
    assert not window.is_available(WeekBucket(14, date(2024, 4, 7), date(2024, 4, 13)))


def test_month_availability_uses_month_of_bounds():
    w = AvailabilityWindow(date(2024, 1, 15), date(2024, 3, 10))
    assert w.is_available(MonthKey(2024, 0))
    assert w.is_available(MonthKey(2024, 2))
    assert not w.is_available(MonthKey(2023, 11))
    assert not w.is_available(MonthKey(2024, 3))


def test_default_window_uses_injected_today():
    w = default_window(datetime(2024, 5, 3, 15, 30))
    assert w.lower == date(2024, 1, 1)
    assert w.upper == date(2024, 5, 3)


def test_default_window_custom_earliest():
    w = default_window(date(2024, 5, 3), earliest=date(2024, 4, 1))
    assert w.lower == date(2024, 4, 1)


@pytest.mark.parametrize(
    "lower, week_start, expected",
    [
        # Saturday lower bound: its week began six days earlier
        (date(2024, 1, 6), date(2023, 12, 31), True),
        (date(2024, 1, 6), date(2023, 12, 24), False),
        # Sunday lower bound: no widening needed
        (date(2024, 1, 7), date(2024, 1, 7), True),
        (date(2024, 1, 7), date(2023, 12, 31), False),
    ],
)
def test_week_lower_bound_widens_to_its_own_week_only(lower, week_start, expected):
    w = AvailabilityWindow(lower, date(2024, 3, 31))
    bucket = WeekBucket(0, week_start, week_start + timedelta(days=6))
    assert w.is_week_available(bucket) is expected
