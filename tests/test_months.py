"""MonthKey ordering and enumeration."""

from datetime import date

import pytest

from domain.availability import AvailabilityWindow
from domain.months import (
    MonthKey,
    group_months_by_year,
    month_keys_between,
    month_keys_in_window,
)


def test_month_key_ordering_follows_ordinal():
    assert MonthKey(2023, 11) < MonthKey(2024, 0) < MonthKey(2024, 1)
    assert MonthKey(2024, 0).ordinal == 2024 * 12


def test_month_key_rejects_invalid_month():
    with pytest.raises(ValueError):
        MonthKey(2024, 12)


def test_month_key_round_trips_through_ordinal():
    key = MonthKey(2024, 5)
    assert MonthKey.from_ordinal(key.ordinal) == key


def test_shift_crosses_year_boundary():
    assert MonthKey(2024, 0).shift(-1) == MonthKey(2023, 11)
    assert MonthKey(2023, 11).shift(1) == MonthKey(2024, 0)


def test_calendar_bounds():
    feb = MonthKey(2024, 1)
    assert feb.first_day == date(2024, 2, 1)
    assert feb.last_day == date(2024, 2, 29)
    assert feb.date_range.days == 29
    assert str(feb) == "2024-02"
    assert feb.label == "FEB"


def test_from_date():
    assert MonthKey.from_date(date(2024, 3, 31)) == MonthKey(2024, 2)


def test_is_consecutive_to():
    assert MonthKey(2023, 11).is_consecutive_to(MonthKey(2024, 0))
    assert not MonthKey(2024, 0).is_consecutive_to(MonthKey(2024, 2))
    assert not MonthKey(2024, 0).is_consecutive_to(MonthKey(2024, 0))


def test_month_keys_between_accepts_swapped_bounds():
    keys = month_keys_between(MonthKey(2024, 1), MonthKey(2023, 11))
    assert keys == [MonthKey(2023, 11), MonthKey(2024, 0), MonthKey(2024, 1)]


def test_month_keys_in_window_and_grouping():
    window = AvailabilityWindow(date(2023, 11, 20), date(2024, 2, 3))
    keys = month_keys_in_window(window)

    assert keys[0] == MonthKey(2023, 10)
    assert keys[-1] == MonthKey(2024, 1)

    grouped = group_months_by_year(keys)
    assert list(grouped) == [2023, 2024]
    assert len(grouped[2023]) == 2
    assert len(grouped[2024]) == 2
