# months.py

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime
import calendar
from typing import Dict, List

from domain.models import MONTH_ABBREVIATIONS
from domain.time_ranges import DateRange, normalize_day


@dataclass(frozen=True, order=True)
class MonthKey:
    """
    A calendar month addressed by (year, month) with month in 0..11.

    Ordering follows ``ordinal`` (year * 12 + month) because the dataclass
    compares field tuples in declaration order.
    """
    year: int
    month: int

    def __post_init__(self) -> None:
        if not 0 <= self.month <= 11:
            raise ValueError(f"month must be 0..11, got {self.month}")

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "MonthKey":
        year, month = divmod(ordinal, 12)
        return cls(year, month)

    @classmethod
    def from_date(cls, d: date | datetime) -> "MonthKey":
        d = normalize_day(d)
        return cls(d.year, d.month - 1)

    @property
    def ordinal(self) -> int:
        return self.year * 12 + self.month

    @property
    def first_day(self) -> date:
        return date(self.year, self.month + 1, 1)

    @property
    def last_day(self) -> date:
        return date(
            self.year,
            self.month + 1,
            calendar.monthrange(self.year, self.month + 1)[1],
        )

    @property
    def date_range(self) -> DateRange:
        return DateRange(self.first_day, self.last_day)

    @property
    def label(self) -> str:
        return MONTH_ABBREVIATIONS[self.month]

    def shift(self, months: int) -> "MonthKey":
        return MonthKey.from_ordinal(self.ordinal + months)

    def is_consecutive_to(self, other: "MonthKey") -> bool:
        return abs(self.ordinal - other.ordinal) == 1

    def __str__(self) -> str:
        return f"{self.year}-{self.month + 1:02d}"


def month_keys_between(start: MonthKey, end: MonthKey) -> List[MonthKey]:
    """
    Every key from start to end inclusive, in order (arguments may be swapped).
    """
    lo, hi = sorted((start.ordinal, end.ordinal))
    return [MonthKey.from_ordinal(i) for i in range(lo, hi + 1)]


def month_keys_in_window(window) -> List[MonthKey]:
    """
    Months from the earliest to the most recent month of an AvailabilityWindow.
    """
    return month_keys_between(
        MonthKey.from_date(window.lower),
        MonthKey.from_date(window.upper),
    )


def group_months_by_year(keys: List[MonthKey]) -> Dict[int, List[MonthKey]]:
    grouped: Dict[int, List[MonthKey]] = defaultdict(list)
    for key in keys:
        grouped[key.year].append(key)
    return dict(grouped)
