# weeks.py

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from typing import TYPE_CHECKING, Dict, List, Tuple

from domain.models import MONTH_NAMES, WEEK_LOOKAHEAD_YEARS
from domain.time_ranges import DateRange, add_years, month_bounds, week_bounds

if TYPE_CHECKING:
    from domain.availability import AvailabilityWindow


@dataclass(frozen=True)
class WeekBucket:
    index: int
    start: date
    end: date

    @property
    def date_range(self) -> DateRange:
        return DateRange(self.start, self.end)

    @property
    def month_label(self) -> str:
        """Grouping label like 'JANUARY-2024', taken from the week start."""
        return f"{MONTH_NAMES[self.start.month - 1].upper()}-{self.start.year}"


def build_week_buckets(window: AvailabilityWindow) -> Tuple[WeekBucket, ...]:
    """
    Generate contiguous Sunday-start week buckets for a window.

    Starts at the Sunday on/before ``window.lower`` and runs until
    WEEK_LOOKAHEAD_YEARS past ``window.upper``. Buckets after ``upper``
    are generated for browsing but are never available.

    Returns:
        tuple of WeekBucket indexed 0..N-1 in chronological order
    """
    first_start, _ = week_bounds(window.lower)
    horizon = add_years(window.upper, WEEK_LOOKAHEAD_YEARS)

    buckets: List[WeekBucket] = []
    start = first_start
    while start <= horizon:
        buckets.append(
            WeekBucket(
                index=len(buckets),
                start=start,
                end=start + timedelta(days=6),
            )
        )
        start += timedelta(days=7)

    return tuple(buckets)


# --------------------------------------------------
# Quarter navigation (weekly view)
# --------------------------------------------------

def quarter_of(d: date) -> int:
    """Quarter index 0..3 for a date."""
    return (d.month - 1) // 3


def quarter_bounds(quarter: int, year: int) -> Tuple[date, date]:
    if quarter not in (0, 1, 2, 3):
        raise ValueError(f"quarter must be 0..3, got {quarter}")

    first_month = quarter * 3 + 1
    start = date(year, first_month, 1)
    _, end = month_bounds(date(year, first_month + 2, 1))
    return start, end


def shift_quarter(quarter: int, year: int, step: int) -> Tuple[int, int]:
    """
    Move ``step`` quarters forward (or backward when negative).

    Returns:
        (quarter, year)
    """
    year_offset, quarter = divmod(quarter + step, 4)
    return quarter, year + year_offset


def quarter_label(quarter: int, year: int) -> str:
    first = MONTH_NAMES[quarter * 3].upper()
    last = MONTH_NAMES[quarter * 3 + 2].upper()
    return f"{first} - {last} {year}"


def weeks_in_quarter(
    buckets: Tuple[WeekBucket, ...],
    quarter: int,
    year: int,
) -> List[WeekBucket]:
    """
    Buckets overlapping the quarter, so boundary weeks show up in both.
    """
    q_start, q_end = quarter_bounds(quarter, year)
    return [b for b in buckets if b.start <= q_end and b.end >= q_start]


def group_weeks_by_month(buckets: List[WeekBucket]) -> Dict[str, List[WeekBucket]]:
    """
    Group buckets by the month of their start day, keeping chronological order.
    """
    grouped: Dict[str, List[WeekBucket]] = defaultdict(list)
    for bucket in buckets:
        grouped[bucket.month_label].append(bucket)
    return dict(grouped)
