# time_ranges.py

from dataclasses import dataclass
from datetime import date, datetime, timedelta
import calendar
from typing import Tuple

from domain.models import MONTH_NAMES


def normalize_day(value: date | datetime) -> date:
    """
    Drop any time-of-day component.

    Accepts plain dates, datetimes and pandas Timestamps (a datetime
    subclass); equality and ordering are by calendar day only.
    """
    if isinstance(value, datetime):
        return value.date()
    return value


def week_bounds(d: date) -> Tuple[date, date]:
    """
    Return (sunday, saturday) for the Sunday-start week containing date d.
    """
    sunday = d - timedelta(days=(d.weekday() + 1) % 7)
    saturday = sunday + timedelta(days=6)
    return sunday, saturday


def month_bounds(d: date) -> Tuple[date, date]:
    """
    Return first and last day of the calendar month containing date d.
    """
    first_day = d.replace(day=1)
    last_day = d.replace(
        day=calendar.monthrange(d.year, d.month)[1]
    )
    return first_day, last_day


def add_years(d: date, years: int) -> date:
    # Feb 29 falls back to Feb 28 in non-leap years
    try:
        return d.replace(year=d.year + years)
    except ValueError:
        return d.replace(year=d.year + years, day=28)


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"DateRange start {self.start} is after end {self.end}")

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def contains(self, d: date | datetime) -> bool:
        return self.start <= normalize_day(d) <= self.end


# --------------------------------------------------
# Formatting
# --------------------------------------------------

def format_day(d: date) -> str:
    """Format like 'Jan 1, 2024'."""
    return f"{MONTH_NAMES[d.month - 1][:3]} {d.day}, {d.year}"


def format_range_label(date_range: DateRange | None) -> str:
    """
    Human label for a selected range.

    'Jan 1, 2024 - Jan 7, 2024', or a single date when start == end.
    Empty string when nothing is selected.
    """
    if date_range is None:
        return ""

    start = format_day(date_range.start)
    if date_range.start == date_range.end:
        return start

    return f"{start} - {format_day(date_range.end)}"


# --------------------------------------------------
# Comparison period
# --------------------------------------------------

def previous_period(date_range: DateRange) -> DateRange:
    """
    Comparison period for a selected range.

    The dashboard compares the most recent day of the selection against
    the day before it, regardless of the selection length.
    """
    previous_day = date_range.end - timedelta(days=1)
    return DateRange(previous_day, previous_day)
