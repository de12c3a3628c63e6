# availability.py

from dataclasses import dataclass
from datetime import date, datetime

from domain.models import DEFAULT_EARLIEST_DAY
from domain.months import MonthKey
from domain.time_ranges import normalize_day, week_bounds
from domain.weeks import WeekBucket


@dataclass(frozen=True)
class AvailabilityWindow:
    """
    Inclusive [lower, upper] bounds on what the picker may select.

    lower is the earliest selectable day (typically the sign-up date),
    upper the most recent day with data. Each unit is tested against the
    bounds normalized to its own granularity: a week counts from the
    Sunday on/before ``lower``, a month from the month containing it.
    """
    lower: date
    upper: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "lower", normalize_day(self.lower))
        object.__setattr__(self, "upper", normalize_day(self.upper))

        if self.lower > self.upper:
            raise ValueError(
                f"Availability window lower bound {self.lower} is after upper bound {self.upper}"
            )

    def is_day_available(self, d: date | datetime) -> bool:
        return self.lower <= normalize_day(d) <= self.upper

    def is_week_available(self, bucket: WeekBucket) -> bool:
        # The lower bound is widened to its week start on purpose. Bucket 0
        # starts on the Sunday on/before ``lower`` and must stay selectable,
        # otherwise a window opening mid-week has an unclickable first week.
        # So a week starting up to six days before ``lower`` is available;
        # do not tighten this to ``lower <= bucket.start``.
        first_week_start, _ = week_bounds(self.lower)
        return first_week_start <= bucket.start <= self.upper

    def is_month_available(self, key: MonthKey) -> bool:
        return MonthKey.from_date(self.lower) <= key <= MonthKey.from_date(self.upper)

    def is_available(self, unit: date | datetime | WeekBucket | MonthKey) -> bool:
        if isinstance(unit, WeekBucket):
            return self.is_week_available(unit)
        if isinstance(unit, MonthKey):
            return self.is_month_available(unit)
        return self.is_day_available(unit)


def default_window(today: date | datetime, earliest: date | None = None) -> AvailabilityWindow:
    """
    Window from ``earliest`` (default DEFAULT_EARLIEST_DAY) to ``today``.

    ``today`` is always passed in; nothing here reads the system clock.
    """
    if earliest is None:
        earliest = DEFAULT_EARLIEST_DAY
    return AvailabilityWindow(lower=earliest, upper=normalize_day(today))
