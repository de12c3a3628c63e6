# calendar_grid.py

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List

from domain.daily import DailySelector
from domain.months import MonthKey
from domain.selection import DailySelection
from domain.time_ranges import week_bounds

GRID_CELLS = 42  # 6 rows x 7 days


@dataclass(frozen=True)
class DayCell:
    day: date
    in_current_month: bool
    is_available: bool
    is_in_range: bool
    is_range_start: bool
    is_range_end: bool
    is_anchor: bool

    @property
    def is_disabled(self) -> bool:
        return not (self.in_current_month and self.is_available)


def shift_month(month_start: date, months: int) -> date:
    """First day of the month ``months`` away from month_start."""
    return MonthKey.from_date(month_start).shift(months).first_day


def month_grid(
    month_start: date,
    selector: DailySelector,
    state: DailySelection,
) -> List[DayCell]:
    """
    Build the daily view grid for one month.

    Always 42 cells starting on the Sunday on/before the 1st, so leading
    and trailing days of the neighbouring months are included (flagged
    with in_current_month=False).
    """
    first = month_start.replace(day=1)
    grid_start, _ = week_bounds(first)

    cells: List[DayCell] = []
    for offset in range(GRID_CELLS):
        d = grid_start + timedelta(days=offset)
        cells.append(
            DayCell(
                day=d,
                in_current_month=d.month == first.month,
                is_available=selector.window.is_day_available(d),
                is_in_range=selector.is_selected(state, d),
                is_range_start=state.is_ranged and d == state.start,
                is_range_end=state.is_ranged and d == state.end,
                is_anchor=selector.is_anchor(state, d),
            )
        )

    return cells
