# daily.py

import logging
from datetime import date, datetime

from domain.availability import AvailabilityWindow
from domain.selection import ClickResult, DailySelection, RangeEmission
from domain.time_ranges import DateRange, normalize_day

logger = logging.getLogger(__name__)


class DailySelector:
    """
    Two-click anchor/range selection over individual days.

    No span cap, no direction lock, no adjacency requirement: the second
    click closes the range in whichever order the two days were chosen.
    """

    def __init__(self, window: AvailabilityWindow) -> None:
        self.window = window

    def empty(self) -> DailySelection:
        return DailySelection()

    def on_click(self, state: DailySelection, day: date | datetime) -> ClickResult[DailySelection]:
        day = normalize_day(day)

        if not self.window.is_day_available(day):
            logger.debug("Ignoring click on unavailable day %s", day)
            return ClickResult(state)

        # Toggle-off: clicking inside a committed range clears it
        if state.is_ranged and state.start <= day <= state.end:
            logger.info("Cleared daily range %s..%s", state.start, state.end)
            return ClickResult(DailySelection(), RangeEmission(state.start, None))

        if state.anchor is None:
            # Empty, or a committed range being replaced by a fresh anchor
            return ClickResult(DailySelection(anchor=day))

        start, end = sorted((state.anchor, day))
        logger.info("Selected daily range %s..%s", start, end)
        return ClickResult(
            DailySelection(start=start, end=end),
            RangeEmission(start, end),
        )

    # --------------------------------------------------
    # Queries
    # --------------------------------------------------

    def current_range(self, state: DailySelection) -> DateRange | None:
        if not state.is_ranged:
            return None
        return DateRange(state.start, state.end)

    def is_selected(self, state: DailySelection, day: date | datetime) -> bool:
        return state.is_ranged and state.start <= normalize_day(day) <= state.end

    def is_range_boundary(self, state: DailySelection, day: date | datetime) -> bool:
        day = normalize_day(day)
        return state.is_ranged and day in (state.start, state.end)

    def is_anchor(self, state: DailySelection, day: date | datetime) -> bool:
        return state.anchor is not None and state.anchor == normalize_day(day)
