# monthly.py

import logging

from domain.availability import AvailabilityWindow
from domain.months import MonthKey, month_keys_between
from domain.selection import ClickResult, MonthlySelection, RangeEmission
from domain.time_ranges import DateRange

logger = logging.getLogger(__name__)


class MonthlySelector:
    """
    Key-addressed selection over year-month buckets.

    Same shape as the weekly selector, minus two rules: there is no span
    cap and no direction lock, so a range may grow from either end in any
    order. This asymmetry is intentional.
    """

    def __init__(self, window: AvailabilityWindow) -> None:
        self.window = window

    def empty(self) -> MonthlySelection:
        return MonthlySelection()

    def on_click(self, state: MonthlySelection, key: MonthKey) -> ClickResult[MonthlySelection]:
        if not self.window.is_month_available(key):
            logger.debug("Ignoring click on unavailable month %s", key)
            return ClickResult(state)

        if state.is_empty:
            return self._single(key)

        start, end = state.start, state.end

        # Toggle-off
        if start <= key <= end:
            logger.info("Cleared monthly range %s..%s", start, end)
            return ClickResult(MonthlySelection(), RangeEmission(key.first_day, None))

        if not (key.is_consecutive_to(start) or key.is_consecutive_to(end)):
            return self._single(key)

        new_start = min(key, start)
        new_end = max(key, end)
        new_state = MonthlySelection(tuple(month_keys_between(new_start, new_end)))

        logger.info("Extended monthly range to %s..%s", new_start, new_end)
        return ClickResult(
            new_state,
            RangeEmission(new_start.first_day, new_end.last_day),
        )

    # --------------------------------------------------
    # Queries
    # --------------------------------------------------

    def current_range(self, state: MonthlySelection) -> DateRange | None:
        if state.is_empty:
            return None
        return DateRange(state.start.first_day, state.end.last_day)

    def is_selected(self, state: MonthlySelection, key: MonthKey) -> bool:
        return key in state.keys

    def is_range_boundary(self, state: MonthlySelection, key: MonthKey) -> bool:
        return state.is_ranged and key in (state.start, state.end)

    def _single(self, key: MonthKey) -> ClickResult[MonthlySelection]:
        logger.info("Selected single month %s", key)
        return ClickResult(
            MonthlySelection((key,)),
            RangeEmission(key.first_day, key.last_day),
        )
