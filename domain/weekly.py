# weekly.py

import logging
from typing import Tuple

from domain.availability import AvailabilityWindow
from domain.models import MAX_WEEK_SPAN
from domain.selection import ClickResult, Direction, RangeEmission, WeeklySelection
from domain.time_ranges import DateRange
from domain.weeks import WeekBucket, build_week_buckets

logger = logging.getLogger(__name__)


class WeeklySelector:
    """
    Index-addressed selection over the week buckets of a window.

    A range grows one adjacent week at a time, up to MAX_WEEK_SPAN weeks.
    Once it has grown in one direction it is locked to that direction:
    a click on the opposite side restarts the selection instead of
    extending it. The monthly selector deliberately has no such lock;
    do not "align" the two.
    """

    def __init__(
        self,
        window: AvailabilityWindow,
        buckets: Tuple[WeekBucket, ...] | None = None,
        max_span: int = MAX_WEEK_SPAN,
    ) -> None:
        self.window = window
        self.buckets = buckets if buckets is not None else build_week_buckets(window)
        self.max_span = max_span

    def empty(self) -> WeeklySelection:
        return WeeklySelection()

    def is_index_available(self, index: int) -> bool:
        if not 0 <= index < len(self.buckets):
            return False
        return self.window.is_week_available(self.buckets[index])

    def on_click(self, state: WeeklySelection, index: int) -> ClickResult[WeeklySelection]:
        if not self.is_index_available(index):
            logger.debug("Ignoring click on unavailable week index %s", index)
            return ClickResult(state)

        if state.is_empty:
            return self._single(index)

        start, end = state.start_index, state.end_index

        # Toggle-off
        if start <= index <= end:
            logger.info("Cleared weekly range %s..%s", start, end)
            return ClickResult(
                WeeklySelection(),
                RangeEmission(self.buckets[start].start, None),
            )

        if index not in (start - 1, end + 1):
            # Jump: not adjacent to either boundary
            return self._single(index)

        # Span cap is checked before the direction lock so that a week
        # rendered disabled by is_at_max_range can never reset the range.
        if self.is_at_max_range(state, index):
            logger.debug(
                "Ignoring week %s: range %s..%s is at the %s-week cap",
                index, start, end, self.max_span,
            )
            return ClickResult(state)

        proposed = Direction.BACKWARD if index < start else Direction.FORWARD

        if state.direction is not None and proposed != state.direction:
            return self._single(index)

        if proposed is Direction.BACKWARD:
            start = index
        else:
            end = index

        new_state = WeeklySelection(start, end, state.direction or proposed)
        logger.info("Extended weekly range to %s..%s (%s)", start, end, new_state.direction.value)
        return ClickResult(new_state, self._emission(start, end))

    def is_at_max_range(self, state: WeeklySelection, index: int) -> bool:
        """
        True when clicking ``index`` would extend the range past the cap.

        Only indices adjacent to a boundary can extend a range; anything
        further away is a jump and is never blocked.
        """
        if state.is_empty:
            return False

        start, end = state.start_index, state.end_index

        if index == start - 1:
            return end - index + 1 > self.max_span
        if index == end + 1:
            return index - start + 1 > self.max_span
        return False

    # --------------------------------------------------
    # Queries
    # --------------------------------------------------

    def current_range(self, state: WeeklySelection) -> DateRange | None:
        if state.is_empty:
            return None
        return DateRange(
            self.buckets[state.start_index].start,
            self.buckets[state.end_index].end,
        )

    def is_selected(self, state: WeeklySelection, index: int) -> bool:
        return state.is_ranged and state.start_index <= index <= state.end_index

    def is_range_boundary(self, state: WeeklySelection, index: int) -> bool:
        return state.is_ranged and index in (state.start_index, state.end_index)

    # --------------------------------------------------
    # Helpers
    # --------------------------------------------------

    def _single(self, index: int) -> ClickResult[WeeklySelection]:
        logger.info("Selected single week %s (%s)", index, self.buckets[index].start)
        return ClickResult(WeeklySelection(index, index, None), self._emission(index, index))

    def _emission(self, start: int, end: int) -> RangeEmission:
        return RangeEmission(self.buckets[start].start, self.buckets[end].end)
