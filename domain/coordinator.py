# coordinator.py

import logging
from datetime import date, datetime
from typing import Any, Callable, Dict, Optional

from domain.availability import AvailabilityWindow, default_window
from domain.daily import DailySelector
from domain.models import DAILY, GRANULARITIES, MONTHLY, WEEKLY
from domain.monthly import MonthlySelector
from domain.selection import ClickResult
from domain.time_ranges import DateRange, format_range_label
from domain.weekly import WeeklySelector

logger = logging.getLogger(__name__)

RangeCallback = Callable[[date, Optional[date]], None]
ViewCallback = Callable[[str], None]


class DatePickerCoordinator:
    """
    Owns the active granularity and one selection state per granularity.

    Clicks are delegated to the active selector; the new state replaces
    the old one in a single assignment and any emitted range is forwarded
    to ``on_range_select``. Switching granularity clears every selector.
    """

    def __init__(
        self,
        window: AvailabilityWindow | None = None,
        *,
        today: date | datetime | None = None,
        earliest: date | None = None,
        granularity: str = DAILY,
        on_range_select: RangeCallback | None = None,
        on_view_change: ViewCallback | None = None,
        on_apply: RangeCallback | None = None,
    ) -> None:
        if window is None:
            if today is None:
                raise ValueError("Either window or today must be given")
            window = default_window(today, earliest)

        _check_granularity(granularity)

        self.granularity = granularity
        self.on_range_select = on_range_select
        self.on_view_change = on_view_change
        self.on_apply = on_apply

        self._carried_range: DateRange | None = None
        self._install_window(window)

    # --------------------------------------------------
    # Inputs
    # --------------------------------------------------

    def set_availability_window(self, lower: date | datetime, upper: date | datetime) -> None:
        """
        Replace the window. Week indices are only meaningful for the
        buckets of one window, so every selection is cleared.
        """
        self._install_window(AvailabilityWindow(lower, upper))
        logger.info("Availability window set to %s..%s", self.window.lower, self.window.upper)

    def set_granularity(self, granularity: str, persist_range: bool = False) -> None:
        """
        Switch the active view.

        Every selector is reset. With ``persist_range`` the committed range
        of the view being left stays visible as ``current_range`` until
        the first click in the new view.
        """
        _check_granularity(granularity)

        if granularity == self.granularity:
            return

        carried = self.current_range if persist_range else None
        previous = self.granularity

        self.granularity = granularity
        self._reset_states()
        self._carried_range = carried

        logger.info("Switched view %s -> %s", previous, granularity)
        if self.on_view_change:
            self.on_view_change(granularity)

    def on_click(self, unit: Any) -> ClickResult:
        """
        Forward a click to the active selector.

        ``unit`` is a day for the daily view, a week bucket index for the
        weekly view and a MonthKey for the monthly view.
        """
        selector = self.selectors[self.granularity]
        result = selector.on_click(self.states[self.granularity], unit)

        self.states[self.granularity] = result.state

        if result.emitted is not None:
            self._carried_range = None
            if self.on_range_select:
                self.on_range_select(result.emitted.start, result.emitted.end)

        return result

    def clear(self) -> None:
        self._reset_states()
        logger.info("Cleared all selections")

    def apply(self) -> DateRange | None:
        """
        Hand the committed range to the host. No-op without a selection.
        """
        selected = self.current_range
        if selected is None:
            return None

        logger.info("Applied range %s", format_range_label(selected))
        if self.on_apply:
            self.on_apply(selected.start, selected.end)
        return selected

    # --------------------------------------------------
    # Outputs
    # --------------------------------------------------

    @property
    def active_selector(self):
        return self.selectors[self.granularity]

    @property
    def active_state(self):
        return self.states[self.granularity]

    @property
    def current_range(self) -> DateRange | None:
        selected = self.active_selector.current_range(self.active_state)
        if selected is None:
            return self._carried_range
        return selected

    @property
    def has_valid_selection(self) -> bool:
        return self.current_range is not None

    def formatted_label(self) -> str:
        return format_range_label(self.current_range)

    def is_unit_available(self, unit: Any) -> bool:
        if self.granularity == WEEKLY:
            return self.weekly.is_index_available(unit)
        return self.window.is_available(unit)

    def is_unit_selected(self, unit: Any) -> bool:
        return self.active_selector.is_selected(self.active_state, unit)

    def is_unit_range_boundary(self, unit: Any) -> bool:
        return self.active_selector.is_range_boundary(self.active_state, unit)

    def is_unit_at_max_range(self, unit: Any) -> bool:
        # Only weekly selections are capped
        if self.granularity != WEEKLY:
            return False
        return self.weekly.is_at_max_range(self.active_state, unit)

    # --------------------------------------------------
    # Internals
    # --------------------------------------------------

    def _install_window(self, window: AvailabilityWindow) -> None:
        self.window = window
        self.daily = DailySelector(window)
        self.weekly = WeeklySelector(window)
        self.monthly = MonthlySelector(window)
        self.selectors: Dict[str, Any] = {
            DAILY: self.daily,
            WEEKLY: self.weekly,
            MONTHLY: self.monthly,
        }
        self._reset_states()

    def _reset_states(self) -> None:
        self.states: Dict[str, Any] = {
            name: selector.empty() for name, selector in self.selectors.items()
        }
        self._carried_range = None


def _check_granularity(granularity: str) -> None:
    if granularity not in GRANULARITIES:
        raise ValueError(f"Unknown granularity: {granularity}")
