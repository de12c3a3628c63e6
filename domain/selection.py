# selection.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Generic, Optional, Tuple, TypeVar

from domain.months import MonthKey


class Direction(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


# ---------------------------------------------------------------------
# Per-granularity selection states
#
# All states are immutable; selectors return a new value on every click.
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class DailySelection:
    """
    Empty (both None), Anchored (anchor only) or Ranged (range only).
    """
    anchor: Optional[date] = None
    start: Optional[date] = None
    end: Optional[date] = None

    def __post_init__(self) -> None:
        assert (self.start is None) == (self.end is None), "half-open daily range"
        assert self.anchor is None or self.start is None, "anchored and ranged at once"
        assert self.start is None or self.start <= self.end, "daily range start after end"

    @property
    def is_empty(self) -> bool:
        return self.anchor is None and self.start is None

    @property
    def is_ranged(self) -> bool:
        return self.start is not None


@dataclass(frozen=True)
class WeeklySelection:
    """
    Boundary pair over densely indexed week buckets.

    Single(i) is represented as start_index == end_index with no direction.
    """
    start_index: Optional[int] = None
    end_index: Optional[int] = None
    direction: Optional[Direction] = None

    def __post_init__(self) -> None:
        assert (self.start_index is None) == (self.end_index is None), "half-open weekly range"
        assert (
            self.start_index is None or self.start_index <= self.end_index
        ), "weekly range start after end"
        assert self.start_index is not None or self.direction is None, "direction without range"

    @property
    def is_empty(self) -> bool:
        return self.start_index is None

    @property
    def is_ranged(self) -> bool:
        return self.start_index is not None

    @property
    def span(self) -> int:
        if self.start_index is None:
            return 0
        return self.end_index - self.start_index + 1


@dataclass(frozen=True)
class MonthlySelection:
    """
    Ordered, gap-free tuple of every selected month.

    Unlike weeks, months are rendered as individual chips, so the full
    set is kept rather than just the two boundaries.
    """
    keys: Tuple[MonthKey, ...] = ()

    def __post_init__(self) -> None:
        for a, b in zip(self.keys, self.keys[1:]):
            assert b.ordinal == a.ordinal + 1, "monthly selection is not contiguous"

    @property
    def is_empty(self) -> bool:
        return not self.keys

    @property
    def is_ranged(self) -> bool:
        return bool(self.keys)

    @property
    def start(self) -> Optional[MonthKey]:
        return self.keys[0] if self.keys else None

    @property
    def end(self) -> Optional[MonthKey]:
        return self.keys[-1] if self.keys else None


# ---------------------------------------------------------------------
# Click results
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class RangeEmission:
    """
    What the picker reports to the host after a click.

    ``end is None`` signals that the selection starting at ``start``
    was cleared.
    """
    start: date
    end: Optional[date]

    @property
    def is_deselection(self) -> bool:
        return self.end is None


S = TypeVar("S")


@dataclass(frozen=True)
class ClickResult(Generic[S]):
    state: S
    emitted: Optional[RangeEmission] = None
