from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
import os

from domain.availability import AvailabilityWindow
from domain.models import DAILY, DEFAULT_EARLIEST_DAY, GRANULARITIES


def _iso_date(env_key: str, raw: str) -> date:
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        raise ValueError(f"{env_key} must be an ISO date (YYYY-MM-DD), got {raw!r}") from None


@dataclass(frozen=True)
class PickerConfig:
    """
    Picker settings, read from the environment.

    ``today`` is injected by the caller; PICKER_MOST_RECENT_DAY overrides
    it as the upper bound of the availability window.
    """
    today: date

    earliest_day: date = None       # type: ignore[assignment]
    most_recent_day: date = None    # type: ignore[assignment]

    initial_view: str = field(default_factory=lambda: os.getenv("PICKER_INITIAL_VIEW", DAILY).strip().lower())
    log_level: str = field(default_factory=lambda: os.getenv("PICKER_LOG_LEVEL", "INFO").strip().upper())
    logs_dir: Path = None           # type: ignore[assignment]

    window: AvailabilityWindow = field(init=False)

    def __post_init__(self) -> None:
        earliest_raw = os.getenv("PICKER_EARLIEST_DAY", "")
        recent_raw = os.getenv("PICKER_MOST_RECENT_DAY", "")

        object.__setattr__(
            self,
            "earliest_day",
            _iso_date("PICKER_EARLIEST_DAY", earliest_raw) if earliest_raw.strip() else DEFAULT_EARLIEST_DAY,
        )
        object.__setattr__(
            self,
            "most_recent_day",
            _iso_date("PICKER_MOST_RECENT_DAY", recent_raw) if recent_raw.strip() else self.today,
        )
        object.__setattr__(
            self,
            "logs_dir",
            Path(os.getenv("PICKER_LOGS_DIR", "logs")).expanduser().resolve(),
        )

        if self.initial_view not in GRANULARITIES:
            raise ValueError(
                f"PICKER_INITIAL_VIEW must be one of {', '.join(GRANULARITIES)}, got {self.initial_view!r}"
            )

        # Built eagerly so inverted bounds fail at construction
        object.__setattr__(
            self,
            "window",
            AvailabilityWindow(self.earliest_day, self.most_recent_day),
        )
