from datetime import timedelta

import pandas as pd

from domain.availability import AvailabilityWindow
from domain.models import DAILY, MONTHLY, WEEKLY
from domain.time_ranges import DateRange


# Sunday-start weeks: periods anchored on Saturday end on Saturday
_PERIOD_FREQ = {
    DAILY: "D",
    WEEKLY: "W-SAT",
    MONTHLY: "M",
}


def build_period_frame(date_range: DateRange, granularity: str) -> pd.DataFrame:
    """
    One row per day, week or month covered by the range.

    Columns: Period, Start, End, Days. Partial periods at the edges are
    clipped to the range, so Days always sums to the range length.
    """
    if granularity not in _PERIOD_FREQ:
        raise ValueError(f"Unknown granularity: {granularity}")

    days = pd.date_range(date_range.start, date_range.end, freq="D")
    df = pd.DataFrame({"day": days})
    df["period"] = df["day"].dt.to_period(_PERIOD_FREQ[granularity])  # type: ignore[attr-defined]

    grouped = (
        df.groupby("period", as_index=False)
        .agg(Start=("day", "min"), End=("day", "max"), Days=("day", "count"))
        .sort_values("Start")
    )

    grouped["Period"] = grouped["Start"].dt.strftime(  # type: ignore[attr-defined]
        {
            DAILY: "%Y-%m-%d",
            WEEKLY: "Week of %Y-%m-%d",
            MONTHLY: "%B %Y",
        }[granularity]
    )
    grouped["Start"] = grouped["Start"].dt.date  # type: ignore[attr-defined]
    grouped["End"] = grouped["End"].dt.date  # type: ignore[attr-defined]

    return grouped[["Period", "Start", "End", "Days"]].reset_index(drop=True)


def build_timeline_frame(
    window: AvailabilityWindow,
    date_range: DateRange,
    previous: DateRange | None = None,
) -> pd.DataFrame:
    """
    Bars for a plotly timeline: the availability window, the selection
    and optionally the comparison period.

    Finish is exclusive (end + 1 day) so single-day bars have width.
    """
    rows = [
        ("Available data", window.lower, window.upper),
        ("Selected", date_range.start, date_range.end),
    ]
    if previous is not None:
        rows.append(("Comparison", previous.start, previous.end))

    return pd.DataFrame(
        [
            {
                "Series": name,
                "Start": pd.Timestamp(start),
                "Finish": pd.Timestamp(end + timedelta(days=1)),
            }
            for name, start, end in rows
        ]
    )
