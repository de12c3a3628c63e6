from datetime import date
from typing import Final, Dict, List


# ---------------------------------------------------------------------
# Granularity
# ---------------------------------------------------------------------

DAILY: Final[str] = "daily"
WEEKLY: Final[str] = "weekly"
MONTHLY: Final[str] = "monthly"

GRANULARITIES: Final[List[str]] = [
    DAILY,
    WEEKLY,
    MONTHLY,
]

GRANULARITY_LABELS: Final[Dict[str, str]] = {
    DAILY: "Daily",
    WEEKLY: "Weekly",
    MONTHLY: "Monthly",
}


# ---------------------------------------------------------------------
# Selection limits
# ---------------------------------------------------------------------

# 13 weeks ~ one quarter
MAX_WEEK_SPAN: Final[int] = 13

# Weeks are generated past the most recent data day so that
# future quarters can still be browsed (rendered disabled).
WEEK_LOOKAHEAD_YEARS: Final[int] = 2

DEFAULT_EARLIEST_DAY: Final[date] = date(2024, 1, 1)


# ---------------------------------------------------------------------
# Calendar names
# ---------------------------------------------------------------------

MONTH_NAMES: Final[List[str]] = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

MONTH_ABBREVIATIONS: Final[List[str]] = [m[:3].upper() for m in MONTH_NAMES]

# Weeks start on Sunday
WEEKDAY_NAMES: Final[List[str]] = ["SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT"]
