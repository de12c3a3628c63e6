from datetime import date

import streamlit as st

from domain.calendar_grid import month_grid, shift_month
from domain.coordinator import DatePickerCoordinator
from domain.models import (
    DAILY,
    GRANULARITIES,
    GRANULARITY_LABELS,
    MONTH_NAMES,
    MONTHLY,
    WEEKDAY_NAMES,
    WEEKLY,
)
from domain.months import group_months_by_year, month_keys_in_window
from domain.time_ranges import format_day, format_range_label
from domain.weeks import (
    group_weeks_by_month,
    quarter_label,
    quarter_of,
    shift_quarter,
    weeks_in_quarter,
)
from infrastructure.config import PickerConfig

PICKER_KEY = "date_picker"
APPLIED_KEY = "applied_range"


# --------------------------------------------------
# Public entry point (called from app.py)
# --------------------------------------------------

def render_date_picker_screen(config: PickerConfig) -> None:
    st.title("Date range")
    st.markdown("Pick the period the dashboard charts and tables should cover.")

    picker = _get_picker(config)

    # 1. Granularity
    view = st.radio(
        "View",
        GRANULARITIES,
        index=GRANULARITIES.index(picker.granularity),
        format_func=lambda g: GRANULARITY_LABELS[g],
        horizontal=True,
    )
    if view != picker.granularity:
        picker.set_granularity(view)
        _reset_navigation(config.most_recent_day)

    st.caption(
        f"Data available from {format_day(picker.window.lower)} "
        f"to {format_day(picker.window.upper)}"
    )

    # 2. Active view
    if picker.granularity == DAILY:
        _render_daily_view(picker)
    elif picker.granularity == WEEKLY:
        _render_weekly_view(picker)
    elif picker.granularity == MONTHLY:
        _render_monthly_view(picker)

    st.divider()

    # 3. Selection footer
    _render_footer(picker)


# --------------------------------------------------
# Session state
# --------------------------------------------------

def _get_picker(config: PickerConfig) -> DatePickerCoordinator:
    if PICKER_KEY not in st.session_state:
        st.session_state[PICKER_KEY] = DatePickerCoordinator(
            config.window,
            granularity=config.initial_view,
        )
        _reset_navigation(config.most_recent_day)
    return st.session_state[PICKER_KEY]


def _reset_navigation(anchor: date) -> None:
    st.session_state["picker_month"] = anchor.replace(day=1)
    st.session_state["picker_quarter"] = (quarter_of(anchor), anchor.year)


# --------------------------------------------------
# Views
# --------------------------------------------------

def _render_daily_view(picker: DatePickerCoordinator) -> None:
    month_start = st.session_state["picker_month"]

    prev_col, title_col, next_col = st.columns([1, 5, 1])
    if prev_col.button("‹", key="month_prev"):
        st.session_state["picker_month"] = shift_month(month_start, -1)
        st.rerun()
    title_col.subheader(f"{MONTH_NAMES[month_start.month - 1]} {month_start.year}")
    if next_col.button("›", key="month_next"):
        st.session_state["picker_month"] = shift_month(month_start, 1)
        st.rerun()

    header = st.columns(7)
    for col, name in zip(header, WEEKDAY_NAMES):
        col.caption(name)

    cells = month_grid(month_start, picker.daily, picker.active_state)

    for row_start in range(0, len(cells), 7):
        cols = st.columns(7)
        for col, cell in zip(cols, cells[row_start:row_start + 7]):
            highlighted = cell.is_in_range or cell.is_anchor
            if col.button(
                str(cell.day.day),
                key=f"day_{cell.day.isoformat()}",
                disabled=cell.is_disabled,
                type="primary" if highlighted else "secondary",
            ):
                picker.on_click(cell.day)
                st.rerun()


def _render_weekly_view(picker: DatePickerCoordinator) -> None:
    quarter, year = st.session_state["picker_quarter"]

    prev_col, title_col, next_col = st.columns([1, 5, 1])
    if prev_col.button("‹", key="quarter_prev"):
        st.session_state["picker_quarter"] = shift_quarter(quarter, year, -1)
        st.rerun()
    title_col.subheader(quarter_label(quarter, year))
    if next_col.button("›", key="quarter_next"):
        st.session_state["picker_quarter"] = shift_quarter(quarter, year, 1)
        st.rerun()

    weeks = weeks_in_quarter(picker.weekly.buckets, quarter, year)
    if not weeks:
        st.info("No weeks in this quarter.")
        return

    for month_label, month_weeks in group_weeks_by_month(weeks).items():
        st.markdown(f"**{month_label.replace('-', ' ')}**")
        cols = st.columns(len(month_weeks))

        for col, week in zip(cols, month_weeks):
            # Weeks a click could not extend into are rendered disabled
            disabled = (
                not picker.is_unit_available(week.index)
                or picker.is_unit_at_max_range(week.index)
            )
            if col.button(
                f"{week.start.day}–{week.end.day}",
                key=f"week_{week.index}",
                help=format_range_label(week.date_range),
                disabled=disabled,
                type="primary" if picker.is_unit_selected(week.index) else "secondary",
            ):
                picker.on_click(week.index)
                st.rerun()


def _render_monthly_view(picker: DatePickerCoordinator) -> None:
    keys = month_keys_in_window(picker.window)

    for year, year_keys in group_months_by_year(keys).items():
        st.markdown(f"**{year}**")

        for row_start in range(0, len(year_keys), 4):
            cols = st.columns(4)
            for col, key in zip(cols, year_keys[row_start:row_start + 4]):
                if col.button(
                    key.label,
                    key=f"month_{key}",
                    disabled=not picker.is_unit_available(key),
                    type="primary" if picker.is_unit_selected(key) else "secondary",
                ):
                    picker.on_click(key)
                    st.rerun()


# --------------------------------------------------
# Footer
# --------------------------------------------------

def _render_footer(picker: DatePickerCoordinator) -> None:
    label = picker.formatted_label()
    if label:
        st.markdown(f"**Selected:** {label}")
    else:
        st.caption("Nothing selected yet.")

    clear_col, apply_col = st.columns(2)

    if clear_col.button("Clear", disabled=not picker.has_valid_selection):
        picker.clear()
        st.rerun()

    if apply_col.button(
        "Apply",
        type="primary",
        disabled=not picker.has_valid_selection,
    ):
        applied = picker.apply()
        st.session_state[APPLIED_KEY] = {
            "range": applied,
            "granularity": picker.granularity,
        }
        st.success(f"Applied {format_range_label(applied)}")

    if APPLIED_KEY in st.session_state:
        applied = st.session_state[APPLIED_KEY]["range"]
        st.caption(f"Dashboard period: {format_range_label(applied)}")
