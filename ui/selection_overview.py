import streamlit as st
import plotly.express as px

from domain.time_ranges import format_range_label, previous_period
from infrastructure.config import PickerConfig
from ui.date_picker import APPLIED_KEY
from ui.overview_helpers import build_period_frame, build_timeline_frame


# --------------------------------------------------
# Public entry point (called from app.py)
# --------------------------------------------------

def render_selection_overview(config: PickerConfig) -> None:
    st.title("Selection overview")

    if APPLIED_KEY not in st.session_state:
        st.info("No date range applied yet. Pick one on the Date range page.")
        return

    applied = st.session_state[APPLIED_KEY]
    date_range = applied["range"]
    granularity = applied["granularity"]

    previous = previous_period(date_range)

    col1, col2, col3 = st.columns(3)
    col1.metric("Days", date_range.days)
    col2.metric("Granularity", granularity.capitalize())
    col3.metric("Compared with", format_range_label(previous))

    st.caption(f"Period: {format_range_label(date_range)}")

    # --- Periods covered ---
    st.subheader("Periods covered")
    st.dataframe(
        build_period_frame(date_range, granularity),
        width="stretch",
        hide_index=True,
    )

    # --- Timeline ---
    st.subheader("Timeline")
    timeline = build_timeline_frame(config.window, date_range, previous)

    st.plotly_chart(
        px.timeline(
            timeline,
            x_start="Start",
            x_end="Finish",
            y="Series",
            color="Series",
        ),
        width="stretch",
    )
