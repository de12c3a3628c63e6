from datetime import date

import streamlit as st

from infrastructure.config import PickerConfig
from infrastructure.logging_utils import setup_logger
from ui.date_picker import render_date_picker_screen
from ui.selection_overview import render_selection_overview


def main() -> None:
    st.set_page_config(
        page_title="Visibility Date Picker",
        layout="centered",
    )

    try:
        config = PickerConfig(today=date.today())
        # Engine modules log under the "domain" namespace
        setup_logger("domain", config.logs_dir, config.log_level)
    except ValueError as e:
        st.error("Invalid picker configuration")
        st.caption(str(e))
        return

    page = st.sidebar.radio(
        "Navigation",
        [
            "Date range",
            "Selection overview",
        ],
    )

    if page == "Date range":
        render_date_picker_screen(config)
    elif page == "Selection overview":
        render_selection_overview(config)


if __name__ == "__main__":
    main()
