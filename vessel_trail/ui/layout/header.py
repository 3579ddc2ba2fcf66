"""
Header component for the vessel trail dashboard.
Renders the title, the filter button and the theme toggle.
"""

import streamlit as st

from vessel_trail.ui.layout.global_state import get_theme_mode, toggle_theme_mode
from vessel_trail.ui.filters import filter_dialog


def render_header() -> None:
    """
    Render the application header.
    """
    title_col, filter_col, theme_col = st.columns([6, 1, 1])

    with title_col:
        st.title("🚢 Vessel Trail")
        st.caption("*Historical track colored by vessel performance.*")

    with filter_col:
        st.button(
            "🔍 Filters",
            key="open_filter_dialog",
            on_click=filter_dialog.open_filter_dialog,
            help="Open global filters",
            use_container_width=True,
        )

    with theme_col:
        label = "🌙 Dark" if get_theme_mode() == "light" else "☀️ Light"
        st.button(
            label,
            key="toggle_theme",
            on_click=toggle_theme_mode,
            help="Toggle map style",
            use_container_width=True,
        )

    # Horizontal divider
    st.divider()
