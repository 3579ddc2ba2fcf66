"""
Vessel Trail Dashboard
Displays a vessel's historical track colored by a performance metric.

This is the main Streamlit application entry point.
"""

import sys
from pathlib import Path

# Add the project root to the Python path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import streamlit as st

# Page configuration must be first Streamlit command
st.set_page_config(
    page_title="Vessel Trail",
    page_icon="🚢",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# Now import app modules
from vessel_trail.config import get_settings
from vessel_trail.data.loaders import get_data_service
from vessel_trail.logging_config import configure_logging
from vessel_trail.trail.date_filter import apply_filter
from vessel_trail.ui.filters.filter_dialog import render_filter_dialog, show_notices
from vessel_trail.ui.layout.global_state import (
    get_applied_filter,
    get_filter_coordinator,
    init_session_state,
    is_filter_dialog_open,
    set_filter_dialog_open,
    take_app_notices,
)
from vessel_trail.ui.layout.header import render_header
from vessel_trail.ui.map.info_cards import render_info_cards
from vessel_trail.ui.map.map_section import render_trail_map


def reset_filter() -> None:
    """Clear the applied filter so that all data is shown."""
    get_filter_coordinator().reset_applied()


def main() -> None:
    """Main application entry point."""
    configure_logging(get_settings().log_level)
    init_session_state()

    render_header()

    # Filtering is local over the in-memory snapshot
    all_points = get_data_service().load_trail()
    criteria = get_applied_filter()
    filtered = apply_filter(all_points, criteria)

    map_col, info_col = st.columns([2, 1])
    with map_col:
        render_trail_map(filtered, criteria)
    with info_col:
        render_info_cards(filtered, criteria, on_reset=reset_filter)

    # The dialog request is consumed so that dismissing it does not reopen it
    if is_filter_dialog_open():
        set_filter_dialog_open(False)
        render_filter_dialog()

    show_notices(take_app_notices())

    # Footer
    st.divider()
    st.markdown("""
    <div style="text-align: center; color: #888; font-size: 12px;">
        Vessel Trail Dashboard | Static trail snapshot, filtered locally
    </div>
    """, unsafe_allow_html=True)


if __name__ == "__main__":
    main()
