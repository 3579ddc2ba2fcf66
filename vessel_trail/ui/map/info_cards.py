"""
Info cards for the vessel trail dashboard.
Summary of the latest record in the filtered trail.
"""

from typing import Optional, Sequence

import streamlit as st

from vessel_trail.data.loaders import trail_to_frame
from vessel_trail.models.filters import FilterCriteria
from vessel_trail.models.trail import TrailPoint


# Mock value until paint records are available
PAINT_VALUE = "Sigma Coatings"
NO_DATA = "No data"


def format_date(value: Optional[str]) -> str:
    if not value:
        return ""
    return value.split("T")[0]


def _value_or_na(value) -> str:
    return "N/A" if value is None else str(value)


def summarize_trail(points: Sequence[TrailPoint]) -> dict[str, str]:
    """Card values taken from the last record of the filtered trail."""
    if not points:
        return {
            "Paint": NO_DATA,
            "Hull Roughness": NO_DATA,
            "Log Factor": NO_DATA,
            "Last Underwater": NO_DATA,
        }
    last = points[-1]
    return {
        "Paint": PAINT_VALUE,
        "Hull Roughness": _value_or_na(last.shaft_power),
        "Log Factor": _value_or_na(last.shaft_speed),
        "Last Underwater": last.timestamp,
    }


def render_info_cards(
    points: Sequence[TrailPoint],
    criteria: Optional[FilterCriteria],
    on_reset,
) -> None:
    """
    Render the filter summary, reset button and metric cards.

    Args:
        points: Filtered trail points
        criteria: Applied filter, or None for all data
        on_reset: Callback clearing the applied filter
    """
    label_col, reset_col = st.columns([3, 1])
    with label_col:
        if criteria is not None:
            st.markdown(f"**Filter:** {format_date(criteria.date_from)} to {format_date(criteria.date_to)}")
        else:
            st.markdown("**All Data**")
    with reset_col:
        st.button(
            "Reset Filter",
            key="reset_filter",
            on_click=on_reset,
            disabled=criteria is None,
            use_container_width=True,
        )

    for title, value in summarize_trail(points).items():
        with st.container(border=True):
            st.markdown(f"**{title}**")
            if value == NO_DATA:
                st.caption(f"*{NO_DATA}*")
            else:
                st.write(value)

    if points:
        with st.expander(f"📋 Trail records ({len(points)})", expanded=False):
            frame = trail_to_frame(points)
            st.dataframe(frame, hide_index=True, use_container_width=True)
            st.download_button(
                "⬇️ Download CSV",
                data=frame.to_csv(index=False),
                file_name="vessel_trail.csv",
                mime="text/csv",
                key="download_trail_csv",
            )
