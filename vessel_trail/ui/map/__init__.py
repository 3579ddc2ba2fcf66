"""
Map and summary components for the vessel trail dashboard.
"""

from vessel_trail.ui.map.map_section import render_trail_map
from vessel_trail.ui.map.info_cards import render_info_cards, summarize_trail

__all__ = [
    "render_trail_map",
    "render_info_cards",
    "summarize_trail",
]
