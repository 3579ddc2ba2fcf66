"""
Layout components for the vessel trail dashboard.
"""

from vessel_trail.ui.layout.global_state import (
    init_session_state,
    get_theme_mode,
    toggle_theme_mode,
    get_trail_metric,
    get_filter_coordinator,
    get_applied_filter,
)
from vessel_trail.ui.layout.header import render_header

__all__ = [
    "init_session_state",
    "get_theme_mode",
    "toggle_theme_mode",
    "get_trail_metric",
    "get_filter_coordinator",
    "get_applied_filter",
    "render_header",
]
