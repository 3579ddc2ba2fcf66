"""
Rendering package for the vessel trail dashboard.
Provides map visualization using pydeck behind a rendering port.
"""

from vessel_trail.rendering.port import RenderContext, RenderingPort
from vessel_trail.rendering.pydeck_adapter import (
    PydeckRenderer,
    get_initial_view_state,
    fit_bounds_view_state,
    center_zoom_view_state,
    build_tooltip,
)

__all__ = [
    "RenderContext",
    "RenderingPort",
    "PydeckRenderer",
    "get_initial_view_state",
    "fit_bounds_view_state",
    "center_zoom_view_state",
    "build_tooltip",
]
