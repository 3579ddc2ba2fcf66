"""
Trail package for the vessel trail dashboard.
Classification, date filtering, geometry assembly and tooltip data.
"""

from vessel_trail.trail.classifier import (
    ColorBand,
    classify,
    legend,
    hex_to_rgba,
)
from vessel_trail.trail.date_filter import (
    in_date_range,
    filter_by_date_range,
    apply_filter,
)
from vessel_trail.trail.geometry import (
    PointFeature,
    LineFeature,
    TrailFeatureCollection,
    FitBounds,
    CenterZoom,
    NoViewportChange,
    ViewportDirective,
    TrailGeometry,
    build_trail_geometry,
    select_viewport,
)
from vessel_trail.trail.store import TrailFeatureStore
from vessel_trail.trail.tooltip import (
    TooltipProvider,
    TooltipShow,
    TooltipHide,
    tooltip_fields,
)

__all__ = [
    "ColorBand",
    "classify",
    "legend",
    "hex_to_rgba",
    "in_date_range",
    "filter_by_date_range",
    "apply_filter",
    "PointFeature",
    "LineFeature",
    "TrailFeatureCollection",
    "FitBounds",
    "CenterZoom",
    "NoViewportChange",
    "ViewportDirective",
    "TrailGeometry",
    "build_trail_geometry",
    "select_viewport",
    "TrailFeatureStore",
    "TooltipProvider",
    "TooltipShow",
    "TooltipHide",
    "tooltip_fields",
]
