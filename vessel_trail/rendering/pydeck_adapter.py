"""
PyDeck adapter for the vessel trail map.
Implements the rendering port with deck.gl layers through pydeck.
"""

import math
from typing import Optional, Sequence, Union

import pydeck as pdk

from vessel_trail.rendering.port import RenderContext
from vessel_trail.trail.geometry import (
    BBox,
    CenterZoom,
    Coordinate,
    FitBounds,
    LineFeature,
    PointFeature,
    TrailFeatureCollection,
    ViewportDirective,
)
from vessel_trail.trail.tooltip import TOOLTIP_FIELDS, tooltip_fields


# Default style (works without Mapbox token)
DEFAULT_STYLE = "https://basemaps.cartocdn.com/gl/positron-gl-style/style.json"
DARK_STYLE = "https://basemaps.cartocdn.com/gl/dark-matter-gl-style/style.json"

# Minimum zoom level to prevent world repetition (1.0 shows ~one full world)
MIN_ZOOM_LEVEL = 1.0
MAX_ZOOM_LEVEL = 18.0

# deck.gl world size at zoom 0
TILE_SIZE = 512
MAX_LATITUDE = 85.051129

POINT_RADIUS_PX = 5
POINT_STROKE_PX = 1
LINE_WIDTH_PX = 3

POINT_LAYER_ID = "trail_points"
LINE_LAYER_ID = "trail_line"


def get_initial_view_state(
    latitude: float = 0,
    longitude: float = 0,
    zoom: float = 2,
    min_zoom: float = MIN_ZOOM_LEVEL,
    max_zoom: float = MAX_ZOOM_LEVEL,
) -> pdk.ViewState:
    """
    Create an initial view state for the map.

    Args:
        latitude: Center latitude
        longitude: Center longitude
        zoom: Zoom level (0-20)
        min_zoom: Minimum zoom level (prevents world repetition)
        max_zoom: Maximum zoom level

    Returns:
        PyDeck ViewState object
    """
    zoom = max(min_zoom, min(zoom, max_zoom))

    return pdk.ViewState(
        latitude=latitude,
        longitude=longitude,
        zoom=zoom,
        min_zoom=min_zoom,
        max_zoom=max_zoom,
        pitch=0,
        bearing=0,
    )


def lnglat_to_world(longitude: float, latitude: float, zoom: float = 0) -> tuple[float, float]:
    """Web Mercator world pixel coordinates at the given zoom."""
    scale = TILE_SIZE * 2 ** zoom
    latitude = max(-MAX_LATITUDE, min(latitude, MAX_LATITUDE))
    siny = math.sin(math.radians(latitude))
    x = (longitude + 180.0) / 360.0 * scale
    y = (0.5 - math.log((1 + siny) / (1 - siny)) / (4 * math.pi)) * scale
    return x, y


def world_to_lnglat(x: float, y: float, zoom: float = 0) -> tuple[float, float]:
    scale = TILE_SIZE * 2 ** zoom
    longitude = x / scale * 360.0 - 180.0
    latitude = math.degrees(math.atan(math.sinh(math.pi * (1 - 2 * y / scale))))
    return longitude, latitude


def fit_bounds_view_state(
    bbox: BBox,
    width: int,
    height: int,
    padding: int = 40,
    duration_ms: Optional[int] = None,
    min_zoom: float = MIN_ZOOM_LEVEL,
    max_zoom: float = MAX_ZOOM_LEVEL,
) -> pdk.ViewState:
    """
    View state that fits a bounding box inside the map with pixel padding.

    Args:
        bbox: [min_lon, min_lat, max_lon, max_lat]
        width: Map width in pixels
        height: Map height in pixels
        padding: Padding on every side in pixels
        duration_ms: Transition duration; None for an immediate jump

    Returns:
        PyDeck ViewState object
    """
    min_lon, min_lat, max_lon, max_lat = bbox
    x0, y0 = lnglat_to_world(min_lon, max_lat)
    x1, y1 = lnglat_to_world(max_lon, min_lat)

    span_x = max(x1 - x0, 1e-9)
    span_y = max(y1 - y0, 1e-9)
    usable_w = max(width - 2 * padding, 1)
    usable_h = max(height - 2 * padding, 1)

    zoom = math.log2(min(usable_w / span_x, usable_h / span_y))
    zoom = max(min_zoom, min(zoom, max_zoom))
    longitude, latitude = world_to_lnglat((x0 + x1) / 2, (y0 + y1) / 2)

    view_state = get_initial_view_state(latitude=latitude, longitude=longitude, zoom=zoom,
                                        min_zoom=min_zoom, max_zoom=max_zoom)
    if duration_ms:
        view_state.transition_duration = duration_ms
    return view_state


def center_zoom_view_state(coordinate: Coordinate, zoom: float) -> pdk.ViewState:
    longitude, latitude = coordinate
    return get_initial_view_state(latitude=latitude, longitude=longitude, zoom=zoom)


def view_state_for(
    viewport: ViewportDirective,
    context: RenderContext,
    current: pdk.ViewState,
) -> pdk.ViewState:
    """Translate a viewport directive; no-op keeps the current view."""
    if isinstance(viewport, FitBounds):
        return fit_bounds_view_state(
            viewport.bounds,
            context.width,
            context.height,
            padding=viewport.padding,
            duration_ms=viewport.duration_ms if viewport.animate else None,
        )
    if isinstance(viewport, CenterZoom):
        return center_zoom_view_state(viewport.coordinate, viewport.zoom)
    return current


def point_records(collection: TrailFeatureCollection) -> list[dict]:
    """Scatterplot rows: position, color and tooltip fields of each point."""
    rows = []
    for feature in collection.points:
        row = {
            "position": list(feature.coordinate),
            "color": feature.band.rgba(),
            "index": feature.index,
        }
        row.update(dict(tooltip_fields(feature.record)))
        rows.append(row)
    return rows


def create_line_layer(line: LineFeature) -> pdk.Layer:
    """
    Create a PyDeck path layer for the track line.
    The line is not pickable so it never triggers the tooltip.
    """
    return pdk.Layer(
        "PathLayer",
        id=LINE_LAYER_ID,
        data=[{"path": [list(c) for c in line.coordinates], "color": line.band.rgba()}],
        pickable=False,
        get_path="path",
        get_color="color",
        width_units="pixels",
        get_width=LINE_WIDTH_PX,
        width_min_pixels=LINE_WIDTH_PX,
    )


def create_point_layer(collection: TrailFeatureCollection) -> pdk.Layer:
    """Create a PyDeck scatterplot layer for the trail points."""
    return pdk.Layer(
        "ScatterplotLayer",
        id=POINT_LAYER_ID,
        data=point_records(collection),
        pickable=True,
        stroked=True,
        filled=True,
        get_position="position",
        get_fill_color="color",
        get_line_color=[255, 255, 255, 255],
        radius_units="pixels",
        get_radius=POINT_RADIUS_PX,
        line_width_units="pixels",
        get_line_width=POINT_STROKE_PX,
    )


def build_tooltip() -> dict:
    """deck.gl tooltip template built from the same fields as the tooltip provider."""
    html = "<br/>".join(f"<b>{label}:</b> {{{label}}}" for label, _ in TOOLTIP_FIELDS)
    return {
        "html": html,
        "style": {
            "backgroundColor": "#000000",
            "color": "#FFFFFF",
            "fontSize": "13px",
            "padding": "8px 12px",
            "borderRadius": "6px",
        },
    }


def _distance_to_segment(px: float, py: float, a: tuple[float, float], b: tuple[float, float]) -> float:
    ax, ay = a
    bx, by = b
    dx, dy = bx - ax, by - ay
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return math.hypot(px - ax, py - ay)
    t = max(0.0, min(1.0, ((px - ax) * dx + (py - ay) * dy) / length_sq))
    return math.hypot(px - (ax + t * dx), py - (ay + t * dy))


class PydeckRenderer:
    """
    Rendering port backed by pydeck.

    Keeps the last view state so that a no-op viewport directive leaves the
    map where it was, and the last collection for hit testing.
    """

    def __init__(self):
        self._view_state = get_initial_view_state()
        self._collection = TrailFeatureCollection()
        self._context = RenderContext()

    @property
    def view_state(self) -> pdk.ViewState:
        return self._view_state

    def render(
        self,
        collection: TrailFeatureCollection,
        viewport: ViewportDirective,
        context: RenderContext,
    ) -> pdk.Deck:
        """
        Render the trail as a PyDeck map.

        Returns:
            PyDeck Deck object ready for display
        """
        self._view_state = view_state_for(viewport, context, self._view_state)
        self._collection = collection
        self._context = context

        layers = []
        if collection.line is not None:
            layers.append(create_line_layer(collection.line))
        if collection.points:
            layers.append(create_point_layer(collection))

        style = DARK_STYLE if context.map_style == "dark" else DEFAULT_STYLE

        return pdk.Deck(
            layers=layers,
            initial_view_state=self._view_state,
            map_style=style,
            tooltip=build_tooltip(),
        )

    def to_screen(self, coordinate: Coordinate) -> tuple[float, float]:
        """Screen pixel of a coordinate in the last rendered view."""
        zoom = self._view_state.zoom
        cx, cy = lnglat_to_world(self._view_state.longitude, self._view_state.latitude, zoom)
        x, y = lnglat_to_world(coordinate[0], coordinate[1], zoom)
        return x - cx + self._context.width / 2, y - cy + self._context.height / 2

    def features_at(self, x: float, y: float) -> Sequence[Union[PointFeature, LineFeature]]:
        """Features under a pixel: nearest points first, then the line."""
        hits: list[tuple[float, Union[PointFeature, LineFeature]]] = []
        reach = POINT_RADIUS_PX + POINT_STROKE_PX
        for feature in self._collection.points:
            sx, sy = self.to_screen(feature.coordinate)
            distance = math.hypot(x - sx, y - sy)
            if distance <= reach:
                hits.append((distance, feature))
        hits.sort(key=lambda hit: hit[0])

        line = self._collection.line
        if line is not None and len(line.coordinates) > 1:
            screen = [self.to_screen(c) for c in line.coordinates]
            for a, b in zip(screen, screen[1:]):
                if _distance_to_segment(x, y, a, b) <= LINE_WIDTH_PX:
                    hits.append((LINE_WIDTH_PX, line))
                    break

        return [feature for _, feature in hits]
