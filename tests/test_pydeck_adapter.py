"""
Tests for the pydeck rendering adapter.
"""

import pytest

from vessel_trail.models.trail import TrailMetric
from vessel_trail.rendering.port import RenderContext
from vessel_trail.rendering.pydeck_adapter import (
    DARK_STYLE,
    DEFAULT_STYLE,
    LINE_LAYER_ID,
    POINT_LAYER_ID,
    PydeckRenderer,
    build_tooltip,
    fit_bounds_view_state,
    lnglat_to_world,
    point_records,
    world_to_lnglat,
)
from vessel_trail.trail.geometry import NoViewportChange, TrailFeatureCollection, build_trail_geometry


@pytest.fixture
def geometry(make_point):
    return build_trail_geometry(
        [
            make_point(timestamp="2025-01-01T00:00:00Z", position=(4.0, 52.0), power=100),
            make_point(timestamp="2025-01-02T00:00:00Z", position=(6.0, 53.0), power=120),
        ],
        TrailMetric.POWER,
    )


def test_render_builds_line_and_point_layers(geometry):
    deck = PydeckRenderer().render(geometry.collection, geometry.viewport, RenderContext())

    ids = [layer.id for layer in deck.layers]
    assert ids == [LINE_LAYER_ID, POINT_LAYER_ID]
    assert deck.layers[0].type == "PathLayer"
    assert deck.layers[1].type == "ScatterplotLayer"


def test_render_empty_collection_has_no_layers():
    deck = PydeckRenderer().render(TrailFeatureCollection(), NoViewportChange(), RenderContext())
    assert deck.layers == []


def test_map_style_follows_theme(geometry):
    renderer = PydeckRenderer()
    assert renderer.render(geometry.collection, geometry.viewport, RenderContext()).map_style == DEFAULT_STYLE
    dark = renderer.render(geometry.collection, geometry.viewport, RenderContext(map_style="dark"))
    assert dark.map_style == DARK_STYLE


def test_point_records_carry_color_and_fields(geometry):
    rows = point_records(geometry.collection)
    assert [row["index"] for row in rows] == [0, 1]
    assert rows[0]["position"] == [4.0, 52.0]
    assert rows[0]["color"] == [0, 255, 0, 255]
    assert rows[1]["color"] == [255, 0, 0, 255]
    assert rows[0]["Timestamp"] == "2025-01-01T00:00:00Z"
    assert rows[0]["Consumption"] == "N/A"


def test_tooltip_template_lists_fields():
    html = build_tooltip()["html"]
    for label in ("Timestamp", "Power", "Consumption", "LogSpeed", "WaveHeight", "WindSpeed"):
        assert f"{{{label}}}" in html


def test_fit_bounds_centers_and_animates():
    view_state = fit_bounds_view_state((4.0, 52.0, 6.0, 53.0), 900, 560, padding=40, duration_ms=500)
    assert view_state.longitude == pytest.approx(5.0)
    assert 52.0 < view_state.latitude < 53.0
    assert view_state.transition_duration == 500

    # Fits: both corners land inside the padded frame
    cx, cy = lnglat_to_world(view_state.longitude, view_state.latitude, view_state.zoom)
    for lon, lat in ((4.0, 52.0), (6.0, 53.0)):
        x, y = lnglat_to_world(lon, lat, view_state.zoom)
        assert 40 - 1e-6 <= x - cx + 450 <= 860 + 1e-6
        assert 40 - 1e-6 <= y - cy + 280 <= 520 + 1e-6


def test_world_projection_round_trip():
    x, y = lnglat_to_world(4.5, 52.5, 3)
    assert world_to_lnglat(x, y, 3) == pytest.approx((4.5, 52.5))


def test_no_viewport_change_keeps_view(geometry, make_point):
    renderer = PydeckRenderer()
    renderer.render(geometry.collection, geometry.viewport, RenderContext())
    before = renderer.view_state

    renderer.render(TrailFeatureCollection(), NoViewportChange(), RenderContext())
    assert renderer.view_state is before


def test_single_point_centers_view(make_point):
    single = build_trail_geometry([make_point(position=(4.5, 52.5))], single_point_zoom=10)
    renderer = PydeckRenderer()
    renderer.render(single.collection, single.viewport, RenderContext())
    assert renderer.view_state.longitude == 4.5
    assert renderer.view_state.latitude == 52.5
    assert renderer.view_state.zoom == 10
