"""
Map section for the vessel trail dashboard.
Metric selector, legend and the pydeck trail map.
"""

import logging
from typing import Optional, Sequence

import streamlit as st

from vessel_trail.models.filters import FilterCriteria
from vessel_trail.models.trail import TrailMetric, TrailPoint
from vessel_trail.trail.classifier import legend
from vessel_trail.trail.geometry import NoViewportChange
from vessel_trail.trail.tooltip import TOOLTIP_FIELDS
from vessel_trail.rendering.pydeck_adapter import POINT_LAYER_ID
from vessel_trail.ui.layout.global_state import (
    TRAIL_METRIC_KEY,
    get_feature_store,
    get_render_context,
    get_rendered_generation,
    get_renderer,
    get_trail_metric,
    set_rendered_generation,
)


logger = logging.getLogger(__name__)

EMPTY_TRAIL_MESSAGE = "No vessel trail data matches your filter."


def render_metric_selector(disabled: bool) -> TrailMetric:
    """Trail coloring dropdown."""
    metrics = [m.value for m in TrailMetric]
    st.selectbox(
        "Trail Coloring",
        options=metrics,
        format_func=lambda value: TrailMetric(value).label,
        key=TRAIL_METRIC_KEY,
        disabled=disabled,
    )
    return get_trail_metric()


def render_legend(metric: TrailMetric) -> None:
    """Color legend for the selected metric."""
    items = []
    for band, description in legend(metric):
        items.append(
            f'<span style="display:inline-block;width:12px;height:12px;border-radius:6px;'
            f'background:{band.hex};margin:0 6px 0 12px;"></span>{description}'
        )
    st.markdown(
        f'<div style="font-size:13px;color:#888;">{"".join(items)}</div>',
        unsafe_allow_html=True,
    )


def render_selected_point(event) -> None:
    """Show the fields of a clicked trail point."""
    selection = getattr(event, "selection", None) or {}
    objects = selection.get("objects", {}).get(POINT_LAYER_ID, [])
    if not objects:
        return

    selected = objects[0]
    fields = " | ".join(f"**{label}:** {selected.get(label, 'N/A')}" for label, _ in TOOLTIP_FIELDS)
    st.caption(fields)


def render_trail_map(points: Sequence[TrailPoint], criteria: Optional[FilterCriteria]) -> None:
    """
    Render the trail map for the filtered points.

    Geometry is rebuilt only when the applied filter or the metric changed;
    the view is moved only for a newly committed generation.
    """
    metric = render_metric_selector(disabled=len(points) == 0)
    render_legend(metric)

    if not points:
        st.info(f"ℹ️ {EMPTY_TRAIL_MESSAGE}")
        return

    store = get_feature_store()
    if store.needs_recompute(criteria, metric):
        store.recompute(points, metric, criteria)

    renderer = get_renderer()
    if store.generation != get_rendered_generation():
        viewport = store.viewport
        set_rendered_generation(store.generation)
    else:
        viewport = NoViewportChange()

    deck = renderer.render(store.collection, viewport, get_render_context())
    event = st.pydeck_chart(
        deck,
        use_container_width=True,
        height=get_render_context().height,
        on_select="rerun",
        selection_mode="single-object",
        key="trail_map",
    )
    render_selected_point(event)
