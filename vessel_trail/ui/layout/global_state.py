"""
Global session state management for the vessel trail dashboard.
Manages theme mode, the filter coordinator, trail metric and map state.
"""

from typing import Optional

import streamlit as st

from vessel_trail.config import get_settings
from vessel_trail.filters.coordinator import FilterFormCoordinator, FormNotice
from vessel_trail.models.filters import FilterCriteria
from vessel_trail.models.trail import TrailMetric
from vessel_trail.rendering.port import RenderContext
from vessel_trail.rendering.pydeck_adapter import PydeckRenderer
from vessel_trail.trail.store import TrailFeatureStore


# Session state keys
THEME_MODE_KEY = "theme_mode"
TRAIL_METRIC_KEY = "trail_metric"
FILTER_COORDINATOR_KEY = "filter_coordinator"
FILTER_DIALOG_OPEN_KEY = "filter_dialog_open"
FEATURE_STORE_KEY = "trail_feature_store"
RENDERER_KEY = "trail_renderer"
RENDERED_GENERATION_KEY = "trail_rendered_generation"
APP_NOTICES_KEY = "app_notices"


def init_session_state() -> None:
    """
    Initialize all session state variables.
    Should be called at the start of the application.
    """
    settings = get_settings()

    # Theme mode: "light" or "dark"
    if THEME_MODE_KEY not in st.session_state:
        st.session_state[THEME_MODE_KEY] = "light"

    if TRAIL_METRIC_KEY not in st.session_state:
        st.session_state[TRAIL_METRIC_KEY] = TrailMetric.NONE.value

    if FILTER_COORDINATOR_KEY not in st.session_state:
        st.session_state[FILTER_COORDINATOR_KEY] = FilterFormCoordinator(
            submit_delay=settings.submit_delay_seconds,
        )

    if FILTER_DIALOG_OPEN_KEY not in st.session_state:
        st.session_state[FILTER_DIALOG_OPEN_KEY] = False

    if FEATURE_STORE_KEY not in st.session_state:
        st.session_state[FEATURE_STORE_KEY] = TrailFeatureStore(settings)

    if RENDERER_KEY not in st.session_state:
        st.session_state[RENDERER_KEY] = PydeckRenderer()

    if RENDERED_GENERATION_KEY not in st.session_state:
        st.session_state[RENDERED_GENERATION_KEY] = 0

    if APP_NOTICES_KEY not in st.session_state:
        st.session_state[APP_NOTICES_KEY] = []


# Theme Functions
def get_theme_mode() -> str:
    return st.session_state.get(THEME_MODE_KEY, "light")


def toggle_theme_mode() -> None:
    """Toggle between light and dark map styles."""
    st.session_state[THEME_MODE_KEY] = "dark" if get_theme_mode() == "light" else "light"


def get_render_context() -> RenderContext:
    """Explicit presentation settings for the renderer."""
    return RenderContext(map_style=get_theme_mode(), height=get_settings().map_height)


# Trail Metric Functions
def get_trail_metric() -> TrailMetric:
    return TrailMetric(st.session_state.get(TRAIL_METRIC_KEY, TrailMetric.NONE.value))


# Filter Functions
def get_filter_coordinator() -> FilterFormCoordinator:
    return st.session_state[FILTER_COORDINATOR_KEY]


def get_applied_filter() -> Optional[FilterCriteria]:
    """The applied filter snapshot, or None for all data."""
    return get_filter_coordinator().applied


def is_filter_dialog_open() -> bool:
    return st.session_state.get(FILTER_DIALOG_OPEN_KEY, False)


def set_filter_dialog_open(is_open: bool) -> None:
    st.session_state[FILTER_DIALOG_OPEN_KEY] = is_open


# Map Functions
def get_feature_store() -> TrailFeatureStore:
    return st.session_state[FEATURE_STORE_KEY]


def get_renderer() -> PydeckRenderer:
    return st.session_state[RENDERER_KEY]


def get_rendered_generation() -> int:
    return st.session_state.get(RENDERED_GENERATION_KEY, 0)


def set_rendered_generation(generation: int) -> None:
    st.session_state[RENDERED_GENERATION_KEY] = generation


# Notice Functions
def push_app_notices(notices: list[FormNotice]) -> None:
    """Queue notices to be shown after the next rerun."""
    st.session_state[APP_NOTICES_KEY] = st.session_state.get(APP_NOTICES_KEY, []) + list(notices)


def take_app_notices() -> list[FormNotice]:
    notices = st.session_state.get(APP_NOTICES_KEY, [])
    st.session_state[APP_NOTICES_KEY] = []
    return notices
