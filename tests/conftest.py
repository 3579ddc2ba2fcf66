import pytest

from vessel_trail.config import DashboardSettings
from vessel_trail.data.catalog import DEFAULT_CATALOG
from vessel_trail.models.trail import TrailPoint


@pytest.fixture
def catalog():
    return DEFAULT_CATALOG


@pytest.fixture
def settings():
    return DashboardSettings(
        submit_delay_seconds=0.01,
        fit_padding_px=40,
        fit_duration_ms=500,
        single_point_zoom=10,
    )


@pytest.fixture
def make_point():
    """Factory for trail points with sensible defaults."""

    def _make(timestamp="2025-03-01T00:00:00Z", position=(4.0, 52.0), **fields):
        if position is not None and isinstance(position, tuple):
            position = list(position)
        return TrailPoint(timestamp=timestamp, position=position, **fields)

    return _make
