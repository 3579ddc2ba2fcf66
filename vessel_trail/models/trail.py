"""
Trail models for the vessel trail dashboard.
A trail point is one observation of the vessel: where it was and how it performed.
"""

import math
from enum import Enum
from numbers import Real
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class TrailMetric(str, Enum):
    """Performance dimension used to color the trail."""
    NONE = "none"
    POWER = "power"
    CONSUMPTION = "consumption"
    SFOC = "sfoc"

    @property
    def label(self) -> str:
        return METRIC_LABELS[self]


METRIC_LABELS = {
    TrailMetric.NONE: "None",
    TrailMetric.POWER: "Power",
    TrailMetric.CONSUMPTION: "Excess Consumption",
    TrailMetric.SFOC: "SFOC",
}


def is_valid_position(position: Any) -> bool:
    """
    Check that a raw position is a (longitude, latitude) pair of finite numbers.

    Booleans are rejected even though they are ints in Python.
    """
    if not isinstance(position, (list, tuple)) or len(position) != 2:
        return False
    for value in position:
        if isinstance(value, bool) or not isinstance(value, Real):
            return False
        if not math.isfinite(value):
            return False
    return True


class TrailPoint(BaseModel):
    """
    A single observation along the vessel trail.

    Keys are read from the camelCase dataset (``sfocVisible``, ``logSpeed``...)
    but exposed in snake_case. ``position`` is kept exactly as loaded so that
    malformed entries can be detected and dropped downstream.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timestamp: str = Field(..., description="ISO-8601 timestamp, zero-padded")
    position: Any = Field(None, description="[longitude, latitude]")

    # Metrics used for trail coloring
    power: Optional[float] = None
    consumption: Optional[float] = None
    sfoc: Optional[float] = None
    sfoc_visible: bool = Field(False, alias="sfocVisible")

    # Auxiliary readings
    shaft_power: Optional[float] = Field(None, alias="shaftPower")
    shaft_speed: Optional[float] = Field(None, alias="shaftSpeed")
    log_speed: Optional[float] = Field(None, alias="logSpeed")
    wave_height: Optional[float] = Field(None, alias="waveHeight")
    wind_speed: Optional[float] = Field(None, alias="windSpeed")

    @property
    def has_valid_position(self) -> bool:
        return is_valid_position(self.position)

    @property
    def coordinate(self) -> Optional[tuple[float, float]]:
        """(longitude, latitude) when the position is valid, else None."""
        if not self.has_valid_position:
            return None
        return float(self.position[0]), float(self.position[1])

    def metric_value(self, metric: TrailMetric) -> Optional[float]:
        """Value of the given metric for this point (None for ``none``)."""
        if metric == TrailMetric.POWER:
            return self.power
        if metric == TrailMetric.CONSUMPTION:
            return self.consumption
        if metric == TrailMetric.SFOC:
            return self.sfoc
        return None
