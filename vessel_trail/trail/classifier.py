"""
Metric-to-color classification for trail points and the trail line.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from vessel_trail.models.trail import TrailMetric


class ColorBand(str, Enum):
    """Severity color assigned to a metric value."""
    GREEN = "green"
    AMBER = "amber"
    RED = "red"
    DEFAULT = "default"

    @property
    def hex(self) -> str:
        return BAND_COLORS[self]

    def rgba(self, opacity: float = 1.0) -> list[int]:
        return hex_to_rgba(self.hex, opacity)


BAND_COLORS = {
    ColorBand.GREEN: "#00FF00",
    ColorBand.AMBER: "#FFAC1C",
    ColorBand.RED: "#FF0000",
    ColorBand.DEFAULT: "#0000FF",
}


@dataclass(frozen=True)
class MetricThresholds:
    """Two cut points splitting a metric into green / amber / red."""
    amber_from: float
    red_from: float
    missing: ColorBand  # band used when the value is absent


METRIC_THRESHOLDS = {
    TrailMetric.POWER: MetricThresholds(amber_from=106, red_from=114, missing=ColorBand.GREEN),
    TrailMetric.CONSUMPTION: MetricThresholds(amber_from=5, red_from=15, missing=ColorBand.RED),
    TrailMetric.SFOC: MetricThresholds(amber_from=103, red_from=110, missing=ColorBand.AMBER),
}


def hex_to_rgba(hex_color: str, opacity: float = 1.0) -> list[int]:
    """
    Convert hex color to RGBA list.

    Args:
        hex_color: Hex color string (e.g., "#FF0000")
        opacity: Opacity value (0-1)

    Returns:
        List of [R, G, B, A] values (0-255)
    """
    hex_color = hex_color.lstrip("#")
    if len(hex_color) == 3:
        hex_color = "".join([c * 2 for c in hex_color])

    r = int(hex_color[0:2], 16)
    g = int(hex_color[2:4], 16)
    b = int(hex_color[4:6], 16)
    a = int(opacity * 255)

    return [r, g, b, a]


def classify(metric: TrailMetric, value: Optional[float], sfoc_visible: bool = False) -> ColorBand:
    """
    Map a metric value to a color band.

    SFOC is only classified for points flagged ``sfoc_visible``; otherwise it
    falls through to the default band like ``none``. Non-finite values are
    treated as missing.
    """
    metric = TrailMetric(metric)
    if metric == TrailMetric.NONE:
        return ColorBand.DEFAULT
    if metric == TrailMetric.SFOC and not sfoc_visible:
        return ColorBand.DEFAULT

    thresholds = METRIC_THRESHOLDS[metric]
    if value is None or not math.isfinite(value):
        return thresholds.missing
    if value < thresholds.amber_from:
        return ColorBand.GREEN
    if value < thresholds.red_from:
        return ColorBand.AMBER
    return ColorBand.RED


def legend(metric: TrailMetric) -> list[tuple[ColorBand, str]]:
    """Legend rows (band, description) for the selected metric."""
    metric = TrailMetric(metric)
    if metric == TrailMetric.NONE:
        return [(ColorBand.DEFAULT, "Trail")]

    thresholds = METRIC_THRESHOLDS[metric]
    low = f"{thresholds.amber_from:g}"
    high = f"{thresholds.red_from:g}"
    rows = [
        (ColorBand.GREEN, f"< {low}"),
        (ColorBand.AMBER, f"{low} to < {high}"),
        (ColorBand.RED, f"≥ {high}"),
    ]
    if metric == TrailMetric.SFOC:
        rows.append((ColorBand.DEFAULT, "SFOC hidden"))
    return rows
