"""
Tooltip data for hovered trail points.

The provider makes a fresh decision on every pointer event. Hit testing is
delegated to the rendering port, which knows the current projection. In the
Streamlit app deck.gl renders the tooltip client-side from the same
TOOLTIP_FIELDS list.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

from vessel_trail.models.trail import TrailPoint
from vessel_trail.trail.geometry import LineFeature, PointFeature


# (label, attribute) pairs in display order
TOOLTIP_FIELDS = [
    ("Timestamp", "timestamp"),
    ("Power", "power"),
    ("Consumption", "consumption"),
    ("LogSpeed", "log_speed"),
    ("WaveHeight", "wave_height"),
    ("WindSpeed", "wind_speed"),
]

# Pixel offset from the pointer
TOOLTIP_OFFSET = 10

MISSING_VALUE = "N/A"


@dataclass(frozen=True)
class TooltipShow:
    x: float
    y: float
    fields: tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class TooltipHide:
    pass


TooltipDirective = Union[TooltipShow, TooltipHide]

Picker = Callable[[float, float], Sequence[Union[PointFeature, LineFeature]]]


def format_value(value) -> str:
    if value is None:
        return MISSING_VALUE
    return str(value)


def tooltip_fields(record: TrailPoint) -> tuple[tuple[str, str], ...]:
    """Display (label, value) pairs for a trail record."""
    return tuple((label, format_value(getattr(record, attr))) for label, attr in TOOLTIP_FIELDS)


def first_point_hit(features: Sequence[Union[PointFeature, LineFeature]]) -> Optional[PointFeature]:
    """First point feature among hit features; lines are never tooltip targets."""
    for feature in features:
        if isinstance(feature, PointFeature):
            return feature
    return None


class TooltipProvider:
    """Turns pointer events into show/hide tooltip directives."""

    def __init__(self, picker: Picker):
        self._picker = picker

    def on_pointer_move(self, x: float, y: float) -> TooltipDirective:
        hit = first_point_hit(self._picker(x, y))
        if hit is None:
            return TooltipHide()
        return TooltipShow(
            x=x + TOOLTIP_OFFSET,
            y=y + TOOLTIP_OFFSET,
            fields=tooltip_fields(hit.record),
        )

    def on_pointer_leave(self) -> TooltipDirective:
        return TooltipHide()
