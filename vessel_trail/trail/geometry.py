"""
Trail geometry assembly and viewport-fit policy.

Turns an ordered list of trail points into renderable features: one colored
point per valid record and a single line through all of them, plus a
directive telling the map how to frame the result.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from shapely.geometry import MultiPoint

from vessel_trail.models.trail import TrailMetric, TrailPoint
from vessel_trail.trail.classifier import ColorBand, classify


logger = logging.getLogger(__name__)

Coordinate = tuple[float, float]
BBox = tuple[float, float, float, float]


@dataclass(frozen=True)
class PointFeature:
    """A trail point on the map, colored by its own metric value."""
    coordinate: Coordinate
    band: ColorBand
    index: int
    record: TrailPoint


@dataclass(frozen=True)
class LineFeature:
    """The track line through every valid point, in order."""
    coordinates: tuple[Coordinate, ...]
    band: ColorBand


@dataclass(frozen=True)
class TrailFeatureCollection:
    """Complete set of features shown on the map. Never patched in place."""
    metric: TrailMetric = TrailMetric.NONE
    points: tuple[PointFeature, ...] = ()
    line: Optional[LineFeature] = None

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def features(self) -> list[Union[PointFeature, LineFeature]]:
        """Line first, then points, matching draw order."""
        features: list[Union[PointFeature, LineFeature]] = []
        if self.line is not None:
            features.append(self.line)
        features.extend(self.points)
        return features


@dataclass(frozen=True)
class FitBounds:
    """Fit the view to a bounding box [min_lon, min_lat, max_lon, max_lat]."""
    bounds: BBox
    padding: int
    animate: bool = True
    duration_ms: int = 500


@dataclass(frozen=True)
class CenterZoom:
    """Center the view on a coordinate at a fixed zoom."""
    coordinate: Coordinate
    zoom: float


@dataclass(frozen=True)
class NoViewportChange:
    """Leave the current view untouched."""


ViewportDirective = Union[FitBounds, CenterZoom, NoViewportChange]


@dataclass(frozen=True)
class TrailGeometry:
    collection: TrailFeatureCollection = field(default_factory=TrailFeatureCollection)
    viewport: ViewportDirective = field(default_factory=NoViewportChange)


def valid_points(points: Sequence[TrailPoint]) -> list[TrailPoint]:
    """Points with a usable position, in input order."""
    kept = [p for p in points if p.has_valid_position]
    dropped = len(points) - len(kept)
    if dropped:
        logger.debug("Dropped %d trail point(s) with invalid position", dropped)
    return kept


def classify_point(point: TrailPoint, metric: TrailMetric) -> ColorBand:
    return classify(metric, point.metric_value(metric), point.sfoc_visible)


def select_viewport(
    coordinates: Sequence[Coordinate],
    padding: int = 40,
    duration_ms: int = 500,
    single_point_zoom: float = 10.0,
) -> ViewportDirective:
    """
    Viewport-fit policy.

    Two or more points fit the bounding box with padding and an animated
    transition; a single point is centered at a fixed zoom; nothing means no
    change.
    """
    if len(coordinates) >= 2:
        bounds = MultiPoint(list(coordinates)).bounds
        return FitBounds(bounds=tuple(bounds), padding=padding, animate=True, duration_ms=duration_ms)
    if len(coordinates) == 1:
        return CenterZoom(coordinate=coordinates[0], zoom=single_point_zoom)
    return NoViewportChange()


def build_trail_geometry(
    points: Sequence[TrailPoint],
    metric: TrailMetric = TrailMetric.NONE,
    padding: int = 40,
    duration_ms: int = 500,
    single_point_zoom: float = 10.0,
) -> TrailGeometry:
    """
    Build the full feature collection and viewport directive for a trail.

    The line takes the color of the first point only; it is not segment-colored.

    Args:
        points: Ordered trail points, possibly containing malformed positions
        metric: Metric used to color points and line
        padding: Fit-bounds padding in pixels
        duration_ms: Fit-bounds transition duration
        single_point_zoom: Zoom level when only one point remains

    Returns:
        TrailGeometry with a fresh collection and the viewport directive
    """
    metric = TrailMetric(metric)
    kept = valid_points(points)
    if not kept:
        return TrailGeometry(collection=TrailFeatureCollection(metric=metric), viewport=NoViewportChange())

    point_features = tuple(
        PointFeature(
            coordinate=point.coordinate,
            band=classify_point(point, metric),
            index=i,
            record=point,
        )
        for i, point in enumerate(kept)
    )
    coordinates = tuple(feature.coordinate for feature in point_features)
    line = LineFeature(coordinates=coordinates, band=classify_point(kept[0], metric))

    collection = TrailFeatureCollection(metric=metric, points=point_features, line=line)
    viewport = select_viewport(coordinates, padding, duration_ms, single_point_zoom)
    return TrailGeometry(collection=collection, viewport=viewport)
