"""
Ownership of the displayed trail features.

The store is the only writer of the feature collection shown on the map. Each
recompute request gets a generation number and only the newest generation may
be committed, so a result computed from superseded inputs can never replace a
newer one.
"""

import logging
from typing import Optional, Sequence

from vessel_trail.config import DashboardSettings, get_settings
from vessel_trail.models.filters import FilterCriteria
from vessel_trail.models.trail import TrailMetric, TrailPoint
from vessel_trail.trail.geometry import (
    NoViewportChange,
    TrailFeatureCollection,
    TrailGeometry,
    ViewportDirective,
    build_trail_geometry,
)


logger = logging.getLogger(__name__)


class TrailFeatureStore:
    """
    Holds the current feature collection and the last viewport directive.
    """

    def __init__(self, settings: Optional[DashboardSettings] = None):
        self._settings = settings or get_settings()
        self._latest_generation = 0
        self._committed_generation = 0
        self._inputs: Optional[tuple[Optional[FilterCriteria], TrailMetric]] = None
        self._pending_inputs: Optional[tuple[Optional[FilterCriteria], TrailMetric]] = None
        self._collection = TrailFeatureCollection()
        self._viewport: ViewportDirective = NoViewportChange()

    @property
    def collection(self) -> TrailFeatureCollection:
        return self._collection

    @property
    def viewport(self) -> ViewportDirective:
        """Last viewport directive that actually moved the view."""
        return self._viewport

    @property
    def generation(self) -> int:
        return self._committed_generation

    @property
    def inputs(self) -> Optional[tuple[Optional[FilterCriteria], TrailMetric]]:
        """(criteria, metric) of the committed collection."""
        return self._inputs

    def begin(self, criteria: Optional[FilterCriteria], metric: TrailMetric) -> int:
        """Register a new recompute request and return its generation."""
        self._latest_generation += 1
        self._pending_inputs = (criteria, TrailMetric(metric))
        logger.debug("Recompute generation %d requested (metric=%s)", self._latest_generation, metric)
        return self._latest_generation

    def commit(self, generation: int, geometry: TrailGeometry) -> bool:
        """
        Swap in a freshly built geometry.

        Returns:
            False if a newer request was issued after ``generation``; the
            geometry is then discarded.
        """
        if generation != self._latest_generation:
            logger.warning(
                "Discarding stale trail geometry (generation %d, latest %d)",
                generation,
                self._latest_generation,
            )
            return False

        self._collection = geometry.collection
        if not isinstance(geometry.viewport, NoViewportChange):
            self._viewport = geometry.viewport
        self._committed_generation = generation
        self._inputs = self._pending_inputs
        return True

    def needs_recompute(self, criteria: Optional[FilterCriteria], metric: TrailMetric) -> bool:
        return self._inputs != (criteria, TrailMetric(metric))

    def recompute(
        self,
        points: Sequence[TrailPoint],
        metric: TrailMetric,
        criteria: Optional[FilterCriteria] = None,
    ) -> TrailFeatureCollection:
        """Build and commit the geometry for the latest inputs."""
        generation = self.begin(criteria, metric)
        geometry = build_trail_geometry(
            points,
            metric,
            padding=self._settings.fit_padding_px,
            duration_ms=self._settings.fit_duration_ms,
            single_point_zoom=self._settings.single_point_zoom,
        )
        self.commit(generation, geometry)
        return self._collection
