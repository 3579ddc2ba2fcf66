"""
Models package for the vessel trail dashboard.
Contains Pydantic models for trail points and filter criteria.
"""

from vessel_trail.models.trail import (
    TrailMetric,
    TrailPoint,
    is_valid_position,
)

from vessel_trail.models.filters import (
    FilterCriteria,
    FilterDraft,
    DEFAULT_FILTER,
)

__all__ = [
    "TrailMetric",
    "TrailPoint",
    "is_valid_position",
    "FilterCriteria",
    "FilterDraft",
    "DEFAULT_FILTER",
]
