"""
Date range filtering of the trail snapshot.

Timestamps are compared as strings. This is only correct because the dataset
uses zero-padded ISO-8601 timestamps in a single zone; no timezone
normalization is performed.
"""

from typing import Iterable, Optional

from vessel_trail.models.filters import FilterCriteria
from vessel_trail.models.trail import TrailPoint


def in_date_range(timestamp: str, date_from: Optional[str] = None, date_to: Optional[str] = None) -> bool:
    """
    Inclusive date-range predicate.

    The upper bound is compared at its own precision, so ``date_to="2025-06-01"``
    admits every timestamp on that day.
    """
    if date_from and timestamp < date_from:
        return False
    if date_to and timestamp[: len(date_to)] > date_to:
        return False
    return True


def filter_by_date_range(
    points: Iterable[TrailPoint],
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
) -> list[TrailPoint]:
    """Points whose timestamp falls inside the inclusive range, in input order."""
    return [p for p in points if in_date_range(p.timestamp, date_from, date_to)]


def apply_filter(points: Iterable[TrailPoint], criteria: Optional[FilterCriteria]) -> list[TrailPoint]:
    """
    Reduce the full snapshot to the points matching the applied filter.

    Only the date range narrows the set; company, vessel and hull jobs are
    informational. No applied filter means all data.
    """
    if criteria is None:
        return list(points)
    return filter_by_date_range(points, criteria.date_from, criteria.date_to)
