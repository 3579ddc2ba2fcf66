"""
Tests for the date range filter.
"""

from vessel_trail.models.filters import FilterCriteria
from vessel_trail.trail.date_filter import apply_filter, filter_by_date_range, in_date_range


TIMESTAMPS = ["2025-01-01T00:00:00Z", "2025-06-01T00:00:00Z", "2025-12-31T00:00:00Z"]


def _points(make_point):
    return [make_point(timestamp=ts) for ts in TIMESTAMPS]


def test_inclusive_at_both_bounds(make_point):
    result = filter_by_date_range(_points(make_point), "2025-01-01", "2025-06-01")
    assert [p.timestamp for p in result] == TIMESTAMPS[:2]


def test_upper_bound_covers_whole_day():
    assert in_date_range("2025-06-01T23:59:59Z", None, "2025-06-01")
    assert not in_date_range("2025-06-02T00:00:00Z", None, "2025-06-01")


def test_absent_bounds_are_unconstrained(make_point):
    points = _points(make_point)
    assert filter_by_date_range(points) == points
    assert [p.timestamp for p in filter_by_date_range(points, date_from="2025-06-01")] == TIMESTAMPS[1:]
    assert [p.timestamp for p in filter_by_date_range(points, date_to="2025-01-01")] == TIMESTAMPS[:1]


def test_empty_string_bounds_are_unconstrained(make_point):
    points = _points(make_point)
    assert filter_by_date_range(points, "", "") == points


def test_inverted_range_yields_empty_result(make_point):
    assert filter_by_date_range(_points(make_point), "2025-12-31", "2025-01-01") == []


def test_order_is_preserved(make_point):
    points = [make_point(timestamp=ts) for ts in reversed(TIMESTAMPS)]
    result = filter_by_date_range(points, "2025-01-01", "2025-12-31")
    assert [p.timestamp for p in result] == list(reversed(TIMESTAMPS))


def test_apply_filter_without_criteria_returns_all(make_point):
    points = _points(make_point)
    assert apply_filter(points, None) == points


def test_apply_filter_uses_only_dates(make_point):
    criteria = FilterCriteria(
        date_from="2025-02-01",
        date_to="2025-12-31",
        company=["cmp3"],
        vessel="vsl5",
    )
    result = apply_filter(_points(make_point), criteria)
    assert [p.timestamp for p in result] == TIMESTAMPS[1:]
