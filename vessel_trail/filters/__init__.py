"""
Filter form package for the vessel trail dashboard.
"""

from vessel_trail.filters.coordinator import (
    FilterFormCoordinator,
    FormNotice,
    FormPhase,
    NoticeKind,
    derive_vessel_options,
    needs_vessel_correction,
    VESSEL_RESET_MESSAGE,
    FILTERS_APPLIED_MESSAGE,
)

__all__ = [
    "FilterFormCoordinator",
    "FormNotice",
    "FormPhase",
    "NoticeKind",
    "derive_vessel_options",
    "needs_vessel_correction",
    "VESSEL_RESET_MESSAGE",
    "FILTERS_APPLIED_MESSAGE",
]
