"""
Exception types for the vessel trail dashboard.
"""


class VesselTrailError(Exception):
    """Base class for all dashboard errors."""


class FormLockedError(VesselTrailError):
    """Raised when the filter draft is edited while a submission is in flight."""


class SubmissionInProgressError(VesselTrailError):
    """Raised when a second submission is attempted before the first completes."""


class InvalidFilterError(VesselTrailError):
    """Raised when the filter draft cannot be turned into a criteria snapshot."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors or []


class DatasetLoadError(VesselTrailError):
    """Raised when the trail dataset exists but cannot be parsed."""
