"""
Filter models for the vessel trail dashboard.
"""

from datetime import date, datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_date(value: Union[str, date, datetime, None]) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    value = str(value).strip()
    return value or None


def _dedupe(values: list[str]) -> list[str]:
    seen = set()
    ordered = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


class FilterCriteria(BaseModel):
    """
    An applied filter snapshot.

    Immutable: a new snapshot replaces the previous one on every submission.
    """
    model_config = ConfigDict(frozen=True)

    date_from: Optional[str] = Field(None, description="Inclusive lower bound (ISO date)")
    date_to: Optional[str] = Field(None, description="Inclusive upper bound (ISO date)")
    company: list[str] = Field(..., min_length=1, description="Selected company ids, in selection order")
    vessel: str = Field(..., min_length=1, description="Selected vessel id")
    hull_jobs: list[str] = Field(default_factory=list, description="Hull job ids (informational)")

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def validate_dates(cls, v):
        return _coerce_date(v)

    @field_validator("company", "hull_jobs")
    @classmethod
    def validate_unique(cls, v: list[str]) -> list[str]:
        return _dedupe(v)


class FilterDraft(BaseModel):
    """
    Editable copy of the filter fields used while the filter form is open.
    The company list may be empty here; it is checked on submission.
    """
    model_config = ConfigDict(validate_assignment=True)

    date_from: Optional[str] = None
    date_to: Optional[str] = None
    company: list[str] = Field(default_factory=list)
    vessel: str = ""
    hull_jobs: list[str] = Field(default_factory=list)

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def validate_dates(cls, v):
        return _coerce_date(v)

    @field_validator("company", "hull_jobs")
    @classmethod
    def validate_unique(cls, v: list[str]) -> list[str]:
        return _dedupe(v)

    @classmethod
    def from_criteria(cls, criteria: FilterCriteria) -> "FilterDraft":
        return cls(**criteria.model_dump())

    def to_criteria(self) -> FilterCriteria:
        return FilterCriteria(**self.model_dump())


DEFAULT_FILTER = FilterCriteria(
    date_from="2025-01-01",
    date_to="2025-12-31",
    company=["cmp2"],
    vessel="vsl3",
    hull_jobs=[],
)
