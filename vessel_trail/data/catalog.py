"""
Reference catalog for the filter form.
Companies, hull jobs and the company -> vessel mapping are static lookup tables.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class CatalogEntry:
    """An (id, label) pair shown in a select field."""
    id: str
    label: str


class ReferenceCatalog:
    """
    Read-only lookup tables backing the filter form options.
    """

    def __init__(
        self,
        companies: tuple[CatalogEntry, ...],
        hull_jobs: tuple[CatalogEntry, ...],
        vessels_by_company: Mapping[str, tuple[CatalogEntry, ...]],
    ):
        self._companies = tuple(companies)
        self._hull_jobs = tuple(hull_jobs)
        self._vessels_by_company = MappingProxyType(
            {company_id: tuple(vessels) for company_id, vessels in vessels_by_company.items()}
        )

    @property
    def companies(self) -> tuple[CatalogEntry, ...]:
        return self._companies

    @property
    def hull_jobs(self) -> tuple[CatalogEntry, ...]:
        return self._hull_jobs

    def vessels_for(self, company_id: str) -> tuple[CatalogEntry, ...]:
        """Vessels owned by a company; empty for unknown ids."""
        return self._vessels_by_company.get(company_id, ())

    def company_label(self, company_id: str) -> str:
        return _label_for(self._companies, company_id)

    def hull_job_label(self, hull_job_id: str) -> str:
        return _label_for(self._hull_jobs, hull_job_id)

    def vessel_label(self, vessel_id: str) -> str:
        for vessels in self._vessels_by_company.values():
            label = _find_label(vessels, vessel_id)
            if label is not None:
                return label
        return vessel_id


def _find_label(entries: tuple[CatalogEntry, ...], entry_id: str) -> Optional[str]:
    for entry in entries:
        if entry.id == entry_id:
            return entry.label
    return None


def _label_for(entries: tuple[CatalogEntry, ...], entry_id: str) -> str:
    label = _find_label(entries, entry_id)
    return label if label is not None else entry_id


COMPANIES = (
    CatalogEntry("cmp2", "Company 1"),
    CatalogEntry("cmp1", "Company 2"),
    CatalogEntry("cmp3", "Company 3"),
)

HULL_JOBS = (
    CatalogEntry("03573a58-6a32-4433-9e1a-9f9d31c71edb", "Hull Inspection (HI)"),
    CatalogEntry("b10dd87b-68b4-496d-9b60-39cf9f03c0bb", "Propeller Polish (PP)"),
    CatalogEntry("ee828f1f-f1cd-4962-a980-12ccc4e48e7b", "Hull Cleaning (HC)"),
    CatalogEntry("3a95d310-64bc-4599-8c4d-9304d12bb986", "Propeller Inspection (PI)"),
    CatalogEntry("c854b265-067c-4b7a-8d6a-d00f7304297b", "Drydock (DD)"),
)

VESSELS_BY_COMPANY = {
    "cmp1": (CatalogEntry("vsl1", "Vessel 1A"), CatalogEntry("vsl2", "Vessel 1B")),
    "cmp2": (CatalogEntry("vsl3", "Vessel 2A"), CatalogEntry("vsl4", "Vessel 2B")),
    "cmp3": (CatalogEntry("vsl5", "Vessel 3A"), CatalogEntry("vsl6", "Vessel 3B")),
}

DEFAULT_CATALOG = ReferenceCatalog(COMPANIES, HULL_JOBS, VESSELS_BY_COMPANY)
