"""
Data package for the vessel trail dashboard.
Provides the trail snapshot loader and the reference catalog.
"""

from vessel_trail.data.catalog import (
    CatalogEntry,
    ReferenceCatalog,
    DEFAULT_CATALOG,
)
from vessel_trail.data.loaders import (
    DataService,
    get_data_service,
    load_trail,
    parse_trail_records,
    trail_to_frame,
)

__all__ = [
    "CatalogEntry",
    "ReferenceCatalog",
    "DEFAULT_CATALOG",
    "DataService",
    "get_data_service",
    "load_trail",
    "parse_trail_records",
    "trail_to_frame",
]
