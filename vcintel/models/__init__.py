"""Data models for the company intelligence backend."""

from .company import (
    ALL,
    Company,
    CompanyQuery,
    FilterOptions,
    ListingPage,
    SortDirection,
    SortField,
)
from .enrichment import (
    EnrichmentRequest,
    EnrichmentResult,
    EnrichmentSource,
)
from .collections import (
    CompanyList,
    Note,
    SavedSearch,
    SearchFilters,
    StoredEnrichment,
)

__all__ = [
    "ALL",
    "Company",
    "CompanyQuery",
    "FilterOptions",
    "ListingPage",
    "SortDirection",
    "SortField",
    "EnrichmentRequest",
    "EnrichmentResult",
    "EnrichmentSource",
    "CompanyList",
    "Note",
    "SavedSearch",
    "SearchFilters",
    "StoredEnrichment",
]
