"""Listing engine for searching, filtering, sorting and paginating companies."""

from .engine import ListingEngine, list_companies, parse_query
from .errors import InvalidQuery
from .filters import CompanyFilter, available_filters
from .formatting import format_funding, format_signal
from .sorting import SORT_KEYS, collation_key, sort_companies

__all__ = [
    "ListingEngine",
    "list_companies",
    "parse_query",
    "InvalidQuery",
    "CompanyFilter",
    "available_filters",
    "format_funding",
    "format_signal",
    "SORT_KEYS",
    "collation_key",
    "sort_companies",
]
