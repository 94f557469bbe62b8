"""Enrichment contract and providers."""

from .base import EnrichmentProvider
from .errors import EnrichmentError, MalformedResponse, MissingInput, ProviderFailure
from .factory import create_provider
from .remote import HttpEnrichmentProvider
from .mock import MockEnrichmentProvider
from .service import EnrichmentService, enrich, parse_result, validate_request

__all__ = [
    "EnrichmentProvider",
    "EnrichmentError",
    "MalformedResponse",
    "MissingInput",
    "ProviderFailure",
    "create_provider",
    "HttpEnrichmentProvider",
    "MockEnrichmentProvider",
    "EnrichmentService",
    "enrich",
    "parse_result",
    "validate_request",
]
