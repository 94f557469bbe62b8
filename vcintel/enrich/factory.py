"""Build the configured enrichment provider."""

import logging
from typing import Optional

from vcintel.config import settings
from .base import EnrichmentProvider
from .remote import HttpEnrichmentProvider
from .mock import MockEnrichmentProvider

logger = logging.getLogger(__name__)


def create_provider(kind: Optional[str] = None) -> EnrichmentProvider:
    """Return a provider for ``kind`` (defaults to settings)."""
    kind = (kind or settings.enrichment_provider).lower()
    if kind == "mock":
        return MockEnrichmentProvider()
    if kind == "http":
        logger.info(f"Using remote enrichment service at {settings.enrichment_service_url}")
        return HttpEnrichmentProvider()
    raise ValueError(f"Unknown enrichment provider: {kind}")
