"""Enrichment contract: input checks, bounded provider call, result validation."""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from urllib.parse import urlparse

from pydantic import ValidationError

from vcintel.config import settings
from vcintel.models import EnrichmentRequest, EnrichmentResult
from .base import EnrichmentProvider
from .errors import MalformedResponse, MissingInput, ProviderFailure

logger = logging.getLogger(__name__)


def validate_request(request: EnrichmentRequest) -> EnrichmentRequest:
    """Check the URL is present and absolute; return a trimmed request."""
    url = (request.url or "").strip()
    if not url:
        raise MissingInput("URL is required")

    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise MissingInput(f"URL must be an absolute http(s) URL: {url}")

    return EnrichmentRequest(url=url, company_name=request.company_name or "")


def parse_result(
    payload: Any,
    issued_at: datetime,
    received_at: datetime,
    clock_skew: float = 0.0,
) -> EnrichmentResult:
    """Validate a provider payload against the result schema and time bounds."""
    try:
        result = EnrichmentResult.model_validate(payload)
    except ValidationError as e:
        error = e.errors()[0]
        where = ".".join(str(part) for part in error["loc"]) or "body"
        raise MalformedResponse(f"Invalid enrichment response at {where}: {error['msg']}") from None

    skew = timedelta(seconds=clock_skew)
    for source in result.sources:
        if not (issued_at - skew <= source.fetched_at <= received_at + skew):
            raise MalformedResponse(
                f"Source {source.url} fetchedAt {source.fetched_at.isoformat()} "
                f"outside request window {issued_at.isoformat()}..{received_at.isoformat()}"
            )

    return result


class EnrichmentService:
    """Run enrichment requests against a provider under a time bound."""

    def __init__(
        self,
        provider: EnrichmentProvider,
        timeout: Optional[float] = None,
        clock_skew: Optional[float] = None,
    ):
        self.provider = provider
        self.timeout = settings.enrichment_timeout if timeout is None else timeout
        self.clock_skew = settings.enrichment_clock_skew if clock_skew is None else clock_skew

    async def enrich(self, request: EnrichmentRequest) -> EnrichmentResult:
        """
        Enrich one company.

        Raises:
            MissingInput: URL absent or not absolute; the provider is not called
            ProviderFailure: Upstream failure or timeout
            MalformedResponse: Provider payload violates the schema
        """
        request = validate_request(request)
        issued_at = datetime.now(timezone.utc)

        try:
            payload = await asyncio.wait_for(self.provider.fetch(request), self.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Enrichment of {request.url} timed out after {self.timeout}s")
            raise ProviderFailure(
                f"Enrichment timed out after {self.timeout}s", transient=True
            ) from None

        received_at = datetime.now(timezone.utc)
        result = parse_result(payload, issued_at, received_at, self.clock_skew)
        logger.info(
            f"Enriched {request.company_name or request.url} "
            f"from {len(result.sources)} sources via {self.provider.name}"
        )
        return result


async def enrich(
    request: EnrichmentRequest,
    provider: EnrichmentProvider,
    timeout: Optional[float] = None,
) -> EnrichmentResult:
    """Convenience wrapper around ``EnrichmentService(provider).enrich``."""
    return await EnrichmentService(provider, timeout=timeout).enrich(request)
