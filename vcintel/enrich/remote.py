"""HTTP provider calling a remote enrichment service."""

import logging
from typing import Any, Optional

import httpx

from vcintel.config import settings
from vcintel.models import EnrichmentRequest
from .base import EnrichmentProvider
from .errors import MalformedResponse, ProviderFailure

logger = logging.getLogger(__name__)


class HttpEnrichmentProvider(EnrichmentProvider):
    """POST ``{url, companyName}`` to a service speaking the enrich contract."""

    name = "http"

    def __init__(
        self,
        service_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        user_agent: Optional[str] = None,
    ):
        self.service_url = service_url or settings.enrichment_service_url
        if not self.service_url:
            raise ValueError("VCINTEL_ENRICHMENT_SERVICE_URL not configured")
        self.user_agent = user_agent or settings.user_agent
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(
                settings.enrichment_timeout,
                connect=settings.connect_timeout,
            ),
        )

    async def fetch(self, request: EnrichmentRequest) -> dict[str, Any]:
        try:
            response = await self._client.post(
                self.service_url,
                json=request.model_dump(by_alias=True),
                headers={
                    "User-Agent": self.user_agent,
                    "Accept": "application/json",
                },
            )
        except httpx.TimeoutException:
            logger.warning(f"Timeout calling enrichment service for {request.url}")
            raise ProviderFailure("Enrichment service timed out", transient=True) from None
        except httpx.RequestError as e:
            logger.warning(f"Request error calling enrichment service: {e}")
            raise ProviderFailure(f"Enrichment service unreachable: {e}", transient=True) from e

        status = response.status_code
        if status == 429 or status >= 500:
            raise ProviderFailure(
                f"Enrichment service returned HTTP {status}",
                transient=True,
                status_code=status,
            )
        if status >= 400:
            raise ProviderFailure(
                f"Enrichment service rejected the request: HTTP {status}",
                transient=False,
                status_code=status,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponse(f"Enrichment service returned invalid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise MalformedResponse("Enrichment service returned a non-object body")
        return payload

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
