"""Error taxonomy for enrichment calls."""

from typing import Optional


class EnrichmentError(RuntimeError):
    """Base exception for enrichment failures."""

    retryable: bool = False

    def __init__(self, message: str, code: str = "ENRICHMENT_ERROR") -> None:
        super().__init__(message)
        self.code = code


class MissingInput(EnrichmentError):
    """Raised before any I/O when the request URL is absent or unusable."""

    def __init__(self, message: str = "URL is required") -> None:
        super().__init__(message, code="MISSING_INPUT")


class ProviderFailure(EnrichmentError):
    """Raised when the upstream scraping/summarization step fails.

    ``transient`` tells the caller whether retrying the same request can
    reasonably succeed (timeouts, connection errors, rate limits, 5xx).
    """

    def __init__(
        self,
        message: str,
        transient: bool = True,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, code="PROVIDER_FAILURE")
        self.transient = transient
        self.status_code = status_code

    @property
    def retryable(self) -> bool:
        return self.transient


class MalformedResponse(EnrichmentError):
    """Raised when the provider's response violates the result schema."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="MALFORMED_RESPONSE")
