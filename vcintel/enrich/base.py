"""Abstract base class for enrichment providers."""

from abc import ABC, abstractmethod
from typing import Any

from vcintel.models import EnrichmentRequest


class EnrichmentProvider(ABC):
    """Interface for an out-of-process enrichment backend."""

    name: str = "base"

    @abstractmethod
    async def fetch(self, request: EnrichmentRequest) -> dict[str, Any]:
        """
        Produce the raw enrichment payload for a company.

        Args:
            request: A request whose URL has already been validated

        Returns:
            The JSON-shaped payload, validated by the caller

        Raises:
            ProviderFailure: When the upstream call fails
        """
        pass

    async def aclose(self) -> None:
        """Release any held resources."""
        return None
