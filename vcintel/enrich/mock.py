"""Mock provider returning canned enrichment data."""

from datetime import datetime, timezone
from typing import Any

from vcintel.models import EnrichmentRequest
from .base import EnrichmentProvider

UNKNOWN_COMPANY = "This company"


class MockEnrichmentProvider(EnrichmentProvider):
    """Provider that returns a fixed payload with the inputs interpolated."""

    name = "mock"

    SOURCE_PATHS = ["about", "blog", "careers"]

    async def fetch(self, request: EnrichmentRequest) -> dict[str, Any]:
        """Return the canned payload, stamping every source with now."""
        company_name = request.company_name.strip() or UNKNOWN_COMPANY
        base_url = request.url.rstrip("/")

        return {
            "summary": (
                f"{company_name} is an AI research company focused on developing "
                "safe and interpretable AI systems."
            ),
            "whatTheyDo": [
                "Develop large language models with a focus on safety",
                "Research interpretability and alignment in AI systems",
                "Build enterprise AI solutions for various industries",
                "Publish research papers on AI safety and ethics",
            ],
            "keywords": [
                "artificial intelligence",
                "machine learning",
                "AI safety",
                "large language models",
                "interpretability",
                "enterprise AI",
                "research",
                "Claude",
            ],
            "derivedSignals": [
                "Careers page shows 50+ open positions across engineering and research",
                "Recent blog post about constitutional AI approach",
                "Strong GitHub presence with open-source libraries",
                "Research papers published at major conferences (NeurIPS, ICML)",
            ],
            "sources": [
                {
                    "url": f"{base_url}/{path}",
                    "fetchedAt": datetime.now(timezone.utc).isoformat(),
                }
                for path in self.SOURCE_PATHS
            ],
        }
