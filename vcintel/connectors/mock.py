"""Mock source with the dashboard's demo companies."""

from datetime import date
from typing import Optional

from vcintel.models import Company
from .base import CompanySource


class MockCompanySource(CompanySource):
    """Source that returns predefined demo data."""

    name = "mock"

    def __init__(self, companies: Optional[list[Company]] = None):
        self._companies = list(companies) if companies is not None else self._default_companies()

    async def fetch_companies(self) -> list[Company]:
        """Return a copy of the mock companies."""
        return list(self._companies)

    def _default_companies(self) -> list[Company]:
        """Generate default demo companies."""
        return [
            Company(
                id="1",
                name="Anthropic",
                description="AI research and safety company building reliable, interpretable AI systems",
                industry="Artificial Intelligence",
                stage="Series C",
                founded=2021,
                location="San Francisco, CA",
                website="https://anthropic.com",
                employees=300,
                total_funding=1_750_000_000,
                last_funding_date=date(2023, 5, 23),
                signals=("recent_blog_post", "careers_page", "product_launch"),
            ),
            Company(
                id="2",
                name="Rippling",
                description="Employee management platform unifying payroll, benefits, and IT",
                industry="HR Tech",
                stage="Series F",
                founded=2016,
                location="San Francisco, CA",
                website="https://rippling.com",
                employees=2000,
                total_funding=1_200_000_000,
                last_funding_date=date(2023, 11, 1),
                signals=("rapid_growth", "enterprise_clients", "changelog_active"),
            ),
            Company(
                id="3",
                name="Vercel",
                description="Frontend cloud platform for developers to build and deploy web applications",
                industry="Developer Tools",
                stage="Series D",
                founded=2015,
                location="San Francisco, CA",
                website="https://vercel.com",
                employees=500,
                total_funding=313_000_000,
                last_funding_date=date(2023, 12, 5),
                signals=("open_source", "viral_product", "hiring_surge"),
            ),
            Company(
                id="4",
                name="Glean",
                description="AI-powered enterprise search and knowledge discovery platform",
                industry="Enterprise Software",
                stage="Series D",
                founded=2019,
                location="Palo Alto, CA",
                website="https://glean.com",
                employees=400,
                total_funding=355_000_000,
                last_funding_date=date(2023, 9, 12),
                signals=("ai_forward", "fortune_500_clients", "rapid_growth"),
            ),
            Company(
                id="5",
                name="Deel",
                description="Global payroll and compliance platform for remote teams",
                industry="HR Tech",
                stage="Series D",
                founded=2019,
                location="San Francisco, CA",
                website="https://deel.com",
                employees=2500,
                total_funding=630_000_000,
                last_funding_date=date(2023, 10, 24),
                signals=("global_scale", "hypergrowth", "product_expansion"),
            ),
        ]
