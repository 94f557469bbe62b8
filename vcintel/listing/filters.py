"""Search text and category filters for the company listing."""

import logging

from vcintel.models import ALL, Company, CompanyQuery, FilterOptions

logger = logging.getLogger(__name__)


class CompanyFilter:
    """Apply the search box and the industry/stage selects to companies."""

    def __init__(self, query: CompanyQuery):
        self.needle = query.search_text.casefold()
        self.industry = query.industry_filter
        self.stage = query.stage_filter

    def matches_search(self, company: Company) -> bool:
        if not self.needle:
            return True
        return (
            self.needle in company.name.casefold()
            or self.needle in company.description.casefold()
        )

    def matches_industry(self, company: Company) -> bool:
        return self.industry == ALL or company.industry == self.industry

    def matches_stage(self, company: Company) -> bool:
        return self.stage == ALL or company.stage == self.stage

    def matches(self, company: Company) -> bool:
        """True when the company passes all three predicates."""
        return (
            self.matches_search(company)
            and self.matches_industry(company)
            and self.matches_stage(company)
        )

    def apply(self, companies: list[Company]) -> list[Company]:
        """Return the matching companies in their input order."""
        kept = [c for c in companies if self.matches(c)]
        logger.debug(f"Filter kept {len(kept)} of {len(companies)} companies")
        return kept


def available_filters(companies: list[Company]) -> FilterOptions:
    """Industry and stage choices, ``all`` first, then first-seen order."""
    industries = list(dict.fromkeys(c.industry for c in companies))
    stages = list(dict.fromkeys(c.stage for c in companies))
    return FilterOptions(
        industries=[ALL, *industries],
        stages=[ALL, *stages],
    )
