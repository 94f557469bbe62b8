"""Demo lists and saved searches for a fresh install."""

import logging
from datetime import datetime, timezone

from vcintel.models import CompanyList, SavedSearch, SearchFilters
from vcintel.storage import LISTS, SAVED_SEARCHES, Repository

logger = logging.getLogger(__name__)


def _demo_lists() -> list[CompanyList]:
    return [
        CompanyList(
            id="1",
            name="AI Infrastructure",
            description="Companies building AI infrastructure and tooling",
            company_ids=["1", "4"],
            created_at=datetime(2024, 1, 15, tzinfo=timezone.utc),
        ),
        CompanyList(
            id="2",
            name="Enterprise SaaS",
            description="Promising enterprise software startups",
            company_ids=["2", "3", "5"],
            created_at=datetime(2024, 2, 1, tzinfo=timezone.utc),
        ),
    ]


def _demo_searches() -> list[SavedSearch]:
    return [
        SavedSearch(
            id="1",
            query="AI infrastructure",
            filters=SearchFilters(stage="Series A"),
            created_at=datetime(2024, 2, 15, tzinfo=timezone.utc),
            result_count=12,
        ),
        SavedSearch(
            id="2",
            query="climate tech",
            filters=SearchFilters(industry="CleanTech"),
            created_at=datetime(2024, 2, 10, tzinfo=timezone.utc),
            result_count=8,
        ),
    ]


def seed_demo_data(repository: Repository) -> bool:
    """Seed lists and saved searches when both collections are empty."""
    if repository.list(LISTS) or repository.list(SAVED_SEARCHES):
        return False

    for company_list in _demo_lists():
        repository.put(LISTS, company_list.id, company_list.model_dump(mode="json", by_alias=True))
    for search in _demo_searches():
        repository.put(SAVED_SEARCHES, search.id, search.model_dump(mode="json", by_alias=True))

    logger.info("Seeded demo lists and saved searches")
    return True
