"""Saved searches that can be re-run through the listing engine."""

import logging
from typing import Optional

from vcintel.listing import ListingEngine
from vcintel.models import ALL, Company, ListingPage, SavedSearch, SearchFilters
from vcintel.storage import SAVED_SEARCHES, Repository, new_record_id
from .errors import RecordNotFoundError

logger = logging.getLogger(__name__)


class SavedSearchService:
    """Save, delete and run saved searches."""

    def __init__(self, repository: Repository, engine: Optional[ListingEngine] = None):
        self.repository = repository
        self.engine = engine or ListingEngine()

    def all(self) -> list[SavedSearch]:
        """Saved searches, newest first."""
        searches = [SavedSearch.model_validate(d) for d in self.repository.list(SAVED_SEARCHES)]
        return sorted(searches, key=lambda s: s.created_at, reverse=True)

    def get(self, search_id: str) -> SavedSearch:
        data = self.repository.get(SAVED_SEARCHES, search_id)
        if data is None:
            raise RecordNotFoundError("Saved search", search_id)
        return SavedSearch.model_validate(data)

    def save(
        self,
        query: str,
        industry: Optional[str] = None,
        stage: Optional[str] = None,
        result_count: int = 0,
    ) -> SavedSearch:
        """Store a search; the ``all`` sentinel is saved as no filter."""
        if not query.strip() and not industry and not stage:
            raise ValueError("A saved search needs query text or a filter")
        search = SavedSearch(
            id=new_record_id(),
            query=query.strip(),
            filters=SearchFilters(
                industry=None if industry == ALL else industry,
                stage=None if stage == ALL else stage,
            ),
            result_count=result_count,
        )
        self.repository.put(SAVED_SEARCHES, search.id, search.model_dump(mode="json", by_alias=True))
        logger.info(f"Saved search {search.id} ({search.query!r})")
        return search

    def delete(self, search_id: str) -> None:
        if not self.repository.delete(SAVED_SEARCHES, search_id):
            raise RecordNotFoundError("Saved search", search_id)

    def run(
        self,
        search_id: str,
        companies: list[Company],
        page: int = 1,
        page_size: int = 10,
    ) -> ListingPage:
        """Run a saved search and refresh its stored result count."""
        search = self.get(search_id)
        result = self.engine.list(companies, search.to_query(page=page, page_size=page_size))

        if result.total_matched != search.result_count:
            updated = search.model_copy(update={"result_count": result.total_matched})
            self.repository.put(SAVED_SEARCHES, search.id, updated.model_dump(mode="json", by_alias=True))

        return result
