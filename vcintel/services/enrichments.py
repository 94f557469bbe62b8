"""Per-company enrichment runs: one in flight at a time, last success kept."""

import asyncio
import logging
from typing import Optional

from vcintel.enrich import EnrichmentError, EnrichmentService
from vcintel.models import Company, EnrichmentRequest, EnrichmentResult, StoredEnrichment
from vcintel.storage import ENRICHMENTS, Repository

logger = logging.getLogger(__name__)


class EnrichmentInProgress(RuntimeError):
    """Raised when a company already has an enrichment in flight."""

    def __init__(self, company_id: str) -> None:
        super().__init__(f"Enrichment already running for company {company_id}")
        self.company_id = company_id


class EnrichmentCancelled(RuntimeError):
    """Raised to the waiter when a run is abandoned through ``cancel``."""

    def __init__(self, company_id: str) -> None:
        super().__init__(f"Enrichment cancelled for company {company_id}")
        self.company_id = company_id


class EnrichmentCoordinator:
    """Debounce enrichment triggers per company and keep the latest result.

    A failed or cancelled run leaves the previously stored result untouched.
    """

    def __init__(self, service: EnrichmentService, repository: Repository):
        self.service = service
        self.repository = repository
        self._in_flight: dict[str, asyncio.Task] = {}
        self._cancel_requested: set[str] = set()

    def is_running(self, company_id: str) -> bool:
        task = self._in_flight.get(company_id)
        return task is not None and not task.done()

    async def enrich_company(self, company: Company) -> StoredEnrichment:
        """Enrich ``company`` unless a run for it is already pending."""
        if self.is_running(company.id):
            raise EnrichmentInProgress(company.id)

        request = EnrichmentRequest(url=company.website, company_name=company.name)
        task = asyncio.ensure_future(self.service.enrich(request))
        self._in_flight[company.id] = task
        try:
            result = await task
        except asyncio.CancelledError:
            logger.info(f"Enrichment of {company.name} cancelled")
            if company.id in self._cancel_requested:
                raise EnrichmentCancelled(company.id) from None
            raise
        except EnrichmentError as e:
            logger.warning(f"Enrichment of {company.name} failed ({e.code}): {e}")
            raise
        finally:
            if self._in_flight.get(company.id) is task:
                del self._in_flight[company.id]
            self._cancel_requested.discard(company.id)

        return self._store(company.id, result)

    def cancel(self, company_id: str) -> bool:
        """Abandon the in-flight run for a company, if any."""
        task = self._in_flight.get(company_id)
        if task is None or task.done():
            return False
        self._cancel_requested.add(company_id)
        task.cancel()
        return True

    def latest(self, company_id: str) -> Optional[StoredEnrichment]:
        data = self.repository.get(ENRICHMENTS, company_id)
        return StoredEnrichment.model_validate(data) if data else None

    def _store(self, company_id: str, result: EnrichmentResult) -> StoredEnrichment:
        stored = StoredEnrichment(company_id=company_id, result=result)
        self.repository.put(
            ENRICHMENTS,
            company_id,
            stored.model_dump(mode="json", by_alias=True),
        )
        return stored
