"""Abstract base class for company sources."""

from abc import ABC, abstractmethod
from typing import Optional

from vcintel.models import Company


class CompanySource(ABC):
    """Abstract interface for where company records come from."""

    name: str = "base"

    @abstractmethod
    async def fetch_companies(self) -> list[Company]:
        """
        Return every company the source knows about.

        Returns:
            Companies in the source's natural order, ids unique
        """
        pass

    async def get_company(self, company_id: str) -> Optional[Company]:
        """Look up a single company by id."""
        for company in await self.fetch_companies():
            if company.id == company_id:
                return company
        return None

    async def get_companies(self, company_ids: list[str]) -> list[Company]:
        """Resolve ids to companies in the given order, skipping unknown ids."""
        by_id = {c.id: c for c in await self.fetch_companies()}
        return [by_id[cid] for cid in company_ids if cid in by_id]
