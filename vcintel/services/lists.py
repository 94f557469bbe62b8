"""Named company lists."""

import logging
from datetime import datetime, timezone
from typing import Any

from vcintel.connectors import CompanySource
from vcintel.models import CompanyList
from vcintel.storage import LISTS, Repository, new_record_id
from .errors import RecordNotFoundError

logger = logging.getLogger(__name__)


class ListService:
    """Create, edit, delete and export company lists."""

    def __init__(self, repository: Repository):
        self.repository = repository

    def all(self) -> list[CompanyList]:
        """Lists, newest first."""
        lists = [CompanyList.model_validate(d) for d in self.repository.list(LISTS)]
        return sorted(lists, key=lambda l: l.created_at, reverse=True)

    def get(self, list_id: str) -> CompanyList:
        data = self.repository.get(LISTS, list_id)
        if data is None:
            raise RecordNotFoundError("List", list_id)
        return CompanyList.model_validate(data)

    def create(self, name: str, description: str = "") -> CompanyList:
        if not name.strip():
            raise ValueError("List name is required")
        company_list = CompanyList(
            id=new_record_id(),
            name=name.strip(),
            description=description.strip(),
        )
        self._save(company_list)
        logger.info(f"Created list {company_list.id} ({company_list.name})")
        return company_list

    def delete(self, list_id: str) -> None:
        if not self.repository.delete(LISTS, list_id):
            raise RecordNotFoundError("List", list_id)
        logger.info(f"Deleted list {list_id}")

    def add_company(self, list_id: str, company_id: str) -> CompanyList:
        """Append a company id; adding one already present is a no-op."""
        company_list = self.get(list_id)
        if company_id not in company_list.company_ids:
            company_list.company_ids.append(company_id)
            self._save(company_list)
        return company_list

    def remove_company(self, list_id: str, company_id: str) -> CompanyList:
        company_list = self.get(list_id)
        if company_id in company_list.company_ids:
            company_list.company_ids.remove(company_id)
            self._save(company_list)
        return company_list

    async def export(self, list_id: str, source: CompanySource) -> dict[str, Any]:
        """Export a list with its companies resolved from ``source``."""
        company_list = self.get(list_id)
        companies = await source.get_companies(company_list.company_ids)
        return {
            "listName": company_list.name,
            "description": company_list.description,
            "exportedAt": datetime.now(timezone.utc).isoformat(),
            "companies": [c.model_dump(mode="json", by_alias=True) for c in companies],
        }

    def _save(self, company_list: CompanyList) -> None:
        self.repository.put(
            LISTS,
            company_list.id,
            company_list.model_dump(mode="json", by_alias=True),
        )
