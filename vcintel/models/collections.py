"""User-owned records: lists, saved searches and notes."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .company import ALL, CompanyQuery
from .enrichment import EnrichmentResult


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CompanyList(BaseModel):
    """A named, ordered collection of company ids."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str = ""
    company_ids: list[str] = Field(default_factory=list, alias="companyIds")
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")

    @property
    def company_count(self) -> int:
        return len(self.company_ids)


class SearchFilters(BaseModel):
    industry: Optional[str] = None
    stage: Optional[str] = None


class SavedSearch(BaseModel):
    """A search the user wants to run again later."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    query: str = ""
    filters: SearchFilters = Field(default_factory=SearchFilters)
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")
    result_count: int = Field(default=0, ge=0, alias="resultCount")

    def to_query(self, page: int = 1, page_size: int = 10) -> CompanyQuery:
        """Build the listing query this saved search stands for."""
        return CompanyQuery(
            search_text=self.query,
            industry_filter=self.filters.industry or ALL,
            stage_filter=self.filters.stage or ALL,
            page=page,
            page_size=page_size,
        )


class Note(BaseModel):
    """Free-text note attached to a company."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    company_id: str = Field(alias="companyId")
    content: str
    timestamp: datetime = Field(default_factory=utcnow)


class StoredEnrichment(BaseModel):
    """The latest successful enrichment of a company."""

    model_config = ConfigDict(populate_by_name=True)

    company_id: str = Field(alias="companyId")
    result: EnrichmentResult
    enriched_at: datetime = Field(default_factory=utcnow, alias="enrichedAt")
