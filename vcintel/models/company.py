"""Company records and listing query models."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Company(BaseModel):
    """A tracked company. Immutable once fetched, identified by ``id``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(description="Opaque unique identifier")
    name: str
    description: str = ""
    industry: str = ""
    stage: str = Field(default="", description="Funding round label, e.g. 'Series C'")
    founded: int = Field(description="Year the company was founded")
    location: str = ""
    website: str = ""
    employees: int = Field(default=0, ge=0)
    total_funding: int = Field(default=0, ge=0, alias="totalFunding")
    last_funding_date: date = Field(alias="lastFundingDate")
    signals: tuple[str, ...] = Field(
        default=(),
        description="Signal tags in detection order",
    )


class SortField(str, Enum):
    """Company fields the listing can be sorted by."""

    ID = "id"
    NAME = "name"
    DESCRIPTION = "description"
    INDUSTRY = "industry"
    STAGE = "stage"
    LOCATION = "location"
    WEBSITE = "website"
    FOUNDED = "founded"
    EMPLOYEES = "employees"
    TOTAL_FUNDING = "totalFunding"
    LAST_FUNDING_DATE = "lastFundingDate"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


ALL = "all"


class CompanyQuery(BaseModel):
    """One listing request: search text, filters, sort and page window.

    Page size and sort field are checked by the listing engine rather than
    here, so a bad value surfaces as ``InvalidQuery`` at listing time.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    search_text: str = Field(default="", alias="searchText")
    industry_filter: str = Field(default=ALL, alias="industryFilter")
    stage_filter: str = Field(default=ALL, alias="stageFilter")
    sort_field: str = Field(default=SortField.NAME.value, alias="sortField")
    sort_direction: SortDirection = Field(default=SortDirection.ASC, alias="sortDirection")
    page: int = 1
    page_size: int = Field(default=10, alias="pageSize")


class ListingPage(BaseModel):
    """A filtered, sorted page of companies plus pagination metadata."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[Company] = Field(default_factory=list)
    total_matched: int = Field(alias="totalMatched")
    page: int
    page_size: int = Field(alias="pageSize")
    total_pages: int = Field(alias="totalPages")


class FilterOptions(BaseModel):
    """Choices offered by the industry and stage filters."""

    industries: list[str] = Field(default_factory=lambda: [ALL])
    stages: list[str] = Field(default_factory=lambda: [ALL])
