"""API routes for the company intelligence dashboard."""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from vcintel.config import settings
from vcintel.connectors import CompanySource
from vcintel.enrich import EnrichmentError, EnrichmentService, MissingInput
from vcintel.listing import InvalidQuery, ListingEngine, available_filters, parse_query
from vcintel.models import Company, EnrichmentRequest
from vcintel.services import (
    EnrichmentCancelled,
    EnrichmentCoordinator,
    EnrichmentInProgress,
    ListService,
    NoteService,
    SavedSearchService,
)
from .deps import (
    get_company_source,
    get_coordinator,
    get_enrichment_service,
    get_list_service,
    get_listing_engine,
    get_note_service,
    get_saved_search_service,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ENRICH_FAILED = "Failed to enrich company data"


class EnrichBody(BaseModel):
    """Request body for the enrichment endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    url: Optional[str] = None
    company_name: Optional[str] = Field(default="", alias="companyName")


class CreateListRequest(BaseModel):
    name: str
    description: str = ""


class AddCompanyRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    company_id: str = Field(alias="companyId")


class SaveSearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str = ""
    industry: Optional[str] = None
    stage: Optional[str] = None
    result_count: int = Field(default=0, ge=0, alias="resultCount")


class NoteRequest(BaseModel):
    content: str


def _dump(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True)


def _enrichment_failed(retryable: bool = False) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"error": ENRICH_FAILED, "retryable": retryable},
    )


async def _require_company(source: CompanySource, company_id: str) -> Company:
    company = await source.get_company(company_id)
    if company is None:
        raise HTTPException(status_code=404, detail=f"Company not found: {company_id}")
    return company


# Companies

@router.get("/companies")
async def list_companies(
    q: Optional[str] = Query(None, description="Search text over name and description"),
    industry: Optional[str] = Query(None),
    stage: Optional[str] = Query(None),
    sort: Optional[str] = Query(None, description="Sort field, e.g. name or totalFunding"),
    direction: Optional[str] = Query(None, description="asc or desc"),
    page: Optional[str] = Query(None),
    page_size: Optional[str] = Query(None, alias="pageSize"),
    source: CompanySource = Depends(get_company_source),
    engine: ListingEngine = Depends(get_listing_engine),
):
    """Filtered, sorted, paginated company listing."""
    query = parse_query(
        {
            "searchText": q,
            "industryFilter": industry,
            "stageFilter": stage,
            "sortField": sort,
            "sortDirection": direction,
            "page": page,
            "pageSize": page_size,
        },
        default_page_size=settings.default_page_size,
    )
    if query.page_size > settings.max_page_size:
        raise InvalidQuery(
            f"pageSize must be at most {settings.max_page_size}",
            field="pageSize",
        )

    companies = await source.fetch_companies()
    return _dump(engine.list(companies, query))


@router.get("/companies/filters")
async def company_filters(source: CompanySource = Depends(get_company_source)):
    """Industry and stage choices for the listing filters."""
    return _dump(available_filters(await source.fetch_companies()))


@router.get("/companies/{company_id}")
async def get_company(company_id: str, source: CompanySource = Depends(get_company_source)):
    return _dump(await _require_company(source, company_id))


# Enrichment

@router.post("/enrich")
async def enrich_company_data(
    http_request: Request,
    service: EnrichmentService = Depends(get_enrichment_service),
):
    """Enrich a company from its website URL.

    Errors are limited to 400 "URL is required" and 500 "Failed to enrich
    company data"; an unreadable body counts as the latter.
    """
    try:
        body = EnrichBody.model_validate(await http_request.json())
    except ValueError as e:
        logger.error(f"Unreadable enrichment request body: {e}")
        return _enrichment_failed()

    request = EnrichmentRequest(url=body.url or "", company_name=body.company_name or "")
    try:
        result = await service.enrich(request)
    except MissingInput as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except EnrichmentError as e:
        logger.error(f"Enrichment error for {request.url}: {e}")
        return _enrichment_failed(e.retryable)
    except Exception as e:
        logger.exception(f"Unexpected enrichment error for {request.url}: {e}")
        return _enrichment_failed()
    return _dump(result)


@router.post("/companies/{company_id}/enrich")
async def enrich_profile(
    company_id: str,
    source: CompanySource = Depends(get_company_source),
    coordinator: EnrichmentCoordinator = Depends(get_coordinator),
):
    """Enrich a tracked company; keeps its previous result on failure."""
    company = await _require_company(source, company_id)
    try:
        stored = await coordinator.enrich_company(company)
    except (EnrichmentInProgress, EnrichmentCancelled) as e:
        raise HTTPException(status_code=409, detail=str(e))
    except MissingInput as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except EnrichmentError as e:
        return _enrichment_failed(e.retryable)
    except Exception as e:
        logger.exception(f"Unexpected enrichment error for company {company_id}: {e}")
        return _enrichment_failed()
    return _dump(stored)


@router.delete("/companies/{company_id}/enrich")
async def cancel_enrichment(
    company_id: str,
    coordinator: EnrichmentCoordinator = Depends(get_coordinator),
):
    return {"cancelled": coordinator.cancel(company_id)}


@router.get("/companies/{company_id}/enrichment")
async def latest_enrichment(
    company_id: str,
    coordinator: EnrichmentCoordinator = Depends(get_coordinator),
):
    stored = coordinator.latest(company_id)
    if stored is None:
        raise HTTPException(status_code=404, detail=f"No enrichment for company {company_id}")
    return _dump(stored)


# Notes

@router.get("/companies/{company_id}/notes")
async def list_notes(company_id: str, notes: NoteService = Depends(get_note_service)):
    return [_dump(n) for n in notes.for_company(company_id)]


@router.post("/companies/{company_id}/notes", status_code=201)
async def add_note(
    company_id: str,
    body: NoteRequest,
    source: CompanySource = Depends(get_company_source),
    notes: NoteService = Depends(get_note_service),
):
    await _require_company(source, company_id)
    try:
        return _dump(notes.add(company_id, body.content))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/companies/{company_id}/notes/{note_id}")
async def edit_note(
    company_id: str,
    note_id: str,
    body: NoteRequest,
    notes: NoteService = Depends(get_note_service),
):
    try:
        return _dump(notes.edit(company_id, note_id, body.content))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/companies/{company_id}/notes/{note_id}", status_code=204)
async def delete_note(company_id: str, note_id: str, notes: NoteService = Depends(get_note_service)):
    notes.delete(company_id, note_id)


# Lists

@router.get("/lists")
async def get_lists(lists: ListService = Depends(get_list_service)):
    return [
        {**_dump(l), "companyCount": l.company_count}
        for l in lists.all()
    ]


@router.post("/lists", status_code=201)
async def create_list(body: CreateListRequest, lists: ListService = Depends(get_list_service)):
    try:
        return _dump(lists.create(body.name, body.description))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/lists/{list_id}", status_code=204)
async def delete_list(list_id: str, lists: ListService = Depends(get_list_service)):
    lists.delete(list_id)


@router.post("/lists/{list_id}/companies")
async def add_to_list(
    list_id: str,
    body: AddCompanyRequest,
    source: CompanySource = Depends(get_company_source),
    lists: ListService = Depends(get_list_service),
):
    await _require_company(source, body.company_id)
    return _dump(lists.add_company(list_id, body.company_id))


@router.delete("/lists/{list_id}/companies/{company_id}")
async def remove_from_list(
    list_id: str,
    company_id: str,
    lists: ListService = Depends(get_list_service),
):
    return _dump(lists.remove_company(list_id, company_id))


@router.get("/lists/{list_id}/export")
async def export_list(
    list_id: str,
    source: CompanySource = Depends(get_company_source),
    lists: ListService = Depends(get_list_service),
):
    return await lists.export(list_id, source)


# Saved searches

@router.get("/saved-searches")
async def get_saved_searches(searches: SavedSearchService = Depends(get_saved_search_service)):
    return [_dump(s) for s in searches.all()]


@router.post("/saved-searches", status_code=201)
async def save_search(
    body: SaveSearchRequest,
    searches: SavedSearchService = Depends(get_saved_search_service),
):
    try:
        return _dump(searches.save(body.query, body.industry, body.stage, body.result_count))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/saved-searches/{search_id}", status_code=204)
async def delete_saved_search(
    search_id: str,
    searches: SavedSearchService = Depends(get_saved_search_service),
):
    searches.delete(search_id)


@router.post("/saved-searches/{search_id}/run")
async def run_saved_search(
    search_id: str,
    page: int = Query(1),
    page_size: Optional[int] = Query(None, alias="pageSize"),
    source: CompanySource = Depends(get_company_source),
    searches: SavedSearchService = Depends(get_saved_search_service),
):
    companies = await source.fetch_companies()
    result = searches.run(
        search_id,
        companies,
        page=page,
        page_size=page_size or settings.default_page_size,
    )
    return _dump(result)
