"""Shared collaborators for the API, overridable via ``app.dependency_overrides``."""

from typing import Optional

from fastapi import Depends

from vcintel.config import settings
from vcintel.connectors import CompanySource, create_source
from vcintel.enrich import EnrichmentService, create_provider
from vcintel.listing import ListingEngine
from vcintel.services import (
    EnrichmentCoordinator,
    ListService,
    NoteService,
    SavedSearchService,
)
from vcintel.storage import Repository, create_repository

_repository: Optional[Repository] = None
_source: Optional[CompanySource] = None
_enrichment_service: Optional[EnrichmentService] = None
_coordinator: Optional[EnrichmentCoordinator] = None


def get_repository() -> Repository:
    global _repository
    if _repository is None:
        _repository = create_repository(settings.storage_backend)
    return _repository


def get_company_source() -> CompanySource:
    global _source
    if _source is None:
        _source = create_source()
    return _source


def get_enrichment_service() -> EnrichmentService:
    global _enrichment_service
    if _enrichment_service is None:
        _enrichment_service = EnrichmentService(create_provider())
    return _enrichment_service


def get_listing_engine() -> ListingEngine:
    return ListingEngine()


def get_coordinator(
    service: EnrichmentService = Depends(get_enrichment_service),
    repository: Repository = Depends(get_repository),
) -> EnrichmentCoordinator:
    """One coordinator per service/repository pair, so in-flight runs are shared."""
    global _coordinator
    if (
        _coordinator is None
        or _coordinator.service is not service
        or _coordinator.repository is not repository
    ):
        _coordinator = EnrichmentCoordinator(service, repository)
    return _coordinator


def get_list_service(repository: Repository = Depends(get_repository)) -> ListService:
    return ListService(repository)


def get_saved_search_service(
    repository: Repository = Depends(get_repository),
    engine: ListingEngine = Depends(get_listing_engine),
) -> SavedSearchService:
    return SavedSearchService(repository, engine)


def get_note_service(repository: Repository = Depends(get_repository)) -> NoteService:
    return NoteService(repository)


async def close_resources() -> None:
    """Release the enrichment provider's resources on shutdown."""
    if _enrichment_service is not None:
        await _enrichment_service.provider.aclose()
