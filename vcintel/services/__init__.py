"""Services for user-owned records and coordinated enrichment."""

from .enrichments import EnrichmentCancelled, EnrichmentCoordinator, EnrichmentInProgress
from .errors import RecordNotFoundError
from .lists import ListService
from .notes import NoteService
from .saved_searches import SavedSearchService
from .seed import seed_demo_data

__all__ = [
    "EnrichmentCancelled",
    "EnrichmentCoordinator",
    "EnrichmentInProgress",
    "RecordNotFoundError",
    "ListService",
    "NoteService",
    "SavedSearchService",
    "seed_demo_data",
]
