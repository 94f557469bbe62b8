"""Storage for user-owned records, kept out of the listing and enrichment core."""

from .repository import (
    ENRICHMENTS,
    LISTS,
    NOTES,
    SAVED_SEARCHES,
    InMemoryRepository,
    Repository,
    SqlRepository,
    StorageError,
    create_repository,
    new_record_id,
)

__all__ = [
    "ENRICHMENTS",
    "LISTS",
    "NOTES",
    "SAVED_SEARCHES",
    "InMemoryRepository",
    "Repository",
    "SqlRepository",
    "StorageError",
    "create_repository",
    "new_record_id",
]
