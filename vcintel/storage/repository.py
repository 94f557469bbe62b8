"""Key-value repositories over named collections of JSON records."""

import json
import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from vcintel.models.database import DBRecord, init_db

logger = logging.getLogger(__name__)

# Well-known collection names
LISTS = "vc-lists"
SAVED_SEARCHES = "vc-saved-searches"
NOTES = "vc-notes"
ENRICHMENTS = "vc-enrichments"


class StorageError(RuntimeError):
    """Raised when the backing store fails to read or write."""


_id_lock = threading.Lock()
_last_id = 0


def new_record_id() -> str:
    """Millisecond-timestamp id, bumped when two ids land in the same ms."""
    global _last_id
    with _id_lock:
        candidate = int(time.time() * 1000)
        if candidate <= _last_id:
            candidate = _last_id + 1
        _last_id = candidate
        return str(candidate)


class Repository(ABC):
    """get/put/delete over named collections of JSON-serializable dicts."""

    @abstractmethod
    def get(self, collection: str, record_id: str) -> Optional[dict[str, Any]]:
        pass

    @abstractmethod
    def put(self, collection: str, record_id: str, data: dict[str, Any]) -> None:
        """Insert or replace a record."""
        pass

    @abstractmethod
    def delete(self, collection: str, record_id: str) -> bool:
        """Remove a record; returns False when it did not exist."""
        pass

    @abstractmethod
    def list(self, collection: str) -> list[dict[str, Any]]:
        """All records of a collection in insertion order."""
        pass


class InMemoryRepository(Repository):
    """Process-local repository, used for tests and the memory backend."""

    def __init__(self):
        self._collections: dict[str, dict[str, str]] = {}
        self._lock = threading.Lock()

    def get(self, collection: str, record_id: str) -> Optional[dict[str, Any]]:
        with self._lock:
            raw = self._collections.get(collection, {}).get(record_id)
        return json.loads(raw) if raw is not None else None

    def put(self, collection: str, record_id: str, data: dict[str, Any]) -> None:
        # Stored serialized so callers never share mutable state with the store
        raw = json.dumps(data)
        with self._lock:
            self._collections.setdefault(collection, {})[record_id] = raw

    def delete(self, collection: str, record_id: str) -> bool:
        with self._lock:
            return self._collections.get(collection, {}).pop(record_id, None) is not None

    def list(self, collection: str) -> list[dict[str, Any]]:
        with self._lock:
            raws = list(self._collections.get(collection, {}).values())
        return [json.loads(raw) for raw in raws]


class SqlRepository(Repository):
    """Repository persisted to the ``records`` table."""

    def __init__(self, session_factory: Optional[sessionmaker] = None, db_url: Optional[str] = None):
        self._session_factory = session_factory or init_db(db_url)

    def get(self, collection: str, record_id: str) -> Optional[dict[str, Any]]:
        session = self._session_factory()
        try:
            record = (
                session.query(DBRecord)
                .filter_by(collection=collection, record_id=record_id)
                .first()
            )
            return json.loads(record.data) if record else None
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read {collection}/{record_id}: {e}") from e
        finally:
            session.close()

    def put(self, collection: str, record_id: str, data: dict[str, Any]) -> None:
        session = self._session_factory()
        try:
            record = (
                session.query(DBRecord)
                .filter_by(collection=collection, record_id=record_id)
                .first()
            )
            if record:
                record.data = json.dumps(data)
            else:
                session.add(DBRecord(
                    collection=collection,
                    record_id=record_id,
                    data=json.dumps(data),
                ))
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(f"Failed to write {collection}/{record_id}: {e}") from e
        finally:
            session.close()

    def delete(self, collection: str, record_id: str) -> bool:
        session = self._session_factory()
        try:
            deleted = (
                session.query(DBRecord)
                .filter_by(collection=collection, record_id=record_id)
                .delete()
            )
            session.commit()
            return deleted > 0
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(f"Failed to delete {collection}/{record_id}: {e}") from e
        finally:
            session.close()

    def list(self, collection: str) -> list[dict[str, Any]]:
        session = self._session_factory()
        try:
            records = (
                session.query(DBRecord)
                .filter_by(collection=collection)
                .order_by(DBRecord.id)
                .all()
            )
            return [json.loads(r.data) for r in records]
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to list {collection}: {e}") from e
        finally:
            session.close()


def create_repository(backend: str, db_url: Optional[str] = None) -> Repository:
    """Return the repository for a configured backend name."""
    if backend == "memory":
        return InMemoryRepository()
    if backend == "sqlite":
        logger.info("Using SQLite repository")
        return SqlRepository(db_url=db_url)
    raise ValueError(f"Unknown storage backend: {backend}")
