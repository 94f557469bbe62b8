"""Free-text notes on company profiles."""

import logging

from vcintel.models import Note
from vcintel.storage import NOTES, Repository, new_record_id
from .errors import RecordNotFoundError

logger = logging.getLogger(__name__)


class NoteService:
    """Per-company note CRUD."""

    def __init__(self, repository: Repository):
        self.repository = repository

    def for_company(self, company_id: str) -> list[Note]:
        """A company's notes, newest first."""
        notes = [
            Note.model_validate(d)
            for d in self.repository.list(NOTES)
            if d.get("companyId") == company_id
        ]
        return sorted(notes, key=lambda n: n.timestamp, reverse=True)

    def add(self, company_id: str, content: str) -> Note:
        if not content.strip():
            raise ValueError("Note content is required")
        note = Note(id=new_record_id(), company_id=company_id, content=content)
        self._save(note)
        return note

    def edit(self, company_id: str, note_id: str, content: str) -> Note:
        """Replace a note's content, keeping its timestamp."""
        if not content.strip():
            raise ValueError("Note content is required")
        note = self._get(company_id, note_id)
        updated = note.model_copy(update={"content": content})
        self._save(updated)
        return updated

    def delete(self, company_id: str, note_id: str) -> None:
        self._get(company_id, note_id)
        self.repository.delete(NOTES, note_id)

    def _get(self, company_id: str, note_id: str) -> Note:
        data = self.repository.get(NOTES, note_id)
        if data is None or data.get("companyId") != company_id:
            raise RecordNotFoundError("Note", note_id)
        return Note.model_validate(data)

    def _save(self, note: Note) -> None:
        self.repository.put(NOTES, note.id, note.model_dump(mode="json", by_alias=True))
