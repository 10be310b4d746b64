"""
QuickNotes Backend — In-Memory Note Store
===========================================

What:  NoteStore backed by a dict living inside the store instance.
Who:   Selected when STORE_BACKEND=memory (the default); also used by tests.

The dict is keyed by id and filled in insertion order. Since ids only ever
grow, insertion order is ascending id order and list() needs no sort.
None of the methods await, so each one runs to completion on the event loop
before any other request can observe the collection.
"""

import logging
from typing import Dict, List, Optional

from quicknotes.exceptions import NotFoundError
from quicknotes.schemas.note import NoteResponse
from quicknotes.services.store_base import NoteStore

logger = logging.getLogger(__name__)


class InMemoryNoteStore(NoteStore):
    """Process-local note collection. Contents vanish when the process exits."""

    backend_name = "memory"

    def __init__(self) -> None:
        self._notes: Dict[int, NoteResponse] = {}
        self._next_id = 1

    async def list(self) -> List[NoteResponse]:
        return list(self._notes.values())

    async def get(self, note_id: int) -> NoteResponse:
        return self._lookup(note_id)

    async def create(self, title: Optional[str], content: Optional[str] = None) -> NoteResponse:
        title = self._require_title(title)
        note = NoteResponse(id=self._next_id, title=title, content=content or "")
        self._notes[note.id] = note
        self._next_id += 1
        logger.info("Created note %d", note.id)
        return note

    async def update(
        self,
        note_id: int,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> NoteResponse:
        self._check_new_title(title)
        current = self._lookup(note_id)

        changes = {}
        if title is not None:
            changes["title"] = title
        if content is not None:
            changes["content"] = content

        updated = current.model_copy(update=changes)
        self._notes[note_id] = updated
        logger.info("Updated note %d (%s)", note_id, ", ".join(changes) or "no changes")
        return updated

    async def delete(self, note_id: int) -> None:
        self._lookup(note_id)
        del self._notes[note_id]
        logger.info("Deleted note %d", note_id)

    def _lookup(self, note_id: int) -> NoteResponse:
        note = self._notes.get(note_id)
        if note is None:
            raise NotFoundError(resource="Note", resource_id=note_id)
        return note
