"""
QuickNotes Backend — Abstract Note Store Interface
====================================================

What:  Abstract base class defining the contract every note store fulfils.
How:   Concrete stores (InMemoryNoteStore, SqlNoteStore) inherit from
       NoteStore and implement the five CRUD coroutines plus lifecycle hooks.
Who:   Route handlers receive the app-owned instance via get_store().

Contract:
    - list()   → every note, ascending by id (possibly empty)
    - get()    → one note or NotFoundError
    - create() → ValidationError on missing/empty title, else the new note
    - update() → NotFoundError on unknown id; only supplied fields change
    - delete() → NotFoundError on unknown id
    - ids are assigned by the store, strictly increasing, never reused
    - infrastructure failures surface as DatabaseError, nothing else
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from quicknotes.exceptions import ValidationError
from quicknotes.schemas.note import NoteResponse


class NoteStore(ABC):
    """
    Abstract interface for the authoritative note collection.

    Implementations:
        - InMemoryNoteStore: process-local dict, lost on restart
        - SqlNoteStore: single `notes` table through async SQLAlchemy
    """

    #: Short name reported by GET /health
    backend_name: str = "abstract"

    # ── Lifecycle ─────────────────────────────────────────────────────────

    async def initialize(self) -> None:
        """Establish the backing resource. Default: nothing to do."""

    async def ping(self) -> bool:
        """Cheap reachability probe for health checks."""
        return True

    async def close(self) -> None:
        """Release any held resources. Default: nothing to release."""

    # ── CRUD ──────────────────────────────────────────────────────────────

    @abstractmethod
    async def list(self) -> List[NoteResponse]:
        """Return all notes ordered by ascending id."""
        ...

    @abstractmethod
    async def get(self, note_id: int) -> NoteResponse:
        """
        Return the note with `note_id`.

        Raises:
            NotFoundError: no such note
        """
        ...

    @abstractmethod
    async def create(self, title: Optional[str], content: Optional[str] = None) -> NoteResponse:
        """
        Store a new note and return it with its assigned id.

        Raises:
            ValidationError: title missing or empty
        """
        ...

    @abstractmethod
    async def update(
        self,
        note_id: int,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> NoteResponse:
        """
        Replace the supplied fields of an existing note.

        None means "leave unchanged" for both fields.

        Raises:
            NotFoundError: no such note
            ValidationError: title supplied as an empty string
        """
        ...

    @abstractmethod
    async def delete(self, note_id: int) -> None:
        """
        Remove the note with `note_id`.

        Raises:
            NotFoundError: no such note
        """
        ...

    # ── Shared validation ─────────────────────────────────────────────────

    @staticmethod
    def _require_title(title: Optional[str]) -> str:
        if not title:
            raise ValidationError(message="Title is required", field="title")
        return title

    @staticmethod
    def _check_new_title(title: Optional[str]) -> None:
        if title is not None and title == "":
            raise ValidationError(message="Title cannot be empty", field="title")
