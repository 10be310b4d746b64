"""
QuickNotes — Presentation Client
==================================

What:  Async HTTP client for the notes API with a local, disposable copy of
       the note list.
How:   httpx.AsyncClient against the five CRUD endpoints. After every
       successful create/update/delete the list is fetched again; nothing is
       patched locally or applied optimistically.
Who:   Frontends and scripts that drive the API; tests run it against the
       app in-process through httpx.ASGITransport.

Usage:
    async with NotesClient("http://localhost:4000") as client:
        await client.create_note("Groceries", "milk, eggs")
        for note in client.notes:
            print(note.id, note.title)
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from quicknotes.exceptions import ApiClientError
from quicknotes.schemas.note import NoteResponse

logger = logging.getLogger(__name__)


class NotesClient:
    """
    Client for the QuickNotes HTTP API.

    Args:
        base_url:  Server root, e.g. "http://localhost:4000".
        transport: Optional httpx transport (ASGITransport in tests).
        timeout:   Per-request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:4000",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ) -> None:
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)
        self._notes: List[NoteResponse] = []

    async def __aenter__(self) -> "NotesClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    @property
    def notes(self) -> List[NoteResponse]:
        """The most recently fetched list (a copy; never authoritative)."""
        return list(self._notes)

    # ── Reads ─────────────────────────────────────────────────────────────

    async def refresh(self) -> List[NoteResponse]:
        """Replace the local copy with the server's current list."""
        response = await self._http.get("/notes")
        self._raise_for_error(response)
        self._notes = [NoteResponse.model_validate(item) for item in response.json()]
        return self.notes

    async def get_note(self, note_id: int) -> NoteResponse:
        response = await self._http.get(f"/notes/{note_id}")
        self._raise_for_error(response)
        return NoteResponse.model_validate(response.json())

    # ── Mutations ─────────────────────────────────────────────────────────

    async def create_note(self, title: str, content: Optional[str] = None) -> NoteResponse:
        body: Dict[str, Any] = {"title": title}
        if content is not None:
            body["content"] = content
        response = await self._http.post("/notes", json=body)
        self._raise_for_error(response)
        note = NoteResponse.model_validate(response.json())
        await self.refresh()
        return note

    async def update_note(
        self,
        note_id: int,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> NoteResponse:
        """Send only the fields that were given."""
        body: Dict[str, Any] = {}
        if title is not None:
            body["title"] = title
        if content is not None:
            body["content"] = content
        response = await self._http.put(f"/notes/{note_id}", json=body)
        self._raise_for_error(response)
        note = NoteResponse.model_validate(response.json())
        await self.refresh()
        return note

    async def delete_note(self, note_id: int) -> None:
        response = await self._http.delete(f"/notes/{note_id}")
        self._raise_for_error(response)
        await self.refresh()

    # ── Helpers ───────────────────────────────────────────────────────────

    @staticmethod
    def _raise_for_error(response: httpx.Response) -> None:
        if response.is_success:
            return
        try:
            message = response.json().get("error") or response.reason_phrase
        except (ValueError, AttributeError):
            message = response.reason_phrase
        logger.warning(
            "%s %s failed with %d: %s",
            response.request.method,
            response.request.url.path,
            response.status_code,
            message,
        )
        raise ApiClientError(
            status_code=response.status_code,
            message=message,
            context={"request_id": response.headers.get("X-Request-ID")},
        )
