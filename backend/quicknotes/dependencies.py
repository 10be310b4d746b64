"""
QuickNotes Backend — FastAPI Dependencies
===========================================

What:  Dependency providers injected into route handlers.
How:   The store is created once per application by create_app() and kept
       on `app.state.store`; handlers reach it through get_store().
"""

from fastapi import Request

from quicknotes.services.store_base import NoteStore


def get_store(request: Request) -> NoteStore:
    """Return the note store owned by the running application."""
    return request.app.state.store
