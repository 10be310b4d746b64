"""
QuickNotes Backend — Services Package
=======================================

What:  Note store implementations and the factory that picks one.

Store Inventory:
    - store_base.py:    NoteStore abstract interface
    - memory_store.py:  InMemoryNoteStore (STORE_BACKEND=memory)
    - sql_store.py:     SqlNoteStore (STORE_BACKEND=database)
"""

from quicknotes.config import Settings
from quicknotes.services.memory_store import InMemoryNoteStore
from quicknotes.services.sql_store import SqlNoteStore
from quicknotes.services.store_base import NoteStore


def create_store(settings: Settings) -> NoteStore:
    """Build the store selected by `settings.store_backend`."""
    if settings.store_backend == "database":
        return SqlNoteStore(settings)
    return InMemoryNoteStore()


__all__ = ["NoteStore", "InMemoryNoteStore", "SqlNoteStore", "create_store"]
