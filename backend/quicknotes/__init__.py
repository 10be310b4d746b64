"""
QuickNotes Backend — Application Package Initializer
====================================================

What: Marks the `quicknotes` directory as a Python package.
Who:  Used by uvicorn (`quicknotes.main:app`), pytest, and the console script.

Architecture Note:
    The backend follows a small layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (NoteStore backends)  │  ← memory or SQL persistence
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy engine
    └─────────────────────────────────────┘

    Routes never touch the ORM directly; they receive the app-owned
    NoteStore through a FastAPI dependency and translate its results and
    exceptions into HTTP responses.
"""

__version__ = "1.0.0"
