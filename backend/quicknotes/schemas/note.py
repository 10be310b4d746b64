"""
QuickNotes Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract between client and backend.
How:   FastAPI validates request bodies against NoteCreate / NoteUpdate before
       a handler runs, serializes NoteResponse on the way out, and generates
       the OpenAPI document from all of them.
Who:   Route handlers, the stores (which return NoteResponse), and NotesClient.

Update policy:
    A field that is omitted or null means "leave unchanged". An empty
    content string clears the content. An empty title string is rejected,
    since a stored note never has an empty title.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    Body of POST /notes.

    title is declared optional and validated with validate_default so a
    missing title and an empty one produce the same "Title is required"
    message instead of pydantic's generic "Field required".
    """
    title: Optional[str] = Field(
        default=None,
        validate_default=True,
        description="Note title (required, non-empty)",
    )
    content: Optional[str] = Field(
        default=None,
        description="Note body; stored as an empty string when omitted",
    )

    @field_validator("title")
    @classmethod
    def require_title(cls, v: Optional[str]) -> str:
        if not v:
            raise PydanticCustomError("title_required", "Title is required")
        return v


class NoteUpdate(BaseModel):
    """Body of PUT /notes/{id}. Every field is optional."""
    title: Optional[str] = Field(default=None, description="New title (non-empty)")
    content: Optional[str] = Field(default=None, description="New content")

    @field_validator("title")
    @classmethod
    def reject_empty_title(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v == "":
            raise PydanticCustomError("title_empty", "Title cannot be empty")
        return v


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  Full representation of a note.
    Who:   Returned by every notes endpoint except DELETE, and by both stores.
    """
    id: int = Field(description="Store-assigned identifier, never reused")
    title: str = Field(description="Note title")
    content: str = Field(default="", description="Note body")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    What:  Error body for every failed request.

    Example:
        {"error": "Note not found"}
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and store status.
    Who:   Returned by GET /health for monitoring and container health checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    store: str = Field(description="Active store backend: memory, database")
    database: str = Field(description="Store reachability: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
