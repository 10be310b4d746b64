"""
QuickNotes Backend — Notes Route Handlers
===========================================

What:  CRUD endpoints over the note collection.
How:   Each handler receives the validated body (NoteCreate / NoteUpdate)
       and the app-owned NoteStore, calls one store method, and returns the
       result. Store exceptions are mapped to status codes by the global
       handlers in main.py.
Who:   Called by NotesClient and the browser frontend.

Endpoints:
    GET    /notes        → 200 [Note]
    GET    /notes/{id}   → 200 Note | 404
    POST   /notes        → 201 Note | 400
    PUT    /notes/{id}   → 200 Note | 400 | 404
    DELETE /notes/{id}   → 204      | 404
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from quicknotes.dependencies import get_store
from quicknotes.schemas.note import (
    ErrorResponse,
    NoteCreate,
    NoteResponse,
    NoteUpdate,
)
from quicknotes.services.store_base import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["Notes"])

NOT_FOUND = {404: {"description": "Note not found", "model": ErrorResponse}}
SERVER_ERROR = {500: {"description": "Store unavailable", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[NoteResponse],
    responses={**SERVER_ERROR},
    summary="List all notes",
    description="Returns every note ordered by ascending id.",
)
async def list_notes(store: NoteStore = Depends(get_store)) -> List[NoteResponse]:
    return await store.list()


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Get a single note by id",
)
async def get_note(note_id: int, store: NoteStore = Depends(get_store)) -> NoteResponse:
    return await store.get(note_id)


@router.post(
    "",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Title missing or empty", "model": ErrorResponse}, **SERVER_ERROR},
    summary="Create a note",
    description="Creates a note. `title` is required; `content` defaults to an empty string.",
)
async def create_note(
    payload: Optional[NoteCreate] = None,
    store: NoteStore = Depends(get_store),
) -> NoteResponse:
    if payload is None:
        # no body: the store rejects the missing title
        return await store.create(title=None)
    return await store.create(title=payload.title, content=payload.content)


@router.put(
    "/{note_id}",
    response_model=NoteResponse,
    responses={400: {"description": "Empty title", "model": ErrorResponse}, **NOT_FOUND, **SERVER_ERROR},
    summary="Update a note",
    description=(
        "Replaces only the supplied fields. Omitted or null fields keep their "
        "current value; an empty `content` clears it."
    ),
)
async def update_note(
    note_id: int,
    payload: Optional[NoteUpdate] = None,
    store: NoteStore = Depends(get_store),
) -> NoteResponse:
    if payload is None:
        payload = NoteUpdate()
    return await store.update(note_id, title=payload.title, content=payload.content)


@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **SERVER_ERROR},
    summary="Delete a note",
)
async def delete_note(note_id: int, store: NoteStore = Depends(get_store)) -> Response:
    await store.delete(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
