"""
QuickNotes Backend — SQL Note Store
=====================================

What:  NoteStore backed by the single `notes` table via async SQLAlchemy.
How:   Owns an AsyncEngine and a session factory. Every operation opens its
       own session and transaction (`session.begin()`), so a reader never
       sees a half-applied write.
Who:   Selected when STORE_BACKEND=database.

Error Handling Strategy:
    NotFoundError / ValidationError propagate unchanged. Any SQLAlchemy or
    OS-level failure is logged with the driver detail and re-raised as
    DatabaseError, which the API turns into a generic 500.

Initialization:
    initialize() runs CREATE TABLE IF NOT EXISTS for Base.metadata inside
    the bounded startup retry loop (see database.retry_initialization).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from quicknotes.config import Settings
from quicknotes.database import (
    Base,
    create_engine,
    create_session_factory,
    retry_initialization,
)
from quicknotes.exceptions import DatabaseError, NotFoundError
from quicknotes.models.note import Note
from quicknotes.schemas.note import NoteResponse
from quicknotes.services.store_base import NoteStore

logger = logging.getLogger(__name__)

# Failures that mean "the database is not reachable / not usable right now"
BACKING_ERRORS = (SQLAlchemyError, OSError)

# Bounds of the INTEGER primary key (int4 on PostgreSQL)
MIN_NOTE_ID = -(2**31)
MAX_NOTE_ID = 2**31 - 1


class SqlNoteStore(NoteStore):
    """
    Relational note store.

    Args:
        settings: Supplies the URL, pool sizing and startup retry policy.
        engine:   Optional pre-built engine (tests); otherwise one is created
                  from `settings` and disposed by close().
    """

    backend_name = "database"

    def __init__(self, settings: Settings, engine: Optional[AsyncEngine] = None) -> None:
        self._settings = settings
        self._engine = engine or create_engine(settings)
        self._session_factory = create_session_factory(self._engine)

    # ── Lifecycle ─────────────────────────────────────────────────────────

    async def initialize(self) -> None:
        await retry_initialization(
            self._create_schema,
            max_attempts=self._settings.db_init_max_attempts,
            delay=self._settings.db_init_retry_delay,
            retry_on=BACKING_ERRORS,
            description="Database initialization",
        )

    async def _create_schema(self) -> None:
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except BACKING_ERRORS as e:
            logger.warning("Database ping failed: %s", e)
            return False

    async def close(self) -> None:
        await self._engine.dispose()

    # ── CRUD ──────────────────────────────────────────────────────────────

    async def list(self) -> List[NoteResponse]:
        async with self._transaction("list notes") as session:
            result = await session.execute(select(Note).order_by(Note.id.asc()))
            return [NoteResponse.model_validate(row) for row in result.scalars().all()]

    async def get(self, note_id: int) -> NoteResponse:
        async with self._transaction("get note", note_id) as session:
            note = await self._lookup(session, note_id)
            return NoteResponse.model_validate(note)

    async def create(self, title: Optional[str], content: Optional[str] = None) -> NoteResponse:
        title = self._require_title(title)
        async with self._transaction("create note") as session:
            note = Note(title=title, content=content or "")
            session.add(note)
            await session.flush()  # assigns the id
            created = NoteResponse.model_validate(note)
        logger.info("Created note %d", created.id)
        return created

    async def update(
        self,
        note_id: int,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> NoteResponse:
        self._check_new_title(title)
        async with self._transaction("update note", note_id) as session:
            note = await self._lookup(session, note_id)
            if title is not None:
                note.title = title
            if content is not None:
                note.content = content
            await session.flush()
            updated = NoteResponse.model_validate(note)
        logger.info("Updated note %d", note_id)
        return updated

    async def delete(self, note_id: int) -> None:
        async with self._transaction("delete note", note_id) as session:
            note = await self._lookup(session, note_id)
            await session.delete(note)
        logger.info("Deleted note %d", note_id)

    # ── Helpers ───────────────────────────────────────────────────────────

    @asynccontextmanager
    async def _transaction(
        self, operation: str, note_id: Optional[int] = None
    ) -> AsyncIterator[AsyncSession]:
        """
        Session + transaction for one store operation.

        Commits when the block exits cleanly, rolls back otherwise, and
        converts backing failures into DatabaseError.
        """
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    yield session
        except BACKING_ERRORS as e:
            logger.error(
                "Database error during %s (note_id=%s): %s",
                operation,
                note_id,
                e,
                exc_info=True,
            )
            raise DatabaseError(
                context={
                    "operation": operation,
                    "note_id": note_id,
                    "error_type": type(e).__name__,
                },
            ) from e

    @staticmethod
    async def _lookup(session: AsyncSession, note_id: int) -> Note:
        if not MIN_NOTE_ID <= note_id <= MAX_NOTE_ID:
            raise NotFoundError(resource="Note", resource_id=note_id)
        note = await session.get(Note, note_id)
        if note is None:
            raise NotFoundError(resource="Note", resource_id=note_id)
        return note
