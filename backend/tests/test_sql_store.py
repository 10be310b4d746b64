"""
QuickNotes Backend — SQL Store Tests
=======================================

What:  Behaviour specific to SqlNoteStore on top of the shared contract.
How:   Real SQLite databases (aiosqlite) in pytest's tmp_path; an
       unreachable database is simulated with a path whose directory does
       not exist.

What we test:
    ✅ initialize() creates the notes table and is idempotent
    ✅ notes survive a new store instance on the same database
    ✅ initialize() gives up with InitializationError after bounded retries
    ✅ driver failures during CRUD surface as DatabaseError
    ✅ ping() reports reachability
"""

import pytest
from sqlalchemy import inspect

from quicknotes.exceptions import DatabaseError, InitializationError
from quicknotes.services import SqlNoteStore


@pytest.fixture
def unreachable_settings(sqlite_settings_factory):
    """SQLite file inside a directory that does not exist; every connect fails."""
    return sqlite_settings_factory("missing/dir/notes.db", db_init_max_attempts=3)


class TestSqlStoreInitialize:
    """Tests for table creation at startup."""

    @pytest.mark.asyncio
    async def test_initialize_creates_notes_table(self, sqlite_settings):
        store = SqlNoteStore(sqlite_settings)
        try:
            await store.initialize()

            async with store._engine.connect() as conn:
                columns = await conn.run_sync(
                    lambda sync_conn: {c["name"] for c in inspect(sync_conn).get_columns("notes")}
                )
            assert columns == {"id", "title", "content"}
        finally:
            await store.close()

    @pytest.mark.asyncio
    async def test_initialize_is_idempotent(self, sqlite_settings):
        store = SqlNoteStore(sqlite_settings)
        try:
            await store.initialize()
            await store.create("kept")
            await store.initialize()

            assert [n.title for n in await store.list()] == ["kept"]
        finally:
            await store.close()

    @pytest.mark.asyncio
    async def test_notes_persist_across_store_instances(self, sqlite_settings):
        first = SqlNoteStore(sqlite_settings)
        await first.initialize()
        created = await first.create("durable", "yes")
        await first.close()

        second = SqlNoteStore(sqlite_settings)
        try:
            await second.initialize()
            assert await second.get(created.id) == created
            assert (await second.create("next")).id == created.id + 1
        finally:
            await second.close()

    @pytest.mark.asyncio
    async def test_initialize_gives_up_after_max_attempts(self, unreachable_settings):
        store = SqlNoteStore(unreachable_settings)
        try:
            with pytest.raises(InitializationError) as exc_info:
                await store.initialize()

            assert exc_info.value.attempts == 3
            assert "3 attempts" in exc_info.value.message
        finally:
            await store.close()


class TestSqlStoreFailures:
    """Backing failures after startup become DatabaseError."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "operation",
        [
            lambda s: s.list(),
            lambda s: s.get(1),
            lambda s: s.create("title"),
            lambda s: s.update(1, content="x"),
            lambda s: s.delete(1),
        ],
        ids=["list", "get", "create", "update", "delete"],
    )
    async def test_operations_wrap_driver_errors(self, unreachable_settings, operation):
        store = SqlNoteStore(unreachable_settings)
        try:
            with pytest.raises(DatabaseError) as exc_info:
                await operation(store)

            assert "error_type" in exc_info.value.context
        finally:
            await store.close()

    @pytest.mark.asyncio
    async def test_missing_table_is_database_error(self, sqlite_settings):
        """A store used without initialize() hits 'no such table'."""
        store = SqlNoteStore(sqlite_settings)
        try:
            with pytest.raises(DatabaseError):
                await store.list()
        finally:
            await store.close()


class TestSqlStorePing:

    @pytest.mark.asyncio
    async def test_ping_reachable(self, sqlite_settings):
        store = SqlNoteStore(sqlite_settings)
        try:
            assert await store.ping() is True
        finally:
            await store.close()

    @pytest.mark.asyncio
    async def test_ping_unreachable(self, unreachable_settings):
        store = SqlNoteStore(unreachable_settings)
        try:
            assert await store.ping() is False
        finally:
            await store.close()
