"""
QuickNotes Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── sqlite_settings: Settings pointing at a throwaway SQLite file
    ├── store: parametrized NoteStore — runs once per backend (memory, sqlite)
    ├── app: FastAPI app owning `store`
    └── test_client: HTTPX AsyncClient talking to `app` in-process
"""

import os

# Override settings for testing BEFORE any quicknotes imports
os.environ["STORE_BACKEND"] = "memory"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("DATABASE_URL", None)

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from quicknotes.config import Settings
from quicknotes.main import create_app
from quicknotes.services import InMemoryNoteStore, SqlNoteStore


def make_sqlite_settings(db_path, **overrides) -> Settings:
    """Settings for a SQLite database file at `db_path`."""
    values = {
        "store_backend": "database",
        "database_url": f"sqlite+aiosqlite:///{db_path}",
        "db_init_max_attempts": 2,
        "db_init_retry_delay": 0,
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def sqlite_settings_factory(tmp_path):
    """Builds SQLite Settings for a path under tmp_path, with overrides."""
    def factory(relative_path="notes.db", **overrides):
        return make_sqlite_settings(tmp_path / relative_path, **overrides)
    return factory


@pytest.fixture
def sqlite_settings(sqlite_settings_factory):
    """Settings for a fresh SQLite file inside pytest's tmp_path."""
    return sqlite_settings_factory()


@pytest_asyncio.fixture(params=["memory", "sqlite"])
async def store(request, tmp_path):
    """
    Provides an initialized, empty NoteStore.

    Every test using it runs twice: against InMemoryNoteStore and against
    SqlNoteStore on SQLite, so both backends honour the same contract.
    """
    if request.param == "memory":
        yield InMemoryNoteStore()
        return

    sql_store = SqlNoteStore(make_sqlite_settings(tmp_path / "notes.db"))
    await sql_store.initialize()
    try:
        yield sql_store
    finally:
        await sql_store.close()


@pytest.fixture
def app(store):
    """FastAPI app built around the parametrized store."""
    return create_app(settings=Settings(log_level="WARNING"), store=store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the app via ASGITransport.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
