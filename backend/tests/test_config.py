"""
QuickNotes Backend — Configuration Tests
===========================================

What:  Settings defaults, validation and database URL assembly.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.engine import make_url

from quicknotes.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for var in ("STORE_BACKEND", "LOG_LEVEL", "BACKEND_PORT", "DATABASE_URL"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)

        assert settings.store_backend == "memory"
        assert settings.backend_port == 4000
        assert settings.log_level == "INFO"
        assert settings.db_host == "localhost"
        assert settings.db_port == 5432

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("STORE_BACKEND", "database")
        monkeypatch.setenv("BACKEND_PORT", "8080")
        monkeypatch.setenv("DB_HOST", "postgres")

        settings = Settings(_env_file=None)

        assert settings.store_backend == "database"
        assert settings.backend_port == 8080
        assert settings.db_host == "postgres"

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError, match="Invalid log_level"):
            Settings(log_level="chatty")

    def test_invalid_backend_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(store_backend="redis")

    def test_url_assembled_from_parts(self):
        settings = Settings(
            database_url=None,
            db_host="db",
            db_port=5433,
            db_user="notes",
            db_password="p@ss",
            db_name="notesdb",
        )

        url = make_url(settings.sqlalchemy_url)

        assert url.drivername == "postgresql+asyncpg"
        assert url.host == "db"
        assert url.port == 5433
        assert url.username == "notes"
        assert url.password == "p@ss"
        assert url.database == "notesdb"
        assert settings.is_sqlite is False

    def test_database_url_overrides_parts(self):
        settings = Settings(database_url="sqlite+aiosqlite:///./notes.db", db_host="ignored")

        assert settings.sqlalchemy_url == "sqlite+aiosqlite:///./notes.db"
        assert settings.is_sqlite is True

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
