"""
Brewery Backend — Settings Tests
==================================

What:  Environment-driven configuration and its startup validation.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from brewery.config import Settings


class TestSettings:

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db:5432/brewery")
        monkeypatch.setenv("DB_POOL_SIZE", "5")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/brewery"
        assert settings.db_pool_size == 5
        assert settings.log_level == "DEBUG"
        assert settings.is_sqlite is False

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(log_level="CHATTY")

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.example, http://b.example,")
        assert settings.cors_origins_list == ["http://a.example", "http://b.example"]

    def test_async_driver_passes_validation(self):
        Settings(database_url="sqlite+aiosqlite:///brewery.db").validate_required_for_production()

    def test_sync_driver_fails_validation(self):
        settings = Settings(database_url="postgresql://u:p@db:5432/brewery")

        with pytest.raises(ValueError, match="async driver"):
            settings.validate_required_for_production()

    def test_empty_url_fails_validation(self):
        with pytest.raises(ValueError, match="DATABASE_URL is not set"):
            Settings(database_url="").validate_required_for_production()
