"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from pos_config import Settings, clear_settings_cache, get_settings


class TestSettings:
    def test_missing_secret_key_fails(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET_KEY", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_non_integer_expiry_fails(self, monkeypatch):
        monkeypatch.setenv("JWT_EXPIRES_HOURS", "eight")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize("hours", ["0", "-1"])
    def test_non_positive_expiry_fails(self, monkeypatch, hours):
        monkeypatch.setenv("JWT_EXPIRES_HOURS", hours)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize("secret", ["", "   "])
    def test_blank_secret_key_fails(self, monkeypatch, secret):
        monkeypatch.setenv("JWT_SECRET_KEY", secret)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET_KEY", "s3cret")
        monkeypatch.delenv("JWT_EXPIRES_HOURS", raising=False)
        monkeypatch.delenv("STORAGE_BACKEND", raising=False)

        settings = Settings(_env_file=None)

        assert settings.jwt_secret_key.get_secret_value() == "s3cret"
        assert settings.jwt_expires_hours == 8
        assert settings.storage_backend == "filesystem"

    def test_database_url_from_components(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL_OVERRIDE", raising=False)

        settings = Settings(
            _env_file=None,
            postgres_host="db",
            postgres_port=5433,
            postgres_user="pos",
            postgres_password="pw",
            postgres_db="shop",
        )

        assert settings.database_url == "postgresql+asyncpg://pos:pw@db:5433/shop"

    def test_database_url_override_wins(self):
        settings = Settings(
            _env_file=None,
            database_url_override="sqlite+aiosqlite:///tmp/pos.db",
        )

        assert settings.database_url == "sqlite+aiosqlite:///tmp/pos.db"

    def test_cors_origins_parsed(self):
        settings = Settings(
            _env_file=None,
            api_cors_origins="http://a.example, http://b.example,",
        )

        assert settings.cors_origins == ["http://a.example", "http://b.example"]

    def test_secret_not_in_repr(self):
        settings = Settings(_env_file=None, jwt_secret_key="very-secret-value")

        assert "very-secret-value" not in repr(settings)


class TestGetSettings:
    def test_cached_until_cleared(self):
        clear_settings_cache()

        first = get_settings()

        assert get_settings() is first
        clear_settings_cache()
        assert get_settings() is not first
