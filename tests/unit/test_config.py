"""Tests for environment-driven settings."""

import pytest

from clarify.utils.config import Settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("SECURITY__API_KEY", "AI__API_KEY", "DATABASE__URL", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings(_env_file=None)

    assert settings.security.api_key == ""
    assert settings.ai.api_key == ""
    assert settings.database.url == "sqlite+aiosqlite:///./clarify.db"
    assert not settings.is_production()


def test_nested_env_vars(clean_env):
    clean_env.setenv("SECURITY__API_KEY", "secret")
    clean_env.setenv("AI__API_KEY", "ai-key")
    clean_env.setenv("DATABASE__URL", "postgresql+asyncpg://db/x")
    clean_env.setenv("ENVIRONMENT", "production")

    settings = Settings(_env_file=None)

    assert settings.security.api_key == "secret"
    assert settings.ai.api_key == "ai-key"
    assert settings.database.url == "postgresql+asyncpg://db/x"
    assert settings.is_production()


def test_cors_origins_from_comma_string():
    settings = Settings(_env_file=None, security={"cors_origins": "http://a, http://b,"})
    assert settings.security.cors_origins == ["http://a", "http://b"]
