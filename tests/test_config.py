"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from bfhl.config import Settings, get_settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.PORT == 3000
    assert settings.OPENAI_MODEL == "gpt-4o-mini"
    assert settings.AI_MAX_TOKENS == 10
    assert settings.cors_origins == ["*"]
    assert settings.MAX_PRIME_VALUE == 10**12


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("OFFICIAL_EMAIL", "someone@example.edu")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example.com, https://b.example.com")

    settings = Settings(_env_file=None)

    assert settings.OFFICIAL_EMAIL == "someone@example.edu"
    assert settings.PORT == 8080
    assert settings.cors_origins == ["https://a.example.com", "https://b.example.com"]


def test_settings_are_immutable():
    settings = Settings(_env_file=None)

    with pytest.raises(ValidationError):
        settings.OFFICIAL_EMAIL = "changed@example.edu"


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
