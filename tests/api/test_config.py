"""Tests for API configuration."""

import pytest

from api.config import APISettings


class TestAPISettings:
    """Tests for APISettings class."""

    def test_default_values(self):
        """Should have sensible defaults."""
        settings = APISettings()
        assert settings.host == "0.0.0.0"
        assert settings.port == 3001
        assert settings.debug is False
        assert settings.reload is False

    def test_env_override(self, monkeypatch):
        """Should load from LANCHAT_-prefixed environment variables."""
        monkeypatch.setenv("LANCHAT_PORT", "9000")
        monkeypatch.setenv("LANCHAT_DEBUG", "true")
        monkeypatch.setenv("LANCHAT_RELOAD", "true")
        settings = APISettings()
        assert settings.port == 9000
        assert settings.debug is True
        assert settings.reload is True

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("PORT", "9000")
        assert APISettings().port == 3001

    def test_cors_defaults(self):
        """The mobile client and web preview may call from any origin."""
        settings = APISettings()
        assert settings.cors_origins == ["*"]
        assert settings.cors_allow_credentials is False
        assert settings.cors_allow_methods == ["*"]
        assert settings.cors_allow_headers == ["*"]
