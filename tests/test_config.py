"""
Tests for settings loading and validation.
"""

import pytest

from fintrack.config import Settings, settings


class TestSettings:
    """Tests for Settings"""

    def test_test_environment_loaded(self):
        assert settings.SUPABASE_URL == "http://localhost:54321"
        assert settings.SUPABASE_ANON_KEY == "test-anon-key"
        assert not settings.is_production()

    def test_auth_redirect_url_joins_site_and_path(self, monkeypatch):
        monkeypatch.setattr(Settings, "SITE_URL", "https://app.example.com/")
        monkeypatch.setattr(Settings, "AUTH_REDIRECT_PATH", "/dashboard")

        assert Settings().auth_redirect_url == "https://app.example.com/dashboard"

    def test_validate_passes_when_configured(self):
        Settings.validate()

    def test_validate_names_missing_keys(self, monkeypatch):
        monkeypatch.setattr(Settings, "SUPABASE_ANON_KEY", "")

        with pytest.raises(ValueError, match="SUPABASE_ANON_KEY"):
            Settings.validate()
