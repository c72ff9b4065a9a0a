"""Unit tests for Settings validation."""

import pytest
from pydantic import ValidationError

from src.core.config import Settings
from src.core.enums import Environment

BASE = {
    "database_url": "sqlite+aiosqlite:///:memory:",
    "secret_key": "a" * 32,
}


@pytest.mark.unit
class TestSettings:
    def test_defaults(self):
        settings = Settings(**BASE)

        assert settings.app_name == "SeventySix"
        assert settings.api_v1_prefix == "/api/v1"
        assert settings.access_token_expire_minutes == 15
        assert settings.refresh_token_expire_days == 14
        assert settings.log_retention_days == 30

    def test_environment_flags(self):
        settings = Settings(**BASE, environment=Environment.PRODUCTION)

        assert settings.is_production
        assert not settings.is_development

    def test_environment_from_env(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "development")

        assert Settings(**BASE).is_development

    def test_short_secret_key_rejected(self):
        with pytest.raises(ValidationError):
            Settings(database_url=BASE["database_url"], secret_key="short")

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_bcrypt_rounds_range(self, rounds):
        with pytest.raises(ValidationError):
            Settings(**BASE, bcrypt_rounds=rounds)

    def test_retention_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(**BASE, log_retention_days=0)

    def test_api_base_url_trailing_slash_removed(self):
        assert (
            Settings(**BASE, api_base_url="https://api.example.com/").api_base_url
            == "https://api.example.com"
        )
