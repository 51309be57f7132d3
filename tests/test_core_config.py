"""
Unit tests for app.core.config module.
"""
import pytest
from pydantic import ValidationError

from app.core.config import Settings


class TestSettings:
    """Test Settings loading."""

    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite://")
        for name in ("APP_ENV", "JWT_SECRET", "SENDGRID_API_KEY"):
            monkeypatch.delenv(name, raising=False)

        s = Settings(_env_file=None)

        assert s.APP_ENV == "dev"
        assert s.JWT_ALGORITHM == "HS256"
        assert s.JWT_SECRET is None
        assert s.SENDGRID_API_KEY is None
        assert s.SENDGRID_API_URL == "https://api.sendgrid.com/v3/mail/send"
        assert s.SENDGRID_FROM_EMAIL == "support@naricare.app"
        assert s.DB_AUTO_CREATE is False

    def test_env_overrides_case_insensitive(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.setenv("database_url", "postgresql+psycopg2://u:p@db/naricare")
        monkeypatch.setenv("sendgrid_timeout_seconds", "2.5")

        s = Settings(_env_file=None)

        assert s.DATABASE_URL == "postgresql+psycopg2://u:p@db/naricare"
        assert s.SENDGRID_TIMEOUT_SECONDS == 2.5

    def test_database_url_required(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
