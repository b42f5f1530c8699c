import pytest
from pydantic import ValidationError

from app.core.config import Settings, settings, validate_settings


def test_defaults():
    config = Settings(_env_file=None)
    assert config.RATE_LIMIT_MAX_ATTEMPTS == 5
    assert config.RATE_LIMIT_WINDOW_MS == 60000
    assert config.API_PREFIX == "/api"


def test_rate_limit_settings_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, RATE_LIMIT_MAX_ATTEMPTS=0)


def test_gateway_configured_flags():
    config = Settings(
        _env_file=None,
        TWILIO_ACCOUNT_SID="AC1",
        TWILIO_AUTH_TOKEN="token",
        TWILIO_PHONE_NUMBER="+15005550006",
    )
    assert config.twilio_configured
    assert not Settings(_env_file=None, TWILIO_ACCOUNT_SID=None).twilio_configured


def test_production_requires_twilio(monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    monkeypatch.setattr(settings, "TWILIO_ACCOUNT_SID", None)

    with pytest.raises(ValueError, match="required in production"):
        validate_settings()


def test_development_allows_missing_gateways(monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")
    monkeypatch.setattr(settings, "TWILIO_ACCOUNT_SID", None)

    assert validate_settings() is True


def test_empty_relay_url_is_rejected(monkeypatch):
    monkeypatch.setattr(settings, "SMS_RELAY_URL", "")

    with pytest.raises(ValueError, match="SMS_RELAY_URL"):
        validate_settings()
