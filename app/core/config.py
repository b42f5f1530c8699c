"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables
- Centralizes config values (gateway credentials, relay URLs, limits)
- Validates configuration on startup
- Environment-specific settings
"""

from pydantic import Field, validator
from pydantic_settings import BaseSettings
from typing import Optional, Literal


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Gateway credentials are optional here; senders fail closed when they are missing.
    """

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # Twilio (completion notifications)
    TWILIO_ACCOUNT_SID: Optional[str] = Field(
        default=None,
        description="Twilio account SID"
    )
    TWILIO_AUTH_TOKEN: Optional[str] = Field(
        default=None,
        description="Twilio auth token"
    )
    TWILIO_PHONE_NUMBER: Optional[str] = Field(
        default=None,
        description="Sender phone number registered with Twilio"
    )
    TWILIO_API_BASE_URL: str = Field(
        default="https://api.twilio.com/2010-04-01",
        description="Twilio REST API base URL"
    )
    TWILIO_TIMEOUT: float = Field(
        default=10.0,
        description="Twilio request timeout in seconds"
    )

    # BrandTxt (legacy status updates)
    BRANDTXT_API_KEY: Optional[str] = Field(
        default=None,
        description="BrandTxt API key"
    )
    BRANDTXT_CLIENT_ID: Optional[str] = Field(
        default=None,
        description="BrandTxt client id"
    )
    BRANDTXT_SENDER_ID: Optional[str] = Field(
        default=None,
        description="BrandTxt sender id shown to recipients"
    )
    BRANDTXT_URL: str = Field(
        default="https://app.brandtxt.io/api/v2/SendSMS",
        description="BrandTxt SendSMS endpoint"
    )
    BRANDTXT_TIMEOUT: float = Field(
        default=10.0,
        description="BrandTxt request timeout in seconds"
    )

    # Notification relay (where the dispatcher sends its requests)
    SMS_RELAY_URL: str = Field(
        default="http://localhost:8000/api/twilio-sms",
        description="Relay endpoint for completion notifications"
    )
    SMS_STATUS_RELAY_URL: str = Field(
        default="http://localhost:8000/api/send-sms",
        description="Relay endpoint for status update notifications"
    )
    SMS_RELAY_TIMEOUT: float = Field(
        default=15.0,
        description="Dispatcher to relay timeout in seconds"
    )

    # Rate Limiting
    RATE_LIMIT_MAX_ATTEMPTS: int = Field(
        default=5,
        description="Maximum SMS sends per recipient per window"
    )
    RATE_LIMIT_WINDOW_MS: int = Field(
        default=60000,
        description="Rate limit window length in milliseconds"
    )

    # Message content
    SMS_SIGNATURE: str = Field(
        default="BusyBee Car Wash",
        description="Signature line appended to completion messages"
    )
    SHOP_NAME: str = Field(
        default="Hakum Auto Care",
        description="Shop name used in status update messages"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    API_PREFIX: str = Field(
        default="/api",
        description="API route prefix"
    )
    CORS_ORIGINS: list = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    @validator("RATE_LIMIT_MAX_ATTEMPTS", "RATE_LIMIT_WINDOW_MS")
    def validate_positive(cls, v):
        """Rate limit parameters must be positive."""
        if v <= 0:
            raise ValueError("rate limit settings must be positive")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    @property
    def twilio_configured(self) -> bool:
        """True when every Twilio credential is present."""
        return bool(self.TWILIO_ACCOUNT_SID and self.TWILIO_AUTH_TOKEN and self.TWILIO_PHONE_NUMBER)

    @property
    def brandtxt_configured(self) -> bool:
        """True when every BrandTxt credential is present."""
        return bool(self.BRANDTXT_API_KEY and self.BRANDTXT_CLIENT_ID and self.BRANDTXT_SENDER_ID)

    class Config:
        env_file = ".env"
        case_sensitive = True
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()


def validate_settings():
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.

    Outside production, missing gateway credentials are not an error:
    the relay answers "SMS service not configured" for each request instead.
    """
    errors = []

    if not settings.SMS_RELAY_URL:
        errors.append("SMS_RELAY_URL is required")

    if not settings.SMS_STATUS_RELAY_URL:
        errors.append("SMS_STATUS_RELAY_URL is required")

    if settings.SMS_RELAY_TIMEOUT <= 0 or settings.TWILIO_TIMEOUT <= 0 or settings.BRANDTXT_TIMEOUT <= 0:
        errors.append("timeouts must be positive")

    # Production-specific validations
    if settings.is_production and not settings.twilio_configured:
        errors.append("TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN and TWILIO_PHONE_NUMBER are required in production")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
