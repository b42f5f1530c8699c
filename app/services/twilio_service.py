"""
app/services/twilio_service.py

Purpose: Twilio SMS sending

- Sends SMS messages via the Twilio Messages API
- Basic auth with account SID and auth token
- One request per message, no retries
"""

import httpx
from typing import Dict, Any, Optional
from app.core.config import settings
from app.core.exceptions import ConfigurationError, GatewayError
from app.core.logging import get_logger

logger = get_logger(__name__)


class TwilioService:
    """Service for sending SMS messages via Twilio"""

    def __init__(
        self,
        account_sid: Optional[str] = None,
        auth_token: Optional[str] = None,
        from_number: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.account_sid = account_sid if account_sid is not None else settings.TWILIO_ACCOUNT_SID
        self.auth_token = auth_token if auth_token is not None else settings.TWILIO_AUTH_TOKEN
        self.from_number = from_number if from_number is not None else settings.TWILIO_PHONE_NUMBER
        self.api_base_url = (base_url or settings.TWILIO_API_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.TWILIO_TIMEOUT
        self.transport = transport

    @property
    def messages_url(self) -> str:
        return f"{self.api_base_url}/Accounts/{self.account_sid}/Messages.json"

    async def send_sms(self, to_phone: str, body: str) -> Dict[str, Any]:
        """
        Sends an SMS via Twilio

        Args:
            to_phone: Recipient phone in E.164 format (+639171234567)
            body: Message text

        Returns:
            {
                "sid": "SMxxx...",
                "status": "queued"
            }

        Raises:
            ConfigurationError: credentials are missing
            GatewayError: non-2xx response, timeout or transport failure
        """
        if not self.is_configured():
            logger.error("Missing Twilio configuration")
            raise ConfigurationError()

        data = {
            "To": to_phone,
            "From": self.from_number,
            "Body": body
        }

        logger.info(f"📤 Sending Twilio SMS to {to_phone}")

        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                response = await client.post(
                    self.messages_url,
                    data=data,
                    auth=(self.account_sid, self.auth_token),
                )
        except httpx.TimeoutException as e:
            logger.error("Twilio API timeout")
            raise GatewayError("Twilio API timeout") from e
        except httpx.HTTPError as e:
            logger.error(f"Twilio API request failed: {e}")
            raise GatewayError(f"Twilio API request failed: {e}") from e

        if not response.is_success:
            logger.error(f"❌ Twilio API error: {response.status_code} - {response.text}")
            raise GatewayError(
                f"Twilio API error: {response.status_code}",
                gateway_status=response.status_code
            )

        result = response.json()
        logger.info(f"✅ SMS sent: SID={result.get('sid')}")

        return {
            "sid": result.get("sid"),
            "status": result.get("status")
        }

    def is_configured(self) -> bool:
        """Check if Twilio is properly configured"""
        return bool(
            self.account_sid
            and self.auth_token
            and self.from_number
            and self.account_sid != "your_twilio_sid"
        )


# Singleton instance
twilio_service = TwilioService()
