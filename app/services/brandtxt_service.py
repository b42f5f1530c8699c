"""
app/services/brandtxt_service.py

Purpose: BrandTxt SMS sending (status update messages)

- Posts JSON to the BrandTxt SendSMS endpoint
- Treats a non-zero ErrorCode in the body as a failure
"""

import httpx
from typing import Dict, Any, Optional
from app.core.config import settings
from app.core.exceptions import ConfigurationError, GatewayError
from app.core.logging import get_logger

logger = get_logger(__name__)


class BrandTxtService:
    """Service for sending SMS messages via BrandTxt"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        client_id: Optional[str] = None,
        sender_id: Optional[str] = None,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.BRANDTXT_API_KEY
        self.client_id = client_id if client_id is not None else settings.BRANDTXT_CLIENT_ID
        self.sender_id = sender_id if sender_id is not None else settings.BRANDTXT_SENDER_ID
        self.url = url or settings.BRANDTXT_URL
        self.timeout = timeout or settings.BRANDTXT_TIMEOUT
        self.transport = transport

    async def send_sms(self, mobile_number: str, message: str) -> Dict[str, Any]:
        """
        Sends an SMS via BrandTxt

        Args:
            mobile_number: Recipient in 63XXXXXXXXXX form (no "+")
            message: Message text

        Returns:
            The decoded BrandTxt response body

        Raises:
            ConfigurationError: credentials are missing
            GatewayError: non-2xx response, non-zero ErrorCode or transport failure
        """
        if not self.is_configured():
            logger.error("Missing BrandTxt configuration")
            raise ConfigurationError()

        payload = {
            "SenderId": self.sender_id,
            "Is_Unicode": False,
            "Is_Flash": False,
            "SchedTime": "",
            "GroupId": "",
            "Message": message,
            "MobileNumbers": mobile_number,
            "ApiKey": self.api_key,
            "ClientId": self.client_id
        }

        logger.info(f"📤 Sending BrandTxt SMS to {mobile_number}")

        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                response = await client.post(self.url, json=payload)
        except httpx.TimeoutException as e:
            logger.error("BrandTxt API timeout")
            raise GatewayError("BrandTxt API timeout") from e
        except httpx.HTTPError as e:
            logger.error(f"BrandTxt API request failed: {e}")
            raise GatewayError(f"BrandTxt API request failed: {e}") from e

        if not response.is_success:
            logger.error(f"❌ BrandTxt API error: {response.status_code} - {response.text}")
            raise GatewayError(
                f"BrandTxt API error: {response.status_code}",
                gateway_status=response.status_code
            )

        try:
            data = response.json()
        except ValueError as e:
            raise GatewayError("BrandTxt API returned an invalid response") from e

        error_code = data.get("ErrorCode") if isinstance(data, dict) else None
        if error_code != 0:
            description = data.get("ErrorDescription") if isinstance(data, dict) else None
            logger.error(f"❌ BrandTxt rejected message: {description} (Code: {error_code})")
            raise GatewayError(
                f"API Error: {description} (Code: {error_code})",
                gateway_status=response.status_code
            )

        logger.info("✅ BrandTxt SMS accepted")
        return data

    def is_configured(self) -> bool:
        """Check if BrandTxt is properly configured"""
        return bool(self.api_key and self.client_id and self.sender_id)


# Singleton instance
brandtxt_service = BrandTxtService()
