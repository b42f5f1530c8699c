"""
app/services/sms_service.py

Purpose: SMS notification dispatch (client side)

- Packages notification data and posts it to the relay
- Interprets the relay's outcome
- Never raises: every failure becomes SMSResponse(success=False)
- No retries; callers wanting resilience wrap these calls themselves
"""

import httpx
from typing import List, Optional, Union

from app.core.config import settings
from app.core.logging import get_logger
from app.schemas.notification import SMSNotificationData, StatusUpdateData
from app.schemas.response import SMSResponse
from utils.constants import SMS_SENT_MESSAGE, SMS_FAILED_MESSAGE
from utils.time_utils import local_completion_time

logger = get_logger(__name__)


class SMSDispatcher:
    """Sends notification requests to the SMS relay"""

    def __init__(
        self,
        relay_url: Optional[str] = None,
        status_relay_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.relay_url = relay_url or settings.SMS_RELAY_URL
        self.status_relay_url = status_relay_url or settings.SMS_STATUS_RELAY_URL
        self.timeout = timeout or settings.SMS_RELAY_TIMEOUT
        self.transport = transport

    async def _post(self, url: str, payload: dict) -> SMSResponse:
        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                response = await client.post(url, json=payload)

            try:
                body = response.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict):
                body = {}

            if not response.is_success:
                error = body.get("error") or f"Relay returned status {response.status_code}"
                logger.error(f"SMS notification error: {error}")
                return SMSResponse(success=False, error=error)

            return SMSResponse(success=True, message=SMS_SENT_MESSAGE, sid=body.get("sid"))

        except httpx.TimeoutException:
            logger.error("SMS notification error: relay timeout")
            return SMSResponse(success=False, error="SMS relay timeout")
        except Exception as e:
            logger.error(f"SMS notification error: {e}", exc_info=True)
            return SMSResponse(success=False, error=str(e) or SMS_FAILED_MESSAGE)

    async def send_sms_notification(self, data: SMSNotificationData) -> SMSResponse:
        """
        Sends a completion notification through the relay.

        Args:
            data: Notification payload

        Returns:
            SMSResponse; `sid` is the provider message id on success
        """
        logger.info(f"Dispatching completion SMS for {data.plate_number}")
        return await self._post(self.relay_url, data.to_payload())

    async def send_car_completion_sms(
        self,
        customer_phone: str,
        customer_name: str,
        plate_number: str,
        services: Optional[List[str]] = None,
        packages: Optional[List[str]] = None,
        total_amount: float = 0,
    ) -> SMSResponse:
        """Completion SMS for a car, stamped with the current local time."""
        return await self.send_sms_notification(SMSNotificationData(
            phone_number=customer_phone,
            customer_name=customer_name,
            plate_number=plate_number,
            services=services or [],
            packages=packages or [],
            total_amount=total_amount,
            completion_time=local_completion_time(),
        ))

    async def send_motorcycle_completion_sms(
        self,
        customer_phone: str,
        customer_name: str,
        plate_number: str,
        services: Optional[List[str]] = None,
        packages: Optional[List[str]] = None,
        total_amount: float = 0,
    ) -> SMSResponse:
        """Completion SMS for a motorcycle, stamped with the current local time."""
        return await self.send_sms_notification(SMSNotificationData(
            phone_number=customer_phone,
            customer_name=customer_name,
            plate_number=plate_number,
            services=services or [],
            packages=packages or [],
            total_amount=total_amount,
            completion_time=local_completion_time(),
        ))

    async def send_status_update_sms(
        self,
        status: str,
        plate_number: str,
        service_type: Optional[str],
        phone_number: str,
        queue_number: Union[int, str, None] = None,
    ) -> SMSResponse:
        """Queue status update through the legacy relay path."""
        logger.info(f"Dispatching {status} SMS for {plate_number}")
        data = StatusUpdateData(
            status=status,
            plate_number=plate_number,
            service_type=service_type,
            phone_number=phone_number,
            queue_number=queue_number,
        )
        response = await self._post(self.status_relay_url, data.to_payload())
        if response.success:
            # The legacy relay reports no provider id
            response = SMSResponse(success=True, message=SMS_SENT_MESSAGE)
        return response


# Singleton instance
sms_dispatcher = SMSDispatcher()


def get_sms_dispatcher() -> SMSDispatcher:
    """FastAPI dependency returning the process-wide dispatcher."""
    return sms_dispatcher


async def send_sms_notification(data: SMSNotificationData) -> SMSResponse:
    return await sms_dispatcher.send_sms_notification(data)


async def send_car_completion_sms(*args, **kwargs) -> SMSResponse:
    return await sms_dispatcher.send_car_completion_sms(*args, **kwargs)


async def send_motorcycle_completion_sms(*args, **kwargs) -> SMSResponse:
    return await sms_dispatcher.send_motorcycle_completion_sms(*args, **kwargs)
