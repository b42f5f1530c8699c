"""
app/services/notification_service.py

Purpose: Server side of the SMS relay

- Re-validates required fields
- Fails closed when gateway credentials are missing
- Rate limits sends per recipient
- Composes the message body and hands it to the gateway

Errors are raised as WashTrackError subclasses; the API layer's
exception handlers turn them into normalized JSON responses.
"""

from typing import Optional

from app.core.config import settings
from app.core.exceptions import ValidationError, ConfigurationError, RateLimitExceededError
from app.core.logging import get_logger, LogContext
from app.schemas.notification import SMSNotificationData, StatusUpdateData
from app.schemas.response import SMSResponse
from app.services.twilio_service import TwilioService, twilio_service
from app.services.brandtxt_service import BrandTxtService, brandtxt_service
from utils.constants import MISSING_COMPLETION_FIELDS, MISSING_STATUS_FIELDS, SMS_SENT_MESSAGE
from utils.rate_limit_utils import RateLimiter
from utils.sms_utils import (
    build_completion_message,
    build_status_message,
    convert_phone_number,
    format_phone_number,
    strip_leading_plus,
)
from utils.time_utils import local_completion_time

logger = get_logger(__name__)


class NotificationService:
    """Relays notification requests to the SMS gateways"""

    def __init__(
        self,
        twilio: Optional[TwilioService] = None,
        brandtxt: Optional[BrandTxtService] = None,
        rate_limiter: Optional[RateLimiter] = None,
        signature: Optional[str] = None,
        shop_name: Optional[str] = None,
    ):
        self.twilio = twilio or twilio_service
        self.brandtxt = brandtxt or brandtxt_service
        # An empty limiter is falsy (it has __len__), so test for None
        if rate_limiter is None:
            rate_limiter = RateLimiter(
                max_attempts=settings.RATE_LIMIT_MAX_ATTEMPTS,
                window_ms=settings.RATE_LIMIT_WINDOW_MS,
            )
        self.rate_limiter = rate_limiter
        self.signature = signature or settings.SMS_SIGNATURE
        self.shop_name = shop_name or settings.SHOP_NAME

    def _check_rate_limit(self, phone: str) -> None:
        key = f"sms:{format_phone_number(phone)}"
        if not self.rate_limiter.is_allowed(key):
            logger.warning(f"SMS rate limit exceeded for {key}")
            raise RateLimitExceededError()

    async def send_completion(self, data: SMSNotificationData) -> SMSResponse:
        """
        Sends the "vehicle ready" SMS through Twilio.

        Args:
            data: Completion notification payload

        Returns:
            SMSResponse with the Twilio message SID

        Raises:
            ValidationError: phoneNumber, customerName or plateNumber missing
            ConfigurationError: Twilio credentials missing
            RateLimitExceededError: too many sends to this number
            GatewayError: Twilio rejected the request or was unreachable
        """
        if data.missing_required_fields():
            raise ValidationError(MISSING_COMPLETION_FIELDS, details=data.missing_required_fields())

        if not self.twilio.is_configured():
            logger.error("Missing Twilio configuration")
            raise ConfigurationError()

        self._check_rate_limit(data.phone_number)

        with LogContext(plate_number=data.plate_number, status="completed"):
            formatted_phone = strip_leading_plus(data.phone_number)

            message = build_completion_message(
                customer_name=data.customer_name,
                plate_number=data.plate_number,
                completion_time=data.completion_time or local_completion_time(),
                services=data.services,
                packages=data.packages,
                total_amount=data.total_amount,
                signature=self.signature,
            )

            result = await self.twilio.send_sms(f"+{formatted_phone}", message)
            logger.info(f"SMS sent successfully: {result.get('sid')}")

        return SMSResponse(success=True, message=SMS_SENT_MESSAGE, sid=result.get("sid"))

    async def send_status_update(self, data: StatusUpdateData) -> SMSResponse:
        """
        Sends a queue status update through BrandTxt.
        """
        if data.missing_required_fields():
            logger.error(f"Missing required field(s): {data.missing_required_fields()}")
            raise ValidationError(MISSING_STATUS_FIELDS, details=data.missing_required_fields())

        if not self.brandtxt.is_configured():
            logger.error("Missing BrandTxt configuration")
            raise ConfigurationError()

        self._check_rate_limit(data.phone_number)

        with LogContext(plate_number=data.plate_number, status=data.status):
            message = build_status_message(
                status=data.status,
                plate_number=data.plate_number,
                service_type=data.service_type,
                queue_number=data.queue_number,
                shop_name=self.shop_name,
            )

            await self.brandtxt.send_sms(convert_phone_number(data.phone_number), message)
            logger.info("Status SMS sent successfully")

        return SMSResponse(success=True)


notification_service = NotificationService()


def get_notification_service() -> NotificationService:
    """FastAPI dependency returning the process-wide relay service."""
    return notification_service
