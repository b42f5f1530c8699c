"""
app/api/notifications.py

Purpose: SMS relay endpoints

- POST /twilio-sms: completion notification ("vehicle ready")
- POST /send-sms: queue status update (legacy payload)
- Other methods get 405 from the router
- Failures are normalized by the handlers in app/core/errors.py
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.core.logging import get_logger
from app.schemas.notification import SMSNotificationData, StatusUpdateData
from app.services.notification_service import NotificationService, get_notification_service

logger = get_logger(__name__)
router = APIRouter()


@router.post("/twilio-sms")
async def send_completion_sms(
    data: SMSNotificationData,
    service: NotificationService = Depends(get_notification_service),
):
    """
    Sends the completion SMS for a vehicle.

    Returns 200 {success, message, sid}; 400 when phoneNumber,
    customerName or plateNumber is missing; 429 when the number
    was messaged too often; 500 when the gateway is not configured
    or fails.
    """
    logger.info(f"📱 Completion SMS requested for {data.plate_number}")
    response = await service.send_completion(data)
    return JSONResponse(status_code=200, content=response.model_dump(exclude_none=True))


@router.post("/send-sms")
async def send_status_sms(
    data: StatusUpdateData,
    service: NotificationService = Depends(get_notification_service),
):
    """
    Sends a queue status update SMS.
    """
    logger.info(f"📱 Status SMS requested: {data.status} for {data.plate_number}")
    response = await service.send_status_update(data)
    return JSONResponse(status_code=200, content=response.model_dump(exclude_none=True))
