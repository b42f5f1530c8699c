"""
app/api/vehicles.py

Purpose: Vehicle validation endpoints

- POST /vehicles/validate: sanitize and validate an add/edit form
- POST /vehicles/status: validate a status change and notify the customer

Both return 200 with isValid/error; an invalid form is a normal
answer, not an HTTP error.
"""

from fastapi import APIRouter, Depends

from app.core.logging import get_logger
from app.schemas.vehicle import (
    VehicleForm,
    StatusChange,
    VehicleValidationResponse,
    StatusChangeResponse,
)
from app.services.sms_service import SMSDispatcher, get_sms_dispatcher
from app.services.vehicle_service import validate_vehicle_form, process_status_change

logger = get_logger(__name__)
router = APIRouter(prefix="/vehicles")


@router.post("/validate")
async def validate_vehicle(form: VehicleForm):
    """Validates a vehicle form and returns the sanitized fields."""
    result, data = validate_vehicle_form(form)
    response = VehicleValidationResponse(is_valid=result.is_valid, error=result.error, data=data)
    return response.model_dump(by_alias=True, exclude_none=True)


@router.post("/status")
async def change_status(
    change: StatusChange,
    dispatcher: SMSDispatcher = Depends(get_sms_dispatcher),
):
    """
    Validates a status change; on success sends the matching SMS.
    """
    logger.info(f"Status change for {change.plate_number}: {change.previous_status} -> {change.status}")
    result, notification = await process_status_change(change, dispatcher)
    response = StatusChangeResponse(is_valid=result.is_valid, error=result.error, notification=notification)
    return response.model_dump(by_alias=True, exclude_none=True)
