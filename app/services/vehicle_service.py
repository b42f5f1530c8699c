"""
app/services/vehicle_service.py

Purpose: Vehicle form and status change handling

- Sanitizes free-text form fields
- Runs format and crew validators in a fixed order (first error wins)
- Decides which SMS a status change sends and dispatches it

Persistence is not done here; callers save the sanitized fields
themselves once the result is valid.
"""

from typing import Callable, Dict, Any, Iterable, Optional, Tuple

from app.core.logging import get_logger, LogContext
from app.flow.states import (
    NotificationType,
    ServiceStatus,
    get_status_label,
    is_valid_transition,
    notification_for_transition,
    parse_status,
)
from app.schemas.response import SMSResponse
from app.schemas.vehicle import VehicleForm, StatusChange
from app.services.sms_service import SMSDispatcher
from utils.constants import STATUS_TRANSITION_INVALID
from utils.sms_utils import format_phone_number, validate_sms_phone_number
from utils.validation_utils import (
    ValidationResult,
    sanitize_input,
    validate_license_plate,
    validate_motorcycle_plate,
    validate_car_model,
    validate_motorcycle_model,
    validate_car_size,
    validate_motorcycle_size,
    validate_service_status,
    validate_phone_number,
    validate_cost,
    validate_crew_for_status,
    validate_crew_availability,
    validate_uuid,
)

logger = get_logger(__name__)


def _first_failure(checks: Iterable[Callable[[], ValidationResult]]) -> ValidationResult:
    for check in checks:
        result = check()
        if not result.is_valid:
            return result
    return ValidationResult.ok()


def sanitize_vehicle_form(form: VehicleForm) -> Dict[str, Any]:
    """
    Cleans the free-text fields of a vehicle form.

    Plate is uppercased after sanitizing. Non-text fields pass through.
    """
    return {
        "vehicle_type": form.vehicle_type,
        "id": form.id,
        "plate": sanitize_input(form.plate).upper(),
        "model": sanitize_input(form.model),
        "size": form.size,
        "status": form.status,
        "phone": sanitize_input(form.phone),
        "cost": form.cost,
        "crew": list(form.crew or []),
        "has_package": form.has_package,
    }


def validate_vehicle_form(form: VehicleForm) -> Tuple[ValidationResult, Dict[str, Any]]:
    """
    Sanitizes then validates a vehicle form.

    Order: plate, model, size, status, phone, cost, crew for status,
    crew availability, record id (only when given).

    Args:
        form: Raw form input

    Returns:
        (ValidationResult, sanitized fields)
    """
    data = sanitize_vehicle_form(form)
    is_motorcycle = form.vehicle_type == "motorcycle"

    validate_plate = validate_motorcycle_plate if is_motorcycle else validate_license_plate
    validate_model = validate_motorcycle_model if is_motorcycle else validate_car_model
    validate_size = validate_motorcycle_size if is_motorcycle else validate_car_size
    busy_crew = set(form.busy_crew or [])

    checks = [
        lambda: validate_plate(data["plate"]),
        lambda: validate_model(data["model"]),
        lambda: validate_size(data["size"]),
        lambda: validate_service_status(data["status"]),
        lambda: validate_phone_number(data["phone"]),
        lambda: validate_cost(data["cost"]),
        lambda: validate_crew_for_status(data["status"], data["crew"], data["has_package"]),
        lambda: validate_crew_availability(data["crew"], busy_crew),
    ]
    if form.id is not None:
        checks.append(lambda: validate_uuid(form.id))

    result = _first_failure(checks)
    if not result.is_valid:
        logger.info(f"Vehicle form rejected: {result.error}")

    return result, data


def validate_status_transition(previous_status: Optional[str], new_status: str) -> ValidationResult:
    """
    Checks that a vehicle may move from `previous_status` to `new_status`.
    A missing previous status means the vehicle is new and any status is accepted.
    """
    status_result = validate_service_status(new_status)
    if not status_result.is_valid:
        return status_result

    if previous_status is None:
        return ValidationResult.ok()

    previous = parse_status(previous_status)
    if previous is None:
        return validate_service_status(previous_status)

    if not is_valid_transition(previous, ServiceStatus(new_status)):
        return ValidationResult.fail(STATUS_TRANSITION_INVALID.format(
            previous=get_status_label(previous),
            new=get_status_label(new_status),
        ))

    return ValidationResult.ok()


async def process_status_change(
    change: StatusChange,
    dispatcher: SMSDispatcher,
) -> Tuple[ValidationResult, Optional[SMSResponse]]:
    """
    Validates a status change and sends the matching customer SMS.

    Nothing is sent when the change is invalid, when the status does
    not notify, or when the customer has no usable mobile number.

    Args:
        change: Status change request
        dispatcher: SMS dispatcher used for the notification

    Returns:
        (ValidationResult, SMSResponse or None when nothing was sent)
    """
    result = _first_failure([
        lambda: validate_status_transition(change.previous_status, change.status),
        lambda: validate_crew_for_status(change.status, change.crew, change.has_package),
    ])
    if not result.is_valid:
        return result, None

    notification = notification_for_transition(change.previous_status, change.status)
    if notification is None:
        return result, None

    with LogContext(plate_number=change.plate_number, status=change.status, vehicle_type=change.vehicle_type):
        if not change.phone_number or not validate_sms_phone_number(change.phone_number):
            logger.info("Skipping SMS: no valid mobile number on record")
            return result, None

        phone = format_phone_number(change.phone_number)

        if notification == NotificationType.COMPLETION:
            send = (
                dispatcher.send_motorcycle_completion_sms
                if change.vehicle_type == "motorcycle"
                else dispatcher.send_car_completion_sms
            )
            response = await send(
                phone,
                change.customer_name or "Customer",
                change.plate_number,
                services=change.services,
                packages=change.packages,
                total_amount=change.total_amount,
            )
        else:
            response = await dispatcher.send_status_update_sms(
                status=change.status,
                plate_number=change.plate_number,
                service_type=change.service_type,
                phone_number=phone,
                queue_number=change.queue_number,
            )

        if not response.success:
            logger.warning(f"Customer SMS failed: {response.error}")

    return result, response
