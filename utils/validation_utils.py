"""
utils/validation_utils.py

Purpose: Input validation

- Plate, phone, model, cost, size, status and UUID format checks
- Crew rules that depend on status and package selection
- Input sanitization for free-text form fields

Every validator returns a ValidationResult and never raises.
The first failing check wins; errors are not aggregated.
"""

import math
import re
from typing import Any, Optional

from pydantic import BaseModel, Field

from utils.constants import (
    CAR_SIZES,
    MOTORCYCLE_SIZES,
    SERVICE_STATUSES,
    PLATE_MIN_LENGTH,
    PLATE_MAX_LENGTH,
    MODEL_MIN_LENGTH,
    MODEL_MAX_LENGTH,
    MAX_COST,
    PLATE_REQUIRED,
    PLATE_TOO_SHORT,
    PLATE_TOO_LONG,
    MOTORCYCLE_PLATE_REQUIRED,
    MOTORCYCLE_PLATE_TOO_SHORT,
    MOTORCYCLE_PLATE_TOO_LONG,
    PLATE_MISSING_DASH,
    PLATE_INVALID_PARTS,
    PHONE_INVALID,
    CAR_MODEL_REQUIRED,
    CAR_MODEL_TOO_SHORT,
    CAR_MODEL_TOO_LONG,
    CAR_MODEL_INVALID,
    MOTORCYCLE_MODEL_REQUIRED,
    MOTORCYCLE_MODEL_TOO_SHORT,
    MOTORCYCLE_MODEL_TOO_LONG,
    MOTORCYCLE_MODEL_INVALID,
    COST_NOT_A_NUMBER,
    COST_NEGATIVE,
    COST_TOO_HIGH,
    CAR_SIZE_INVALID,
    MOTORCYCLE_SIZE_INVALID,
    STATUS_INVALID,
    UUID_INVALID,
    CREW_STATUS_REQUIRED,
    CREW_NOT_A_LIST,
    CREW_REQUIRED_IN_PROGRESS,
    SELECTED_CREW_NOT_A_LIST,
    BUSY_CREW_NOT_A_SET,
    CREW_BUSY,
)


PHONE_PATTERN = re.compile(r"(09|\+639)[0-9]{9}")

UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)

# Patterns associated with script injection in free text
SUSPICIOUS_PATTERNS = (
    re.compile(r"<script", re.IGNORECASE),
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"on\w+\s*=", re.IGNORECASE | re.ASCII),
    re.compile(r"data:text/html", re.IGNORECASE),
)

# Leading numeric prefix, the way parseFloat reads it
_FLOAT_PREFIX = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INFINITY_PREFIX = re.compile(r"^([+-]?)Infinity")

_ANGLE_BRACKETS = re.compile(r"[<>]")
_JAVASCRIPT_SCHEME = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER = re.compile(r"on\w+\s*=", re.IGNORECASE | re.ASCII)


class ValidationResult(BaseModel):
    """
    Outcome of a single validation. `error` is set iff `is_valid` is False.
    """
    is_valid: bool = Field(..., alias="isValid")
    error: Optional[str] = None

    class Config:
        frozen = True
        populate_by_name = True

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, error: str) -> "ValidationResult":
        return cls(is_valid=False, error=error)

    def to_dict(self) -> dict:
        """Camel-cased dict without an `error` key for valid results."""
        return self.model_dump(by_alias=True, exclude_none=True)


# ============================================================
# PLATES
# ============================================================

def _validate_plate(plate: Any, required: str, too_short: str, too_long: str) -> ValidationResult:
    if not plate or not isinstance(plate, str):
        return ValidationResult.fail(required)

    sanitized = plate.strip().upper()

    if len(sanitized) < PLATE_MIN_LENGTH:
        return ValidationResult.fail(too_short)

    if len(sanitized) > PLATE_MAX_LENGTH:
        return ValidationResult.fail(too_long)

    if "-" not in sanitized:
        return ValidationResult.fail(PLATE_MISSING_DASH)

    parts = sanitized.split("-")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return ValidationResult.fail(PLATE_INVALID_PARTS)

    return ValidationResult.ok()


def validate_license_plate(plate: Any) -> ValidationResult:
    """
    Validates a car plate number or conduction sticker.

    Format: 3-8 characters with exactly one dash and text on both sides.
    Example: ABC-1234

    Args:
        plate: Raw plate input

    Returns:
        ValidationResult
    """
    return _validate_plate(plate, PLATE_REQUIRED, PLATE_TOO_SHORT, PLATE_TOO_LONG)


def validate_motorcycle_plate(plate: Any) -> ValidationResult:
    """
    Validates a motorcycle plate. Same rule as cars, motorcycle wording.
    Example: 123-ABC
    """
    return _validate_plate(
        plate, MOTORCYCLE_PLATE_REQUIRED, MOTORCYCLE_PLATE_TOO_SHORT, MOTORCYCLE_PLATE_TOO_LONG
    )


# ============================================================
# PHONE
# ============================================================

def validate_phone_number(phone: Any) -> ValidationResult:
    """
    Validates Philippine mobile number format.

    Phone is optional, so empty or blank input is valid.
    Accepts 09XXXXXXXXX or +639XXXXXXXXX after removing whitespace.

    Args:
        phone: Phone number string

    Returns:
        ValidationResult
    """
    if not phone or (isinstance(phone, str) and phone.strip() == ""):
        return ValidationResult.ok()

    if not isinstance(phone, str):
        return ValidationResult.fail(PHONE_INVALID)

    sanitized = re.sub(r"\s", "", phone)
    if not PHONE_PATTERN.fullmatch(sanitized):
        return ValidationResult.fail(PHONE_INVALID)

    return ValidationResult.ok()


# ============================================================
# MODEL
# ============================================================

def contains_suspicious_content(text: str) -> bool:
    """True if text matches any of the script-injection patterns."""
    return any(pattern.search(text) for pattern in SUSPICIOUS_PATTERNS)


def _validate_model(model: Any, required: str, too_short: str, too_long: str, invalid: str) -> ValidationResult:
    if not model or not isinstance(model, str):
        return ValidationResult.fail(required)

    sanitized = model.strip()

    if len(sanitized) < MODEL_MIN_LENGTH:
        return ValidationResult.fail(too_short)

    if len(sanitized) > MODEL_MAX_LENGTH:
        return ValidationResult.fail(too_long)

    if contains_suspicious_content(sanitized):
        return ValidationResult.fail(invalid)

    return ValidationResult.ok()


def validate_car_model(model: Any) -> ValidationResult:
    """
    Validates a car model name (2-100 characters, no script content).

    Args:
        model: Model name, e.g. "Toyota Vios"

    Returns:
        ValidationResult
    """
    return _validate_model(
        model, CAR_MODEL_REQUIRED, CAR_MODEL_TOO_SHORT, CAR_MODEL_TOO_LONG, CAR_MODEL_INVALID
    )


def validate_motorcycle_model(model: Any) -> ValidationResult:
    """Validates a motorcycle model name."""
    return _validate_model(
        model,
        MOTORCYCLE_MODEL_REQUIRED,
        MOTORCYCLE_MODEL_TOO_SHORT,
        MOTORCYCLE_MODEL_TOO_LONG,
        MOTORCYCLE_MODEL_INVALID,
    )


# ============================================================
# COST
# ============================================================

def parse_float(value: Any) -> float:
    """
    Parses a number from a string using its leading numeric prefix.

    "42.5" -> 42.5, "12abc" -> 12.0, "abc" -> nan.
    Numbers pass through; anything else is nan.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return math.nan

    text = value.lstrip()

    match = _FLOAT_PREFIX.match(text)
    if match:
        return float(match.group(0))

    match = _INFINITY_PREFIX.match(text)
    if match:
        return -math.inf if match.group(1) == "-" else math.inf

    return math.nan


def validate_cost(cost: Any) -> ValidationResult:
    """
    Validates a cost value.

    Accepts numbers or numeric strings. Fails if not a number,
    negative, or above the sanity ceiling.

    Args:
        cost: Cost as number or string

    Returns:
        ValidationResult
    """
    numeric_cost = parse_float(cost)

    if math.isnan(numeric_cost):
        return ValidationResult.fail(COST_NOT_A_NUMBER)

    if numeric_cost < 0:
        return ValidationResult.fail(COST_NEGATIVE)

    if numeric_cost > MAX_COST:
        return ValidationResult.fail(COST_TOO_HIGH)

    return ValidationResult.ok()


# ============================================================
# ENUMERATIONS
# ============================================================

def validate_car_size(size: Any) -> ValidationResult:
    if not size or size not in CAR_SIZES:
        return ValidationResult.fail(CAR_SIZE_INVALID)
    return ValidationResult.ok()


def validate_motorcycle_size(size: Any) -> ValidationResult:
    if not size or size not in MOTORCYCLE_SIZES:
        return ValidationResult.fail(MOTORCYCLE_SIZE_INVALID)
    return ValidationResult.ok()


def validate_service_status(status: Any) -> ValidationResult:
    """Status must be one of waiting, in-progress, payment-pending, completed, cancelled."""
    if not status or status not in SERVICE_STATUSES:
        return ValidationResult.fail(STATUS_INVALID)
    return ValidationResult.ok()


def validate_uuid(value: Any) -> ValidationResult:
    """
    Validates a database record id (RFC 4122, versions 1-5).
    """
    if not value or not isinstance(value, str):
        return ValidationResult.fail(UUID_INVALID)

    if not UUID_PATTERN.fullmatch(value):
        return ValidationResult.fail(UUID_INVALID)

    return ValidationResult.ok()


# ============================================================
# CREW RULES
# ============================================================

def crew_required_for(status: Any, has_package: bool = False) -> bool:
    """
    The single crew rule: in-progress vehicles need crew unless a package is selected.

    validate_crew_for_status, should_enable_crew_selection and
    is_crew_selection_required are all expressed through this.
    """
    return status == "in-progress" and not has_package


def validate_crew_for_status(status: Any, crew: Any, has_package: bool = False) -> ValidationResult:
    """
    Validates crew assignment against the vehicle status.

    Args:
        status: Service status
        crew: List of crew member ids
        has_package: Whether a service package is selected

    Returns:
        ValidationResult
    """
    if not status or not isinstance(status, str):
        return ValidationResult.fail(CREW_STATUS_REQUIRED)

    if not isinstance(crew, list):
        return ValidationResult.fail(CREW_NOT_A_LIST)

    if crew_required_for(status, has_package) and len(crew) == 0:
        return ValidationResult.fail(CREW_REQUIRED_IN_PROGRESS)

    return ValidationResult.ok()


def validate_crew_availability(selected_crew_ids: Any, busy_crew_ids: Any) -> ValidationResult:
    """
    Fails if any selected crew member is busy on another vehicle.
    The error does not say which members are busy.
    """
    if not isinstance(selected_crew_ids, list):
        return ValidationResult.fail(SELECTED_CREW_NOT_A_LIST)

    if not isinstance(busy_crew_ids, (set, frozenset)):
        return ValidationResult.fail(BUSY_CREW_NOT_A_SET)

    if any(_is_busy(crew_id, busy_crew_ids) for crew_id in selected_crew_ids):
        return ValidationResult.fail(CREW_BUSY)

    return ValidationResult.ok()


def _is_busy(crew_id: Any, busy_crew_ids) -> bool:
    # An unhashable id cannot be in the set
    try:
        return crew_id in busy_crew_ids
    except TypeError:
        return False


def should_enable_crew_selection(status: Any) -> bool:
    """Crew selection is only enabled for in-progress vehicles."""
    # A package never disables selection, so ask the rule without one.
    return crew_required_for(status, has_package=False)


def is_crew_selection_required(status: Any, has_package: bool = False) -> bool:
    return crew_required_for(status, has_package)


# ============================================================
# SANITIZATION
# ============================================================

def sanitize_input(text: Any) -> str:
    """
    Sanitizes free-text input.

    Trims whitespace and removes angle brackets, "javascript:" and
    inline event handler attributes. This is a best-effort denylist,
    not a full HTML sanitizer.

    Args:
        text: Input text

    Returns:
        Sanitized text ("" for non-string input)
    """
    if not text or not isinstance(text, str):
        return ""

    text = text.strip()
    text = _ANGLE_BRACKETS.sub("", text)
    text = _JAVASCRIPT_SCHEME.sub("", text)
    text = _EVENT_HANDLER.sub("", text)

    return text
