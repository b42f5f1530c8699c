"""
utils/sms_utils.py

Purpose: SMS number handling and message builders

- Normalizes Philippine mobile numbers for the gateways
- Builds the completion message body
- Picks status update templates
"""

import random
import re
from typing import List, Optional, Union

from utils.constants import (
    COMPLETION_SMS_TEMPLATE,
    STATUS_SMS_TEMPLATES,
    STATUS_SMS_FALLBACK,
)


PH_MOBILE_PATTERN = re.compile(r"\+639[0-9]{9}")


def format_phone_number(phone: str) -> str:
    """
    Formats a phone number to +63 international format.

    - 09171234567  -> +639171234567
    - 9171234567X  (11 digits starting with 9) -> +63 prefixed
    - 639171234567 -> +639171234567
    - anything else gets +63 prepended as-is

    The last rule is deliberately permissive and can produce a
    malformed number for malformed input; validate_sms_phone_number
    is what rejects those.

    Args:
        phone: Phone number in any common notation

    Returns:
        Phone number with +63 prefix
    """
    cleaned = re.sub(r"[^0-9]", "", phone or "")

    if cleaned.startswith("0") and len(cleaned) == 11:
        return "+63" + cleaned[1:]

    if len(cleaned) == 11 and cleaned.startswith("9"):
        return "+63" + cleaned

    if cleaned.startswith("63") and len(cleaned) == 12:
        return "+" + cleaned

    return "+63" + cleaned


def validate_sms_phone_number(phone: str) -> bool:
    """
    Checks that a number formats to a Philippine mobile number (+639XXXXXXXXX).
    """
    return bool(PH_MOBILE_PATTERN.fullmatch(format_phone_number(phone)))


def strip_leading_plus(phone: str) -> str:
    """
    Removes one leading "+" and all whitespace.
    The Twilio relay prefixes "+" again when it builds the To field.
    """
    return re.sub(r"\s", "", re.sub(r"^\+", "", phone))


def convert_phone_number(phone: str) -> str:
    """
    Converts a number to the digits-only 63XXXXXXXXXX form used by BrandTxt.

    Args:
        phone: Phone number string

    Returns:
        Digits with 63 country code where it can be inferred
    """
    cleaned = re.sub(r"[^0-9]", "", phone or "")

    if cleaned.startswith("0"):
        return "63" + cleaned[1:]
    elif cleaned.startswith("63"):
        return cleaned
    elif len(cleaned) == 10:
        return "63" + cleaned
    return cleaned


def format_amount(amount: Union[int, float]) -> str:
    """Peso amount with two decimals, e.g. ₱500.00"""
    return f"₱{float(amount):.2f}"


def build_completion_message(
    customer_name: str,
    plate_number: str,
    completion_time: str,
    services: Optional[List[str]] = None,
    packages: Optional[List[str]] = None,
    total_amount: Union[int, float, None] = None,
    signature: str = "BusyBee Car Wash",
) -> str:
    """
    Builds the completion SMS body.

    Services, packages and the amount line are only included when
    present and non-empty (the amount line is omitted for 0).

    Args:
        customer_name: Name to greet
        plate_number: Vehicle plate
        completion_time: Human-readable completion time
        services: Service names
        packages: Package names
        total_amount: Amount charged
        signature: Business signature line

    Returns:
        Message body
    """
    details = ""
    if services:
        details += f"\nServices: {', '.join(services)}"
    if packages:
        details += f"\nPackages: {', '.join(packages)}"
    if total_amount:
        details += f"\nTotal Amount: {format_amount(total_amount)}"

    return COMPLETION_SMS_TEMPLATE.format(
        customer_name=customer_name,
        plate_number=plate_number,
        completion_time=completion_time,
        details=details,
        signature=signature,
    )


def build_status_message(
    status: str,
    plate_number: str,
    service_type: Optional[str] = None,
    queue_number: Union[int, str, None] = None,
    shop_name: str = "Hakum Auto Care",
    rng: Optional[random.Random] = None,
) -> str:
    """
    Picks a random status update template and fills its placeholders.

    Unknown statuses get a generic update line.
    """
    templates = STATUS_SMS_TEMPLATES.get(status)
    if not templates:
        return STATUS_SMS_FALLBACK.replace("{plateNumber}", plate_number)

    template = (rng or random).choice(templates)

    message = template.replace("{plateNumber}", plate_number)
    message = message.replace("{serviceType}", service_type or "")
    message = message.replace("{queueNumber}", str(queue_number) if queue_number else "?")
    message = message.replace("{shopName}", shop_name)

    return message
