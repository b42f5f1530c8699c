import random

import pytest

from utils.constants import STATUS_SMS_TEMPLATES
from utils.sms_utils import (
    format_phone_number,
    validate_sms_phone_number,
    strip_leading_plus,
    convert_phone_number,
    build_completion_message,
    build_status_message,
)


@pytest.mark.parametrize("raw,expected", [
    ("09171234567", "+639171234567"),
    ("639171234567", "+639171234567"),
    ("+63 917 123 4567", "+639171234567"),
    ("0917-123-4567", "+639171234567"),
    ("91712345678", "+6391712345678"),
])
def test_format_phone_number(raw, expected):
    assert format_phone_number(raw) == expected


def test_format_phone_number_fallback_is_permissive():
    # Unrecognized shapes still get +63 prepended; validation rejects them later
    assert format_phone_number("12345") == "+6312345"
    assert format_phone_number("9171234567") == "+639171234567"
    assert format_phone_number("") == "+63"


def test_validate_sms_phone_number():
    assert validate_sms_phone_number("09171234567")
    assert validate_sms_phone_number("+639171234567")
    assert validate_sms_phone_number("9171234567")
    assert not validate_sms_phone_number("12345")
    assert not validate_sms_phone_number("08171234567")
    assert not validate_sms_phone_number("91712345678")


def test_strip_leading_plus():
    assert strip_leading_plus("+63 917 123 4567") == "639171234567"
    assert strip_leading_plus("09171234567") == "09171234567"
    assert strip_leading_plus("++63") == "+63"


def test_convert_phone_number():
    assert convert_phone_number("09171234567") == "639171234567"
    assert convert_phone_number("+639171234567") == "639171234567"
    assert convert_phone_number("9171234567") == "639171234567"
    assert convert_phone_number("12345") == "12345"


def test_completion_message_with_details():
    message = build_completion_message(
        customer_name="Juan",
        plate_number="ABC-1234",
        completion_time="2025-01-05 02:30 PM",
        services=["Exterior Wash", "Interior Clean"],
        packages=["Premium Package"],
        total_amount=500,
    )
    assert message.startswith("🚗 Car Wash Complete!")
    assert "Hi Juan," in message
    assert "Your vehicle (ABC-1234) has been completed at 2025-01-05 02:30 PM." in message
    assert "\nServices: Exterior Wash, Interior Clean" in message
    assert "\nPackages: Premium Package" in message
    assert "\nTotal Amount: ₱500.00" in message
    assert message.endswith("- BusyBee Car Wash")


def test_completion_message_omits_empty_details():
    message = build_completion_message("Juan", "ABC-1234", "now", [], [], 0)
    assert "Services:" not in message
    assert "Packages:" not in message
    assert "Total Amount" not in message
    assert "completed at now.\n\nThank you" in message


def test_status_message_fills_placeholders():
    message = build_status_message("waiting", "ABC-1234", queue_number=3, rng=random.Random(1))
    expected = [t.replace("{plateNumber}", "ABC-1234").replace("{queueNumber}", "3") for t in STATUS_SMS_TEMPLATES["waiting"]]
    assert message in expected


def test_status_message_defaults_queue_number():
    message = build_status_message("waiting", "ABC-1234", rng=random.Random(0))
    assert "?" in message
    assert "{queueNumber}" not in message


def test_status_message_uses_shop_name():
    message = build_status_message("completed", "ABC-1234", shop_name="Shine Co")
    assert "Shine Co" in message
    assert "{shopName}" not in message


def test_status_message_in_progress_mentions_service():
    message = build_status_message("in-progress", "ABC-1234", service_type="Premium Wash")
    assert "Premium Wash" in message


def test_status_message_unknown_status_falls_back():
    assert build_status_message("cancelled", "ABC-1234") == "Status update for vehicle ABC-1234"


def test_non_ascii_digits_are_not_phone_digits():
    digits = "١٢٣٤٥٦٧٨٩"
    assert format_phone_number("09" + digits) == "+6309"
    assert format_phone_number("+639" + digits) == "+63639"
    assert not validate_sms_phone_number("09" + digits)
    assert not validate_sms_phone_number("+639" + digits)
    assert convert_phone_number("09" + digits) == "639"
