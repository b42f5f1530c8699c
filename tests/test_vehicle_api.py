import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.schemas.response import SMSResponse
from app.services.sms_service import get_sms_dispatcher
from utils.constants import CREW_BUSY, CREW_REQUIRED_IN_PROGRESS, SMS_SENT_MESSAGE

client = TestClient(app)


class RecordingDispatcher:
    """Stands in for SMSDispatcher and records what would be sent."""

    def __init__(self, response=None):
        self.response = response or SMSResponse(success=True, message=SMS_SENT_MESSAGE, sid="SM9")
        self.calls = []

    async def send_car_completion_sms(self, *args, **kwargs):
        self.calls.append(("car_completion", args, kwargs))
        return self.response

    async def send_motorcycle_completion_sms(self, *args, **kwargs):
        self.calls.append(("motorcycle_completion", args, kwargs))
        return self.response

    async def send_status_update_sms(self, **kwargs):
        self.calls.append(("status_update", (), kwargs))
        return self.response


@pytest.fixture
def dispatcher():
    fake = RecordingDispatcher()
    app.dependency_overrides[get_sms_dispatcher] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_sms_dispatcher, None)


CAR_FORM = {
    "vehicleType": "car",
    "plate": "  abc-1234 ",
    "model": "Toyota Vios",
    "size": "medium",
    "status": "in-progress",
    "phone": "09171234567",
    "cost": "350",
    "crew": ["c1"],
    "busyCrew": ["c2"],
}


# ------------------------------------------------------------
# /vehicles/validate
# ------------------------------------------------------------

def test_valid_car_form_returns_sanitized_fields():
    response = client.post("/api/vehicles/validate", json=CAR_FORM)

    assert response.status_code == 200
    data = response.json()
    assert data["isValid"] is True
    assert "error" not in data
    assert data["data"]["plate"] == "ABC-1234"
    assert data["data"]["model"] == "Toyota Vios"


def test_first_failure_wins():
    response = client.post("/api/vehicles/validate", json={**CAR_FORM, "plate": "AB", "model": "X"})

    data = response.json()
    assert data["isValid"] is False
    assert data["error"] == "License plate must be at least 3 characters long"


def test_motorcycle_rules_apply():
    form = {**CAR_FORM, "vehicleType": "motorcycle", "plate": "123-abc", "model": "Honda Click"}

    response = client.post("/api/vehicles/validate", json=form)

    assert response.json()["error"] == "Please select a valid motorcycle size"


def test_busy_crew_is_rejected():
    response = client.post("/api/vehicles/validate", json={**CAR_FORM, "crew": ["c2"]})
    assert response.json()["error"] == CREW_BUSY


def test_in_progress_without_crew():
    form = {**CAR_FORM, "crew": []}
    assert client.post("/api/vehicles/validate", json=form).json()["error"] == CREW_REQUIRED_IN_PROGRESS

    form["hasPackage"] = True
    assert client.post("/api/vehicles/validate", json=form).json()["isValid"] is True


def test_record_id_checked_only_when_given():
    assert client.post("/api/vehicles/validate", json={**CAR_FORM, "id": "not-a-uuid"}).json()["error"] == "Invalid ID format"

    form = {**CAR_FORM, "id": "123e4567-e89b-12d3-a456-426614174000"}
    assert client.post("/api/vehicles/validate", json=form).json()["isValid"] is True


def test_cost_and_phone_errors():
    assert client.post("/api/vehicles/validate", json={**CAR_FORM, "cost": "abc"}).json()["error"] == "Cost must be a valid number"
    assert "09 or +639" in client.post("/api/vehicles/validate", json={**CAR_FORM, "phone": "12345"}).json()["error"]


def test_suspicious_model_is_rejected():
    response = client.post("/api/vehicles/validate", json={**CAR_FORM, "model": "data:text/html,hi"})
    assert response.json()["error"] == "Car model contains invalid characters"


# ------------------------------------------------------------
# /vehicles/status
# ------------------------------------------------------------

def test_completion_sends_completion_sms(dispatcher):
    change = {
        "vehicleType": "car",
        "plateNumber": "ABC-1234",
        "previousStatus": "payment-pending",
        "status": "completed",
        "customerName": "Juan",
        "phoneNumber": "09171234567",
        "services": ["Exterior Wash"],
        "totalAmount": 350,
    }

    response = client.post("/api/vehicles/status", json=change)

    data = response.json()
    assert data["isValid"] is True
    assert data["notification"] == {"success": True, "message": SMS_SENT_MESSAGE, "sid": "SM9"}

    kind, args, kwargs = dispatcher.calls[-1]
    assert kind == "car_completion"
    assert args == ("+639171234567", "Juan", "ABC-1234")
    assert kwargs["services"] == ["Exterior Wash"]
    assert kwargs["total_amount"] == 350


def test_motorcycle_completion(dispatcher):
    change = {
        "vehicleType": "motorcycle",
        "plateNumber": "123-ABC",
        "previousStatus": "payment-pending",
        "status": "completed",
        "phoneNumber": "+639171234567",
    }

    client.post("/api/vehicles/status", json=change)

    kind, args, _ = dispatcher.calls[-1]
    assert kind == "motorcycle_completion"
    assert args[1] == "Customer"


def test_status_update_sms(dispatcher):
    change = {
        "plateNumber": "ABC-1234",
        "previousStatus": "waiting",
        "status": "in-progress",
        "phoneNumber": "09171234567",
        "crew": ["c1"],
        "serviceType": "Premium Wash",
    }

    response = client.post("/api/vehicles/status", json=change)

    assert response.json()["isValid"] is True
    kind, _, kwargs = dispatcher.calls[-1]
    assert kind == "status_update"
    assert kwargs["status"] == "in-progress"
    assert kwargs["phone_number"] == "+639171234567"
    assert kwargs["service_type"] == "Premium Wash"


def test_invalid_transition_sends_nothing(dispatcher):
    change = {"plateNumber": "ABC-1234", "previousStatus": "waiting", "status": "completed", "phoneNumber": "09171234567"}

    data = client.post("/api/vehicles/status", json=change).json()

    assert data["isValid"] is False
    assert data["error"] == "Cannot change status from Waiting to Completed"
    assert "notification" not in data
    assert dispatcher.calls == []


def test_crew_rule_applies_to_status_change(dispatcher):
    change = {"plateNumber": "ABC-1234", "previousStatus": "waiting", "status": "in-progress", "phoneNumber": "09171234567"}

    data = client.post("/api/vehicles/status", json=change).json()

    assert data["error"] == CREW_REQUIRED_IN_PROGRESS
    assert dispatcher.calls == []


def test_cancel_sends_nothing(dispatcher):
    change = {"plateNumber": "ABC-1234", "previousStatus": "waiting", "status": "cancelled", "phoneNumber": "09171234567"}

    data = client.post("/api/vehicles/status", json=change).json()

    assert data["isValid"] is True
    assert "notification" not in data
    assert dispatcher.calls == []


def test_missing_phone_skips_sms(dispatcher):
    change = {"plateNumber": "ABC-1234", "previousStatus": "payment-pending", "status": "completed"}

    data = client.post("/api/vehicles/status", json=change).json()

    assert data["isValid"] is True
    assert dispatcher.calls == []


def test_failed_sms_does_not_invalidate_change(dispatcher):
    dispatcher.response = SMSResponse(success=False, error="SMS service not configured")
    change = {"plateNumber": "ABC-1234", "previousStatus": "payment-pending", "status": "completed", "phoneNumber": "09171234567"}

    data = client.post("/api/vehicles/status", json=change).json()

    assert data["isValid"] is True
    assert data["notification"] == {"success": False, "error": "SMS service not configured"}


def test_unknown_status_is_rejected(dispatcher):
    data = client.post("/api/vehicles/status", json={"plateNumber": "ABC-1234", "status": "done"}).json()
    assert data["error"] == "Please select a valid status"


def test_non_ascii_digit_phone_skips_sms(dispatcher):
    change = {"plateNumber": "ABC-1234", "previousStatus": "payment-pending", "status": "completed", "phoneNumber": "+639١٢٣٤٥٦٧٨٩"}

    data = client.post("/api/vehicles/status", json=change).json()

    assert data["isValid"] is True
    assert dispatcher.calls == []
