import pytest

from app.main import app
from app.services.notification_service import NotificationService, get_notification_service
from tests.fakes import GatewayRecorder, make_twilio, make_brandtxt
from utils.rate_limit_utils import RateLimiter


@pytest.fixture
def twilio_gateway():
    return GatewayRecorder()


@pytest.fixture
def brandtxt_gateway():
    return GatewayRecorder(status_code=200, body={"ErrorCode": 0, "ErrorDescription": "Success"})


@pytest.fixture
def relay_service(twilio_gateway, brandtxt_gateway):
    """Relay wired to fake gateways and installed into the app."""
    service = NotificationService(
        twilio=make_twilio(twilio_gateway),
        brandtxt=make_brandtxt(brandtxt_gateway),
        rate_limiter=RateLimiter(max_attempts=3, window_ms=60000),
        signature="BusyBee Car Wash",
        shop_name="Hakum Auto Care",
    )
    app.dependency_overrides[get_notification_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_notification_service, None)


@pytest.fixture
def unconfigured_relay():
    service = NotificationService(
        twilio=make_twilio(account_sid="", auth_token="", from_number=""),
        brandtxt=make_brandtxt(api_key="", client_id="", sender_id=""),
        rate_limiter=RateLimiter(),
    )
    app.dependency_overrides[get_notification_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_notification_service, None)
