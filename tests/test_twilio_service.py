import base64

import httpx
import pytest

from app.core.exceptions import ConfigurationError, GatewayError
from tests.fakes import GatewayRecorder, make_twilio


@pytest.mark.asyncio
async def test_send_sms_posts_form_with_basic_auth(twilio_gateway):
    service = make_twilio(twilio_gateway)

    result = await service.send_sms("+639171234567", "Hello")

    assert result == {"sid": "SM123", "status": "queued"}
    request = twilio_gateway.requests[-1]
    assert request.method == "POST"
    assert str(request.url) == "https://twilio.test/2010-04-01/Accounts/AC123/Messages.json"
    assert twilio_gateway.last_form == {"To": "+639171234567", "From": "+15005550006", "Body": "Hello"}

    expected = base64.b64encode(b"AC123:secret").decode()
    assert request.headers["Authorization"] == f"Basic {expected}"


@pytest.mark.asyncio
async def test_non_2xx_raises_gateway_error():
    recorder = GatewayRecorder(status_code=400, body={"code": 21211, "message": "Invalid 'To' Phone Number"})
    service = make_twilio(recorder)

    with pytest.raises(GatewayError) as exc_info:
        await service.send_sms("+6312345", "Hello")

    assert exc_info.value.gateway_status == 400
    assert exc_info.value.status_code == 500
    assert exc_info.value.details == {"gateway_status": 400}


@pytest.mark.asyncio
async def test_unconfigured_service_does_not_call_gateway(twilio_gateway):
    service = make_twilio(twilio_gateway, auth_token="")

    assert not service.is_configured()
    with pytest.raises(ConfigurationError):
        await service.send_sms("+639171234567", "Hello")
    assert twilio_gateway.requests == []


def test_placeholder_sid_is_not_configured():
    assert not make_twilio(account_sid="your_twilio_sid").is_configured()


@pytest.mark.asyncio
async def test_timeout_becomes_gateway_error():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    service = make_twilio(transport=httpx.MockTransport(handler))

    with pytest.raises(GatewayError) as exc_info:
        await service.send_sms("+639171234567", "Hello")
    assert exc_info.value.message == "Twilio API timeout"


@pytest.mark.asyncio
async def test_connection_failure_becomes_gateway_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    service = make_twilio(transport=httpx.MockTransport(handler))

    with pytest.raises(GatewayError) as exc_info:
        await service.send_sms("+639171234567", "Hello")
    assert "connection refused" in exc_info.value.message
