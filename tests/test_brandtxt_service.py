import pytest

from app.core.exceptions import ConfigurationError, GatewayError
from tests.fakes import GatewayRecorder, make_brandtxt


@pytest.mark.asyncio
async def test_send_sms_posts_json_payload(brandtxt_gateway):
    service = make_brandtxt(brandtxt_gateway)

    result = await service.send_sms("639171234567", "Your car is ready")

    assert result["ErrorCode"] == 0
    payload = brandtxt_gateway.last_json
    assert payload["MobileNumbers"] == "639171234567"
    assert payload["Message"] == "Your car is ready"
    assert payload["SenderId"] == "HAKUM"
    assert payload["ApiKey"] == "key"
    assert payload["ClientId"] == "client"
    assert payload["Is_Unicode"] is False
    assert payload["Is_Flash"] is False


@pytest.mark.asyncio
async def test_nonzero_error_code_is_a_failure():
    recorder = GatewayRecorder(status_code=200, body={"ErrorCode": 7, "ErrorDescription": "Invalid mobile"})
    service = make_brandtxt(recorder)

    with pytest.raises(GatewayError) as exc_info:
        await service.send_sms("12345", "Hello")
    assert exc_info.value.message == "API Error: Invalid mobile (Code: 7)"


@pytest.mark.asyncio
async def test_http_error_status_is_a_failure():
    recorder = GatewayRecorder(status_code=503, body={})
    service = make_brandtxt(recorder)

    with pytest.raises(GatewayError) as exc_info:
        await service.send_sms("639171234567", "Hello")
    assert exc_info.value.gateway_status == 503


@pytest.mark.asyncio
async def test_unconfigured(brandtxt_gateway):
    service = make_brandtxt(brandtxt_gateway, api_key="")

    with pytest.raises(ConfigurationError):
        await service.send_sms("639171234567", "Hello")
    assert brandtxt_gateway.requests == []
