from typing import Optional, Any

from utils.constants import SMS_NOT_CONFIGURED

class WashTrackError(Exception):
    """
    Base exception for the WashTrack service.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

class ValidationError(WashTrackError):
    """
    Raised when a request is missing required fields or is malformed.
    """
    def __init__(self, message: str = "Validation error", details: Optional[Any] = None):
        super().__init__(message, code="VALIDATION_ERROR", status_code=400, details=details)

class ConfigurationError(WashTrackError):
    """
    Raised when gateway credentials are not configured.
    """
    def __init__(self, message: str = SMS_NOT_CONFIGURED, details: Optional[Any] = None):
        super().__init__(message, code="SERVICE_NOT_CONFIGURED", status_code=500, details=details)

class GatewayError(WashTrackError):
    """
    Raised when the SMS gateway rejects a request or cannot be reached.
    """
    def __init__(self, message: str = "SMS gateway error", gateway_status: Optional[int] = None, details: Optional[Any] = None):
        self.gateway_status = gateway_status
        if details is None and gateway_status is not None:
            details = {"gateway_status": gateway_status}
        super().__init__(message, code="GATEWAY_ERROR", status_code=500, details=details)

class RateLimitExceededError(WashTrackError):
    """
    Raised when a key has used up its attempts for the current window.
    """
    def __init__(self, message: str = "Too many requests. Please try again later.", details: Optional[Any] = None):
        super().__init__(message, code="RATE_LIMITED", status_code=429, details=details)
