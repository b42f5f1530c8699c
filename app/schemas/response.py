from pydantic import BaseModel
from typing import Optional, Any

class ErrorResponse(BaseModel):
    """
    Standard error response structure.
    """
    success: bool = False
    error: str
    code: str
    details: Optional[Any] = None

class SMSResponse(BaseModel):
    """
    Normalized outcome of an SMS send. `sid` is only set on success.
    """
    success: bool
    message: Optional[str] = None
    error: Optional[str] = None
    sid: Optional[str] = None
