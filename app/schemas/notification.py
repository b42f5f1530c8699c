"""
app/schemas/notification.py

Purpose: SMS notification payload schemas

- Completion notification payload (Twilio relay)
- Status update payload (legacy BrandTxt relay)
- Field names on the wire are camelCase

Required fields are Optional here on purpose: the relay checks them
itself so it can answer with its own 400 message.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Union


class SMSNotificationData(BaseModel):
    """
    Data for a "vehicle ready" notification.
    """
    phone_number: Optional[str] = Field(None, alias="phoneNumber")
    customer_name: Optional[str] = Field(None, alias="customerName")
    plate_number: Optional[str] = Field(None, alias="plateNumber")
    services: Optional[List[str]] = Field(default_factory=list)
    packages: Optional[List[str]] = Field(default_factory=list)
    total_amount: Optional[float] = Field(0, alias="totalAmount")
    completion_time: Optional[str] = Field(None, alias="completionTime")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "phoneNumber": "+639171234567",
                "customerName": "Juan Dela Cruz",
                "plateNumber": "ABC-1234",
                "services": ["Exterior Wash", "Interior Clean"],
                "packages": ["Premium Package"],
                "totalAmount": 500.00,
                "completionTime": "2025-01-05 02:30 PM"
            }
        }

    def missing_required_fields(self) -> List[str]:
        """Names of required wire fields that are absent or empty."""
        required = {
            "phoneNumber": self.phone_number,
            "customerName": self.customer_name,
            "plateNumber": self.plate_number,
        }
        return [name for name, value in required.items() if not value]

    def to_payload(self) -> dict:
        """JSON body the relay expects."""
        return self.model_dump(by_alias=True)


class StatusUpdateData(BaseModel):
    """
    Data for a queue status update notification.
    """
    status: Optional[str] = None
    plate_number: Optional[str] = Field(None, alias="plateNumber")
    service_type: Optional[str] = Field(None, alias="serviceType")
    phone_number: Optional[str] = Field(None, alias="phoneNumber")
    queue_number: Optional[Union[int, str]] = Field(None, alias="queueNumber")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "status": "waiting",
                "plateNumber": "ABC-1234",
                "serviceType": "Basic Wash",
                "phoneNumber": "09171234567",
                "queueNumber": 3
            }
        }

    def missing_required_fields(self) -> List[str]:
        required = {
            "status": self.status,
            "plateNumber": self.plate_number,
            "phoneNumber": self.phone_number,
        }
        return [name for name, value in required.items() if not value]

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)
