"""
app/schemas/vehicle.py

Purpose: Vehicle form and status change schemas

- Raw form input as sent by the queue UI (not yet validated)
- Status change requests that may trigger an SMS
"""

from pydantic import BaseModel, Field
from typing import Any, List, Literal, Optional, Union

from app.schemas.response import SMSResponse


VehicleType = Literal["car", "motorcycle"]


class VehicleForm(BaseModel):
    """
    Add/edit vehicle form fields. Values are kept loose on purpose;
    the validators decide what is acceptable and return the message.
    """
    vehicle_type: VehicleType = Field("car", alias="vehicleType")
    id: Optional[str] = None
    plate: Optional[Any] = None
    model: Optional[Any] = None
    size: Optional[str] = None
    status: Optional[str] = "waiting"
    phone: Optional[str] = ""
    cost: Optional[Union[float, str]] = 0
    crew: Optional[List[str]] = Field(default_factory=list)
    busy_crew: Optional[List[str]] = Field(default_factory=list, alias="busyCrew")
    has_package: bool = Field(False, alias="hasPackage")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "vehicleType": "car",
                "plate": "abc-1234",
                "model": "Toyota Vios",
                "size": "medium",
                "status": "in-progress",
                "phone": "09171234567",
                "cost": "350",
                "crew": ["c1"],
                "busyCrew": ["c2"],
                "hasPackage": False
            }
        }


class StatusChange(BaseModel):
    """
    A vehicle moving from one status to another.
    """
    vehicle_type: VehicleType = Field("car", alias="vehicleType")
    plate_number: str = Field(..., alias="plateNumber")
    previous_status: Optional[str] = Field(None, alias="previousStatus")
    status: str
    customer_name: Optional[str] = Field(None, alias="customerName")
    phone_number: Optional[str] = Field(None, alias="phoneNumber")
    crew: List[str] = Field(default_factory=list)
    has_package: bool = Field(False, alias="hasPackage")
    services: List[str] = Field(default_factory=list)
    packages: List[str] = Field(default_factory=list)
    total_amount: float = Field(0, alias="totalAmount")
    service_type: Optional[str] = Field(None, alias="serviceType")
    queue_number: Optional[Union[int, str]] = Field(None, alias="queueNumber")

    class Config:
        populate_by_name = True


class VehicleValidationResponse(BaseModel):
    is_valid: bool = Field(..., alias="isValid")
    error: Optional[str] = None
    data: dict = Field(default_factory=dict)

    class Config:
        populate_by_name = True


class StatusChangeResponse(BaseModel):
    is_valid: bool = Field(..., alias="isValid")
    error: Optional[str] = None
    notification: Optional[SMSResponse] = None

    class Config:
        populate_by_name = True
