"""Request schemas for Bill API

The create payload is accepted untyped; coercion and validation happen in
the CreateBill use case so that the same rules apply to every caller.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class CreateBillRequestSchema(BaseModel):
    """
    Request schema for creating a bill

    Used for POST /api/bills endpoint. Values may be strings or numbers.
    """

    name: Optional[Any] = Field(
        default=None,
        alias="Name",
        description="Customer name (required, non-empty)"
    )

    mobile: Optional[Any] = Field(
        default=None,
        alias="Mobile",
        description="Mobile number (required, exactly 10 digits)"
    )

    bill_date: Optional[Any] = Field(
        default=None,
        alias="Date",
        description="Delivery date, ISO-8601 (required)"
    )

    morning: Optional[Any] = Field(
        default=None,
        alias="Morning",
        description="Morning quantity in liters (required, >= 0)"
    )

    evening: Optional[Any] = Field(
        default=None,
        alias="Evening",
        description="Evening quantity in liters (required, >= 0)"
    )

    rate: Optional[Any] = Field(
        default=None,
        alias="Rate",
        description="Price per liter (required, >= 0.01)"
    )

    @classmethod
    def from_payload(cls, payload: Any) -> "CreateBillRequestSchema":
        """Build from a decoded JSON body; anything but an object is empty"""
        return cls.model_validate(payload if isinstance(payload, dict) else {})

    def to_raw(self) -> Dict[str, Any]:
        """Payload keyed by the public field names"""
        return self.model_dump(by_alias=True)

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "Name": "Asha",
                "Mobile": "9876543210",
                "Date": "2024-01-05",
                "Morning": 2,
                "Evening": 1.5,
                "Rate": 50
            }
        }
