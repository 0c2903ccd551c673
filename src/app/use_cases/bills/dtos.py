"""Data Transfer Objects for Bill Use Cases

Pydantic models for response outputs. Attributes are snake_case; the
public JSON names (Name, Mobile, Date, ...) are carried as aliases.
"""

from datetime import date, datetime
from pydantic import BaseModel, Field

from src.domain.bill import Bill


class BillResponseDTO(BaseModel):
    """
    Response DTO for a stored bill

    Returned by CreateBill, ListBills and SearchBills.
    """

    id: str = Field(
        ...,
        description="Bill identifier"
    )

    name: str = Field(
        ...,
        alias="Name",
        description="Customer name"
    )

    mobile: str = Field(
        ...,
        alias="Mobile",
        description="Customer mobile number (10 digits)"
    )

    bill_date: date = Field(
        ...,
        alias="Date",
        description="Delivery date"
    )

    morning: float = Field(
        ...,
        alias="Morning",
        description="Morning quantity in liters"
    )

    evening: float = Field(
        ...,
        alias="Evening",
        description="Evening quantity in liters"
    )

    rate: float = Field(
        ...,
        alias="Rate",
        description="Price per liter"
    )

    total_liters: float = Field(
        ...,
        alias="TotalLiters",
        description="Morning + Evening"
    )

    total_amount: float = Field(
        ...,
        alias="TotalAmount",
        description="(Morning + Evening) * Rate"
    )

    created_at: datetime = Field(
        ...,
        alias="CreatedAt",
        description="Bill creation timestamp"
    )

    @classmethod
    def from_entity(cls, bill: Bill) -> "BillResponseDTO":
        return cls(
            id=bill.id,
            name=bill.name,
            mobile=bill.mobile,
            bill_date=bill.bill_date,
            morning=bill.morning,
            evening=bill.evening,
            rate=bill.rate,
            total_liters=bill.total_liters,
            total_amount=bill.total_amount,
            created_at=bill.created_at,
        )

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "0b8f7a52-3f3e-4c59-9a55-0f4c1d6a2e11",
                "Name": "Asha",
                "Mobile": "9876543210",
                "Date": "2024-01-05",
                "Morning": 2.0,
                "Evening": 1.5,
                "Rate": 50.0,
                "TotalLiters": 3.5,
                "TotalAmount": 175.0,
                "CreatedAt": "2024-01-05T06:30:00Z"
            }
        }


class DeleteBillResponseDTO(BaseModel):
    """Confirmation returned after a bill is deleted"""

    message: str = Field(
        default="Bill deleted successfully",
        description="Confirmation message"
    )
