"""Bill Domain Entity

One milk delivery billing record for a customer on a single date.
"""

from datetime import datetime, date, timezone
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, Date, DateTime, Float, String
from src.domain.base import BaseModel, generate_uuid


class Bill(BaseModel, table=True):
    """
    Bill - Delivery billing record

    Domain Rules:
    - mobile is exactly 10 digits
    - morning and evening are >= 0, rate is >= 0.01
    - total_liters = morning + evening
    - total_amount = (morning + evening) * rate
    - Totals are computed once at creation and never edited
    - A bill is only created, read or deleted (no update)
    """

    __tablename__ = "bills"
    __table_args__ = (
        CheckConstraint("morning >= 0", name="morning_non_negative"),
        CheckConstraint("evening >= 0", name="evening_non_negative"),
        CheckConstraint("rate >= 0.01", name="rate_minimum"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique bill identifier (UUID assigned at creation)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Customer name"
    )

    mobile: str = Field(
        sa_column=Column(String(10), nullable=False, index=True),
        description="Customer mobile number (10 digits)"
    )

    bill_date: date = Field(
        sa_column=Column(Date, nullable=False, index=True),
        description="Delivery date"
    )

    morning: float = Field(
        sa_column=Column(Float, nullable=False),
        description="Morning quantity in liters (>= 0)"
    )

    evening: float = Field(
        sa_column=Column(Float, nullable=False),
        description="Evening quantity in liters (>= 0)"
    )

    rate: float = Field(
        sa_column=Column(Float, nullable=False),
        description="Price per liter (>= 0.01)"
    )

    total_liters: float = Field(
        sa_column=Column(Float, nullable=False),
        description="morning + evening"
    )

    total_amount: float = Field(
        sa_column=Column(Float, nullable=False),
        description="(morning + evening) * rate"
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Bill creation timestamp (UTC)"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "0b8f7a52-3f3e-4c59-9a55-0f4c1d6a2e11",
                "name": "Asha",
                "mobile": "9876543210",
                "bill_date": "2024-01-05",
                "morning": 2.0,
                "evening": 1.5,
                "rate": 50.0,
                "total_liters": 3.5,
                "total_amount": 175.0,
                "created_at": "2024-01-05T06:30:00Z"
            }
        }
