"""Bill field rules

Coercion and validation of raw bill input, plus the derived totals.
No storage dependencies.
"""

import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional, Tuple

from libs.result import Result, Return, Error

MOBILE_PATTERN = re.compile(r"^\d{10}$", flags=re.ASCII)

MIN_QUANTITY = 0.0
MIN_RATE = 0.01

# Public field name -> minimum accepted value
NUMERIC_MINIMUMS = {
    "Morning": MIN_QUANTITY,
    "Evening": MIN_QUANTITY,
    "Rate": MIN_RATE,
}


@dataclass(frozen=True)
class BillFields:
    """Coerced and validated bill input"""

    name: str
    mobile: str
    bill_date: date
    morning: float
    evening: float
    rate: float


def compute_totals(morning: float, evening: float, rate: float) -> Tuple[float, float]:
    """Return (total_liters, total_amount) for the given quantities and rate"""
    total_liters = morning + evening
    return total_liters, (morning + evening) * rate


def coerce_text(value: Any) -> Optional[str]:
    """Convert a raw value to stripped text, None when missing or blank"""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def coerce_date(value: Any) -> Optional[date]:
    """
    Convert a raw value to a calendar date

    Accepts date/datetime objects and ISO-8601 strings, either a plain date
    ("2024-01-05") or a date-time ("2024-01-05T10:00:00Z").

    Returns:
        The calendar date, or None if the value does not parse
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def coerce_number(value: Any) -> Optional[float]:
    """Convert a raw value to a finite float, None if it is not a number"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    if math.isnan(number) or math.isinf(number):
        return None
    return number


def validate_mobile(mobile: str) -> bool:
    return MOBILE_PATTERN.fullmatch(mobile) is not None


def normalize_bill_fields(raw: Mapping[str, Any]) -> Result[BillFields]:
    """
    Coerce and validate raw bill input

    Args:
        raw: Untyped payload keyed by Name, Mobile, Date, Morning, Evening, Rate

    Returns:
        Result[BillFields]: Coerced fields, or a VALIDATION_ERROR whose
        details map every failing field to its message
    """
    problems: Dict[str, str] = {}

    name = coerce_text(raw.get("Name"))
    if name is None:
        problems["Name"] = "Name is required"

    # Matched as given, surrounding whitespace included
    mobile = None if coerce_text(raw.get("Mobile")) is None else str(raw.get("Mobile"))
    if mobile is None:
        problems["Mobile"] = "Mobile is required"
    elif not validate_mobile(mobile):
        problems["Mobile"] = "Mobile number must be 10 digits"

    bill_date = None
    if raw.get("Date") is None:
        problems["Date"] = "Date is required"
    else:
        bill_date = coerce_date(raw.get("Date"))
        if bill_date is None:
            problems["Date"] = "Invalid date"

    numbers: Dict[str, float] = {}
    for field_name, minimum in NUMERIC_MINIMUMS.items():
        number = coerce_number(raw.get(field_name))
        if number is None:
            problems[field_name] = f"{field_name} must be a number"
        elif number < minimum:
            problems[field_name] = f"{field_name} must be at least {minimum:g}"
        else:
            numbers[field_name] = number

    if problems:
        summary = ", ".join(f"{key}: {message}" for key, message in problems.items())
        return Return.err(
            Error(
                code="VALIDATION_ERROR",
                message=f"Bill validation failed: {summary}",
                details=problems,
            )
        )

    return Return.ok(
        BillFields(
            name=name,
            mobile=mobile,
            bill_date=bill_date,
            morning=numbers["Morning"],
            evening=numbers["Evening"],
            rate=numbers["Rate"],
        )
    )
