from .base import BaseModel, generate_uuid
from .bill import Bill
from .bill_rules import BillFields, compute_totals, normalize_bill_fields

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Bill",
    "BillFields",
    "compute_totals",
    "normalize_bill_fields",
]
