"""Bill record use cases"""
from .create_bill import CreateBill
from .list_bills import ListBills
from .search_bills import SearchBills
from .delete_bill import DeleteBill
from .dtos import BillResponseDTO, DeleteBillResponseDTO

__all__ = [
    "CreateBill",
    "ListBills",
    "SearchBills",
    "DeleteBill",
    "BillResponseDTO",
    "DeleteBillResponseDTO",
]
