"""
List Bills Use Case

Retrieves all bills, or only those matching an optional free-text query.
"""
import logging
from typing import List, Optional
from libs.result import Result, Return, Error
from src.app.repositories.bill_repository import BillRepository
from .dtos import BillResponseDTO

logger = logging.getLogger(__name__)


class ListBills:
    """
    Use case: List bills

    Without a query every bill is returned; with a query only bills whose
    name contains it (any case) or whose mobile contains it are returned.
    Bills are ordered by date DESC (most recent first). No match is an
    empty list, never an error.
    """

    def __init__(self, bill_repo: BillRepository):
        """
        Initialize with bill repository.

        Args:
            bill_repo: BillRepository instance
        """
        self.bill_repo = bill_repo

    async def execute(self, query: Optional[str] = None) -> Result[List[BillResponseDTO]]:
        """
        List bills, filtered when a non-empty query is given.

        Args:
            query: Optional search text

        Returns:
            Result[List[BillResponseDTO]]: Matching bills
        """
        try:
            bills = await self.bill_repo.list(query=query or None)
        except Exception as e:
            logger.error(f"Failed to fetch bills: {e}")
            return Return.err(
                Error(
                    code="FETCH_BILLS_FAILED",
                    message="Failed to fetch bills",
                    reason=str(e),
                )
            )

        return Return.ok([BillResponseDTO.from_entity(bill) for bill in bills])
