"""Bill Repository Interface

Defines the contract for bill persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.bill import Bill


class BillRepository(ABC):
    """
    Repository interface for Bill persistence

    Bills are only created, read and deleted. Listings are ordered by
    bill_date DESC (most recent first).
    """

    @abstractmethod
    async def create(self, bill: Bill) -> Bill:
        """
        Create a new bill

        Args:
            bill: Bill entity to persist

        Returns:
            Created Bill with assigned ID and creation timestamp
        """
        pass

    @abstractmethod
    async def get_by_id(self, bill_id: str) -> Optional[Bill]:
        """
        Retrieve bill by ID

        Args:
            bill_id: Bill identifier

        Returns:
            Bill if found, None otherwise
        """
        pass

    @abstractmethod
    async def list(self, query: Optional[str] = None) -> List[Bill]:
        """
        List bills, optionally filtered

        Args:
            query: If given, keep only bills whose name contains it
                (case-insensitive) or whose mobile contains it

        Returns:
            List of bills ordered by bill_date DESC
        """
        pass

    @abstractmethod
    async def delete(self, bill_id: str) -> bool:
        """
        Delete a bill by ID

        Args:
            bill_id: Bill identifier

        Returns:
            True if a bill was removed, False if none matched
        """
        pass
