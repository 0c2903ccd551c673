"""Search Bills Use Case

Same matching as ListBills, but the query is mandatory.
"""

import logging
from typing import List, Optional
from libs.result import Result, Return, Error
from src.app.repositories.bill_repository import BillRepository
from .dtos import BillResponseDTO

logger = logging.getLogger(__name__)


class SearchBills:
    """
    Search Bills Use Case

    A missing or empty query is a client error, distinct from a search
    that matches nothing (which returns an empty list).
    """

    def __init__(self, bill_repo: BillRepository):
        self.bill_repo = bill_repo

    async def execute(self, query: Optional[str]) -> Result[List[BillResponseDTO]]:
        """
        Execute search

        Args:
            query: Search text matched against name and mobile

        Returns:
            Result[List[BillResponseDTO]]: Matching bills or error

        Errors:
            SEARCH_QUERY_REQUIRED: No query given
            SEARCH_FAILED: The store query failed
        """
        if not query:
            return Return.err(
                Error(
                    code="SEARCH_QUERY_REQUIRED",
                    message="Search query required",
                )
            )

        try:
            bills = await self.bill_repo.list(query=query)
        except Exception as e:
            logger.error(f"Bill search failed: {e}")
            return Return.err(
                Error(
                    code="SEARCH_FAILED",
                    message="Search failed",
                    reason=str(e),
                )
            )

        return Return.ok([BillResponseDTO.from_entity(bill) for bill in bills])
