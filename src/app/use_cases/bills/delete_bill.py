"""DeleteBill Use Case

Removes a bill by identifier.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.bill_repository import BillRepository
from .dtos import DeleteBillResponseDTO

logger = logging.getLogger(__name__)


class DeleteBill:
    def __init__(self, uow: UnitOfWork, bill_repo: BillRepository):
        self.uow = uow
        self.bill_repo = bill_repo

    async def execute(self, bill_id: str) -> Result[DeleteBillResponseDTO]:
        """
        Delete a bill

        Errors:
            BILL_NOT_FOUND: No bill has this identifier
            DELETE_BILL_FAILED: Unexpected store failure (underlying message)
        """
        try:
            deleted = await self.bill_repo.delete(bill_id)
            if not deleted:
                return Return.err(
                    Error(
                        code="BILL_NOT_FOUND",
                        message="Bill not found",
                    )
                )
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete bill {bill_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_BILL_FAILED",
                    message=str(e),
                )
            )

        logger.info(f"Deleted bill {bill_id}")
        return Return.ok(DeleteBillResponseDTO())
