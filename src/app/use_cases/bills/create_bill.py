"""CreateBill Use Case

Validates a raw bill submission, computes the derived totals and persists
the bill.
"""

import logging
from typing import Any, Mapping
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.bill_repository import BillRepository
from src.domain.bill import Bill
from src.domain.bill_rules import normalize_bill_fields, compute_totals
from .dtos import BillResponseDTO

logger = logging.getLogger(__name__)


class CreateBill:
    """
    Use Case: Create a bill from an untyped payload

    Business Rules:
    1. Name and Mobile are required, Mobile is exactly 10 digits
    2. Date must parse to a calendar date
    3. Morning/Evening >= 0, Rate >= 0.01
    4. TotalLiters and TotalAmount are always computed here, never supplied

    Flow:
    1. Coerce and validate the raw fields
    2. Compute totals
    3. Persist the bill and commit
    4. Return the stored bill
    """

    def __init__(
        self,
        uow: UnitOfWork,
        bill_repo: BillRepository,
    ):
        self.uow = uow
        self.bill_repo = bill_repo

    async def execute(self, raw: Mapping[str, Any]) -> Result[BillResponseDTO]:
        """
        Execute bill creation

        Args:
            raw: Payload with Name, Mobile, Date, Morning, Evening, Rate

        Returns:
            Result[BillResponseDTO]: Success with the stored bill or error

        Errors:
            VALIDATION_ERROR: A field is missing or invalid
            PERSISTENCE_VALIDATION_FAILED: The store rejected the record
            CREATE_BILL_FAILED: Any other failure while persisting
        """
        logger.debug(
            "Raw bill values: %s",
            {key: raw.get(key) for key in ("Name", "Mobile", "Date", "Morning", "Evening", "Rate")},
        )

        # Step 1: Coerce and validate
        fields_result = normalize_bill_fields(raw)
        if fields_result.is_err():
            return fields_result
        fields = fields_result.value

        # Step 2: Derived totals
        total_liters, total_amount = compute_totals(
            fields.morning, fields.evening, fields.rate
        )

        try:
            # Step 3: Persist
            bill = Bill(
                name=fields.name,
                mobile=fields.mobile,
                bill_date=fields.bill_date,
                morning=fields.morning,
                evening=fields.evening,
                rate=fields.rate,
                total_liters=total_liters,
                total_amount=total_amount,
            )
            created_bill = await self.bill_repo.create(bill)
            await self.uow.commit()

        except IntegrityError as e:
            await self.uow.rollback()
            logger.warning(f"Bill rejected by store: {e.orig}")
            return Return.err(
                Error(
                    code="PERSISTENCE_VALIDATION_FAILED",
                    message=f"Bill validation failed: {e.orig}",
                    reason=str(e),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create bill: {e}")
            return Return.err(
                Error(
                    code="CREATE_BILL_FAILED",
                    message="Failed to create bill",
                    reason=str(e),
                )
            )

        logger.info(f"Created bill {created_bill.id} for mobile {created_bill.mobile}")

        # Step 4: Build response
        return Return.ok(BillResponseDTO.from_entity(created_bill))
