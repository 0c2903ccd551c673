"""SQLAlchemy Bill Repository Implementation

Implements bill persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from sqlalchemy import delete, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.sql_functions import casefold
from src.app.repositories.bill_repository import BillRepository
from src.domain.bill import Bill


class SqlAlchemyBillRepository(BillRepository):
    """
    SQLAlchemy implementation of BillRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, bill: Bill) -> Bill:
        """
        Create a new bill

        Args:
            bill: Bill entity to persist

        Returns:
            Created Bill with generated ID
        """
        self.session.add(bill)
        await self.session.flush()
        await self.session.refresh(bill)
        return bill

    async def get_by_id(self, bill_id: str) -> Optional[Bill]:
        statement = select(Bill).where(Bill.id == bill_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list(self, query: Optional[str] = None) -> List[Bill]:
        """
        List bills ordered by date DESC, then creation time DESC

        Args:
            query: Literal substring matched against the case-folded name
                and, as-is, against mobile

        Returns:
            List of bills
        """
        statement = select(Bill)

        if query:
            statement = statement.where(
                or_(
                    casefold(Bill.name).contains(query.casefold(), autoescape=True),
                    Bill.mobile.contains(query, autoescape=True),
                )
            )

        statement = statement.order_by(Bill.bill_date.desc(), Bill.created_at.desc())

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def delete(self, bill_id: str) -> bool:
        """
        Delete a bill by ID

        Args:
            bill_id: Bill identifier

        Returns:
            True if a row was removed
        """
        statement = delete(Bill).where(Bill.id == bill_id)
        result = await self.session.execute(statement)
        return result.rowcount > 0
