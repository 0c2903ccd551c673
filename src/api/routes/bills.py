"""Bill API Routes

FastAPI routes for creating, listing, searching and deleting bills.
"""

from typing import Any, List, Optional
from fastapi import APIRouter, Body, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.bill_request import CreateBillRequestSchema
from src.app.use_cases.bills.dtos import BillResponseDTO, DeleteBillResponseDTO
from src.app.use_cases.bills.create_bill import CreateBill
from src.app.use_cases.bills.list_bills import ListBills
from src.app.use_cases.bills.search_bills import SearchBills
from src.app.use_cases.bills.delete_bill import DeleteBill
from src.adapter.repositories.bill_repository import SqlAlchemyBillRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError, ServerError

router = APIRouter(prefix="/bills", tags=["Bills"])


@router.post(
    "",
    response_model=BillResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {
            "description": "Missing or invalid fields",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "VALIDATION_ERROR",
                            "message": "Bill validation failed: Mobile: Mobile number must be 10 digits",
                            "details": {"Mobile": "Mobile number must be 10 digits"}
                        }
                    }
                }
            }
        }
    }
)
async def create_bill(
    payload: Any = Body(
        default=None,
        description="Bill fields; a missing or non-object body counts as all fields missing"
    ),
    session: AsyncSession = Depends(get_session)
):
    """
    Create a bill and compute its totals.

    **Request body:**
    - `Name` (required): Customer name
    - `Mobile` (required): 10 digit mobile number
    - `Date` (required): Delivery date (ISO-8601)
    - `Morning` (required): Morning quantity (>= 0)
    - `Evening` (required): Evening quantity (>= 0)
    - `Rate` (required): Price per liter (>= 0.01)

    `TotalLiters` and `TotalAmount` are always computed by the server.

    **Returns:**
    - 201: The stored bill
    - 400: Missing, invalid or malformed fields, or the store rejected the record
    """
    uow = SqlAlchemyUnitOfWork(session)
    bill_repo = SqlAlchemyBillRepository(session)

    use_case = CreateBill(uow, bill_repo)
    request = CreateBillRequestSchema.from_payload(payload)
    result = await use_case.execute(request.to_raw())

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "",
    response_model=List[BillResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def list_bills(
    query: Optional[str] = Query(
        default=None,
        description="Optional text matched against Name (any case) and Mobile"
    ),
    session: AsyncSession = Depends(get_session)
):
    """
    List bills, most recent date first.

    **Query parameters:**
    - `query` (optional): When given, only bills whose Name or Mobile
      contains it are returned

    **Returns:**
    - 200: Array of bills (empty when nothing matches)
    - 500: Failed to fetch bills
    """
    bill_repo = SqlAlchemyBillRepository(session)

    use_case = ListBills(bill_repo)
    result = await use_case.execute(query)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get(
    "/search",
    response_model=List[BillResponseDTO],
    status_code=status.HTTP_200_OK,
    responses={
        400: {
            "description": "Missing search query",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "SEARCH_QUERY_REQUIRED",
                            "message": "Search query required"
                        }
                    }
                }
            }
        }
    }
)
async def search_bills(
    query: Optional[str] = Query(
        default=None,
        description="Text matched against Name (any case) and Mobile (required)"
    ),
    session: AsyncSession = Depends(get_session)
):
    """
    Search bills by Name or Mobile.

    **Returns:**
    - 200: Array of matching bills (empty when nothing matches)
    - 400: `query` missing
    - 500: Search failed
    """
    bill_repo = SqlAlchemyBillRepository(session)

    use_case = SearchBills(bill_repo)
    result = await use_case.execute(query)

    if result.is_err():
        if result.error.code == "SEARCH_QUERY_REQUIRED":
            raise ClientError(result.error)
        raise ServerError(result.error)

    return result.value


@router.delete(
    "/{bill_id}",
    response_model=DeleteBillResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        404: {
            "description": "Bill not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "BILL_NOT_FOUND",
                            "message": "Bill not found"
                        }
                    }
                }
            }
        }
    }
)
async def delete_bill(
    bill_id: str,
    session: AsyncSession = Depends(get_session)
):
    """
    Delete a bill by identifier.

    **Returns:**
    - 200: `{"message": "Bill deleted successfully"}`
    - 404: Bill not found
    - 500: Unexpected store failure
    """
    uow = SqlAlchemyUnitOfWork(session)
    bill_repo = SqlAlchemyBillRepository(session)

    use_case = DeleteBill(uow, bill_repo)
    result = await use_case.execute(bill_id)

    if result.is_err():
        if result.error.code == "BILL_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(result.error)

    return result.value
