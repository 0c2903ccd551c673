"""Unit tests for ListBills and SearchBills use cases"""

import pytest
from datetime import date, datetime, timezone
from unittest.mock import AsyncMock

from src.app.use_cases.bills.list_bills import ListBills
from src.app.use_cases.bills.search_bills import SearchBills
from src.domain.bill import Bill


def make_bill(name, mobile, bill_date):
    return Bill(
        id=f"bill-{name.lower()}",
        name=name,
        mobile=mobile,
        bill_date=bill_date,
        morning=1.0,
        evening=1.0,
        rate=40.0,
        total_liters=2.0,
        total_amount=80.0,
        created_at=datetime(2024, 1, 1, 6, 0, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def mock_bill_repo():
    repo = AsyncMock()
    repo.list.return_value = [
        make_bill("Asha", "9876543210", date(2024, 1, 6)),
        make_bill("Ravi", "9123456780", date(2024, 1, 5)),
    ]
    return repo


class TestListBills:
    """Test suite for ListBills use case"""

    @pytest.mark.asyncio
    async def test_list_without_query(self, mock_bill_repo):
        # Act
        result = await ListBills(mock_bill_repo).execute()

        # Assert
        assert result.is_ok()
        assert [bill.name for bill in result.value] == ["Asha", "Ravi"]
        mock_bill_repo.list.assert_awaited_once_with(query=None)

    @pytest.mark.asyncio
    async def test_empty_query_means_no_filter(self, mock_bill_repo):
        # Act
        await ListBills(mock_bill_repo).execute("")

        # Assert
        mock_bill_repo.list.assert_awaited_once_with(query=None)

    @pytest.mark.asyncio
    async def test_query_is_passed_through(self, mock_bill_repo):
        # Act
        await ListBills(mock_bill_repo).execute("ash")

        # Assert
        mock_bill_repo.list.assert_awaited_once_with(query="ash")

    @pytest.mark.asyncio
    async def test_no_match_returns_empty_list(self, mock_bill_repo):
        # Arrange
        mock_bill_repo.list.return_value = []

        # Act
        result = await ListBills(mock_bill_repo).execute("nobody")

        # Assert
        assert result.is_ok()
        assert result.value == []

    @pytest.mark.asyncio
    async def test_store_failure(self, mock_bill_repo):
        # Arrange
        mock_bill_repo.list.side_effect = RuntimeError("db down")

        # Act
        result = await ListBills(mock_bill_repo).execute()

        # Assert
        assert result.is_err()
        assert result.error.code == "FETCH_BILLS_FAILED"
        assert result.error.message == "Failed to fetch bills"


class TestSearchBills:
    """Test suite for SearchBills use case"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", [None, ""])
    async def test_query_required(self, mock_bill_repo, query):
        # Act
        result = await SearchBills(mock_bill_repo).execute(query)

        # Assert
        assert result.is_err()
        assert result.error.code == "SEARCH_QUERY_REQUIRED"
        assert result.error.message == "Search query required"
        mock_bill_repo.list.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_search_returns_matches(self, mock_bill_repo):
        # Arrange
        mock_bill_repo.list.return_value = [make_bill("Asha", "9876543210", date(2024, 1, 6))]

        # Act
        result = await SearchBills(mock_bill_repo).execute("ASH")

        # Assert
        assert result.is_ok()
        assert len(result.value) == 1
        assert result.value[0].mobile == "9876543210"
        mock_bill_repo.list.assert_awaited_once_with(query="ASH")

    @pytest.mark.asyncio
    async def test_store_failure(self, mock_bill_repo):
        # Arrange
        mock_bill_repo.list.side_effect = RuntimeError("db down")

        # Act
        result = await SearchBills(mock_bill_repo).execute("ash")

        # Assert
        assert result.is_err()
        assert result.error.code == "SEARCH_FAILED"
        assert result.error.message == "Search failed"
