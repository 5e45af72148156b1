"""Tests for AddSupplyUseCase."""

from unittest.mock import Mock

import pytest

from stockledger.application.dto.requests import AddSupplyRequest
from stockledger.application.use_cases.add_supply import AddSupplyUseCase
from stockledger.core.exceptions import ConcurrencyConflictError, ValidationError


@pytest.fixture
def mock_stock_repository(lager):
    repository = Mock()
    repository.require.return_value = lager
    repository.update.side_effect = lambda item: item.model_copy(
        update={"version": item.version + 1}
    )
    return repository


@pytest.fixture
def use_case(mock_stock_repository, ledger):
    return AddSupplyUseCase(stock_repository=mock_stock_repository, ledger=ledger)


class TestAddSupplyUseCase:
    def test_blends_and_persists(self, use_case, mock_stock_repository):
        """Test WAC recalculation reaches the repository."""
        request = AddSupplyRequest(item_id="x", quantity=50, base_cost=18.0, notes="Restock")
        result = use_case.execute(request)
        updated_item = mock_stock_repository.update.call_args[0][0]
        assert updated_item.quantity == 150
        assert updated_item.total_cost == 14.67
        assert updated_item.selling_price == 19.07
        assert result.entry.notes == "Restock"

    def test_invalid_batch_not_persisted(self, use_case, mock_stock_repository):
        with pytest.raises(ValidationError):
            use_case.execute(AddSupplyRequest(item_id="x", quantity=0, base_cost=18.0))
        mock_stock_repository.update.assert_not_called()

    def test_conflict_propagates(self, use_case, mock_stock_repository):
        mock_stock_repository.update.side_effect = ConcurrencyConflictError("x", 1, 2)
        with pytest.raises(ConcurrencyConflictError):
            use_case.execute(AddSupplyRequest(item_id="x", quantity=5, base_cost=13.0))

    def test_preview_does_not_persist(self, use_case, mock_stock_repository):
        preview = use_case.preview(AddSupplyRequest(item_id="x", quantity=50, base_cost=18.0))
        assert preview.new_average_cost == 14.67
        response = use_case.preview_response(preview)
        assert response.new_selling_price == 19.07
        mock_stock_repository.update.assert_not_called()

    def test_response(self, use_case):
        result = use_case.execute(
            AddSupplyRequest(item_id="x", quantity=50, base_cost=18.0, batch_id="B-1")
        )
        response = use_case.to_response(result)
        assert response.entry.batch_id == "B-1"
        assert response.entry.entry_type == "supply"
        assert response.item.supply_entries == 1
