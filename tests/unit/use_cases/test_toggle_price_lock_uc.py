"""Tests for TogglePriceLockUseCase and DeleteStockItemUseCase."""

from unittest.mock import Mock

import pytest

from stockledger.application.dto.requests import PriceLockRequest
from stockledger.application.use_cases.delete_stock_item import DeleteStockItemUseCase
from stockledger.application.use_cases.toggle_price_lock import TogglePriceLockUseCase
from stockledger.core.entities.stock import SupplyEntryType
from stockledger.core.exceptions import StockItemNotFoundError


@pytest.fixture
def mock_stock_repository(lager):
    repository = Mock()
    repository.require.return_value = lager
    repository.update.side_effect = lambda item: item
    return repository


class TestTogglePriceLockUseCase:
    def test_lock_persists(self, mock_stock_repository, ledger):
        use_case = TogglePriceLockUseCase(stock_repository=mock_stock_repository, ledger=ledger)
        result = use_case.execute(PriceLockRequest(item_id="x", lock=True, current_price=17.5))
        assert result.item.is_price_locked is True
        assert result.item.selling_price == 17.5
        mock_stock_repository.update.assert_called_once()

    def test_same_state_skips_update(self, mock_stock_repository, ledger):
        use_case = TogglePriceLockUseCase(stock_repository=mock_stock_repository, ledger=ledger)
        result = use_case.execute(PriceLockRequest(item_id="x", lock=False))
        assert result.entry is None
        mock_stock_repository.update.assert_not_called()

    def test_unlock_keeps_locked_price(self, mock_stock_repository, ledger, lager):
        locked = ledger.toggle_price_lock(lager, lock=True, current_price=20.0).item
        mock_stock_repository.require.return_value = locked
        use_case = TogglePriceLockUseCase(stock_repository=mock_stock_repository, ledger=ledger)
        result = use_case.execute(PriceLockRequest(item_id=lager.id, lock=False))
        assert result.item.is_price_locked is False
        assert result.item.selling_price == 20.0

    def test_unlock_with_recalculate_reprices(self, mock_stock_repository, ledger, lager):
        locked = ledger.toggle_price_lock(lager, lock=True, current_price=20.0).item
        # Put the markup back to 30% so the repricing is visible
        locked = locked.model_copy(update={"markup": 30.0})
        mock_stock_repository.require.return_value = locked
        use_case = TogglePriceLockUseCase(stock_repository=mock_stock_repository, ledger=ledger)

        result = use_case.execute(
            PriceLockRequest(item_id=lager.id, lock=False, recalculate=True)
        )

        assert result.item.is_price_locked is False
        assert result.item.selling_price == 16.9
        assert result.entry.entry_type == SupplyEntryType.PRICE_UNLOCK
        assert [e.entry_type for e in result.item.supply_history] == [
            SupplyEntryType.PRICE_CHANGE,
            SupplyEntryType.PRICE_UNLOCK,
            SupplyEntryType.PRICE_LOCK,
        ]
        assert result.item.supply_history[0].price_change == -3.1
        mock_stock_repository.update.assert_called_once_with(result.item)

    def test_recalculate_ignored_on_lock(self, mock_stock_repository, ledger):
        use_case = TogglePriceLockUseCase(stock_repository=mock_stock_repository, ledger=ledger)
        result = use_case.execute(
            PriceLockRequest(item_id="x", lock=True, current_price=20.0, recalculate=True)
        )
        assert result.item.selling_price == 20.0
        assert len(result.item.supply_history) == 1

    def test_response_reports_warning(self, mock_stock_repository, ledger):
        use_case = TogglePriceLockUseCase(stock_repository=mock_stock_repository, ledger=ledger)
        result = use_case.execute(PriceLockRequest(item_id="x", lock=True, current_price=25.0))
        response = use_case.to_response(result)
        assert response.entry.entry_type == "price_lock"
        assert response.entry.price_lock_changed is True
        assert response.warnings[0].price == 25.0


class TestDeleteStockItemUseCase:
    def test_delete(self, mock_stock_repository, lager):
        use_case = DeleteStockItemUseCase(stock_repository=mock_stock_repository)
        removed = use_case.execute(lager.id)
        mock_stock_repository.delete.assert_called_once_with(lager.id)
        assert use_case.to_response(removed).deleted is True

    def test_delete_missing(self, mock_stock_repository):
        mock_stock_repository.require.side_effect = StockItemNotFoundError("nope")
        use_case = DeleteStockItemUseCase(stock_repository=mock_stock_repository)
        with pytest.raises(StockItemNotFoundError):
            use_case.execute("nope")
        mock_stock_repository.delete.assert_not_called()
