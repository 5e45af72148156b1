"""Tests for SearchStockUseCase and GetSupplyHistoryUseCase."""

import pytest

from stockledger.application.dto.requests import StockSearchRequest, SupplyHistoryRequest
from stockledger.application.use_cases.search_stock import SearchStockUseCase
from stockledger.application.use_cases.supply_history import GetSupplyHistoryUseCase
from stockledger.core.entities.stock import StockFields, SupplyBatch
from stockledger.core.exceptions import StockItemNotFoundError, ValidationError
from stockledger.infrastructure.storage.memory import InMemoryStockRepository


@pytest.fixture
def repository(ledger, lager) -> InMemoryStockRepository:
    stout = ledger.create_item(
        StockFields(
            name="Dry Stout",
            type="Stout",
            supplier="Harbour Brewing",
            quantity=5,
            base_cost=20,
            markup=5,
            minimum_stock=10,
        )
    ).item
    supplied = ledger.add_supply(lager, SupplyBatch(quantity=20, base_cost=13.0)).item
    supplied = ledger.add_supply(
        supplied, SupplyBatch(quantity=40, base_cost=14.0, supplier="Craft Beer Co.")
    ).item
    return InMemoryStockRepository([supplied, stout])


class TestSearchStockUseCase:
    def test_search_and_sort(self, repository):
        use_case = SearchStockUseCase(stock_repository=repository)
        items = use_case.execute(StockSearchRequest(sort_field="selling_price", sort_order="desc"))
        assert [i.name for i in items] == ["Dry Stout", "Premium Lager"]

    def test_low_stock_only(self, repository):
        use_case = SearchStockUseCase(stock_repository=repository)
        items = use_case.execute(StockSearchRequest(low_stock_only=True))
        assert [i.name for i in items] == ["Dry Stout"]

    def test_low_stock_emptiest_first(self, repository, ledger):
        empty = ledger.create_item(
            StockFields(name="Alt", type="Altbier", quantity=0, minimum_stock=12)
        ).item
        repository.add(empty)
        use_case = SearchStockUseCase(stock_repository=repository)
        items = use_case.execute(StockSearchRequest(low_stock_only=True, sort_field="quantity"))
        assert [i.name for i in items] == ["Alt", "Dry Stout"]

    def test_response(self, repository):
        use_case = SearchStockUseCase(stock_repository=repository)
        response = use_case.to_response(use_case.execute(StockSearchRequest(search_term="harbour")))
        assert response.total == 1
        assert response.items[0].stock_status == "low_stock"

    def test_bad_sort_field(self, repository):
        use_case = SearchStockUseCase(stock_repository=repository)
        with pytest.raises(ValidationError):
            use_case.execute(StockSearchRequest(sort_field="id"))


class TestGetSupplyHistoryUseCase:
    def _lager_id(self, repository):
        return next(i.id for i in repository.list_items() if i.name == "Premium Lager")

    def test_full_history(self, repository):
        use_case = GetSupplyHistoryUseCase(stock_repository=repository)
        item_id = self._lager_id(repository)
        entries = use_case.execute(SupplyHistoryRequest(item_id=item_id))
        assert [e.quantity for e in entries] == [40, 20]

    def test_filtered_by_supplier(self, repository):
        use_case = GetSupplyHistoryUseCase(stock_repository=repository)
        item_id = self._lager_id(repository)
        entries = use_case.execute(SupplyHistoryRequest(item_id=item_id, supplier="craft"))
        response = use_case.to_response(item_id, entries)
        assert response.total == 1
        assert response.entries[0].supplier == "Craft Beer Co."

    def test_unknown_item(self, repository):
        use_case = GetSupplyHistoryUseCase(stock_repository=repository)
        with pytest.raises(StockItemNotFoundError):
            use_case.execute(SupplyHistoryRequest(item_id="missing"))
