"""Tests for response DTO mapping."""

from stockledger.application.dto.responses import (
    ClientStockResponse,
    ErrorResponse,
    StockItemResponse,
    SupplyEntryResponse,
)
from stockledger.core.entities.stock import SupplyBatch
from stockledger.core.exceptions import StockItemNotFoundError


def test_client_view_hides_costs(lager):
    response = ClientStockResponse.from_item(lager)
    data = response.model_dump()
    assert data["selling_price"] == 16.9
    assert "total_cost" not in data
    assert "markup" not in data


def test_error_response_from_exception():
    response = ErrorResponse(**StockItemNotFoundError("beer9").to_dict())
    assert response.error == "STOCK_ITEM_NOT_FOUND"
    assert response.details == {"item_id": "beer9"}


def test_entry_with_comparison(ledger, lager):
    item = ledger.add_supply(lager, SupplyBatch(quantity=10, base_cost=12.0)).item
    entry = ledger.add_supply(item, SupplyBatch(quantity=10, base_cost=13.2)).entry
    response = SupplyEntryResponse.from_entry(entry)
    assert response.comparison_to_previous.percentage_change == 10.0
    assert response.entry_type == "supply"


def test_item_margin_health_thresholds(lager):
    assert StockItemResponse.from_item(lager).margin_health == "healthy"
    strict = StockItemResponse.from_item(lager, 40.0, 50.0)
    assert strict.margin_health == "low"
    assert strict.profit_margin == 30.0
    assert strict.total_value == 1300.0
