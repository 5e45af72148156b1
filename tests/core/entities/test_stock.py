"""Tests for stock entities."""

from datetime import datetime, timezone

import pydantic
import pytest

from stockledger.core.entities.stock import (
    StockItem,
    StockStatus,
    SupplyEntry,
    SupplyEntryType,
)


def _item(**overrides) -> StockItem:
    data = {
        "name": "Craft IPA",
        "type": "IPA",
        "quantity": 80.0,
        "base_cost": 3.0,
        "shipping_cost": 0.7,
        "additional_costs": 0.3,
        "total_cost": 4.0,
        "selling_price": 5.8,
        "minimum_stock": 30.0,
        "available": True,
    }
    data.update(overrides)
    return StockItem(**data)


class TestStockItem:
    """Tests for StockItem entity."""

    def test_defaults(self):
        """Test default values."""
        item = StockItem(name="Stout", type="Stout")
        assert item.quantity == 0.0
        assert item.total_cost == 0.0
        assert item.is_price_locked is False
        assert item.available is False
        assert item.supply_history == []
        assert item.version == 1
        assert len(item.id) == 32

    def test_profit_margin(self):
        """Margin is relative to cost."""
        item = _item()
        assert item.profit_margin == pytest.approx(45.0)

    def test_profit_margin_zero_cost(self):
        item = _item(base_cost=0, shipping_cost=0, additional_costs=0, total_cost=0)
        assert item.profit_margin == 0.0

    def test_total_value(self):
        assert _item().total_value == pytest.approx(320.0)

    def test_stock_status(self):
        assert _item().stock_status == StockStatus.IN_STOCK
        assert _item(quantity=30).stock_status == StockStatus.LOW_STOCK
        assert _item(quantity=0).stock_status == StockStatus.OUT_OF_STOCK

    def test_below_minimum_is_inclusive(self):
        assert _item(quantity=30).is_below_minimum is True
        assert _item(quantity=31).is_below_minimum is False

    def test_last_supply_skips_price_events(self):
        """Price lock rows are not deliveries."""
        delivery = SupplyEntry(quantity=10, base_cost=3.0, total_cost=3.0)
        lock = SupplyEntry(entry_type=SupplyEntryType.PRICE_LOCK)
        item = _item(supply_history=[lock, delivery])
        assert item.last_supply == delivery

    def test_last_supply_none_without_deliveries(self):
        assert _item().last_supply is None


class TestSupplyEntry:
    """Tests for SupplyEntry entity."""

    def test_entries_are_frozen(self):
        entry = SupplyEntry(quantity=10)
        with pytest.raises(pydantic.ValidationError):
            entry.quantity = 20

    def test_is_supply(self):
        assert SupplyEntry().is_supply is True
        assert SupplyEntry(entry_type=SupplyEntryType.PRICE_UNLOCK).is_supply is False

    def test_parses_iso_dates(self):
        entry = SupplyEntry.model_validate(
            {"date": "2023-10-20T10:00:00Z", "delivery_date": "2023-10-20"}
        )
        assert entry.date == datetime(2023, 10, 20, 10, tzinfo=timezone.utc)
        assert entry.delivery_date.isoformat() == "2023-10-20"
