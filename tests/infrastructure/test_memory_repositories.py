"""Tests for in-memory repositories."""

from datetime import datetime, timedelta, timezone

import pytest

from stockledger.core.entities.order import Order, OrderStatus
from stockledger.core.exceptions import (
    ConcurrencyConflictError,
    DuplicateStockItemError,
    OrderNotFoundError,
    StockItemNotFoundError,
    ValidationError,
)
from stockledger.infrastructure.storage.memory import (
    InMemoryOrderRepository,
    InMemoryStockRepository,
    get_order_repository,
    get_stock_repository,
    reset_repositories,
)


class TestInMemoryStockRepository:
    def test_add_and_get(self, lager):
        repository = InMemoryStockRepository()
        repository.add(lager)
        assert repository.get(lager.id) == lager
        assert len(repository) == 1

    def test_get_missing(self):
        assert InMemoryStockRepository().get("nope") is None

    def test_require_missing(self):
        with pytest.raises(StockItemNotFoundError):
            InMemoryStockRepository().require("nope")

    def test_duplicate(self, stock_repository, lager):
        with pytest.raises(DuplicateStockItemError):
            stock_repository.add(lager)

    def test_returns_copies(self, stock_repository, lager):
        loaded = stock_repository.require(lager.id)
        loaded.name = "Changed"
        assert stock_repository.require(lager.id).name == "Premium Lager"

    def test_update_bumps_version(self, stock_repository, lager):
        saved = stock_repository.update(lager.model_copy(update={"quantity": 1}))
        assert saved.version == 2
        assert stock_repository.require(lager.id).quantity == 1

    def test_stale_update_rejected(self, stock_repository, lager):
        """Two writers that loaded the same version cannot both win."""
        first = stock_repository.require(lager.id)
        second = stock_repository.require(lager.id)
        stock_repository.update(first.model_copy(update={"quantity": 5}))
        with pytest.raises(ConcurrencyConflictError):
            stock_repository.update(second.model_copy(update={"quantity": 7}))
        assert stock_repository.require(lager.id).quantity == 5

    def test_update_missing(self, lager):
        with pytest.raises(StockItemNotFoundError):
            InMemoryStockRepository().update(lager)

    def test_delete(self, stock_repository, lager):
        stock_repository.delete(lager.id)
        assert stock_repository.get(lager.id) is None
        with pytest.raises(StockItemNotFoundError):
            stock_repository.delete(lager.id)

    def test_list_keeps_insertion_order(self, ledger, lager_fields):
        items = [
            ledger.create_item(lager_fields.model_copy(update={"name": name})).item
            for name in ("Zwickel", "Alt", "Kolsch")
        ]
        repository = InMemoryStockRepository(items)
        assert [i.name for i in repository.list_items()] == ["Zwickel", "Alt", "Kolsch"]

    def test_list_items_returns_copies(self, stock_repository, lager):
        listed = stock_repository.list_items()[0]
        listed.supply_history.append(None)
        assert stock_repository.require(lager.id).supply_history == []


def _order(order_id: str, minutes: int, status=OrderStatus.PENDING) -> Order:
    return Order(
        id=order_id,
        stock_item_id="beer1",
        product_name="Premium Lager",
        quantity=1,
        unit_price=4.48,
        total_price=4.48,
        order_date=datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(minutes=minutes),
        status=status,
        delivery_address="Somewhere 1",
        contact_number="09123456789",
    )


class TestInMemoryOrderRepository:
    def test_add_and_require(self):
        repository = InMemoryOrderRepository()
        repository.add(_order("o1", 0))
        assert repository.require("o1").id == "o1"

    def test_duplicate(self):
        repository = InMemoryOrderRepository()
        repository.add(_order("o1", 0))
        with pytest.raises(ValidationError):
            repository.add(_order("o1", 1))

    def test_missing(self):
        repository = InMemoryOrderRepository()
        with pytest.raises(OrderNotFoundError):
            repository.require("o1")
        with pytest.raises(OrderNotFoundError):
            repository.update(_order("o1", 0))

    def test_list_newest_first_and_by_status(self):
        repository = InMemoryOrderRepository()
        repository.add(_order("old", 0))
        repository.add(_order("new", 5, OrderStatus.PROCESSING))
        assert [o.id for o in repository.list_orders()] == ["new", "old"]
        assert [o.id for o in repository.list_orders(OrderStatus.PENDING)] == ["old"]


def test_singletons_reset():
    assert get_stock_repository() is get_stock_repository()
    first = get_order_repository()
    reset_repositories()
    assert get_order_repository() is not first
