"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import datetime, timedelta, timezone

import pytest

from stockledger.application.services import reset_services
from stockledger.config import reset_settings
from stockledger.core.entities.stock import StockFields, StockItem
from stockledger.core.services.stock_ledger import StockLedgerService
from stockledger.infrastructure.storage.memory import (
    InMemoryStockRepository,
    reset_repositories,
)


class FakeClock:
    """Deterministic clock advancing one minute per call."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now = current + timedelta(minutes=1)
        return current


@pytest.fixture(autouse=True)
def _reset_singletons() -> Generator[None, None, None]:
    """Start every test with fresh settings, services and repositories."""
    reset_settings()
    reset_services()
    reset_repositories()
    yield
    reset_settings()
    reset_services()
    reset_repositories()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ledger(clock) -> StockLedgerService:
    return StockLedgerService(clock=clock)


@pytest.fixture
def lager_fields() -> StockFields:
    """Base 12 + shipping 0.5 + other 0.5 = 13.00 at 30% markup."""
    return StockFields(
        name="Premium Lager",
        type="Lager",
        supplier="Premium Breweries Ltd",
        quantity=100,
        base_cost=12.0,
        shipping_cost=0.5,
        additional_costs=0.5,
        markup=30,
        is_markup_percentage=True,
        minimum_stock=20,
    )


@pytest.fixture
def lager(ledger, lager_fields) -> StockItem:
    return ledger.create_item(lager_fields).item


@pytest.fixture
def stock_repository(lager) -> InMemoryStockRepository:
    return InMemoryStockRepository([lager])
