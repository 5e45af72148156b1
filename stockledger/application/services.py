"""
Service factory functions for dependency injection.

This module provides factory functions that wire settings and
infrastructure implementations to core services. Use cases should import
from here.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from stockledger.config import get_logger, get_settings
from stockledger.core.services import OrderService, StockLedgerService

if TYPE_CHECKING:
    from stockledger.core.interfaces import IOrderRepository, IStockRepository
    from stockledger.infrastructure.export import SupplyHistoryCsvExporter

logger = get_logger(__name__)

# Singleton service instances
_stock_ledger_service: StockLedgerService | None = None
_order_service: OrderService | None = None


def get_stock_ledger_service() -> StockLedgerService:
    """
    Get or create the StockLedgerService configured from settings.

    Returns:
        Configured StockLedgerService
    """
    global _stock_ledger_service

    if _stock_ledger_service is None:
        pricing = get_settings().pricing
        _stock_ledger_service = StockLedgerService(
            precision=pricing.currency_precision,
            price_deviation_threshold=pricing.price_deviation_threshold,
            allow_negative_markup=pricing.allow_negative_markup,
        )
    return _stock_ledger_service


def get_order_service() -> OrderService:
    """Get or create the OrderService."""
    global _order_service

    if _order_service is None:
        _order_service = OrderService()
    return _order_service


def get_csv_exporter() -> "SupplyHistoryCsvExporter":
    """Create a CSV exporter."""
    from stockledger.infrastructure.export import SupplyHistoryCsvExporter

    return SupplyHistoryCsvExporter()


def seed_stock_repository(
    repository: "IStockRepository",
    path: Path | None = None,
) -> int:
    """
    Load the seed catalogue into a repository.

    Items whose id is already present are skipped.

    Returns:
        Number of items added
    """
    from stockledger.infrastructure.seed import load_catalogue

    path = path or get_settings().catalogue.seed_path
    added = 0
    for item in load_catalogue(path):
        if repository.get(item.id) is None:
            repository.add(item)
            added += 1
    logger.info("stock_repository_seeded", path=str(path), added=added)
    return added


def seed_order_repository(
    repository: "IOrderRepository",
    path: Path | None = None,
) -> int:
    """Load the seed catalogue's order history, skipping known order ids."""
    from stockledger.infrastructure.seed import load_orders

    path = path or get_settings().catalogue.seed_path
    added = 0
    for order in load_orders(path):
        if repository.get(order.id) is None:
            repository.add(order)
            added += 1
    logger.info("order_repository_seeded", path=str(path), added=added)
    return added


def reset_services() -> None:
    """Reset all singleton services (for testing)."""
    global _stock_ledger_service, _order_service
    _stock_ledger_service = None
    _order_service = None
