"""In-memory storage implementations."""

from stockledger.infrastructure.storage.memory.order_repository import (
    InMemoryOrderRepository,
)
from stockledger.infrastructure.storage.memory.stock_repository import (
    InMemoryStockRepository,
)

# Singleton instances
_stock_repository: InMemoryStockRepository | None = None
_order_repository: InMemoryOrderRepository | None = None


def get_stock_repository() -> InMemoryStockRepository:
    """Get singleton stock repository instance."""
    global _stock_repository
    if _stock_repository is None:
        _stock_repository = InMemoryStockRepository()
    return _stock_repository


def get_order_repository() -> InMemoryOrderRepository:
    """Get singleton order repository instance."""
    global _order_repository
    if _order_repository is None:
        _order_repository = InMemoryOrderRepository()
    return _order_repository


def reset_repositories() -> None:
    """Drop singleton repositories (for testing)."""
    global _stock_repository, _order_repository
    _stock_repository = None
    _order_repository = None


__all__ = [
    # Repository classes
    "InMemoryStockRepository",
    "InMemoryOrderRepository",
    # Factory functions
    "get_stock_repository",
    "get_order_repository",
    "reset_repositories",
]
