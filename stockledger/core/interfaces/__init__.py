"""Core interfaces (ports) for dependency injection."""

from stockledger.core.interfaces.order_repository import IOrderRepository
from stockledger.core.interfaces.stock_repository import IStockRepository

__all__ = [
    "IStockRepository",
    "IOrderRepository",
]
