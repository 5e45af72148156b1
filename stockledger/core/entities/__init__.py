"""Core domain entities."""

from stockledger.core.entities.order import (
    ORDER_TRANSITIONS,
    Order,
    OrderDetails,
    OrderStatus,
)
from stockledger.core.entities.stock import (
    BatchComparison,
    MarginHealth,
    StockFields,
    StockItem,
    StockStatus,
    SupplyBatch,
    SupplyEntry,
    SupplyEntryType,
)

__all__ = [
    # Stock entities
    "StockItem",
    "StockFields",
    "SupplyBatch",
    "SupplyEntry",
    "SupplyEntryType",
    "BatchComparison",
    "StockStatus",
    "MarginHealth",
    # Order entities
    "Order",
    "OrderDetails",
    "OrderStatus",
    "ORDER_TRANSITIONS",
]
