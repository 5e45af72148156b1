"""
Domain exceptions for the stock ledger.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class LedgerError(Exception):
    """Base exception for all stock ledger errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for presentation layers."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Validation Exceptions
class ValidationError(LedgerError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )
        self.field = field


# Lookup Exceptions
class NotFoundError(LedgerError):
    """Referenced record does not exist in the current collection."""

    pass


class StockItemNotFoundError(NotFoundError):
    """Stock item not found."""

    def __init__(self, item_id: str):
        super().__init__(
            f"Stock item not found: {item_id}",
            code="STOCK_ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )


class OrderNotFoundError(NotFoundError):
    """Order not found."""

    def __init__(self, order_id: str):
        super().__init__(
            f"Order not found: {order_id}",
            code="ORDER_NOT_FOUND",
            details={"order_id": order_id},
        )


# Stock & Order Exceptions
class InsufficientStockError(LedgerError):
    """Requested quantity exceeds units on hand."""

    def __init__(self, item_id: str, requested: float, available: float):
        super().__init__(
            f"Insufficient stock for {item_id}: requested {requested}, available {available}",
            code="INSUFFICIENT_STOCK",
            details={"item_id": item_id, "requested": requested, "available": available},
        )


class InvalidOrderStateError(LedgerError):
    """Order status transition is not allowed."""

    def __init__(self, order_id: str, current: str, requested: str):
        super().__init__(
            f"Cannot move order {order_id} from '{current}' to '{requested}'",
            code="INVALID_ORDER_STATE",
            details={"order_id": order_id, "current": current, "requested": requested},
        )


# Storage Exceptions
class ConcurrencyConflictError(LedgerError):
    """Stored record changed since it was loaded."""

    def __init__(self, item_id: str, expected_version: int, actual_version: int):
        super().__init__(
            f"Stock item {item_id} was modified concurrently "
            f"(expected version {expected_version}, found {actual_version})",
            code="CONCURRENCY_CONFLICT",
            details={
                "item_id": item_id,
                "expected_version": expected_version,
                "actual_version": actual_version,
            },
        )


class DuplicateStockItemError(LedgerError):
    """Stock item with the same id already exists."""

    def __init__(self, item_id: str):
        super().__init__(
            f"Stock item already exists: {item_id}",
            code="DUPLICATE_STOCK_ITEM",
            details={"item_id": item_id},
        )


class ConfigurationError(LedgerError):
    """Configuration error."""

    pass
