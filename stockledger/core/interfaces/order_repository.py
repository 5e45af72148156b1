"""Abstract interface for order storage."""

from abc import ABC, abstractmethod

from stockledger.core.entities.order import Order, OrderStatus


class IOrderRepository(ABC):
    """Interface for client order persistence."""

    @abstractmethod
    def add(self, order: Order) -> Order:
        """Store a new order."""
        pass

    @abstractmethod
    def get(self, order_id: str) -> Order | None:
        """Get order by ID."""
        pass

    @abstractmethod
    def require(self, order_id: str) -> Order:
        """Get order by ID or raise OrderNotFoundError."""
        pass

    @abstractmethod
    def update(self, order: Order) -> Order:
        """Replace a stored order."""
        pass

    @abstractmethod
    def list_orders(self, status: OrderStatus | None = None) -> list[Order]:
        """Orders newest first, optionally filtered by status."""
        pass
