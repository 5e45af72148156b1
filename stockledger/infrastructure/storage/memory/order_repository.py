"""In-memory implementation of order storage."""

import threading

from stockledger.config import get_logger
from stockledger.core.entities.order import Order, OrderStatus
from stockledger.core.exceptions import OrderNotFoundError, ValidationError
from stockledger.core.interfaces.order_repository import IOrderRepository

logger = get_logger(__name__)


class InMemoryOrderRepository(IOrderRepository):
    """Dict-backed client order storage."""

    def __init__(self):
        self._orders: dict[str, Order] = {}
        self._lock = threading.Lock()

    def add(self, order: Order) -> Order:
        with self._lock:
            if order.id in self._orders:
                raise ValidationError("id", "order already exists", order.id)
            self._orders[order.id] = order.model_copy()
        logger.info("order_stored", order_id=order.id)
        return order

    def get(self, order_id: str) -> Order | None:
        with self._lock:
            order = self._orders.get(order_id)
        return order.model_copy() if order is not None else None

    def require(self, order_id: str) -> Order:
        order = self.get(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def update(self, order: Order) -> Order:
        with self._lock:
            if order.id not in self._orders:
                raise OrderNotFoundError(order.id)
            self._orders[order.id] = order.model_copy()
        logger.info("order_updated", order_id=order.id, status=order.status.value)
        return order

    def list_orders(self, status: OrderStatus | None = None) -> list[Order]:
        """Orders newest first, optionally filtered by status."""
        with self._lock:
            orders = list(self._orders.values())
        if status is not None:
            orders = [o for o in orders if o.status == status]
        return sorted(orders, key=lambda o: o.order_date, reverse=True)
