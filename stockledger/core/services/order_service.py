"""
Client order service.

Validates client orders against stock on hand and moves stock out of (and
back into) the item when orders are placed or cancelled.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from stockledger.config import get_logger
from stockledger.core.entities.order import Order, OrderDetails, OrderStatus
from stockledger.core.entities.stock import StockItem, utc_now
from stockledger.core.exceptions import (
    InsufficientStockError,
    InvalidOrderStateError,
    ValidationError,
)
from stockledger.core.services.pricing import round_to_decimal

logger = get_logger(__name__)

CONTACT_NUMBER_PATTERN = re.compile(r"^\+?[\d\s-]{8,}$")


@dataclass
class OrderResult:
    """An order together with the stock item it moved."""

    order: Order
    item: StockItem | None


class OrderService:
    """Places and progresses client orders. Pure service; no storage."""

    def __init__(self, clock: Callable[[], datetime] | None = None):
        self._clock = clock or utc_now

    def place_order(self, item: StockItem, details: OrderDetails) -> OrderResult:
        """Reserve stock for a new pending order priced at the current selling price."""
        self.validate_details(details)

        if not item.available or item.quantity < details.quantity:
            raise InsufficientStockError(item.id, details.quantity, item.quantity)

        now = self._clock()
        order = Order(
            stock_item_id=item.id,
            product_name=item.name,
            quantity=details.quantity,
            unit_price=item.selling_price,
            total_price=round_to_decimal(item.selling_price * details.quantity),
            order_date=now,
            status=OrderStatus.PENDING,
            delivery_address=details.delivery_address.strip(),
            contact_number=details.contact_number.strip(),
            special_instructions=details.special_instructions,
        )

        remaining = item.quantity - details.quantity
        updated = item.model_copy(
            update={
                "quantity": remaining,
                "available": remaining > 0,
                "updated_at": now,
            }
        )

        logger.info(
            "order_placed",
            order_id=order.id,
            item_id=item.id,
            quantity=order.quantity,
            total_price=order.total_price,
            remaining=remaining,
        )
        return OrderResult(order=order, item=updated)

    def change_status(
        self, order: Order, item: StockItem | None, status: OrderStatus
    ) -> OrderResult:
        """
        Move an order along pending -> processing -> delivered.

        Cancelling an open order returns its quantity to ``item``. The item is
        only needed for a cancel and may be None once it has been deleted.
        Delivered and cancelled orders are final.
        """
        if not order.can_transition_to(status):
            raise InvalidOrderStateError(order.id, order.status.value, status.value)

        updated_item = item
        if status == OrderStatus.CANCELLED and item is not None:
            restored = item.quantity + order.quantity
            updated_item = item.model_copy(
                update={
                    "quantity": restored,
                    "available": restored > 0,
                    "updated_at": self._clock(),
                }
            )

        updated_order = order.model_copy(update={"status": status})
        logger.info(
            "order_status_changed",
            order_id=order.id,
            previous=order.status.value,
            status=status.value,
        )
        return OrderResult(order=updated_order, item=updated_item)

    @staticmethod
    def validate_details(details: OrderDetails) -> None:
        if not details.stock_item_id:
            raise ValidationError("stock_item_id", "please select a product")
        if details.quantity < 1:
            raise ValidationError("quantity", "must be at least 1", details.quantity)
        if not details.delivery_address.strip():
            raise ValidationError("delivery_address", "is required")
        contact = details.contact_number.strip()
        if not contact:
            raise ValidationError("contact_number", "is required")
        if not CONTACT_NUMBER_PATTERN.match(contact):
            raise ValidationError(
                "contact_number", "please enter a valid contact number", contact
            )
