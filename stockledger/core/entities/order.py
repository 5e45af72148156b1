"""Client order entities."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from stockledger.core.entities.stock import new_id, utc_now


class OrderStatus(str, Enum):
    """Lifecycle states of a client order."""

    PENDING = "pending"
    PROCESSING = "processing"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


# Allowed status transitions
ORDER_TRANSITIONS: dict[OrderStatus, set[OrderStatus]] = {
    OrderStatus.PENDING: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.DELIVERED, OrderStatus.CANCELLED},
    OrderStatus.DELIVERED: set(),
    OrderStatus.CANCELLED: set(),
}


class Order(BaseModel):
    """A client order against one stock item."""

    id: str = Field(default_factory=new_id)
    stock_item_id: str
    product_name: str
    quantity: float
    unit_price: float
    total_price: float
    order_date: datetime = Field(default_factory=utc_now)
    status: OrderStatus = OrderStatus.PENDING
    delivery_address: str
    contact_number: str
    special_instructions: str | None = None

    @property
    def is_open(self) -> bool:
        return self.status in (OrderStatus.PENDING, OrderStatus.PROCESSING)

    def can_transition_to(self, status: OrderStatus) -> bool:
        return status in ORDER_TRANSITIONS[self.status]


class OrderDetails(BaseModel):
    """What a client submits when placing an order."""

    stock_item_id: str
    quantity: float = 1
    delivery_address: str = ""
    contact_number: str = ""
    special_instructions: str | None = None
