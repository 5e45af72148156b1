"""List Orders Use Case: client order history."""

from stockledger.application.dto.requests import OrderListRequest
from stockledger.application.dto.responses import OrderListResponse, OrderResponse
from stockledger.config import get_logger
from stockledger.core.entities.order import Order
from stockledger.core.interfaces.order_repository import IOrderRepository
from stockledger.core.services.pricing import round_to_decimal

logger = get_logger(__name__)


class ListOrdersUseCase:
    """Order history, newest first, optionally filtered by status or item."""

    def __init__(self, order_repository: IOrderRepository | None = None):
        self._order_repository = order_repository

    def _get_order_repository(self) -> IOrderRepository:
        if self._order_repository is None:
            from stockledger.infrastructure.storage.memory import get_order_repository

            self._order_repository = get_order_repository()
        return self._order_repository

    def execute(self, request: OrderListRequest) -> list[Order]:
        orders = self._get_order_repository().list_orders(status=request.status)
        if request.stock_item_id is not None:
            orders = [o for o in orders if o.stock_item_id == request.stock_item_id]

        logger.debug(
            "order_list_complete",
            status=request.status.value if request.status else None,
            stock_item_id=request.stock_item_id,
            results=len(orders),
        )
        return orders

    def to_response(self, orders: list[Order]) -> OrderListResponse:
        return OrderListResponse(
            orders=[OrderResponse.from_order(order) for order in orders],
            total=len(orders),
            total_value=round_to_decimal(sum(order.total_price for order in orders)),
        )
