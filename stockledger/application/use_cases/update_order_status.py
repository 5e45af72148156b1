"""Update Order Status Use Case."""

from stockledger.application.dto.requests import UpdateOrderStatusRequest
from stockledger.application.dto.responses import OrderOperationResponse, OrderResponse
from stockledger.config import get_logger
from stockledger.core.entities.order import OrderStatus
from stockledger.core.interfaces.order_repository import IOrderRepository
from stockledger.core.interfaces.stock_repository import IStockRepository
from stockledger.core.services.order_service import OrderResult, OrderService

logger = get_logger(__name__)


class UpdateOrderStatusUseCase:
    """Advance or cancel an order; cancellation restores stock."""

    def __init__(
        self,
        stock_repository: IStockRepository | None = None,
        order_repository: IOrderRepository | None = None,
        order_service: OrderService | None = None,
    ):
        self._stock_repository = stock_repository
        self._order_repository = order_repository
        self._order_service = order_service

    def _get_stock_repository(self) -> IStockRepository:
        if self._stock_repository is None:
            from stockledger.infrastructure.storage.memory import get_stock_repository

            self._stock_repository = get_stock_repository()
        return self._stock_repository

    def _get_order_repository(self) -> IOrderRepository:
        if self._order_repository is None:
            from stockledger.infrastructure.storage.memory import get_order_repository

            self._order_repository = get_order_repository()
        return self._order_repository

    def _get_order_service(self) -> OrderService:
        if self._order_service is None:
            from stockledger.application.services import get_order_service

            self._order_service = get_order_service()
        return self._order_service

    def execute(self, request: UpdateOrderStatusRequest) -> OrderResult:
        order_repository = self._get_order_repository()

        # Step 1: Load the order, and the stock item only when stock goes back
        order = order_repository.require(request.order_id)
        item = None
        cancelling = request.status == OrderStatus.CANCELLED
        if cancelling:
            item = self._get_stock_repository().get(order.stock_item_id)
            if item is None:
                logger.warning(
                    "cancelled_order_item_missing",
                    order_id=order.id,
                    item_id=order.stock_item_id,
                )

        # Step 2: Apply the transition
        result = self._get_order_service().change_status(order, item, request.status)

        # Step 3: Persist
        if cancelling and result.item is not None:
            result.item = self._get_stock_repository().update(result.item)
        result.order = order_repository.update(result.order)

        logger.info(
            "order_status_update_complete",
            order_id=result.order.id,
            status=result.order.status.value,
        )
        return result

    def to_response(self, result: OrderResult) -> OrderOperationResponse:
        item = result.item
        return OrderOperationResponse(
            order=OrderResponse.from_order(result.order),
            remaining_quantity=item.quantity if item is not None else None,
            available=item.available if item is not None else None,
        )
