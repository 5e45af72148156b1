"""Place Order Use Case: client order that reserves stock."""

from stockledger.application.dto.requests import PlaceOrderRequest
from stockledger.application.dto.responses import OrderOperationResponse, OrderResponse
from stockledger.config import get_logger
from stockledger.core.interfaces.order_repository import IOrderRepository
from stockledger.core.interfaces.stock_repository import IStockRepository
from stockledger.core.services.order_service import OrderResult, OrderService

logger = get_logger(__name__)


class PlaceOrderUseCase:
    """Create a pending order and decrement the ordered item's stock."""

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

    def execute(self, request: PlaceOrderRequest) -> OrderResult:
        """Execute place order use case."""
        logger.info(
            "place_order_started",
            item_id=request.stock_item_id,
            quantity=request.quantity,
        )

        details = request.to_details()
        service = self._get_order_service()

        # Reject malformed orders before touching storage
        service.validate_details(details)

        stock_repository = self._get_stock_repository()
        item = stock_repository.require(details.stock_item_id)

        result = service.place_order(item, details)

        # Stock first: a version conflict must not leave an orphan order
        result.item = stock_repository.update(result.item)
        result.order = self._get_order_repository().add(result.order)

        logger.info(
            "place_order_complete",
            order_id=result.order.id,
            remaining=result.item.quantity,
        )
        return result

    def to_response(self, result: OrderResult) -> OrderOperationResponse:
        return OrderOperationResponse(
            order=OrderResponse.from_order(result.order),
            remaining_quantity=result.item.quantity,
            available=result.item.available,
        )
