"""Search Stock Use Case."""

from stockledger.application.dto.requests import StockSearchRequest
from stockledger.application.dto.responses import StockItemResponse, StockListResponse
from stockledger.config import get_logger
from stockledger.core.entities.stock import StockItem
from stockledger.core.interfaces.stock_repository import IStockRepository
from stockledger.core.services.stock_query import filter_and_sort, list_low_stock

logger = get_logger(__name__)


class SearchStockUseCase:
    """Filter and sort the stock list."""

    def __init__(self, stock_repository: IStockRepository | None = None):
        self._stock_repository = stock_repository

    def _get_stock_repository(self) -> IStockRepository:
        if self._stock_repository is None:
            from stockledger.infrastructure.storage.memory import get_stock_repository

            self._stock_repository = get_stock_repository()
        return self._stock_repository

    def execute(self, request: StockSearchRequest) -> list[StockItem]:
        items = self._get_stock_repository().list_items()
        if request.low_stock_only:
            items = list_low_stock(items)
        result = filter_and_sort(
            items,
            search_term=request.search_term,
            sort_field=request.sort_field,
            sort_order=request.sort_order,
        )
        logger.debug(
            "stock_search_complete",
            search_term=request.search_term,
            sort_field=request.sort_field,
            results=len(result),
        )
        return result

    def to_response(self, items: list[StockItem]) -> StockListResponse:
        return StockListResponse(
            items=[StockItemResponse.from_item(item) for item in items],
            total=len(items),
        )
