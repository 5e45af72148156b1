"""Delete Stock Item Use Case."""

from stockledger.application.dto.responses import DeleteStockItemResponse
from stockledger.config import get_logger
from stockledger.core.entities.stock import StockItem
from stockledger.core.interfaces.stock_repository import IStockRepository

logger = get_logger(__name__)


class DeleteStockItemUseCase:
    """Remove a stock item and its supply history. Irreversible."""

    def __init__(self, stock_repository: IStockRepository | None = None):
        self._stock_repository = stock_repository

    def _get_stock_repository(self) -> IStockRepository:
        if self._stock_repository is None:
            from stockledger.infrastructure.storage.memory import get_stock_repository

            self._stock_repository = get_stock_repository()
        return self._stock_repository

    def execute(self, item_id: str) -> StockItem:
        """Delete the item; returns what was removed."""
        repository = self._get_stock_repository()
        item = repository.require(item_id)
        repository.delete(item_id)
        logger.info(
            "stock_item_removed",
            item_id=item_id,
            name=item.name,
            history_entries=len(item.supply_history),
        )
        return item

    def to_response(self, item: StockItem) -> DeleteStockItemResponse:
        return DeleteStockItemResponse(id=item.id, name=item.name)
