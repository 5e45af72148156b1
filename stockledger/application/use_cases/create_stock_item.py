"""Create Stock Item Use Case."""

from dataclasses import dataclass, field

from stockledger.application.dto.requests import StockItemRequest
from stockledger.application.dto.responses import (
    PriceWarningResponse,
    StockItemResponse,
    StockOperationResponse,
)
from stockledger.config import get_logger
from stockledger.core.entities.stock import StockItem
from stockledger.core.interfaces.stock_repository import IStockRepository
from stockledger.core.services.pricing import PriceDeviationWarning
from stockledger.core.services.stock_ledger import StockLedgerService

logger = get_logger(__name__)


@dataclass
class CreateStockItemResult:
    """Result of creating a stock item."""

    item: StockItem
    warnings: list[PriceDeviationWarning] = field(default_factory=list)


class CreateStockItemUseCase:
    """Create a stock item and store it."""

    def __init__(
        self,
        stock_repository: IStockRepository | None = None,
        ledger: StockLedgerService | None = None,
    ):
        self._stock_repository = stock_repository
        self._ledger = ledger

    def _get_stock_repository(self) -> IStockRepository:
        if self._stock_repository is None:
            from stockledger.infrastructure.storage.memory import get_stock_repository

            self._stock_repository = get_stock_repository()
        return self._stock_repository

    def _get_ledger(self) -> StockLedgerService:
        if self._ledger is None:
            from stockledger.application.services import get_stock_ledger_service

            self._ledger = get_stock_ledger_service()
        return self._ledger

    def execute(self, request: StockItemRequest) -> CreateStockItemResult:
        """Execute create stock item use case."""
        logger.info("create_stock_item_started", name=request.name)

        result = self._get_ledger().create_item(request.to_fields())
        item = self._get_stock_repository().add(result.item)

        logger.info("create_stock_item_complete", item_id=item.id)
        return CreateStockItemResult(item=item, warnings=result.warnings)

    def to_response(self, result: CreateStockItemResult) -> StockOperationResponse:
        """Convert result to a presentation response."""
        return StockOperationResponse(
            item=StockItemResponse.from_item(result.item),
            warnings=[PriceWarningResponse.from_warning(w) for w in result.warnings],
        )
