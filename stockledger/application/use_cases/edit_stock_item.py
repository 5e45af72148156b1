"""Edit Stock Item Use Case: full-record replace with price audit."""

from stockledger.application.dto.requests import EditStockItemRequest
from stockledger.application.dto.responses import (
    PriceWarningResponse,
    StockItemResponse,
    StockOperationResponse,
    SupplyEntryResponse,
)
from stockledger.config import get_logger
from stockledger.core.interfaces.stock_repository import IStockRepository
from stockledger.core.services.stock_ledger import LedgerResult, StockLedgerService

logger = get_logger(__name__)


class EditStockItemUseCase:
    """Load an item, replace its fields and persist the result."""

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

    def execute(self, request: EditStockItemRequest) -> LedgerResult:
        """Execute edit stock item use case."""
        logger.info("edit_stock_item_started", item_id=request.item_id)

        repository = self._get_stock_repository()

        # 1. Load current item
        item = repository.require(request.item_id)

        # 2. Apply full-record edit (validates before touching anything)
        result = self._get_ledger().edit_item(item, request.to_fields())

        # 3. Persist
        result.item = repository.update(result.item)

        logger.info(
            "edit_stock_item_complete",
            item_id=result.item.id,
            audit_entry=result.entry is not None,
        )
        return result

    def to_response(self, result: LedgerResult) -> StockOperationResponse:
        """Convert result to a presentation response."""
        return StockOperationResponse(
            item=StockItemResponse.from_item(result.item),
            entry=SupplyEntryResponse.from_entry(result.entry) if result.entry else None,
            warnings=[PriceWarningResponse.from_warning(w) for w in result.warnings],
        )
