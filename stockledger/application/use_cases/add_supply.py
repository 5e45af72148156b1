"""Add Supply Use Case: weighted-average cost blend of a delivery."""

from stockledger.application.dto.requests import AddSupplyRequest
from stockledger.application.dto.responses import (
    StockItemResponse,
    StockOperationResponse,
    SupplyEntryResponse,
    SupplyPreviewResponse,
)
from stockledger.config import get_logger
from stockledger.core.interfaces.stock_repository import IStockRepository
from stockledger.core.services.stock_ledger import (
    LedgerResult,
    StockLedgerService,
    SupplyPreview,
)

logger = get_logger(__name__)


class AddSupplyUseCase:
    """Record a supply delivery against a stock item."""

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

    def preview(self, request: AddSupplyRequest) -> SupplyPreview:
        """Show the new average cost and price without recording anything."""
        item = self._get_stock_repository().require(request.item_id)
        return self._get_ledger().preview_supply(item, request.to_batch())

    def execute(self, request: AddSupplyRequest) -> LedgerResult:
        """Execute add supply use case."""
        logger.info(
            "add_supply_started",
            item_id=request.item_id,
            quantity=request.quantity,
        )

        repository = self._get_stock_repository()

        # 1. Load current item
        item = repository.require(request.item_id)

        # 2. Blend the batch into the running average
        result = self._get_ledger().add_supply(item, request.to_batch())

        # 3. Persist (version check rejects a concurrent blend)
        result.item = repository.update(result.item)

        logger.info(
            "add_supply_complete",
            item_id=result.item.id,
            new_qty=result.item.quantity,
            new_avg=result.item.total_cost,
        )
        return result

    def to_response(self, result: LedgerResult) -> StockOperationResponse:
        """Convert result to a presentation response."""
        return StockOperationResponse(
            item=StockItemResponse.from_item(result.item),
            entry=SupplyEntryResponse.from_entry(result.entry) if result.entry else None,
        )

    @staticmethod
    def preview_response(preview: SupplyPreview) -> SupplyPreviewResponse:
        return SupplyPreviewResponse(
            new_quantity=preview.new_quantity,
            batch_total_cost=preview.batch_total_cost,
            new_average_cost=preview.new_average_cost,
            new_selling_price=preview.new_selling_price,
            profit_margin=preview.profit_margin,
        )
