"""Toggle Price Lock Use Case."""

from stockledger.application.dto.requests import PriceLockRequest
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


class TogglePriceLockUseCase:
    """Lock or unlock a stock item's selling price."""

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

    def execute(self, request: PriceLockRequest) -> LedgerResult:
        """
        Execute toggle price lock use case.

        With ``recalculate`` an unlock is followed by a markup repricing; its
        price_change row lands in the history ahead of the unlock entry,
        which stays the result's ``entry``.
        """
        repository = self._get_stock_repository()
        item = repository.require(request.item_id)
        ledger = self._get_ledger()

        result = ledger.toggle_price_lock(
            item,
            lock=request.lock,
            current_price=request.current_price,
            notes=request.notes,
        )

        if result.entry is not None and not request.lock and request.recalculate:
            result.item = ledger.recalculate_price(result.item).item

        # Same-state toggles leave the stored item alone
        if result.entry is not None:
            result.item = repository.update(result.item)

        logger.info(
            "toggle_price_lock_complete",
            item_id=result.item.id,
            locked=result.item.is_price_locked,
            warnings=len(result.warnings),
        )
        return result

    def to_response(self, result: LedgerResult) -> StockOperationResponse:
        """Convert result to a presentation response."""
        return StockOperationResponse(
            item=StockItemResponse.from_item(result.item),
            entry=SupplyEntryResponse.from_entry(result.entry) if result.entry else None,
            warnings=[PriceWarningResponse.from_warning(w) for w in result.warnings],
        )
