"""Get Supply History Use Case."""

from stockledger.application.dto.requests import SupplyHistoryRequest
from stockledger.application.dto.responses import (
    SupplyEntryResponse,
    SupplyHistoryResponse,
)
from stockledger.core.entities.stock import SupplyEntry
from stockledger.core.interfaces.stock_repository import IStockRepository
from stockledger.core.services.stock_query import filter_supply_history


class GetSupplyHistoryUseCase:
    """Read an item's supply history through the date/supplier/quantity filters."""

    def __init__(self, stock_repository: IStockRepository | None = None):
        self._stock_repository = stock_repository

    def _get_stock_repository(self) -> IStockRepository:
        if self._stock_repository is None:
            from stockledger.infrastructure.storage.memory import get_stock_repository

            self._stock_repository = get_stock_repository()
        return self._stock_repository

    def execute(self, request: SupplyHistoryRequest) -> list[SupplyEntry]:
        item = self._get_stock_repository().require(request.item_id)
        return filter_supply_history(item.supply_history, request.to_filter())

    def to_response(
        self, item_id: str, entries: list[SupplyEntry]
    ) -> SupplyHistoryResponse:
        return SupplyHistoryResponse(
            item_id=item_id,
            entries=[SupplyEntryResponse.from_entry(e) for e in entries],
            total=len(entries),
        )
