"""Export Supply History Use Case."""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from stockledger.application.dto.requests import SupplyHistoryRequest
from stockledger.config import get_logger
from stockledger.core.interfaces.stock_repository import IStockRepository
from stockledger.core.services.stock_query import filter_supply_history

if TYPE_CHECKING:
    from stockledger.infrastructure.export import SupplyHistoryCsvExporter

logger = get_logger(__name__)


@dataclass
class ExportResult:
    """CSV text plus where it was written, if anywhere."""

    item_id: str
    filename: str
    content: str
    rows: int
    path: Path | None = None


class ExportSupplyHistoryUseCase:
    """Render an item's (optionally filtered) supply history as CSV."""

    def __init__(
        self,
        stock_repository: IStockRepository | None = None,
        exporter: "SupplyHistoryCsvExporter | None" = None,
    ):
        self._stock_repository = stock_repository
        self._exporter = exporter

    def _get_stock_repository(self) -> IStockRepository:
        if self._stock_repository is None:
            from stockledger.infrastructure.storage.memory import get_stock_repository

            self._stock_repository = get_stock_repository()
        return self._stock_repository

    def _get_exporter(self) -> "SupplyHistoryCsvExporter":
        if self._exporter is None:
            from stockledger.application.services import get_csv_exporter

            self._exporter = get_csv_exporter()
        return self._exporter

    def execute(
        self,
        request: SupplyHistoryRequest,
        output_dir: Path | None = None,
    ) -> ExportResult:
        """
        Export supply history for one item.

        Args:
            request: Item id and history filters
            output_dir: When given, the CSV is also written there

        Returns:
            ExportResult with the CSV text
        """
        from stockledger.infrastructure.export import supply_history_filename

        item = self._get_stock_repository().require(request.item_id)
        entries = filter_supply_history(item.supply_history, request.to_filter())

        exporter = self._get_exporter()
        content = exporter.export(entries)
        filename = supply_history_filename(item)

        path = None
        if output_dir is not None:
            path = exporter.write(content, output_dir / filename)

        logger.info(
            "supply_history_export_complete",
            item_id=item.id,
            rows=len(entries),
            path=str(path) if path else None,
        )
        return ExportResult(
            item_id=item.id,
            filename=filename,
            content=content,
            rows=len(entries),
            path=path,
        )
