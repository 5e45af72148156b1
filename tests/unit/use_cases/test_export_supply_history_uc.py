"""Tests for ExportSupplyHistoryUseCase."""

import pytest

from stockledger.application.dto.requests import SupplyHistoryRequest
from stockledger.application.use_cases.export_supply_history import (
    ExportSupplyHistoryUseCase,
)
from stockledger.core.entities.stock import SupplyBatch
from stockledger.infrastructure.export import SupplyHistoryCsvExporter
from stockledger.infrastructure.storage.memory import InMemoryStockRepository


@pytest.fixture
def repository(ledger, lager) -> InMemoryStockRepository:
    item = ledger.add_supply(lager, SupplyBatch(quantity=50, base_cost=18.0)).item
    item = ledger.toggle_price_lock(item, lock=True).item
    return InMemoryStockRepository([item])


class TestExportSupplyHistoryUseCase:
    def test_export_text(self, repository, lager):
        use_case = ExportSupplyHistoryUseCase(
            stock_repository=repository, exporter=SupplyHistoryCsvExporter()
        )
        result = use_case.execute(SupplyHistoryRequest(item_id=lager.id))
        lines = result.content.splitlines()
        assert result.rows == 2
        assert len(lines) == 3
        assert result.filename == "premium-lager-supply-history.csv"
        assert result.path is None

    def test_filters_apply(self, repository, lager):
        use_case = ExportSupplyHistoryUseCase(stock_repository=repository)
        result = use_case.execute(SupplyHistoryRequest(item_id=lager.id, min_quantity=1))
        assert result.rows == 1

    def test_writes_file(self, repository, lager, tmp_path):
        use_case = ExportSupplyHistoryUseCase(stock_repository=repository)
        result = use_case.execute(SupplyHistoryRequest(item_id=lager.id), output_dir=tmp_path)
        assert result.path == tmp_path / "premium-lager-supply-history.csv"
        assert result.path.read_text(encoding="utf-8") == result.content
