"""Export formats."""

from stockledger.infrastructure.export.csv_exporter import (
    STOCK_COLUMNS,
    SUPPLY_HISTORY_COLUMNS,
    SupplyHistoryCsvExporter,
    supply_history_filename,
)

__all__ = [
    "SupplyHistoryCsvExporter",
    "SUPPLY_HISTORY_COLUMNS",
    "STOCK_COLUMNS",
    "supply_history_filename",
]
