"""
CSV export of supply history.

One row per supply entry under a fixed header. Money columns are written
as unquoted 2-decimal numbers, text columns are quoted with embedded
quotes doubled.
"""

import csv
import io
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

from stockledger.config import get_logger
from stockledger.core.entities.stock import StockItem, SupplyEntry

logger = get_logger(__name__)

SUPPLY_HISTORY_COLUMNS = [
    "date",
    "quantity",
    "base_cost",
    "shipping_cost",
    "additional_costs",
    "total_cost",
    "profit_margin",
    "price_change",
    "average_cost_change",
    "supplier",
    "notes",
]

STOCK_COLUMNS = [
    "id",
    "name",
    "type",
    "supplier",
    "quantity",
    "base_cost",
    "shipping_cost",
    "additional_costs",
    "total_cost",
    "markup",
    "is_markup_percentage",
    "selling_price",
    "is_price_locked",
    "minimum_stock",
    "available",
]

_CENT = Decimal("0.01")


def _money(value: float) -> Decimal:
    # Decimal counts as numeric for QUOTE_NONNUMERIC and keeps trailing zeros
    amount = Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP)
    return amount.copy_abs() if amount.is_zero() else amount


def _quantity(value: float) -> int | float:
    return int(value) if float(value).is_integer() else value


class SupplyHistoryCsvExporter:
    """Serialize supply histories and stock lists to CSV text."""

    def __init__(self, lineterminator: str = "\n"):
        self._lineterminator = lineterminator

    def _writer(self, output: io.StringIO):
        return csv.writer(
            output,
            quoting=csv.QUOTE_NONNUMERIC,
            lineterminator=self._lineterminator,
        )

    def export(self, entries: Iterable[SupplyEntry]) -> str:
        """Header plus one row per entry, in the order given."""
        output = io.StringIO()
        writer = self._writer(output)
        writer.writerow(SUPPLY_HISTORY_COLUMNS)
        count = 0
        for entry in entries:
            writer.writerow(
                [
                    entry.date.isoformat(),
                    _quantity(entry.quantity),
                    _money(entry.base_cost),
                    _money(entry.shipping_cost),
                    _money(entry.additional_costs),
                    _money(entry.total_cost),
                    _money(entry.profit_margin),
                    _money(entry.price_change),
                    _money(entry.average_cost_change),
                    entry.supplier or "",
                    entry.notes or "",
                ]
            )
            count += 1
        logger.debug("supply_history_exported", rows=count)
        return output.getvalue()

    def export_item(self, item: StockItem) -> str:
        """Export an item's full supply history, newest first."""
        return self.export(item.supply_history)

    def export_stock(self, items: Iterable[StockItem]) -> str:
        """Stock list export: one row per item."""
        output = io.StringIO()
        writer = self._writer(output)
        writer.writerow(STOCK_COLUMNS)
        for item in items:
            writer.writerow(
                [
                    item.id,
                    item.name,
                    item.type,
                    item.supplier,
                    _quantity(item.quantity),
                    _money(item.base_cost),
                    _money(item.shipping_cost),
                    _money(item.additional_costs),
                    _money(item.total_cost),
                    _money(item.markup),
                    "yes" if item.is_markup_percentage else "no",
                    _money(item.selling_price),
                    "yes" if item.is_price_locked else "no",
                    _quantity(item.minimum_stock),
                    "yes" if item.available else "no",
                ]
            )
        return output.getvalue()

    def write(self, content: str, path: Path) -> Path:
        """Write exported CSV text to disk (UTF-8)."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8", newline="")
        logger.info("csv_written", path=str(path), bytes=len(content))
        return path


def supply_history_filename(item: StockItem) -> str:
    """e.g. ``premium-lager-supply-history.csv``."""
    slug = "-".join(item.name.lower().split()) or item.id
    return f"{slug}-supply-history.csv"
