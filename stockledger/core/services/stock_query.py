"""
Stock and supply history queries.

Filtering and stable sorting over in-memory collections. Pure functions,
no state.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Literal

from stockledger.core.entities.stock import StockItem, SupplyEntry
from stockledger.core.exceptions import ValidationError

SortOrder = Literal["asc", "desc"]

STRING_SORT_FIELDS = frozenset({"name", "type", "supplier"})
NUMERIC_SORT_FIELDS = frozenset(
    {
        "quantity",
        "base_cost",
        "shipping_cost",
        "additional_costs",
        "total_cost",
        "markup",
        "selling_price",
        "minimum_stock",
        "profit_margin",
    }
)
HISTORY_SORT_FIELDS = frozenset({"date", "quantity", "total_cost"})

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass
class SupplyHistoryFilter:
    """Criteria for narrowing a supply history."""

    start_date: date | datetime | None = None
    end_date: date | datetime | None = None
    supplier: str | None = None
    min_quantity: float = 0.0
    max_quantity: float | None = None  # None means unbounded
    sort_by: str = "date"
    sort_order: SortOrder = "desc"


def filter_and_sort(
    items: Iterable[StockItem],
    search_term: str | None = None,
    sort_field: str = "name",
    sort_order: SortOrder = "asc",
) -> list[StockItem]:
    """
    Case-insensitive search over name, type and supplier, then a stable sort.

    Strings compare case-folded, numbers numerically. Ties keep the input
    order in both directions.
    """
    _check_order(sort_order)
    if sort_field not in STRING_SORT_FIELDS and sort_field not in NUMERIC_SORT_FIELDS:
        raise ValidationError("sort_field", "unsupported sort field", sort_field)

    matches = list(items)
    if search_term:
        needle = search_term.strip().casefold()
        matches = [
            item
            for item in matches
            if needle in item.name.casefold()
            or needle in item.type.casefold()
            or needle in item.supplier.casefold()
        ]

    if sort_field in STRING_SORT_FIELDS:
        def key(item: StockItem):
            return getattr(item, sort_field).casefold()
    else:
        def key(item: StockItem):
            return getattr(item, sort_field)

    return sorted(matches, key=key, reverse=sort_order == "desc")


def filter_supply_history(
    history: Iterable[SupplyEntry],
    filters: SupplyHistoryFilter | None = None,
    now: datetime | None = None,
) -> list[SupplyEntry]:
    """
    Filter entries by inclusive date range, supplier and quantity range,
    then sort by date, quantity or total cost.

    Unspecified bounds default to the epoch and the current time. Plain
    dates cover their whole day.
    """
    filters = filters or SupplyHistoryFilter()
    _check_order(filters.sort_order)
    if filters.sort_by not in HISTORY_SORT_FIELDS:
        raise ValidationError("sort_by", "unsupported sort field", filters.sort_by)
    if filters.min_quantity < 0:
        raise ValidationError("min_quantity", "cannot be negative", filters.min_quantity)
    if filters.max_quantity is not None and filters.max_quantity < filters.min_quantity:
        raise ValidationError(
            "max_quantity", "must not be below min_quantity", filters.max_quantity
        )

    start = _as_utc(filters.start_date, end_of_day=False) if filters.start_date else EPOCH
    end = (
        _as_utc(filters.end_date, end_of_day=True)
        if filters.end_date
        else (now or datetime.now(timezone.utc))
    )
    if start > end:
        raise ValidationError("start_date", "must not be after end_date", filters.start_date)

    supplier = filters.supplier.strip().casefold() if filters.supplier else None

    matches = []
    for entry in history:
        entry_date = _as_utc(entry.date, end_of_day=False)
        if entry_date < start or entry_date > end:
            continue
        if supplier and supplier not in (entry.supplier or "").casefold():
            continue
        if entry.quantity < filters.min_quantity:
            continue
        if filters.max_quantity is not None and entry.quantity > filters.max_quantity:
            continue
        matches.append(entry)

    if filters.sort_by == "date":
        def key(entry: SupplyEntry):
            return _as_utc(entry.date, end_of_day=False)
    else:
        def key(entry: SupplyEntry):
            return getattr(entry, filters.sort_by)

    return sorted(matches, key=key, reverse=filters.sort_order == "desc")


def list_low_stock(items: Iterable[StockItem]) -> list[StockItem]:
    """Items at or below their minimum stock level, emptiest first."""
    return sorted(
        (item for item in items if item.is_below_minimum),
        key=lambda item: item.quantity,
    )


def _check_order(sort_order: str) -> None:
    if sort_order not in ("asc", "desc"):
        raise ValidationError("sort_order", "must be 'asc' or 'desc'", sort_order)


def _as_utc(value: date | datetime, end_of_day: bool) -> datetime:
    """Normalize dates and naive datetimes to aware UTC datetimes."""
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.max if end_of_day else time.min)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
