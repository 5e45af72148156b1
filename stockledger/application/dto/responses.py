"""Response DTOs for the presentation boundary.

Read models handed to whatever renders stock, history and orders.
"""

from datetime import date, datetime

from pydantic import BaseModel

from stockledger.config import get_settings
from stockledger.core.entities.order import Order
from stockledger.core.entities.stock import StockItem, SupplyEntry
from stockledger.core.services.pricing import (
    PriceDeviationWarning,
    classify_margin,
    round_to_decimal,
)


class ErrorResponse(BaseModel):
    """Error payload mirroring LedgerError.to_dict()."""

    error: str
    message: str
    details: dict = {}


class BatchComparisonResponse(BaseModel):
    base_cost_diff: float
    shipping_cost_diff: float
    additional_costs_diff: float
    total_cost_diff: float
    percentage_change: float


class SupplyEntryResponse(BaseModel):
    """Supply history row."""

    id: str
    entry_type: str
    date: datetime
    quantity: float
    base_cost: float
    shipping_cost: float
    additional_costs: float
    total_cost: float
    supplier: str | None = None
    notes: str | None = None
    profit_margin: float
    price_change: float
    average_cost_change: float
    was_auto_calculated: bool
    price_lock_changed: bool | None = None
    price_before_lock: float | None = None
    batch_id: str | None = None
    batch_number: str | None = None
    delivery_date: date | None = None
    origin: str | None = None
    shipping_method: str | None = None
    reason_for_cost_change: str | None = None
    comparison_to_previous: BatchComparisonResponse | None = None

    @classmethod
    def from_entry(cls, entry: SupplyEntry) -> "SupplyEntryResponse":
        data = entry.model_dump()
        data["entry_type"] = entry.entry_type.value
        return cls(**data)


class StockItemResponse(BaseModel):
    """Admin view of a stock item."""

    id: str
    name: str
    type: str
    supplier: str
    quantity: float
    base_cost: float
    shipping_cost: float
    additional_costs: float
    total_cost: float
    markup: float
    is_markup_percentage: bool
    selling_price: float
    is_price_locked: bool
    minimum_stock: float
    available: bool
    profit_margin: float
    margin_health: str
    stock_status: str
    total_value: float
    supply_entries: int
    version: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_item(
        cls,
        item: StockItem,
        low_margin_threshold: float | None = None,
        healthy_margin_threshold: float | None = None,
    ) -> "StockItemResponse":
        if low_margin_threshold is None or healthy_margin_threshold is None:
            pricing = get_settings().pricing
            low_margin_threshold = pricing.low_margin_threshold
            healthy_margin_threshold = pricing.healthy_margin_threshold
        margin = round_to_decimal(item.profit_margin)
        return cls(
            id=item.id,
            name=item.name,
            type=item.type,
            supplier=item.supplier,
            quantity=item.quantity,
            base_cost=item.base_cost,
            shipping_cost=item.shipping_cost,
            additional_costs=item.additional_costs,
            total_cost=item.total_cost,
            markup=item.markup,
            is_markup_percentage=item.is_markup_percentage,
            selling_price=item.selling_price,
            is_price_locked=item.is_price_locked,
            minimum_stock=item.minimum_stock,
            available=item.available,
            profit_margin=margin,
            margin_health=classify_margin(
                margin, low_margin_threshold, healthy_margin_threshold
            ).value,
            stock_status=item.stock_status.value,
            total_value=round_to_decimal(item.total_value),
            supply_entries=len(item.supply_history),
            version=item.version,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )


class ClientStockResponse(BaseModel):
    """Client view of a stock item (no cost data)."""

    id: str
    name: str
    type: str
    quantity: float
    selling_price: float
    available: bool

    @classmethod
    def from_item(cls, item: StockItem) -> "ClientStockResponse":
        return cls(
            id=item.id,
            name=item.name,
            type=item.type,
            quantity=item.quantity,
            selling_price=item.selling_price,
            available=item.available,
        )


class PriceWarningResponse(BaseModel):
    """Advisory price deviation warning."""

    price: float
    suggested_price: float
    deviation_percent: float
    threshold_percent: float
    message: str

    @classmethod
    def from_warning(cls, warning: PriceDeviationWarning) -> "PriceWarningResponse":
        return cls(
            price=warning.price,
            suggested_price=warning.suggested_price,
            deviation_percent=warning.deviation_percent,
            threshold_percent=warning.threshold_percent,
            message=warning.message,
        )


class StockOperationResponse(BaseModel):
    """Result of a create/edit/supply/lock operation."""

    item: StockItemResponse
    entry: SupplyEntryResponse | None = None
    warnings: list[PriceWarningResponse] = []


class SupplyPreviewResponse(BaseModel):
    new_quantity: float
    batch_total_cost: float
    new_average_cost: float
    new_selling_price: float
    profit_margin: float


class StockListResponse(BaseModel):
    items: list[StockItemResponse]
    total: int


class SupplyHistoryResponse(BaseModel):
    item_id: str
    entries: list[SupplyEntryResponse]
    total: int


class DeleteStockItemResponse(BaseModel):
    id: str
    name: str
    deleted: bool = True


class OrderResponse(BaseModel):
    """Client order."""

    id: str
    stock_item_id: str
    product_name: str
    quantity: float
    unit_price: float
    total_price: float
    order_date: datetime
    status: str
    delivery_address: str
    contact_number: str
    special_instructions: str | None = None

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponse":
        data = order.model_dump()
        data["status"] = order.status.value
        return cls(**data)


class OrderOperationResponse(BaseModel):
    order: OrderResponse
    remaining_quantity: float | None = None  # None when the item was not loaded
    available: bool | None = None


class OrderListResponse(BaseModel):
    orders: list[OrderResponse]
    total: int
    total_value: float  # sum of total_price
