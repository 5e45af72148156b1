"""Request DTOs for the presentation boundary.

Pydantic v2 models describing what a caller submits. Range and business
rules are enforced by the core services, which report field-level
ValidationErrors; these models only fix the shape.
"""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, Field

from stockledger.core.entities.order import OrderDetails, OrderStatus
from stockledger.core.entities.stock import StockFields, SupplyBatch
from stockledger.core.services.stock_query import SupplyHistoryFilter


class StockItemRequest(BaseModel):
    """Complete field set for creating or editing a stock item.

    Edits replace every field; partial updates are not supported.
    """

    name: str = Field(..., description="Product name", examples=["Premium Lager"])
    type: str = Field(..., description="Product type", examples=["Lager", "IPA", "Stout"])
    supplier: str = Field(default="", description="Supplier name")
    quantity: float = Field(default=0, description="Units on hand")
    base_cost: float = Field(default=0, description="Base cost per unit")
    shipping_cost: float = Field(default=0, description="Shipping cost per unit")
    additional_costs: float = Field(default=0, description="Other costs per unit")
    markup: float = Field(default=0, description="Markup amount or percentage")
    is_markup_percentage: bool = Field(
        default=False,
        description="Treat markup as a percentage of total cost",
    )
    minimum_stock: float = Field(default=0, description="Low-stock threshold")
    selling_price: float | None = Field(
        default=None,
        description="Operator-set price, used only when the price is locked",
    )
    is_price_locked: bool = Field(
        default=False,
        description="Keep the selling price fixed when costs change",
    )

    def to_fields(self) -> StockFields:
        return StockFields(**self.model_dump())


class EditStockItemRequest(StockItemRequest):
    """Full-record edit of an existing stock item."""

    item_id: str = Field(..., description="Stock item ID")

    def to_fields(self) -> StockFields:
        return StockFields(**self.model_dump(exclude={"item_id"}))


class AddSupplyRequest(BaseModel):
    """Request to record a supply delivery."""

    item_id: str = Field(..., description="Stock item ID")
    quantity: float = Field(..., description="Units delivered")
    base_cost: float = Field(..., description="Base cost per unit of this batch")
    shipping_cost: float = Field(default=0, description="Shipping cost per unit")
    additional_costs: float = Field(default=0, description="Other costs per unit")
    supplier: str | None = Field(default=None, description="Supplier of this batch")
    notes: str | None = Field(default=None, description="Free-form notes")
    batch_id: str | None = Field(
        default=None,
        description="Batch ID (generated when omitted)",
        examples=["BATCH-2023-10-20-001"],
    )
    batch_number: str | None = Field(default=None, examples=["PL-2023-42"])
    delivery_date: date | None = Field(default=None)
    origin: str | None = Field(default=None, examples=["Munich, Germany"])
    shipping_method: str | None = Field(default=None, examples=["Sea Freight"])
    reason_for_cost_change: str | None = Field(default=None)

    def to_batch(self) -> SupplyBatch:
        return SupplyBatch(**self.model_dump(exclude={"item_id"}))


class PriceLockRequest(BaseModel):
    """Request to lock or unlock an item's selling price."""

    item_id: str = Field(..., description="Stock item ID")
    lock: bool = Field(..., description="True to lock, False to unlock")
    current_price: float | None = Field(
        default=None,
        description="Price to fix when locking (defaults to the current price)",
    )
    notes: str | None = Field(default=None, description="Audit note")
    recalculate: bool = Field(
        default=False,
        description="On unlock, reprice from cost and markup straight away",
    )


class StockSearchRequest(BaseModel):
    """Search and sort the stock list."""

    search_term: str | None = Field(
        default=None,
        description="Case-insensitive match on name, type or supplier",
    )
    sort_field: str = Field(default="name", examples=["name", "quantity", "selling_price"])
    sort_order: Literal["asc", "desc"] = "asc"
    low_stock_only: bool = Field(default=False, description="Only items at or below minimum")


class SupplyHistoryRequest(BaseModel):
    """Filter an item's supply history."""

    item_id: str = Field(..., description="Stock item ID")
    start_date: date | datetime | None = Field(default=None, description="Inclusive start")
    end_date: date | datetime | None = Field(default=None, description="Inclusive end")
    supplier: str | None = Field(default=None, description="Supplier substring")
    min_quantity: float = Field(default=0)
    max_quantity: float | None = Field(default=None, description="Unbounded when omitted")
    sort_by: Literal["date", "quantity", "total_cost"] = "date"
    sort_order: Literal["asc", "desc"] = "desc"

    def to_filter(self) -> SupplyHistoryFilter:
        return SupplyHistoryFilter(**self.model_dump(exclude={"item_id"}))


class PlaceOrderRequest(BaseModel):
    """Client order for one product."""

    stock_item_id: str = Field(..., description="Product to order")
    quantity: float = Field(default=1, description="Units ordered (at least 1)")
    delivery_address: str = Field(default="", description="Delivery address")
    contact_number: str = Field(
        default="",
        description="Contact number",
        examples=["+63 912 345 6789"],
    )
    special_instructions: str | None = Field(default=None)

    def to_details(self) -> OrderDetails:
        return OrderDetails(**self.model_dump())


class UpdateOrderStatusRequest(BaseModel):
    """Move an order to a new status."""

    order_id: str = Field(..., description="Order ID")
    status: OrderStatus = Field(..., description="Target status")


class OrderListRequest(BaseModel):
    """Filter the order history."""

    status: OrderStatus | None = Field(default=None, description="Only orders in this status")
    stock_item_id: str | None = Field(default=None, description="Only orders for this item")
