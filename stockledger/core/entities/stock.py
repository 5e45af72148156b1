"""Stock item and supply history entities."""

import datetime as dt
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return uuid4().hex


class StockStatus(str, Enum):
    """Stock level relative to the minimum threshold."""

    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"


class MarginHealth(str, Enum):
    """Profit margin bands."""

    LOW = "low"
    MODERATE = "moderate"
    HEALTHY = "healthy"


class SupplyEntryType(str, Enum):
    """Kinds of audit events recorded in the supply history."""

    SUPPLY = "supply"
    PRICE_CHANGE = "price_change"
    PRICE_LOCK = "price_lock"
    PRICE_UNLOCK = "price_unlock"


class BatchComparison(BaseModel):
    """Cost deltas of a batch against the batch delivered before it."""

    model_config = ConfigDict(frozen=True)

    base_cost_diff: float
    shipping_cost_diff: float
    additional_costs_diff: float
    total_cost_diff: float
    percentage_change: float


class SupplyEntry(BaseModel):
    """
    One delivery or price-change event in a stock item's audit trail.

    Costs are those of this batch, not the running average. Entries are
    frozen once recorded.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    entry_type: SupplyEntryType = SupplyEntryType.SUPPLY
    date: datetime = Field(default_factory=utc_now)
    quantity: float = 0.0  # 0 for price events
    base_cost: float = 0.0
    shipping_cost: float = 0.0
    additional_costs: float = 0.0
    total_cost: float = 0.0
    supplier: str | None = None
    notes: str | None = None
    profit_margin: float = 0.0
    price_change: float = 0.0
    average_cost_change: float = 0.0
    was_auto_calculated: bool = False
    price_lock_changed: bool | None = None
    price_before_lock: float | None = None

    # Batch tracking (audit display only)
    batch_id: str | None = None
    batch_number: str | None = None
    delivery_date: dt.date | None = None
    origin: str | None = None
    shipping_method: str | None = None
    reason_for_cost_change: str | None = None
    comparison_to_previous: BatchComparison | None = None

    @property
    def is_supply(self) -> bool:
        return self.entry_type == SupplyEntryType.SUPPLY


class StockItem(BaseModel):
    """
    Cost and pricing state of one stock item.

    total_cost always equals base_cost + shipping_cost + additional_costs
    and available always equals quantity > 0. supply_history is newest first.
    """

    id: str = Field(default_factory=new_id)
    name: str
    type: str
    supplier: str = ""
    quantity: float = 0.0
    base_cost: float = 0.0
    shipping_cost: float = 0.0
    additional_costs: float = 0.0
    total_cost: float = 0.0
    markup: float = 0.0
    is_markup_percentage: bool = False
    selling_price: float = 0.0
    is_price_locked: bool = False
    minimum_stock: float = 0.0
    available: bool = False
    supply_history: list[SupplyEntry] = Field(default_factory=list)
    version: int = 1
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def profit_margin(self) -> float:
        """Current margin in percent; 0 when cost is 0."""
        if self.total_cost == 0:
            return 0.0
        return (self.selling_price - self.total_cost) / self.total_cost * 100

    @property
    def total_value(self) -> float:
        """Inventory value at the current average cost."""
        return self.quantity * self.total_cost

    @property
    def is_below_minimum(self) -> bool:
        return self.quantity <= self.minimum_stock

    @property
    def stock_status(self) -> StockStatus:
        if self.quantity == 0:
            return StockStatus.OUT_OF_STOCK
        if self.quantity <= self.minimum_stock:
            return StockStatus.LOW_STOCK
        return StockStatus.IN_STOCK

    @property
    def last_supply(self) -> SupplyEntry | None:
        """Most recent delivery, ignoring price events."""
        for entry in self.supply_history:
            if entry.is_supply:
                return entry
        return None


class StockFields(BaseModel):
    """
    Complete editable field set of a stock item.

    Edits always submit the full set; it replaces the previous values.
    """

    name: str
    type: str
    supplier: str = ""
    quantity: float = 0.0
    base_cost: float = 0.0
    shipping_cost: float = 0.0
    additional_costs: float = 0.0
    markup: float = 0.0
    is_markup_percentage: bool = False
    minimum_stock: float = 0.0
    selling_price: float | None = None  # used only when is_price_locked
    is_price_locked: bool = False


class SupplyBatch(BaseModel):
    """A delivery to be blended into a stock item's cost basis."""

    quantity: float
    base_cost: float
    shipping_cost: float = 0.0
    additional_costs: float = 0.0
    supplier: str | None = None
    notes: str | None = None
    batch_id: str | None = None
    batch_number: str | None = None
    delivery_date: dt.date | None = None
    origin: str | None = None
    shipping_method: str | None = None
    reason_for_cost_change: str | None = None
