"""
Stock ledger service.

Owns the cost/pricing state transitions of a stock item and its supply
history: creation, full-record edits, weighted-average supply additions and
price locking. Every operation validates first, then returns a new item
(state replacement); the input item is never mutated.

Pure service - no infrastructure imports. Persistence is the caller's job
(load current item -> apply operation -> persist result).
"""

import math
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from stockledger.config import get_logger
from stockledger.core.entities.stock import (
    StockFields,
    StockItem,
    SupplyBatch,
    SupplyEntry,
    SupplyEntryType,
    utc_now,
)
from stockledger.core.exceptions import ValidationError
from stockledger.core.services.pricing import (
    PriceDeviationWarning,
    calculate_batch_comparison,
    calculate_implied_markup,
    calculate_profit_margin,
    calculate_selling_price,
    calculate_total_cost,
    calculate_weighted_average_cost,
    check_price_deviation,
    generate_batch_id,
    round_to_decimal,
)

logger = get_logger(__name__)


@dataclass
class LedgerResult:
    """Outcome of a ledger operation."""

    item: StockItem
    entry: SupplyEntry | None = None  # audit row appended, if any
    warnings: list[PriceDeviationWarning] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


@dataclass(frozen=True)
class SupplyPreview:
    """What adding a batch would do, without doing it."""

    new_quantity: float
    batch_total_cost: float
    new_average_cost: float
    new_selling_price: float
    profit_margin: float


class StockLedgerService:
    """
    Pricing and weighted-average-cost ledger for stock items.

    Rules:
    - total_cost is always base_cost + shipping_cost + additional_costs
    - unlocked prices follow markup on every cost change; locked prices don't
    - supply additions blend into a single running average unit cost
    - every supply or price event prepends one immutable SupplyEntry
    """

    DEFAULT_PRICE_DEVIATION_THRESHOLD = 15.0

    def __init__(
        self,
        precision: int = 2,
        price_deviation_threshold: float | None = None,
        allow_negative_markup: bool = False,
        clock: Callable[[], datetime] | None = None,
    ):
        """
        Initialize the ledger.

        Args:
            precision: Decimal places for currency values.
            price_deviation_threshold: Percent deviation between a manual
                price and the markup-implied price that triggers a warning.
            allow_negative_markup: Accept negative markup on create/edit.
            clock: Timestamp source, injectable for tests.
        """
        self._precision = precision
        self._deviation_threshold = (
            price_deviation_threshold
            if price_deviation_threshold is not None
            else self.DEFAULT_PRICE_DEVIATION_THRESHOLD
        )
        self._allow_negative_markup = allow_negative_markup
        self._clock = clock or utc_now

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def create_item(self, fields: StockFields) -> LedgerResult:
        """Create a new stock item with an empty supply history."""
        self._validate_fields(fields)

        fields = self._round_costs(fields)
        total_cost = self._round(
            calculate_total_cost(fields.base_cost, fields.shipping_cost, fields.additional_costs)
        )
        selling_price, warnings = self._resolve_price(fields, total_cost)

        now = self._clock()
        item = StockItem(
            name=fields.name.strip(),
            type=fields.type.strip(),
            supplier=fields.supplier.strip(),
            quantity=fields.quantity,
            base_cost=fields.base_cost,
            shipping_cost=fields.shipping_cost,
            additional_costs=fields.additional_costs,
            total_cost=total_cost,
            markup=fields.markup,
            is_markup_percentage=fields.is_markup_percentage,
            selling_price=selling_price,
            is_price_locked=fields.is_price_locked,
            minimum_stock=fields.minimum_stock,
            available=fields.quantity > 0,
            supply_history=[],
            created_at=now,
            updated_at=now,
        )

        logger.info(
            "stock_item_created",
            item_id=item.id,
            name=item.name,
            total_cost=item.total_cost,
            selling_price=item.selling_price,
        )
        return LedgerResult(item=item, warnings=warnings)

    def edit_item(self, item: StockItem, fields: StockFields) -> LedgerResult:
        """
        Replace an item's editable fields in full.

        A price_change entry is recorded only when the selling price or the
        lock state actually changed.
        """
        self._validate_fields(fields)

        fields = self._round_costs(fields)
        total_cost = self._round(
            calculate_total_cost(fields.base_cost, fields.shipping_cost, fields.additional_costs)
        )
        if fields.is_price_locked and fields.selling_price is None:
            fields = fields.model_copy(update={"selling_price": item.selling_price})
        selling_price, warnings = self._resolve_price(fields, total_cost)

        now = self._clock()
        updates = {
            "name": fields.name.strip(),
            "type": fields.type.strip(),
            "supplier": fields.supplier.strip(),
            "quantity": fields.quantity,
            "base_cost": fields.base_cost,
            "shipping_cost": fields.shipping_cost,
            "additional_costs": fields.additional_costs,
            "total_cost": total_cost,
            "markup": fields.markup,
            "is_markup_percentage": fields.is_markup_percentage,
            "selling_price": selling_price,
            "is_price_locked": fields.is_price_locked,
            "minimum_stock": fields.minimum_stock,
            "available": fields.quantity > 0,
            "updated_at": now,
        }

        price_changed = selling_price != item.selling_price
        lock_changed = fields.is_price_locked != item.is_price_locked

        entry = None
        if price_changed or lock_changed:
            entry = self._price_change_entry(
                item,
                new_price=selling_price,
                new_total_cost=total_cost,
                new_locked=fields.is_price_locked,
                supplier=updates["supplier"],
                base_cost=fields.base_cost,
                shipping_cost=fields.shipping_cost,
                additional_costs=fields.additional_costs,
                date=now,
            )
            updates["supply_history"] = [entry, *item.supply_history]

        updated = item.model_copy(update=updates, deep=True)

        logger.info(
            "stock_item_edited",
            item_id=updated.id,
            price_changed=price_changed,
            lock_changed=lock_changed,
        )
        return LedgerResult(item=updated, entry=entry, warnings=warnings)

    def preview_supply(self, item: StockItem, batch: SupplyBatch) -> SupplyPreview:
        """Compute the effect of a supply addition without applying it."""
        self._validate_batch(batch)

        batch_total = calculate_total_cost(
            batch.base_cost, batch.shipping_cost, batch.additional_costs
        )
        new_average = self._round(
            calculate_weighted_average_cost(
                item.quantity, item.total_cost, batch.quantity, batch_total
            )
        )
        if item.is_price_locked:
            new_price = item.selling_price
        else:
            new_price = self._round(
                calculate_selling_price(new_average, item.markup, item.is_markup_percentage)
            )

        return SupplyPreview(
            new_quantity=item.quantity + batch.quantity,
            batch_total_cost=self._round(batch_total),
            new_average_cost=new_average,
            new_selling_price=new_price,
            profit_margin=self._round(calculate_profit_margin(new_price, new_average)),
        )

    def add_supply(self, item: StockItem, batch: SupplyBatch) -> LedgerResult:
        """
        Blend a delivered batch into the item's weighted-average cost.

        The blended average becomes both base_cost and total_cost; shipping
        and additional costs are folded into it and reset to zero.
        """
        preview = self.preview_supply(item, batch)

        comparison = None
        previous = item.last_supply
        if previous is not None:
            comparison = calculate_batch_comparison(
                batch.base_cost,
                batch.shipping_cost,
                batch.additional_costs,
                previous.base_cost,
                previous.shipping_cost,
                previous.additional_costs,
            )

        now = self._clock()
        entry = SupplyEntry(
            entry_type=SupplyEntryType.SUPPLY,
            date=now,
            quantity=batch.quantity,
            base_cost=batch.base_cost,
            shipping_cost=batch.shipping_cost,
            additional_costs=batch.additional_costs,
            total_cost=preview.batch_total_cost,
            supplier=batch.supplier or item.supplier or None,
            notes=batch.notes,
            profit_margin=preview.profit_margin,
            price_change=self._round(preview.new_selling_price - item.selling_price),
            average_cost_change=self._round(preview.new_average_cost - item.total_cost),
            was_auto_calculated=not item.is_price_locked,
            batch_id=batch.batch_id or generate_batch_id(now),
            batch_number=batch.batch_number,
            delivery_date=batch.delivery_date,
            origin=batch.origin,
            shipping_method=batch.shipping_method,
            reason_for_cost_change=batch.reason_for_cost_change,
            comparison_to_previous=comparison,
        )

        updated = item.model_copy(
            update={
                "quantity": preview.new_quantity,
                "base_cost": preview.new_average_cost,
                "shipping_cost": 0.0,
                "additional_costs": 0.0,
                "total_cost": preview.new_average_cost,
                "selling_price": preview.new_selling_price,
                "available": preview.new_quantity > 0,
                "supply_history": [entry, *item.supply_history],
                "updated_at": now,
            },
            deep=True,
        )

        logger.info(
            "supply_added",
            item_id=updated.id,
            batch_id=entry.batch_id,
            quantity=batch.quantity,
            new_average_cost=preview.new_average_cost,
            selling_price=preview.new_selling_price,
            price_locked=item.is_price_locked,
        )
        return LedgerResult(item=updated, entry=entry)

    def toggle_price_lock(
        self,
        item: StockItem,
        lock: bool,
        current_price: float | None = None,
        notes: str | None = None,
    ) -> LedgerResult:
        """
        Lock or unlock an item's selling price.

        Locking fixes the price at ``current_price`` (the item's price when
        omitted) and back-derives the implied markup. Unlocking only clears
        the flag; the price follows markup again from the next cost change
        or an explicit recalculate_price call. Toggling to the current state
        is a no-op.
        """
        if lock == item.is_price_locked:
            return LedgerResult(item=item)

        now = self._clock()
        old_price = item.selling_price
        warnings: list[PriceDeviationWarning] = []

        if lock:
            price = old_price if current_price is None else current_price
            self._require_non_negative("selling_price", price)
            warning = check_price_deviation(
                price,
                item.total_cost,
                item.markup,
                item.is_markup_percentage,
                self._deviation_threshold,
            )
            if warning is not None:
                warnings.append(warning)
                self._log_deviation(item, warning)
            markup = round_to_decimal(
                calculate_implied_markup(price, item.total_cost, item.is_markup_percentage),
                4,
            )
            entry_type = SupplyEntryType.PRICE_LOCK
            default_notes = f"Price locked at {price:.2f} (was {old_price:.2f})"
        else:
            price = old_price
            markup = item.markup
            entry_type = SupplyEntryType.PRICE_UNLOCK
            default_notes = f"Price unlocked at {price:.2f}; markup pricing resumes"

        entry = SupplyEntry(
            entry_type=entry_type,
            date=now,
            quantity=0.0,
            base_cost=item.base_cost,
            shipping_cost=item.shipping_cost,
            additional_costs=item.additional_costs,
            total_cost=item.total_cost,
            supplier=item.supplier or None,
            notes=notes or default_notes,
            profit_margin=self._round(calculate_profit_margin(price, item.total_cost)),
            price_change=self._round(price - old_price),
            average_cost_change=0.0,
            was_auto_calculated=False,
            price_lock_changed=True,
            price_before_lock=old_price,
        )

        updated = item.model_copy(
            update={
                "is_price_locked": lock,
                "selling_price": price,
                "markup": markup,
                "supply_history": [entry, *item.supply_history],
                "updated_at": now,
            },
            deep=True,
        )

        logger.info(
            "price_locked" if lock else "price_unlocked",
            item_id=updated.id,
            selling_price=price,
            price_before=old_price,
        )
        return LedgerResult(item=updated, entry=entry, warnings=warnings)

    def recalculate_price(self, item: StockItem) -> LedgerResult:
        """Re-derive an unlocked item's price from its cost and markup."""
        if item.is_price_locked:
            return LedgerResult(item=item)

        price = self.suggested_price(item)
        if price == item.selling_price:
            return LedgerResult(item=item)

        now = self._clock()
        entry = self._price_change_entry(
            item,
            new_price=price,
            new_total_cost=item.total_cost,
            new_locked=False,
            supplier=item.supplier,
            base_cost=item.base_cost,
            shipping_cost=item.shipping_cost,
            additional_costs=item.additional_costs,
            date=now,
        )
        updated = item.model_copy(
            update={
                "selling_price": price,
                "supply_history": [entry, *item.supply_history],
                "updated_at": now,
            },
            deep=True,
        )
        logger.info("price_recalculated", item_id=updated.id, selling_price=price)
        return LedgerResult(item=updated, entry=entry)

    def suggested_price(self, item: StockItem) -> float:
        """Markup-implied price for the item's current cost."""
        return self._round(
            calculate_selling_price(item.total_cost, item.markup, item.is_markup_percentage)
        )

    def check_price(self, item: StockItem, price: float) -> PriceDeviationWarning | None:
        """Advisory check of a manual price against the suggested price."""
        return check_price_deviation(
            price,
            item.total_cost,
            item.markup,
            item.is_markup_percentage,
            self._deviation_threshold,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve_price(
        self, fields: StockFields, total_cost: float
    ) -> tuple[float, list[PriceDeviationWarning]]:
        """Selling price for a field set plus any deviation warning."""
        if not fields.is_price_locked:
            price = self._round(
                calculate_selling_price(total_cost, fields.markup, fields.is_markup_percentage)
            )
            if price < 0:
                raise ValidationError(
                    "markup", "markup drives the selling price below zero", fields.markup
                )
            return price, []

        if fields.selling_price is None:
            raise ValidationError(
                "selling_price", "a locked price needs an explicit selling price"
            )
        warning = check_price_deviation(
            fields.selling_price,
            total_cost,
            fields.markup,
            fields.is_markup_percentage,
            self._deviation_threshold,
        )
        if warning is not None:
            logger.warning(
                "price_deviation_detected",
                name=fields.name,
                price=warning.price,
                suggested_price=warning.suggested_price,
                deviation_percent=warning.deviation_percent,
            )
            return fields.selling_price, [warning]
        return fields.selling_price, []

    def _price_change_entry(
        self,
        item: StockItem,
        new_price: float,
        new_total_cost: float,
        new_locked: bool,
        supplier: str,
        base_cost: float,
        shipping_cost: float,
        additional_costs: float,
        date: datetime,
    ) -> SupplyEntry:
        lock_changed = new_locked != item.is_price_locked
        if lock_changed:
            entry_type = SupplyEntryType.PRICE_LOCK if new_locked else SupplyEntryType.PRICE_UNLOCK
            notes = (
                f"Price {'locked' if new_locked else 'unlocked'} on edit "
                f"({item.selling_price:.2f} -> {new_price:.2f})"
            )
        else:
            entry_type = SupplyEntryType.PRICE_CHANGE
            notes = f"Selling price changed from {item.selling_price:.2f} to {new_price:.2f}"

        return SupplyEntry(
            entry_type=entry_type,
            date=date,
            quantity=0.0,
            base_cost=base_cost,
            shipping_cost=shipping_cost,
            additional_costs=additional_costs,
            total_cost=self._round(new_total_cost),
            supplier=supplier or None,
            notes=notes,
            profit_margin=self._round(calculate_profit_margin(new_price, new_total_cost)),
            price_change=self._round(new_price - item.selling_price),
            average_cost_change=self._round(new_total_cost - item.total_cost),
            was_auto_calculated=not new_locked,
            price_lock_changed=True if lock_changed else None,
            price_before_lock=item.selling_price if lock_changed else None,
        )

    def _validate_fields(self, fields: StockFields) -> None:
        self._require_text("name", fields.name)
        self._require_text("type", fields.type)
        self._require_non_negative("quantity", fields.quantity)
        self._require_non_negative("base_cost", fields.base_cost)
        self._require_non_negative("shipping_cost", fields.shipping_cost)
        self._require_non_negative("additional_costs", fields.additional_costs)
        self._require_non_negative("minimum_stock", fields.minimum_stock)
        if not self._allow_negative_markup:
            self._require_non_negative("markup", fields.markup)
        if fields.selling_price is not None:
            self._require_non_negative("selling_price", fields.selling_price)

    def _validate_batch(self, batch: SupplyBatch) -> None:
        self._require_non_negative("quantity", batch.quantity)
        self._require_non_negative("base_cost", batch.base_cost)
        if batch.quantity <= 0:
            raise ValidationError("quantity", "must be greater than zero", batch.quantity)
        if batch.base_cost <= 0:
            raise ValidationError("base_cost", "must be greater than zero", batch.base_cost)
        self._require_non_negative("shipping_cost", batch.shipping_cost)
        self._require_non_negative("additional_costs", batch.additional_costs)

    @staticmethod
    def _require_text(name: str, value: str) -> None:
        if not value or not value.strip():
            raise ValidationError(name, "is required", value)

    @staticmethod
    def _require_non_negative(name: str, value: float) -> None:
        if not math.isfinite(value):
            raise ValidationError(name, "must be a finite number", value)
        if value < 0:
            raise ValidationError(name, "cannot be negative", value)

    def _log_deviation(self, item: StockItem, warning: PriceDeviationWarning) -> None:
        logger.warning(
            "price_deviation_detected",
            item_id=item.id,
            price=warning.price,
            suggested_price=warning.suggested_price,
            deviation_percent=warning.deviation_percent,
        )

    def _round(self, value: float) -> float:
        return round_to_decimal(value, self._precision)

    def _round_costs(self, fields: StockFields) -> StockFields:
        """Cost inputs at currency precision; total_cost is their sum at that precision."""
        return fields.model_copy(
            update={
                "base_cost": self._round(fields.base_cost),
                "shipping_cost": self._round(fields.shipping_cost),
                "additional_costs": self._round(fields.additional_costs),
            }
        )
