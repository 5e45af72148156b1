"""
Core business logic services.

Layer-pure services that depend only on:
- stockledger/core/entities/*
- stockledger/core/interfaces/*
- stockledger/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from stockledger.core.services.order_service import OrderService
from stockledger.core.services.pricing import (
    PriceDeviationWarning,
    calculate_batch_comparison,
    calculate_implied_markup,
    calculate_profit_margin,
    calculate_selling_price,
    calculate_total_cost,
    calculate_weighted_average_cost,
    check_price_deviation,
    classify_margin,
    format_batch_comparison,
    format_currency,
    generate_batch_id,
    round_to_decimal,
)
from stockledger.core.services.stock_ledger import (
    LedgerResult,
    StockLedgerService,
    SupplyPreview,
)
from stockledger.core.services.stock_query import (
    SupplyHistoryFilter,
    filter_and_sort,
    filter_supply_history,
    list_low_stock,
)

__all__ = [
    # Ledger
    "StockLedgerService",
    "LedgerResult",
    "SupplyPreview",
    # Orders
    "OrderService",
    # Queries
    "SupplyHistoryFilter",
    "filter_and_sort",
    "filter_supply_history",
    "list_low_stock",
    # Pricing
    "PriceDeviationWarning",
    "calculate_total_cost",
    "calculate_selling_price",
    "calculate_profit_margin",
    "calculate_weighted_average_cost",
    "calculate_implied_markup",
    "calculate_batch_comparison",
    "check_price_deviation",
    "classify_margin",
    "round_to_decimal",
    "generate_batch_id",
    "format_currency",
    "format_batch_comparison",
]
