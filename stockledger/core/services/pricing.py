"""
Pricing and cost calculations.

Pure arithmetic helpers shared by the ledger, the order book and exporters.
Nothing here touches state or infrastructure.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

from stockledger.core.entities.stock import BatchComparison, MarginHealth


@dataclass(frozen=True)
class PriceDeviationWarning:
    """Advisory signal: a manual price strays from the markup-implied one."""

    price: float
    suggested_price: float
    deviation_percent: float
    threshold_percent: float

    @property
    def message(self) -> str:
        direction = "above" if self.price > self.suggested_price else "below"
        return (
            f"Price {self.price:.2f} is {abs(self.deviation_percent):.1f}% {direction} "
            f"the suggested price {self.suggested_price:.2f}"
        )


def round_to_decimal(value: float, decimals: int = 2) -> float:
    """Round half-up to a fixed number of places (currency rounding)."""
    quantum = Decimal(1).scaleb(-decimals)
    rounded = float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
    # -0.0 would render as "-0.00"
    return rounded if rounded != 0 else 0.0


def calculate_total_cost(
    base_cost: float,
    shipping_cost: float = 0.0,
    additional_costs: float = 0.0,
) -> float:
    return base_cost + shipping_cost + additional_costs


def calculate_selling_price(
    total_cost: float, markup: float, is_markup_percentage: bool
) -> float:
    """
    Derive a selling price from cost and markup.

    Negative markup is plain arithmetic here and lowers the price; callers
    decide whether to accept it.
    """
    if is_markup_percentage:
        return total_cost * (1 + markup / 100)
    return total_cost + markup


def calculate_profit_margin(selling_price: float, total_cost: float) -> float:
    """Margin in percent of cost. Zero cost yields 0."""
    if total_cost == 0:
        return 0.0
    return (selling_price - total_cost) / total_cost * 100


def calculate_weighted_average_cost(
    current_quantity: float,
    current_cost: float,
    new_quantity: float,
    new_cost: float,
) -> float:
    """Quantity-weighted blend of existing stock and a new batch."""
    total_quantity = current_quantity + new_quantity
    if total_quantity == 0:
        return 0.0
    current_value = current_quantity * current_cost
    new_value = new_quantity * new_cost
    return (current_value + new_value) / total_quantity


def calculate_implied_markup(
    price: float, total_cost: float, is_markup_percentage: bool
) -> float:
    """Markup that would reproduce ``price`` from ``total_cost``."""
    if is_markup_percentage:
        if total_cost == 0:
            return 0.0
        return (price / total_cost - 1) * 100
    return price - total_cost


def calculate_batch_comparison(
    current_base_cost: float,
    current_shipping_cost: float,
    current_additional_costs: float,
    previous_base_cost: float,
    previous_shipping_cost: float,
    previous_additional_costs: float,
) -> BatchComparison:
    """Per-field cost deltas between two batches."""
    current_total = calculate_total_cost(
        current_base_cost, current_shipping_cost, current_additional_costs
    )
    previous_total = calculate_total_cost(
        previous_base_cost, previous_shipping_cost, previous_additional_costs
    )
    percentage = (
        round_to_decimal((current_total - previous_total) / previous_total * 100)
        if previous_total > 0
        else 0.0
    )
    return BatchComparison(
        base_cost_diff=round_to_decimal(current_base_cost - previous_base_cost),
        shipping_cost_diff=round_to_decimal(current_shipping_cost - previous_shipping_cost),
        additional_costs_diff=round_to_decimal(
            current_additional_costs - previous_additional_costs
        ),
        total_cost_diff=round_to_decimal(current_total - previous_total),
        percentage_change=percentage,
    )


def check_price_deviation(
    price: float,
    total_cost: float,
    markup: float,
    is_markup_percentage: bool,
    threshold_percent: float = 15.0,
) -> PriceDeviationWarning | None:
    """
    Compare a manual price to the markup-implied suggestion.

    Returns a warning when the absolute deviation exceeds the threshold,
    otherwise None. A zero suggestion only warns for a non-zero price.
    """
    suggested = round_to_decimal(
        calculate_selling_price(total_cost, markup, is_markup_percentage)
    )
    if suggested == 0:
        if price == 0:
            return None
        deviation = 100.0
    else:
        deviation = round_to_decimal((price - suggested) / suggested * 100, 6)

    if abs(deviation) <= threshold_percent:
        return None
    return PriceDeviationWarning(
        price=price,
        suggested_price=suggested,
        deviation_percent=round_to_decimal(deviation),
        threshold_percent=threshold_percent,
    )


def classify_margin(
    margin: float,
    low_threshold: float = 10.0,
    healthy_threshold: float = 20.0,
) -> MarginHealth:
    if margin < low_threshold:
        return MarginHealth.LOW
    if margin < healthy_threshold:
        return MarginHealth.MODERATE
    return MarginHealth.HEALTHY


def generate_batch_id(now: datetime | None = None) -> str:
    """Batch ids look like BATCH-2023-10-20-482913."""
    now = now or datetime.now(timezone.utc)
    suffix = f"{int(now.timestamp() * 1000) % 1_000_000:06d}"
    return f"BATCH-{now.date().isoformat()}-{suffix}"


def format_currency(amount: float, symbol: str = "₱", decimals: int = 2) -> str:
    """Format with a currency symbol and thousands separators."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.{decimals}f}"


def format_batch_comparison(comparison: BatchComparison, symbol: str = "₱") -> str:
    """Render e.g. ``+₱0.25 (+7.8%)``."""
    sign = "+" if comparison.total_cost_diff >= 0 else ""
    return (
        f"{sign}{format_currency(comparison.total_cost_diff, symbol)} "
        f"({sign}{comparison.percentage_change:g}%)"
    )
