"""Load a stock catalogue and its order history from YAML."""

from pathlib import Path
from typing import Any

import pydantic
import yaml

from stockledger.config import get_logger
from stockledger.core.entities.order import Order
from stockledger.core.entities.stock import StockItem
from stockledger.core.exceptions import ConfigurationError
from stockledger.core.services.pricing import calculate_total_cost, round_to_decimal

logger = get_logger(__name__)


def _validate_entries(raw_entries: list, model: type, kind: str, source: str) -> list:
    entries = []
    for index, raw in enumerate(raw_entries):
        if not isinstance(raw, dict):
            raise ConfigurationError(
                f"Catalogue {source}: {kind} #{index} is not a mapping",
                details={"source": source, "index": index},
            )
        try:
            entries.append(model.model_validate(raw))
        except pydantic.ValidationError as e:
            raise ConfigurationError(
                f"Catalogue {source}: invalid {kind} #{index}: {e.error_count()} error(s)",
                details={"source": source, "index": index, "errors": e.errors()},
            ) from e
    return entries


def parse_catalogue(data: Any, source: str = "<memory>") -> list[StockItem]:
    """
    Build stock items from parsed YAML data.

    Derived fields (total_cost, available) are recomputed so a hand-edited
    file cannot break the cost invariants.
    """
    if not isinstance(data, dict) or not isinstance(data.get("items"), list):
        raise ConfigurationError(
            f"Catalogue {source} must contain an 'items' list",
            details={"source": source},
        )

    items: list[StockItem] = _validate_entries(data["items"], StockItem, "item", source)
    return [
        item.model_copy(
            update={
                "total_cost": round_to_decimal(
                    calculate_total_cost(item.base_cost, item.shipping_cost, item.additional_costs)
                ),
                "available": item.quantity > 0,
            }
        )
        for item in items
    ]


def parse_orders(data: Any, source: str = "<memory>") -> list[Order]:
    """Build orders from parsed YAML data. The 'orders' list is optional."""
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Catalogue {source} must be a mapping", details={"source": source}
        )
    raw_orders = data.get("orders") or []
    if not isinstance(raw_orders, list):
        raise ConfigurationError(
            f"Catalogue {source}: 'orders' must be a list", details={"source": source}
        )
    return _validate_entries(raw_orders, Order, "order", source)


def _read_yaml(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read catalogue {path}: {e}", details={"source": str(path)}
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Malformed catalogue {path}: {e}", details={"source": str(path)}
        ) from e


def load_catalogue(path: Path) -> list[StockItem]:
    """Read and parse the stock items of a YAML catalogue file."""
    items = parse_catalogue(_read_yaml(path), source=str(path))
    logger.info("catalogue_loaded", path=str(path), items=len(items))
    return items


def load_orders(path: Path) -> list[Order]:
    """Read and parse the order history of a YAML catalogue file."""
    orders = parse_orders(_read_yaml(path), source=str(path))
    logger.info("catalogue_orders_loaded", path=str(path), orders=len(orders))
    return orders
