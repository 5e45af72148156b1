"""Seed catalogue loading."""

from stockledger.infrastructure.seed.loader import (
    load_catalogue,
    load_orders,
    parse_catalogue,
    parse_orders,
)

__all__ = ["load_catalogue", "load_orders", "parse_catalogue", "parse_orders"]
