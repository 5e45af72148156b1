"""Tests for structured logging setup."""

import logging

import structlog

from stockledger.config import configure_logging, get_logger
from stockledger.config.logging import add_app_context, round_money_fields


def test_app_context_added():
    event = add_app_context(None, "info", {"event": "supply_added"})
    assert event["app"] == "Stock Ledger"
    assert event["environment"] == "development"


def test_configure_routes_through_stdlib(caplog):
    configure_logging()
    try:
        with caplog.at_level(logging.INFO, logger="stockledger.test"):
            get_logger("stockledger.test").info("stock_item_created", item_id="beer1")
    finally:
        structlog.reset_defaults()
    assert "stock_item_created" in caplog.text
    assert "beer1" in caplog.text


def test_money_fields_rounded():
    event = round_money_fields(
        None,
        "info",
        {"event": "supply_added", "selling_price": 16.900000000000002, "quantity": 150.0},
    )
    assert event["selling_price"] == 16.9
    assert event["quantity"] == 150.0


def test_money_fields_leave_non_floats():
    event = round_money_fields(None, "info", {"event": "x", "price": None, "total_cost": 3})
    assert event["price"] is None
    assert event["total_cost"] == 3


def test_level_override(caplog):
    configure_logging("DEBUG")
    try:
        with caplog.at_level(logging.DEBUG):
            get_logger("stockledger.search").debug("stock_search_complete", results=2)
        assert logging.getLogger("stockledger").level == logging.DEBUG
    finally:
        structlog.reset_defaults()
        logging.getLogger("stockledger").setLevel(logging.NOTSET)
    assert "stock_search_complete" in caplog.text
