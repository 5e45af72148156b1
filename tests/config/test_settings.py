"""Tests for application settings."""

import pydantic
import pytest

from stockledger.application.services import get_stock_ledger_service
from stockledger.config import PricingSettings, get_settings, reset_settings


class TestSettings:
    def test_defaults(self):
        settings = get_settings()
        assert settings.app_name == "Stock Ledger"
        assert settings.pricing.currency_precision == 2
        assert settings.pricing.price_deviation_threshold == 15.0
        assert settings.pricing.allow_negative_markup is False
        assert settings.catalogue.seed_path.name == "catalogue.yaml"
        assert settings.catalogue.seed_path.exists()

    def test_singleton(self):
        assert get_settings() is get_settings()

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PRICING_PRICE_DEVIATION_THRESHOLD", "5")
        monkeypatch.setenv("PRICING_CURRENCY_SYMBOL", "$")
        reset_settings()
        pricing = get_settings().pricing
        assert pricing.price_deviation_threshold == 5.0
        assert pricing.currency_symbol == "$"

    def test_precision_bounds(self):
        with pytest.raises(pydantic.ValidationError):
            PricingSettings(currency_precision=9)

    def test_ledger_built_from_settings(self, monkeypatch, lager):
        monkeypatch.setenv("PRICING_PRICE_DEVIATION_THRESHOLD", "1")
        reset_settings()
        ledger = get_stock_ledger_service()
        assert ledger.check_price(lager, 17.2) is not None
        assert get_stock_ledger_service() is ledger
