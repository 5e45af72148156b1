"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PricingSettings(BaseSettings):
    """Cost and pricing rules for the stock ledger."""

    model_config = SettingsConfigDict(env_prefix="PRICING_")

    currency_precision: int = 2
    currency_symbol: str = "₱"

    # Manual prices further than this (percent) from the markup-implied
    # price raise an advisory warning
    price_deviation_threshold: float = 15.0

    allow_negative_markup: bool = False

    # Margin health bands (percent)
    low_margin_threshold: float = 10.0
    healthy_margin_threshold: float = 20.0

    @field_validator("currency_precision")
    @classmethod
    def check_precision(cls, v: int) -> int:
        if v < 0 or v > 6:
            raise ValueError("currency_precision must be between 0 and 6")
        return v


class CatalogueSettings(BaseSettings):
    """Seed catalogue configuration."""

    model_config = SettingsConfigDict(env_prefix="CATALOGUE_")

    seed_path: Path = Path(__file__).resolve().parent.parent / "infrastructure" / "seed" / "catalogue.yaml"
    load_on_start: bool = True


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Stock Ledger"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    pricing: PricingSettings = Field(default_factory=PricingSettings)
    catalogue: CatalogueSettings = Field(default_factory=CatalogueSettings)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
