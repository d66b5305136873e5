"""Configuration loading for the Storefront system.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv. Mapping and list settings are
    read from the environment as JSON.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Currency configuration
    base_currency: str = Field(
        default="USD",
        description="Currency catalog prices are expressed in",
    )
    exchange_rates: dict[str, float] = Field(
        default_factory=lambda: {"USD": 1.0, "EUR": 0.92, "GBP": 0.79, "AUD": 1.5},
        description="Units of each currency per unit of the common reference",
    )

    # Shipping configuration
    shipping_destinations: list[str] = Field(
        default_factory=lambda: ["London", "Paris", "New York", "Sydney"],
        description="Destinations served by the flat-rate carrier",
    )
    shipping_cost: float = Field(
        default=10.0,
        description="Flat shipping cost in the base currency",
    )
    shipping_estimated_days: int = Field(
        default=2,
        description="Estimated delivery time in days",
    )

    # Store policies
    opening_hour: int = Field(
        default=8,
        description="Hour the store opens (inclusive)",
    )
    closing_hour: int = Field(
        default=20,
        description="Hour the store closes (exclusive)",
    )
    holiday_month: int = Field(
        default=12,
        description="Month of the yearly holiday discount",
    )
    holiday_day: int = Field(
        default=25,
        description="Day of month of the yearly holiday discount",
    )
    holiday_discount: float = Field(
        default=0.2,
        description="Fraction taken off on the holiday",
    )

    # Payment sandbox
    declined_cards: list[str] = Field(
        default_factory=lambda: ["4000000000000002"],
        description="Card numbers the sandbox payment adapter always declines",
    )

    # Security codes
    security_code_digits: int = Field(
        default=6,
        description="Number of digits in one-time login codes",
    )

    # Pages
    home_path: str = Field(
        default="/home",
        description="Path reported to analytics when the home page renders",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose output",
    )

    @field_validator("base_currency")
    @classmethod
    def validate_base_currency(cls, v: str) -> str:
        """Normalize currency codes to upper case."""
        if not v.strip():
            raise ValueError("base_currency must be a non-empty string")
        return v.strip().upper()

    @field_validator("exchange_rates")
    @classmethod
    def validate_exchange_rates(cls, v: dict[str, float]) -> dict[str, float]:
        """Ensure every rate is positive."""
        for currency, rate in v.items():
            if rate <= 0:
                raise ValueError(f"exchange rate for {currency} must be positive")
        return {currency.upper(): rate for currency, rate in v.items()}

    @field_validator("shipping_cost")
    @classmethod
    def validate_shipping_cost(cls, v: float) -> float:
        """Ensure shipping cost is non-negative."""
        if v < 0:
            raise ValueError("shipping_cost must be non-negative")
        return v

    @field_validator("shipping_estimated_days")
    @classmethod
    def validate_estimated_days(cls, v: int) -> int:
        """Ensure delivery estimate is non-negative."""
        if v < 0:
            raise ValueError("shipping_estimated_days must be non-negative")
        return v

    @field_validator("opening_hour", "closing_hour")
    @classmethod
    def validate_hour(cls, v: int) -> int:
        """Ensure hours fall within a day."""
        if v < 0 or v > 24:
            raise ValueError("hours must be between 0 and 24")
        return v

    @field_validator("holiday_discount")
    @classmethod
    def validate_holiday_discount(cls, v: float) -> float:
        """Ensure the discount is a fraction below 1."""
        if v < 0 or v >= 1:
            raise ValueError("holiday_discount must be in [0, 1)")
        return v

    @field_validator("security_code_digits")
    @classmethod
    def validate_code_digits(cls, v: int) -> int:
        """Ensure codes have a usable length."""
        if v < 4 or v > 12:
            raise ValueError("security_code_digits must be between 4 and 12")
        return v

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Settings":
        """Check the opening window and that the base currency has a rate."""
        if self.opening_hour >= self.closing_hour:
            raise ValueError("opening_hour must be earlier than closing_hour")
        if self.base_currency not in self.exchange_rates:
            raise ValueError(
                f"exchange_rates must include the base currency {self.base_currency}"
            )
        return self


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
