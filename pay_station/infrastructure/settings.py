"""
Application settings.

Provides typed, frozen configuration sections aggregated into a
single settings object.
"""

from dataclasses import dataclass, field
from typing import Optional

from pay_station.configs import (
    APP_NAME,
    CLEAR_TRANSACTION_ON_EMPTY,
    COIN_DENOMINATIONS,
    LOG_FILE,
    LOG_LEVEL,
    LOKI_URL,
    RATE_MINUTES,
    RATE_PRICE,
)
from pay_station.core.exceptions import ConfigurationError
from pay_station.core.value_objects import RateTable


# =============================================================================
# Configuration Classes
# =============================================================================


@dataclass(frozen=True)
class RateSettings:
    """Legal coins and the money-to-time conversion rate."""

    legal_coins: tuple[int, ...] = COIN_DENOMINATIONS
    price: int = RATE_PRICE
    minutes: int = RATE_MINUTES


@dataclass(frozen=True)
class StationSettings:
    """Pay station behaviour settings."""

    clear_transaction_on_empty: bool = CLEAR_TRANSACTION_ON_EMPTY


@dataclass(frozen=True)
class LoggingSettings:
    """Logging outputs."""

    app: str = APP_NAME
    level: int = LOG_LEVEL
    log_file: Optional[str] = LOG_FILE
    loki_url: Optional[str] = LOKI_URL


# =============================================================================
# Main Settings
# =============================================================================


@dataclass
class Settings:
    """
    Main application settings.

    Aggregates all configuration sections.
    """

    rate: RateSettings = field(default_factory=RateSettings)
    station: StationSettings = field(default_factory=StationSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


# =============================================================================
# Settings Singleton
# =============================================================================


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings(settings: Settings | None = None) -> None:
    """Replace the settings singleton (None restores the defaults)."""
    global _settings
    _settings = settings


def build_rate_table(rate: RateSettings | None = None) -> RateTable:
    """
    Build the rate table from rate settings.

    Args:
        rate: Rate settings, defaults to the configured ones.

    Returns:
        RateTable instance.

    Raises:
        ConfigurationError: If the settings do not form a valid table.
    """
    rate = rate or get_settings().rate
    try:
        return RateTable.from_coins(rate.legal_coins, price=rate.price, minutes=rate.minutes)
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid rate configuration: {e}",
            details={"rate": {"legal_coins": list(rate.legal_coins), "price": rate.price, "minutes": rate.minutes}},
        ) from e
