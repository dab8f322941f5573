"""
Configuration module for the pay station.

This module provides centralized constants for the coin set, the
money-to-time conversion rate and the logging outputs.
"""

import logging
from enum import IntEnum
from typing import Final, Optional


# =============================================================================
# Coin Configuration
# =============================================================================

class Coin(IntEnum):
    """Legal coin denominations in cents."""

    NICKEL = 5
    DIME = 10
    QUARTER = 25


# Accepted denominations in cents
COIN_DENOMINATIONS: Final[tuple[int, ...]] = tuple(coin.value for coin in Coin)


# =============================================================================
# Rate Configuration
# =============================================================================

# Every RATE_PRICE cents buys RATE_MINUTES minutes of parking
RATE_PRICE: Final[int] = 5
RATE_MINUTES: Final[int] = 2


# =============================================================================
# Station Behaviour
# =============================================================================

# empty_till() also drops an in-progress transaction without refunding it
CLEAR_TRANSACTION_ON_EMPTY: Final[bool] = True


# =============================================================================
# Logging Configuration
# =============================================================================

APP_NAME: Final[str] = "pay_station"
LOG_LEVEL: Final[int] = logging.DEBUG
LOG_FILE: Final[Optional[str]] = None
LOKI_URL: Final[Optional[str]] = None
