"""
Domain layer - Business logic and domain models.

Contains:
- Pay station state machine
- Current transaction aggregate
"""

from .pay_station import (
    CoinPayStation,
    Transaction,
)


__all__ = [
    "CoinPayStation",
    "Transaction",
]
