"""
Core module - Foundation layer with no external dependencies.

Contains:
- Exceptions
- Interfaces
- Value Objects
"""

from .exceptions import (
    PayStationError,
    PaymentError,
    InvalidCoinError,
    ConfigurationError,
)
from .interfaces import PayStation
from .value_objects import (
    RateTable,
    Receipt,
    StationStatus,
    TransactionPhase,
)


__all__ = [
    # Exceptions
    "PayStationError",
    "PaymentError",
    "InvalidCoinError",
    "ConfigurationError",
    # Interfaces
    "PayStation",
    # Value Objects
    "RateTable",
    "Receipt",
    "StationStatus",
    "TransactionPhase",
]
