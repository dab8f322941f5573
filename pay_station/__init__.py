"""
Parking pay station.

Accepts coin payments, converts them into parking time, and issues
receipts or refunds while keeping the till of completed purchases.
"""

from pay_station.core import (
    ConfigurationError,
    InvalidCoinError,
    PaymentError,
    PayStation,
    PayStationError,
    RateTable,
    Receipt,
    StationStatus,
    TransactionPhase,
)
from pay_station.domain import CoinPayStation, Transaction


__all__ = [
    "CoinPayStation",
    "ConfigurationError",
    "InvalidCoinError",
    "PaymentError",
    "PayStation",
    "PayStationError",
    "RateTable",
    "Receipt",
    "StationStatus",
    "Transaction",
    "TransactionPhase",
]
