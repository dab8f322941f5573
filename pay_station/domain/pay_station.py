"""
Pay Station - Coin payment, parking time and till accounting.

The current transaction is held as one immutable value that is replaced
as a whole, so inserted money, displayed time and the coin tally can
never drift apart.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional

from pay_station.core.exceptions import InvalidCoinError
from pay_station.core.interfaces import PayStation
from pay_station.core.value_objects import (
    RateTable,
    Receipt,
    StationStatus,
    TransactionPhase,
)
from pay_station.infrastructure.settings import build_rate_table, get_settings
from pay_station.loggers import logger


# =============================================================================
# Transaction
# =============================================================================


@dataclass(frozen=True)
class Transaction:
    """
    Coins inserted since the last reset.

    Attributes:
        coins: (denomination, count) pairs sorted by denomination.
        inserted_so_far: Total cents inserted.
        time_bought: Minutes bought with ``inserted_so_far``.
    """

    coins: tuple[tuple[int, int], ...] = field(default_factory=tuple)
    inserted_so_far: int = 0
    time_bought: int = 0

    @classmethod
    def empty(cls) -> "Transaction":
        """Create an idle transaction."""
        return cls()

    @property
    def phase(self) -> TransactionPhase:
        """Get the transaction phase."""
        if self.inserted_so_far > 0:
            return TransactionPhase.ACCEPTING
        return TransactionPhase.IDLE

    def with_coin(self, coin: int, rate: RateTable) -> "Transaction":
        """
        Return a new transaction with one more coin.

        Args:
            coin: Legal coin denomination in cents.
            rate: Rate table used to recompute the parking time.

        Returns:
            New Transaction instance.
        """
        counts = self.coin_counts()
        counts[coin] = counts.get(coin, 0) + 1
        inserted = self.inserted_so_far + coin
        return Transaction(
            coins=tuple(sorted(counts.items())),
            inserted_so_far=inserted,
            time_bought=rate.minutes_for(inserted),
        )

    def coin_counts(self) -> dict[int, int]:
        """Get a fresh denomination -> count mapping."""
        return dict(self.coins)


# =============================================================================
# Coin Pay Station
# =============================================================================


class CoinPayStation(PayStation):
    """
    Coin-operated parking pay station.

    Converts inserted coins into parking time, issues receipts on
    purchase, refunds coins on cancel and keeps the till of completed
    purchases until it is emptied.
    """

    def __init__(
        self,
        rate_table: Optional[RateTable] = None,
        clear_transaction_on_empty: Optional[bool] = None,
    ) -> None:
        """
        Initialize the pay station.

        Args:
            rate_table: Legal coins and rate, defaults to the configured table.
            clear_transaction_on_empty: Whether ``empty_till`` also drops an
                in-progress transaction, defaults to the configured value.
        """
        settings = get_settings()
        self._rate = rate_table or build_rate_table(settings.rate)
        if clear_transaction_on_empty is None:
            clear_transaction_on_empty = settings.station.clear_transaction_on_empty
        self._clear_transaction_on_empty = clear_transaction_on_empty

        self._transaction = Transaction.empty()
        self._total_profit = 0
        self._lock = threading.Lock()

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def rate_table(self) -> RateTable:
        """Get the rate table."""
        return self._rate

    @property
    def clear_transaction_on_empty(self) -> bool:
        """Check whether empty_till also drops the current transaction."""
        return self._clear_transaction_on_empty

    @property
    def phase(self) -> TransactionPhase:
        """Get the current transaction phase."""
        return self._transaction.phase

    @property
    def inserted_so_far(self) -> int:
        """Get cents inserted in the current transaction."""
        return self._transaction.inserted_so_far

    @property
    def total_profit(self) -> int:
        """Get cents collected by purchases since the last empty."""
        return self._total_profit

    def coin_counts(self) -> dict[int, int]:
        """Get a copy of the coins inserted in the current transaction."""
        return self._transaction.coin_counts()

    def status(self) -> StationStatus:
        """
        Get a consistent snapshot of the station.

        Returns:
            StationStatus instance.
        """
        with self._lock:
            transaction = self._transaction
            return StationStatus(
                phase=transaction.phase,
                inserted_so_far=transaction.inserted_so_far,
                time_bought=transaction.time_bought,
                coins=transaction.coins,
                total_profit=self._total_profit,
            )

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def insert_coin(self, value: int) -> None:
        """
        Insert one coin.

        Args:
            value: Coin denomination in cents.

        Raises:
            InvalidCoinError: If the coin is not a legal denomination.
        """
        if not self._rate.is_legal(value):
            logger.warning(f"Rejected invalid coin: {value!r}")
            raise InvalidCoinError(
                f"Invalid coin: {value!r}",
                coin=value,
                legal_coins=self._rate.legal_coins,
            )

        with self._lock:
            self._transaction = self._transaction.with_coin(value, self._rate)
            inserted = self._transaction.inserted_so_far
            minutes = self._transaction.time_bought

        logger.debug(
            f"Coin accepted: {value} cents. "
            f"Total: {inserted} cents, display: {minutes} min"
        )

    def read_display(self) -> int:
        """Get minutes of parking time bought so far."""
        return self._transaction.time_bought

    def purchase(self) -> Receipt:
        """
        Buy the displayed parking time.

        A purchase with nothing inserted issues a zero-minute receipt.

        Returns:
            Receipt for the time bought.
        """
        with self._lock:
            transaction = self._transaction
            receipt = Receipt(minutes_purchased=transaction.time_bought)
            self._total_profit += transaction.inserted_so_far
            self._transaction = Transaction.empty()

        logger.info(
            f"Purchase completed: {receipt.minutes_purchased} min "
            f"for {transaction.inserted_so_far} cents"
        )
        return receipt

    def cancel(self) -> dict[int, int]:
        """
        Cancel the transaction.

        Returns:
            New mapping of denomination to count of the coins to return.
        """
        with self._lock:
            transaction = self._transaction
            self._transaction = Transaction.empty()

        refund = transaction.coin_counts()
        logger.info(f"Transaction cancelled. Returning {transaction.inserted_so_far} cents: {refund}")
        return refund

    def empty_till(self) -> int:
        """
        Empty the till.

        Returns:
            Cents collected by purchases since the last empty.
        """
        with self._lock:
            earned = self._total_profit
            self._total_profit = 0

            discarded = Transaction.empty()
            if self._clear_transaction_on_empty:
                discarded = self._transaction
                self._transaction = Transaction.empty()

        if discarded.inserted_so_far:
            logger.warning(
                f"Till emptied during a transaction. "
                f"Discarded {discarded.inserted_so_far} cents without refund"
            )
        logger.info(f"Till emptied: {earned} cents")
        return earned
