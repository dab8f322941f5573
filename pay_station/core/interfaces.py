"""
Interfaces for the pay station.

Defines the contract that coin hardware, displays, printers and the
till-collection process program against.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pay_station.core.value_objects import Receipt


# =============================================================================
# Pay Station Interface
# =============================================================================


class PayStation(ABC):
    """
    Abstract base class for parking pay stations.

    Responsibilities:
        - accept coin payment;
        - calculate parking time based on payment;
        - know earnings and parking time bought;
        - issue receipts;
        - handle purchase, cancel and till-emptying events.
    """

    @abstractmethod
    def insert_coin(self, value: int) -> None:
        """
        Insert one coin into the station.

        Args:
            value: Coin denomination in cents.

        Raises:
            InvalidCoinError: If the coin is not a legal denomination.
        """
        ...

    @abstractmethod
    def read_display(self) -> int:
        """
        Read the machine's display.

        Returns:
            Minutes of parking time bought so far.
        """
        ...

    @abstractmethod
    def purchase(self) -> Receipt:
        """
        Buy parking time and terminate the transaction.

        Returns:
            Receipt for the time bought.
        """
        ...

    @abstractmethod
    def cancel(self) -> dict[int, int]:
        """
        Cancel the transaction and return the inserted coins.

        Returns:
            Mapping of denomination to number of coins to hand back.
        """
        ...

    @abstractmethod
    def empty_till(self) -> int:
        """
        Collect the money earned by purchases since the last empty.

        Returns:
            Total profit in cents.
        """
        ...
