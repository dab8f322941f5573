"""
Value Objects for the pay station.

Immutable objects that represent values in the domain.
Value objects are compared by value, not by identity.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Iterable


# =============================================================================
# Enums
# =============================================================================


class TransactionPhase(Enum):
    """Phase of the current transaction."""

    IDLE = auto()       # Nothing inserted since the last reset
    ACCEPTING = auto()  # Coins inserted, waiting for purchase or cancel


# =============================================================================
# Rate Table Value Object
# =============================================================================


@dataclass(frozen=True)
class RateTable:
    """
    Immutable table of legal coins and the money-to-time rate.

    Every ``price`` cents inserted buys ``minutes`` minutes of parking;
    leftover cents below ``price`` buy nothing.

    Attributes:
        legal_coins: Accepted coin denominations in cents.
        price: Cents per rate step.
        minutes: Minutes granted per rate step.
    """

    legal_coins: frozenset[int]
    price: int = 5
    minutes: int = 2

    def __post_init__(self) -> None:
        """Validate the table."""
        # Normalize any iterable to a frozenset
        object.__setattr__(self, "legal_coins", frozenset(self.legal_coins))

        if not self.legal_coins:
            raise ValueError("At least one legal coin is required")
        for coin in self.legal_coins:
            if isinstance(coin, bool) or not isinstance(coin, int) or coin <= 0:
                raise ValueError(f"Coin denomination must be a positive integer: {coin!r}")
        for name in ("price", "minutes"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Rate {name} must be an integer: {value!r}")
        if self.price <= 0:
            raise ValueError("Rate price must be positive")
        if self.minutes < 0:
            raise ValueError("Rate minutes cannot be negative")

    @classmethod
    def from_coins(
        cls,
        coins: Iterable[int],
        price: int = 5,
        minutes: int = 2,
    ) -> "RateTable":
        """
        Create a RateTable from any iterable of coin values.

        Args:
            coins: Legal coin denominations in cents.
            price: Cents per rate step.
            minutes: Minutes granted per rate step.

        Returns:
            RateTable instance.
        """
        return cls(legal_coins=frozenset(coins), price=price, minutes=minutes)

    def is_legal(self, coin: Any) -> bool:
        """Check whether a value is an accepted coin."""
        if isinstance(coin, bool) or not isinstance(coin, int):
            return False
        return coin in self.legal_coins

    def minutes_for(self, amount: int) -> int:
        """Parking minutes bought by ``amount`` cents."""
        return amount // self.price * self.minutes

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "legal_coins": sorted(self.legal_coins),
            "price": self.price,
            "minutes": self.minutes,
        }


# =============================================================================
# Receipt Value Object
# =============================================================================


@dataclass(frozen=True)
class Receipt:
    """
    Receipt issued by a purchase.

    Attributes:
        minutes_purchased: Parking time bought, in minutes.
    """

    minutes_purchased: int = 0

    def __post_init__(self) -> None:
        if self.minutes_purchased < 0:
            raise ValueError("Purchased minutes cannot be negative")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for printers and gate controllers."""
        return {"minutes_purchased": self.minutes_purchased}

    def __str__(self) -> str:
        return f"Parking receipt: {self.minutes_purchased} min"


# =============================================================================
# Station Status Value Object
# =============================================================================


@dataclass(frozen=True)
class StationStatus:
    """
    Immutable snapshot of a pay station at a point in time.

    Attributes:
        phase: Current transaction phase.
        inserted_so_far: Cents inserted in the current transaction.
        time_bought: Minutes shown on the display.
        coins: Inserted coins as (denomination, count) pairs.
        total_profit: Cents collected by purchases since the last empty.
    """

    phase: TransactionPhase = TransactionPhase.IDLE
    inserted_so_far: int = 0
    time_bought: int = 0
    coins: tuple[tuple[int, int], ...] = field(default_factory=tuple)
    total_profit: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "phase": self.phase.name.lower(),
            "inserted_so_far": self.inserted_so_far,
            "time_bought": self.time_bought,
            "coins": dict(self.coins),
            "total_profit": self.total_profit,
        }
