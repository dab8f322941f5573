"""
Custom exceptions for the pay station.

Provides a hierarchy of typed exceptions for better error handling
and more informative error messages.
"""

from typing import Any, Iterable, Optional


class PayStationError(Exception):
    """Base exception for all pay station errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            code: Optional error code for programmatic handling.
            details: Optional additional error details.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for collaborators."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# Payment Errors
# =============================================================================


class PaymentError(PayStationError):
    """Base exception for payment-related errors."""

    pass


class InvalidCoinError(PaymentError):
    """Coin value is not one of the legal denominations."""

    def __init__(
        self,
        message: str,
        coin: Any = None,
        legal_coins: Iterable[int] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.coin = coin
        self.details["coin"] = coin
        self.details["legal_coins"] = sorted(legal_coins)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(PayStationError):
    """Station configuration is invalid."""

    pass
