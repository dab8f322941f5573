"""
Unit tests for core value objects and exceptions.
"""

from dataclasses import FrozenInstanceError

import pytest

from pay_station.core.exceptions import (
    ConfigurationError,
    InvalidCoinError,
    PaymentError,
    PayStationError,
)
from pay_station.core.interfaces import PayStation
from pay_station.core.value_objects import (
    RateTable,
    Receipt,
    StationStatus,
    TransactionPhase,
)


# =============================================================================
# Value Objects Tests
# =============================================================================


class TestReceipt:
    """Tests for Receipt value object."""

    def test_receipt_creation(self):
        receipt = Receipt(minutes_purchased=16)
        assert receipt.minutes_purchased == 16

    def test_receipt_is_immutable(self):
        receipt = Receipt(minutes_purchased=16)
        with pytest.raises(FrozenInstanceError):
            receipt.minutes_purchased = 60

    def test_receipt_compares_by_value(self):
        assert Receipt(10) == Receipt(10)
        assert Receipt(10) != Receipt(12)

    def test_receipt_negative_raises(self):
        """Test that negative minutes raises error."""
        with pytest.raises(ValueError):
            Receipt(minutes_purchased=-2)

    def test_receipt_to_dict(self):
        assert Receipt(40).to_dict() == {"minutes_purchased": 40}

    def test_receipt_str(self):
        assert str(Receipt(14)) == "Parking receipt: 14 min"


class TestRateTable:
    """Tests for RateTable value object."""

    @pytest.fixture
    def rate(self):
        return RateTable.from_coins([5, 10, 25])

    def test_defaults(self, rate):
        assert rate.legal_coins == frozenset({5, 10, 25})
        assert rate.price == 5
        assert rate.minutes == 2

    def test_is_legal(self, rate):
        assert rate.is_legal(5)
        assert rate.is_legal(25)
        assert not rate.is_legal(17)
        assert not rate.is_legal(True)
        assert not rate.is_legal(10.0)

    @pytest.mark.parametrize(
        "amount, minutes",
        [(0, 0), (4, 0), (5, 2), (9, 2), (35, 14), (40, 16), (100, 40)],
    )
    def test_minutes_for(self, rate, amount, minutes):
        assert rate.minutes_for(amount) == minutes

    def test_legal_coins_normalized_to_frozenset(self):
        rate = RateTable(legal_coins=[25, 5, 5])
        assert rate.legal_coins == frozenset({5, 25})

    @pytest.mark.parametrize(
        "coins, price, minutes",
        [
            ([], 5, 2),
            ([0], 5, 2),
            ([-5], 5, 2),
            ([True], 5, 2),
            ([2.5], 5, 2),
            ([5], 0, 2),
            ([5], 5, -1),
            ([5], 2.5, 2),
            ([5], True, 2),
            ([5], 5, 1.5),
            ([5], 5, True),
        ],
    )
    def test_invalid_table_raises(self, coins, price, minutes):
        with pytest.raises(ValueError):
            RateTable.from_coins(coins, price=price, minutes=minutes)

    def test_to_dict(self, rate):
        assert rate.to_dict() == {"legal_coins": [5, 10, 25], "price": 5, "minutes": 2}


class TestStationStatus:
    """Tests for StationStatus value object."""

    def test_default_status(self):
        status = StationStatus()
        assert status.phase == TransactionPhase.IDLE
        assert status.to_dict() == {
            "phase": "idle",
            "inserted_so_far": 0,
            "time_bought": 0,
            "coins": {},
            "total_profit": 0,
        }


# =============================================================================
# Interface Tests
# =============================================================================


class TestPayStationInterface:
    """Tests for the PayStation abstract base class."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            PayStation()


# =============================================================================
# Exception Tests
# =============================================================================


class TestExceptions:
    """Tests for custom exceptions."""

    def test_pay_station_error(self):
        """Test PayStationError creation and to_dict."""
        error = PayStationError("Test error", code="TEST_001")
        assert error.message == "Test error"
        assert error.code == "TEST_001"

        d = error.to_dict()
        assert d["error"] == "TEST_001"
        assert d["message"] == "Test error"
        assert d["details"] == {}

    def test_default_code_is_class_name(self):
        assert PaymentError("boom").code == "PaymentError"

    def test_invalid_coin_error(self):
        error = InvalidCoinError("Invalid coin: 17", coin=17, legal_coins={25, 5, 10})
        assert isinstance(error, PaymentError)
        assert isinstance(error, PayStationError)
        assert error.coin == 17
        assert error.details == {"coin": 17, "legal_coins": [5, 10, 25]}
        assert str(error) == "Invalid coin: 17"

    def test_configuration_error(self):
        error = ConfigurationError("bad rate", details={"price": 0})
        assert isinstance(error, PayStationError)
        assert error.to_dict()["details"] == {"price": 0}
