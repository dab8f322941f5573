"""
Pytest configuration for pay station tests.
"""

import pytest

from pay_station.domain.pay_station import CoinPayStation
from pay_station.infrastructure.settings import reset_settings


@pytest.fixture(autouse=True)
def default_settings():
    """Restore default settings around every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def station():
    """Create a fresh pay station for each test."""
    return CoinPayStation()
