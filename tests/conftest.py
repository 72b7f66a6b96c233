"""Pytest configuration and shared fixtures."""

import pytest

from quantlab.data.models import Instrument


@pytest.fixture
def sample_returns() -> list[float]:
    """Five-period return series with a known volatility."""
    return [0.01, -0.02, 0.015, 0.005, -0.01]


@pytest.fixture
def nifty_bids() -> list[tuple[float, int]]:
    """Bid quotes inserted out of price order."""
    return [
        (18000.50, 100),
        (18000.25, 150),
        (18001.00, 75),
    ]


@pytest.fixture
def rising_instrument() -> Instrument:
    """Instrument gaining 10% twice, then flat."""
    return Instrument.from_prices("AAA", [100.0, 110.0, 121.0, 121.0])


@pytest.fixture
def flat_instrument() -> Instrument:
    """Instrument with a constant price."""
    return Instrument.from_prices("BBB", [50.0, 50.0, 50.0, 50.0])
