"""
Data models for instrument price and return histories.

An instrument owns its histories exclusively; both lists only grow by
append and the analytics functions receive them read-only.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from ..errors import MalformedDataError


def _check_price(price: float) -> float:
    if isinstance(price, bool) or not isinstance(price, (int, float)) or not price > 0:
        raise MalformedDataError(
            "Price must be a positive number",
            raw_data=price,
            expected_format="positive float"
        )
    return float(price)


def calculate_returns(prices: Sequence[float]) -> list[float]:
    """
    Derive fractional returns from a price series.

    returns[i] = (prices[i + 1] - prices[i]) / prices[i]

    Args:
        prices: Positive prices in chronological order

    Returns:
        One return per consecutive price pair (len(prices) - 1 values)
    """
    for price in prices:
        _check_price(price)

    return [
        (current - previous) / previous
        for previous, current in zip(prices, prices[1:])
    ]


@dataclass
class Instrument:
    """Tradable instrument with append-only price and return history."""

    ticker: str
    initial_price: float
    price_history: list[float] = field(default_factory=list, init=False)
    returns: list[float] = field(default_factory=list, init=False)

    def __post_init__(self):
        """Seed the price history with the initial price."""
        self.initial_price = _check_price(self.initial_price)
        self.price_history.append(self.initial_price)

    @property
    def current_price(self) -> float:
        """Most recent price."""
        return self.price_history[-1]

    @property
    def periods(self) -> int:
        """Number of returns observed."""
        return len(self.returns)

    def add_price_update(self, new_price: float) -> float:
        """
        Append a new price observation.

        Args:
            new_price: Positive price for the next period

        Returns:
            The fractional return from the previous price
        """
        new_price = _check_price(new_price)
        current = self.current_price
        period_return = (new_price - current) / current

        self.returns.append(period_return)
        self.price_history.append(new_price)
        return period_return

    @classmethod
    def from_prices(cls, ticker: str, prices: Sequence[float]) -> "Instrument":
        """Build an instrument by replaying a price series."""
        if not prices:
            raise MalformedDataError(
                "Price series must contain at least one price",
                raw_data=list(prices),
                expected_format="non-empty sequence"
            )

        instrument = cls(ticker=ticker, initial_price=prices[0])
        for price in prices[1:]:
            instrument.add_price_update(price)
        return instrument
