"""Pairs-trade analysis: spread window selection and trade pricing"""

from dataclasses import dataclass

from ..data.models import Instrument
from ..errors import SeriesMismatchError
from ..metrics.spread import (
    TradingWindow,
    calculate_spread,
    find_best_trading_window,
    window_cumulative_spread,
)


@dataclass(frozen=True)
class PairsTradeResult:
    """Priced pairs trade: short leg A, long leg B over one window"""
    short_ticker: str
    long_ticker: str
    window: TradingWindow
    cumulative_spread: float
    entry_price_short: float
    entry_price_long: float
    exit_price_short: float
    exit_price_long: float
    profit: float
    annualized_return: float

    @property
    def holding_periods(self) -> int:
        """Number of periods between entry and exit index"""
        return self.window.exit_index - self.window.entry_index


def analyze_pairs(instrument_a: Instrument, instrument_b: Instrument,
                  trading_days: int = 252) -> PairsTradeResult:
    """
    Find and price the best pairs trade between two instruments

    The spread is returns_a - returns_b. Window indices are used directly
    as indices into each price history: the trade shorts A and buys B at
    the entry index, and covers A and sells B at the exit index.

    Args:
        instrument_a: Leg that is shorted
        instrument_b: Leg that is bought
        trading_days: Annualization factor

    Returns:
        PairsTradeResult for the best window

    Raises:
        SeriesMismatchError: If the return histories differ in length
    """
    if instrument_a.periods != instrument_b.periods:
        raise SeriesMismatchError(
            "Price history mismatch between instruments",
            left_length=instrument_a.periods,
            right_length=instrument_b.periods,
            context={"tickers": [instrument_a.ticker, instrument_b.ticker]}
        )

    spread = calculate_spread(instrument_a.returns, instrument_b.returns)
    window = find_best_trading_window(spread)

    entry_a = instrument_a.price_history[window.entry_index]
    entry_b = instrument_b.price_history[window.entry_index]
    exit_a = instrument_a.price_history[window.exit_index]
    exit_b = instrument_b.price_history[window.exit_index]

    profit = (exit_b - entry_b) - (exit_a - entry_a)
    annualized_return = (profit / abs(entry_a + entry_b)) * trading_days

    return PairsTradeResult(
        short_ticker=instrument_a.ticker,
        long_ticker=instrument_b.ticker,
        window=window,
        cumulative_spread=window_cumulative_spread(spread, window),
        entry_price_short=entry_a,
        entry_price_long=entry_b,
        exit_price_short=exit_a,
        exit_price_long=exit_b,
        profit=profit,
        annualized_return=annualized_return,
    )
