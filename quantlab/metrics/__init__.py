"""Analytics primitives over return series, quote levels and spreads"""

from .orderbook import EMPTY_LEVEL, OrderBook, PriceLevel
from .spread import (
    TradingWindow,
    calculate_spread,
    find_best_trading_window,
    window_cumulative_spread,
)
from .volatility import (
    VolatilityCalculator,
    calculate_rolling_volatility,
    calculate_sliding_volatility,
)

__all__ = [
    "VolatilityCalculator",
    "calculate_rolling_volatility",
    "calculate_sliding_volatility",
    "OrderBook",
    "PriceLevel",
    "EMPTY_LEVEL",
    "TradingWindow",
    "calculate_spread",
    "find_best_trading_window",
    "window_cumulative_spread",
]
