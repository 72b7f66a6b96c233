"""Windowed volatility (population standard deviation of returns)"""

import math
from collections.abc import Sequence
from itertools import islice

from ..errors import InvalidParameterError


def _check_window_size(window_size: int) -> None:
    if isinstance(window_size, bool) or not isinstance(window_size, int) or window_size < 1:
        raise InvalidParameterError(
            "Window size must be a positive integer",
            parameter="window_size",
            value=window_size
        )


def _population_std(total: float, total_sq: float, count: int) -> float:
    mean = total / count
    variance = (total_sq / count) - (mean * mean)
    # Cancellation can push the variance slightly below zero
    return math.sqrt(max(variance, 0.0))


def calculate_rolling_volatility(returns: Sequence[float], window_size: int) -> float:
    """
    Calculate volatility over the first window of a return series

    Variance = E[x^2] - E[x]^2 over returns[0:window_size], clamped at zero.
    Only the first window is used; see calculate_sliding_volatility for one
    value per window offset.

    Args:
        returns: Per-period fractional returns
        window_size: Number of periods in the window (>= 1)

    Returns:
        Per-period volatility, or 0.0 if fewer than window_size returns
    """
    _check_window_size(window_size)

    if len(returns) < window_size:
        return 0.0

    total = 0.0
    total_sq = 0.0
    for value in islice(returns, window_size):
        total += value
        total_sq += value * value

    return _population_std(total, total_sq, window_size)


def calculate_sliding_volatility(returns: Sequence[float], window_size: int) -> list[float]:
    """
    Calculate volatility for every window offset of a return series

    Running sums are updated as the window slides, so the whole series is
    processed in a single pass.

    Args:
        returns: Per-period fractional returns
        window_size: Number of periods in each window (>= 1)

    Returns:
        len(returns) - window_size + 1 volatilities, empty if insufficient data
    """
    _check_window_size(window_size)

    if len(returns) < window_size:
        return []

    total = 0.0
    total_sq = 0.0
    for value in islice(returns, window_size):
        total += value
        total_sq += value * value

    result = [_population_std(total, total_sq, window_size)]
    for i in range(window_size, len(returns)):
        leaving = returns[i - window_size]
        entering = returns[i]
        total += entering - leaving
        total_sq += entering * entering - leaving * leaving
        result.append(_population_std(total, total_sq, window_size))

    return result


class VolatilityCalculator:
    """Volatility calculator bound to a configured window size"""

    def __init__(self, window_size: int = 20):
        _check_window_size(window_size)
        self.window_size = window_size

    def calculate_with_returns(self, returns: Sequence[float]) -> float:
        """
        Calculate first-window volatility for a return series

        Args:
            returns: Return series owned by the caller

        Returns:
            Volatility, or 0.0 if insufficient data
        """
        return calculate_rolling_volatility(returns, self.window_size)

    def calculate_sliding(self, returns: Sequence[float]) -> list[float]:
        """Calculate per-offset volatilities for a return series"""
        return calculate_sliding_volatility(returns, self.window_size)

    def has_sufficient_data(self, returns: Sequence[float]) -> bool:
        """Check whether the series fills at least one window"""
        return len(returns) >= self.window_size
