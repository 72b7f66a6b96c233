"""Spread series and optimal entry/exit window detection"""

from collections.abc import Sequence
from itertools import islice
from typing import NamedTuple

from ..errors import SeriesMismatchError


class TradingWindow(NamedTuple):
    """Inclusive index range into a spread series"""
    entry_index: int
    exit_index: int


def calculate_spread(returns_a: Sequence[float], returns_b: Sequence[float]) -> list[float]:
    """
    Calculate the per-period spread between two aligned return series

    spread[i] = returns_a[i] - returns_b[i]

    Raises:
        SeriesMismatchError: If the series have different lengths
    """
    if len(returns_a) != len(returns_b):
        raise SeriesMismatchError(
            "Return series must have equal length to build a spread",
            left_length=len(returns_a),
            right_length=len(returns_b)
        )

    return [a - b for a, b in zip(returns_a, returns_b)]


def find_best_trading_window(spread: Sequence[float]) -> TradingWindow:
    """
    Find the contiguous range with the largest cumulative spread

    Single pass: a running sum that drops below zero is abandoned and the
    next range starts after the current index. A window is only recorded
    when its sum strictly exceeds the best so far, so input with no
    positive value returns TradingWindow(0, 0).

    Args:
        spread: Per-period spread values

    Returns:
        TradingWindow(entry_index, exit_index) with entry_index <= exit_index
    """
    best_sum = 0.0
    running_sum = 0.0
    start = 0
    entry = exit_ = 0

    for i, value in enumerate(spread):
        running_sum += value

        if running_sum < 0:
            running_sum = 0.0
            start = i + 1

        if running_sum > best_sum:
            best_sum = running_sum
            entry = start
            exit_ = i

    return TradingWindow(entry, exit_)


def window_cumulative_spread(spread: Sequence[float], window: TradingWindow) -> float:
    """Sum of spread values inside an inclusive window"""
    if not spread:
        return 0.0
    return sum(islice(spread, window.entry_index, window.exit_index + 1))
