"""Two-asset portfolio volatility and inverse-volatility position sizing"""

import math
from dataclasses import dataclass

from ..errors import InvalidParameterError


@dataclass(frozen=True)
class RiskReport:
    """Portfolio risk estimate for a two-asset position"""
    portfolio_volatility: float
    weight_a: float
    weight_b: float


def _check_volatility(name: str, value: float) -> None:
    if not value >= 0 or math.isinf(value):
        raise InvalidParameterError(
            "Volatility must be a finite non-negative number",
            parameter=name,
            value=value
        )


def portfolio_volatility(vol_a: float, vol_b: float) -> float:
    """Root-sum-of-squares of two volatilities (uncorrelated assets)"""
    _check_volatility("vol_a", vol_a)
    _check_volatility("vol_b", vol_b)
    return math.sqrt(vol_a * vol_a + vol_b * vol_b)


def inverse_volatility_weights(vol_a: float, vol_b: float) -> tuple[float, float]:
    """
    Weight each asset by the inverse of its volatility

    A zero-volatility asset takes the whole allocation; if both are zero
    the allocation is split evenly.

    Returns:
        (weight_a, weight_b) summing to 1.0
    """
    _check_volatility("vol_a", vol_a)
    _check_volatility("vol_b", vol_b)

    if vol_a == 0 and vol_b == 0:
        return 0.5, 0.5
    if vol_a == 0:
        return 1.0, 0.0
    if vol_b == 0:
        return 0.0, 1.0

    inverse_a = 1 / vol_a
    inverse_b = 1 / vol_b
    weight_a = inverse_a / (inverse_a + inverse_b)
    return weight_a, 1 - weight_a


def analyze_risk(vol_a: float, vol_b: float) -> RiskReport:
    """Combine portfolio volatility and inverse-volatility weights"""
    weight_a, weight_b = inverse_volatility_weights(vol_a, vol_b)
    return RiskReport(
        portfolio_volatility=portfolio_volatility(vol_a, vol_b),
        weight_a=weight_a,
        weight_b=weight_b,
    )
