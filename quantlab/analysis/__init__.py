"""Pairs-trade and portfolio risk analysis built on the metrics primitives"""

from .pairs import PairsTradeResult, analyze_pairs
from .risk import RiskReport, analyze_risk, inverse_volatility_weights, portfolio_volatility

__all__ = [
    "PairsTradeResult",
    "analyze_pairs",
    "RiskReport",
    "analyze_risk",
    "portfolio_volatility",
    "inverse_volatility_weights",
]
