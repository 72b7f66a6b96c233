"""
quantlab - Quantitative Pairs Analysis Toolkit

Analytics primitives over financial time series: windowed volatility,
a price-ordered limit order book, and an optimal entry/exit window
detector for pairs-trading spreads.
"""

__version__ = "0.1.0"
__author__ = "quantlab Team"
