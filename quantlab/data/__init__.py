"""
Instrument price data and synthetic price generation.
"""
