#!/usr/bin/env python3
"""
Basic Usage Example - quantlab Pairs Analysis Engine

This script demonstrates the basic usage of the analysis engine with
simulated market data. It shows how to:
- Simulate two correlated price histories
- Insert quotes into an order book
- Run volatility, pairs-window and risk analysis
- Print the console report

Run: python examples/basic_usage.py
"""

from quantlab.config.defaults import get_default_config
from quantlab.data.simulator import simulate_pair
from quantlab.engine import PairsAnalysisEngine
from quantlab.logging import configure_logging
from quantlab.reporting import ConsoleReporter

NIFTY_QUOTES = [
    ("bid", 18000.50, 100),
    ("bid", 18000.25, 150),
    ("bid", 18001.00, 75),
    ("ask", 18001.75, 60),
    ("ask", 18001.50, 90),
]


def main():
    """Main demonstration function."""
    configure_logging(level="WARNING")

    print("=== QUANTITATIVE TRADING ANALYSIS PLATFORM ===")
    print()

    config = get_default_config()
    infy, tcs = simulate_pair("INFY", 1500.0, "TCS", 3800.0, params=config.simulation)

    engine = PairsAnalysisEngine(config=config)
    report = engine.run(infy, tcs, quotes=NIFTY_QUOTES)

    ConsoleReporter(params=config.reporting).write(report)
    return report


if __name__ == "__main__":
    main()
