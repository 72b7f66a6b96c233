"""Console report output for analysis results."""

import sys
from typing import Optional, TextIO

import structlog

from ..config.defaults import ReportingParams
from ..models.report import AnalysisReport, OrderBookSummary, VolatilityResult
from ..analysis.pairs import PairsTradeResult
from ..analysis.risk import RiskReport

logger = structlog.get_logger(__name__)


class ConsoleReporter:
    """Formats an AnalysisReport into text sections and writes them to a stream."""

    def __init__(self, params: Optional[ReportingParams] = None,
                 stream: Optional[TextIO] = None):
        self.params = params or ReportingParams()
        self.stream = stream

    def render(self, report: AnalysisReport) -> str:
        """Render the whole report as a single string."""
        sections = [self._format_volatility(report.volatility)]

        if report.order_book is not None:
            sections.append(self._format_order_book(report.order_book))

        if report.pairs_trade is not None:
            sections.append(self._format_pairs(report.pairs_trade))

        if report.risk is not None and len(report.volatility) == 2:
            sections.append(self._format_risk(report.risk, report.volatility))

        if report.skipped_steps:
            sections.append(self._format_skipped(report.skipped_steps))

        return "\n\n".join(sections) + "\n"

    def write(self, report: AnalysisReport) -> None:
        """Write the rendered report to the configured stream (stdout by default)."""
        stream = self.stream or sys.stdout
        stream.write(self.render(report))
        stream.flush()

        logger.info(
            "Analysis report written",
            sections_skipped=len(report.skipped_steps)
        )

    def _format_volatility(self, results: list[VolatilityResult]) -> str:
        ticker_width = self.params.ticker_width
        value_width = self.params.value_width

        lines = ["--- VOLATILITY ANALYSIS ---"]
        for result in results:
            lines.append(
                f"{result.ticker:<{ticker_width}}"
                f"Price: {result.current_price:<{value_width}.2f}"
                f"Volatility: {result.volatility:<{value_width}.6f}"
                f"Returns: {result.periods} days"
            )
        return "\n".join(lines)

    def _format_order_book(self, summary: OrderBookSummary) -> str:
        return "\n".join([
            "--- ORDER BOOK SIMULATION ---",
            f"Top Bid: {summary.best_bid.price:g} x {summary.best_bid.quantity}, "
            f"Top Ask: {summary.best_ask.price:g} x {summary.best_ask.quantity}",
        ])

    def _format_pairs(self, trade: PairsTradeResult) -> str:
        return "\n".join([
            "=== PAIRS TRADING ANALYSIS ===",
            f"Stocks: {trade.short_ticker} vs {trade.long_ticker}",
            f"Optimal trade window: Day {trade.window.entry_index} "
            f"to Day {trade.window.exit_index}",
            f"Strategy: Buy {trade.long_ticker} (@ {trade.entry_price_long:.2f}), "
            f"Short {trade.short_ticker} (@ {trade.entry_price_short:.2f})",
            f"Exit: Sell {trade.long_ticker} (@ {trade.exit_price_long:.2f}), "
            f"Cover {trade.short_ticker} (@ {trade.exit_price_short:.2f})",
            f"Potential Profit: {trade.profit:.4f}",
            f"Annualized Return: {trade.annualized_return:.4f} "
            f"({trade.annualized_return * self.params.percent_scale:.2f}%)",
        ])

    def _format_risk(self, risk: RiskReport, results: list[VolatilityResult]) -> str:
        scale = self.params.percent_scale
        ticker_a, ticker_b = results[0].ticker, results[1].ticker
        return "\n".join([
            "--- RISK ANALYSIS ---",
            f"Estimated Portfolio Volatility: {risk.portfolio_volatility * scale:.4f}%",
            f"Optimal Weights: {ticker_a}: {risk.weight_a * scale:.2f}%, "
            f"{ticker_b}: {risk.weight_b * scale:.2f}%",
        ])

    def _format_skipped(self, skipped: dict[str, str]) -> str:
        lines = ["--- SKIPPED ---"]
        for step, reason in skipped.items():
            lines.append(f"{step}: {reason}")
        return "\n".join(lines)
