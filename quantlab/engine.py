"""
Main analysis engine coordinator.

Orchestrates the analysis pipeline over two instruments owned by the
caller: per-instrument volatility, optional order book quote simulation,
pairs-trade window selection and two-asset risk sizing.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .analysis.pairs import PairsTradeResult, analyze_pairs
from .analysis.risk import RiskReport, analyze_risk
from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.models import Instrument
from .errors import AnalysisError, DataQualityError, InvalidParameterError
from .logging.config import get_analysis_logger, log_analysis_step
from .metrics.orderbook import ASK, BID, OrderBook
from .metrics.volatility import VolatilityCalculator
from .models.report import AnalysisReport, OrderBookSummary, VolatilityResult

logger = structlog.get_logger(__name__)

# (side, price, quantity) with side 'bid' or 'ask'
Quote = tuple[str, float, int]


class PairsAnalysisEngine:
    """
    Main coordinator for two-instrument analysis.

    Manages the analysis pipeline:
    Instruments → Volatility → Order Book → Pairs Window → Risk
    """

    def __init__(self, config: Optional[DefaultConfig] = None,
                 config_dir: Optional[Union[str, Path]] = None,
                 overrides: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the analysis engine.

        An explicit config applies to every instrument. Otherwise defaults,
        per-instrument entries in instruments.yaml and overrides are merged
        separately for each ticker analyzed.
        """
        self.logger = logger
        self.analysis_logger = get_analysis_logger(__name__)

        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        self.overrides = overrides
        self._fixed_config = config is not None
        self._instrument_configs: dict[str, DefaultConfig] = {}
        self._volatility_calculators: dict[str, VolatilityCalculator] = {}

        self.config = config if config is not None else self._load_config()

        self.volatility_calculator = VolatilityCalculator(
            window_size=self.config.volatility.window_size
        )

        self.logger.info(
            "Pairs analysis engine initialized",
            volatility_window=self.config.volatility.window_size,
            trading_days=self.config.pairs.trading_days,
            equal_price_priority=self.config.orderbook.equal_price_priority
        )

    def _load_config(self, ticker: Optional[str] = None) -> DefaultConfig:
        merged = self.config_loader.merge_config(ticker, self.overrides)
        errors = ConfigValidator.validate_config(merged)
        if errors:
            context: dict[str, Any] = {"errors": [f"{e.field}: {e.message}" for e in errors]}
            if ticker is not None:
                context["ticker"] = ticker
            raise InvalidParameterError("Invalid configuration", context=context)
        return self.config_loader.build_config(ticker, self.overrides)

    def config_for(self, ticker: str) -> DefaultConfig:
        """Resolve the configuration that applies to one instrument."""
        if self._fixed_config:
            return self.config

        if ticker not in self._instrument_configs:
            self._instrument_configs[ticker] = self._load_config(ticker)
        return self._instrument_configs[ticker]

    def volatility_calculator_for(self, ticker: str) -> VolatilityCalculator:
        """Volatility calculator using the instrument's configured window."""
        if ticker not in self._volatility_calculators:
            window_size = self.config_for(ticker).volatility.window_size
            if window_size == self.volatility_calculator.window_size:
                calculator = self.volatility_calculator
            else:
                calculator = VolatilityCalculator(window_size=window_size)
                self.logger.debug(
                    "Instrument volatility window override",
                    ticker=ticker,
                    window_size=window_size
                )
            self._volatility_calculators[ticker] = calculator
        return self._volatility_calculators[ticker]

    def analyze_volatility(self, instrument: Instrument) -> VolatilityResult:
        """Calculate windowed volatility for one instrument."""
        calculator = self.volatility_calculator_for(instrument.ticker)
        volatility = calculator.calculate_with_returns(instrument.returns)
        result = VolatilityResult(
            ticker=instrument.ticker,
            current_price=instrument.current_price,
            volatility=volatility,
            window_size=calculator.window_size,
            periods=instrument.periods,
        )

        if not result.has_sufficient_data:
            self.logger.warning(
                "Insufficient returns for volatility window",
                ticker=instrument.ticker,
                periods=instrument.periods,
                window_size=result.window_size
            )

        return result

    def analyze_pairs(self, instrument_a: Instrument,
                      instrument_b: Instrument) -> PairsTradeResult:
        """Find and price the best pairs trade (short A, long B)."""
        result = analyze_pairs(
            instrument_a, instrument_b,
            trading_days=self.config.pairs.trading_days
        )

        self.logger.info(
            "Best trading window found",
            short=result.short_ticker,
            long=result.long_ticker,
            entry_index=result.window.entry_index,
            exit_index=result.window.exit_index,
            profit=result.profit
        )
        return result

    def analyze_risk(self, vol_a: float, vol_b: float) -> RiskReport:
        """Estimate portfolio volatility and inverse-volatility weights."""
        return analyze_risk(vol_a, vol_b)

    def simulate_order_book(self, quotes: Iterable[Quote]) -> OrderBook:
        """
        Build an order book from a sequence of quotes.

        Args:
            quotes: (side, price, quantity) tuples inserted in order

        Returns:
            Populated OrderBook
        """
        book = OrderBook(equal_price_priority=self.config.orderbook.equal_price_priority)

        for side, price, quantity in quotes:
            if side == BID:
                book.add_bid(price, quantity)
            elif side == ASK:
                book.add_ask(price, quantity)
            else:
                raise InvalidParameterError(
                    "Quote side must be 'bid' or 'ask'", parameter="side", value=side
                )

        self.logger.debug(
            "Order book simulated",
            bid_depth=book.depth(BID),
            ask_depth=book.depth(ASK)
        )
        return book

    def run(self, instrument_a: Instrument, instrument_b: Instrument,
            quotes: Iterable[Quote] = ()) -> AnalysisReport:
        """
        Run the full analysis pipeline.

        Data quality problems skip the affected step and are recorded in
        AnalysisReport.skipped_steps; unexpected failures raise AnalysisError.
        """
        report = AnalysisReport()
        quotes = list(quotes)

        for instrument in (instrument_a, instrument_b):
            result = self._run_step(
                report, f"volatility:{instrument.ticker}", self.analyze_volatility, instrument
            )
            if result is not None:
                report.volatility.append(result)

        if quotes:
            book = self._run_step(report, "order_book", self.simulate_order_book, quotes)
            if book is not None:
                max_levels = self.config.orderbook.max_levels
                report.order_book = OrderBookSummary(
                    best_bid=book.best_bid(),
                    best_ask=book.best_ask(),
                    bid_depth=book.depth(BID),
                    ask_depth=book.depth(ASK),
                    spread=book.spread(),
                    bid_notional=book.notional_value(BID, max_levels),
                    ask_notional=book.notional_value(ASK, max_levels),
                )

        report.pairs_trade = self._run_step(
            report, "pairs", self.analyze_pairs, instrument_a, instrument_b
        )

        if len(report.volatility) == 2:
            vol_a, vol_b = (result.volatility for result in report.volatility)
            report.risk = self._run_step(report, "risk", self.analyze_risk, vol_a, vol_b)
        else:
            report.skipped_steps["risk"] = "Volatility unavailable for both instruments"

        return report

    def _run_step(self, report: AnalysisReport, step: str, func, *args):
        try:
            result = func(*args)
        except DataQualityError as e:
            report.skipped_steps[step] = str(e)
            log_analysis_step(
                self.analysis_logger, step, completed=False,
                reason=str(e), context=e.context or None
            )
            return None
        except Exception as e:
            self.logger.error(
                "Unexpected error during analysis",
                step=step,
                error=str(e),
                error_type=type(e).__name__
            )
            raise AnalysisError(
                f"Analysis step '{step}' failed: {e}", step=step
            ) from e

        log_analysis_step(self.analysis_logger, step, completed=True)
        return result
