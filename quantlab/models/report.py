"""Data models for analysis engine results"""

from dataclasses import dataclass, field
from typing import Optional

from ..analysis.pairs import PairsTradeResult
from ..analysis.risk import RiskReport
from ..metrics.orderbook import PriceLevel


@dataclass(frozen=True)
class VolatilityResult:
    """Volatility of one instrument over the configured window"""
    ticker: str
    current_price: float
    volatility: float
    window_size: int
    periods: int

    @property
    def has_sufficient_data(self) -> bool:
        """False when the 0.0 sentinel was returned for a short history"""
        return self.periods >= self.window_size


@dataclass(frozen=True)
class OrderBookSummary:
    """Top of book after simulated quote insertion"""
    best_bid: PriceLevel
    best_ask: PriceLevel
    bid_depth: int
    ask_depth: int
    spread: Optional[float] = None
    bid_notional: float = 0.0
    ask_notional: float = 0.0


@dataclass
class AnalysisReport:
    """Complete result of one engine run"""
    volatility: list[VolatilityResult] = field(default_factory=list)
    order_book: Optional[OrderBookSummary] = None
    pairs_trade: Optional[PairsTradeResult] = None
    risk: Optional[RiskReport] = None
    skipped_steps: dict[str, str] = field(default_factory=dict)

    def is_complete(self) -> bool:
        """Check whether every analysis step produced a result"""
        return not self.skipped_steps and self.pairs_trade is not None and self.risk is not None
