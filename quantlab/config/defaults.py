"""Default configuration parameters for the analytics toolkit."""

from dataclasses import dataclass


@dataclass(frozen=True)
class VolatilityParams:
    """Volatility estimation parameters."""
    window_size: int = 20                  # Periods in the volatility window


@dataclass(frozen=True)
class PairsParams:
    """Pairs-trading analysis parameters."""
    trading_days: int = 252                # Annualization factor


@dataclass(frozen=True)
class OrderBookParams:
    """Order book parameters."""
    equal_price_priority: str = "lifo"     # 'lifo' or 'fifo' among equal prices
    max_levels: int = 5                    # Levels included in notional value


@dataclass(frozen=True)
class SimulationParams:
    """Synthetic price generation parameters."""
    days: int = 100
    seed: int = 42
    leader_move_range: int = 100           # Leader move in hundredths of a percent
    follower_noise_range: int = 40         # Follower noise in hundredths of a percent


@dataclass(frozen=True)
class ReportingParams:
    """Console reporting parameters."""
    percent_scale: float = 100.0
    ticker_width: int = 8
    value_width: int = 10


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    volatility: VolatilityParams
    pairs: PairsParams
    orderbook: OrderBookParams
    simulation: SimulationParams
    reporting: ReportingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        volatility=VolatilityParams(),
        pairs=PairsParams(),
        orderbook=OrderBookParams(),
        simulation=SimulationParams(),
        reporting=ReportingParams(),
    )
