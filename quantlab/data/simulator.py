"""
Synthetic correlated price generation.

Produces a leader/follower pair of price paths for demos and tests. Each
day the leader moves by a random whole number of hundredths of a percent
and the follower takes the same move plus independent noise, so the two
paths are correlated but not identical.
"""

import random
from typing import Optional

import structlog

from ..config.defaults import SimulationParams
from .models import Instrument

logger = structlog.get_logger(__name__)


class PriceSimulator:
    """Seeded generator of correlated daily price moves."""

    def __init__(self, params: Optional[SimulationParams] = None):
        self.params = params or SimulationParams()
        self._rng = random.Random(self.params.seed)

    def next_moves(self) -> tuple[float, float]:
        """
        Draw one day's percentage moves for the leader and follower.

        Returns:
            (leader_pct, follower_pct), e.g. 0.25 means +0.25%
        """
        leader_range = self.params.leader_move_range
        noise_range = self.params.follower_noise_range

        leader_pct = (self._rng.randrange(leader_range) - leader_range // 2) / 100.0
        noise_pct = (self._rng.randrange(noise_range) - noise_range // 2) / 100.0
        return leader_pct, leader_pct + noise_pct

    def simulate(self, leader: Instrument, follower: Instrument,
                 days: Optional[int] = None) -> None:
        """
        Append simulated daily prices to both instruments.

        Args:
            leader: Instrument driving the common move
            follower: Instrument tracking the leader with noise
            days: Number of days to simulate (defaults to params.days)
        """
        days = self.params.days if days is None else days

        for _ in range(days):
            leader_pct, follower_pct = self.next_moves()
            leader.add_price_update(leader.current_price * (1 + leader_pct / 100))
            follower.add_price_update(follower.current_price * (1 + follower_pct / 100))

        logger.debug(
            "Simulated correlated prices",
            leader=leader.ticker,
            follower=follower.ticker,
            days=days,
            seed=self.params.seed
        )


def simulate_pair(leader_ticker: str, leader_price: float,
                  follower_ticker: str, follower_price: float,
                  params: Optional[SimulationParams] = None) -> tuple[Instrument, Instrument]:
    """Create two instruments and fill them with a simulated history."""
    leader = Instrument(ticker=leader_ticker, initial_price=leader_price)
    follower = Instrument(ticker=follower_ticker, initial_price=follower_price)
    PriceSimulator(params).simulate(leader, follower)
    return leader, follower
