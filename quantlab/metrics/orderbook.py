"""Price-ordered limit order book with binary-search level insertion"""

from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from typing import Optional

from ..errors import InvalidParameterError

BID = "bid"
ASK = "ask"

LIFO = "lifo"
FIFO = "fifo"


@dataclass(frozen=True)
class PriceLevel:
    """Order book level (price, quantity)"""
    price: float
    quantity: int


# Returned for an empty side instead of raising
EMPTY_LEVEL = PriceLevel(price=0.0, quantity=0)


def _bid_key(level: PriceLevel) -> float:
    return -level.price


def _ask_key(level: PriceLevel) -> float:
    return level.price


def calculate_notional_value(levels: tuple[PriceLevel, ...], max_levels: int = 5) -> float:
    """
    Calculate notional value for order book side

    Args:
        levels: Price levels, best first
        max_levels: Maximum levels to include in calculation

    Returns:
        Total notional value (price * quantity)
    """
    notional = 0.0
    for i, level in enumerate(levels):
        if i >= max_levels:
            break
        notional += level.price * level.quantity

    return notional


class OrderBook:
    """
    Two-sided book of price levels, best price at index 0 on each side

    Bids are kept in descending price order and asks in ascending price
    order. Each insert locates its rank with a binary search and shifts the
    levels behind it, so the ordering holds after every call.

    Levels sharing a price are ordered by equal_price_priority: with 'lifo'
    the newest level sits ahead of older ones at that price, with 'fifo' it
    queues behind them.

    Mutations are not atomic; callers sharing a book across threads must
    serialize them.
    """

    def __init__(self, equal_price_priority: str = LIFO):
        if equal_price_priority not in (LIFO, FIFO):
            raise InvalidParameterError(
                "Equal price priority must be 'lifo' or 'fifo'",
                parameter="equal_price_priority",
                value=equal_price_priority
            )
        self.equal_price_priority = equal_price_priority
        self._bids: list[PriceLevel] = []
        self._asks: list[PriceLevel] = []

    @property
    def bids(self) -> tuple[PriceLevel, ...]:
        """Bid levels, highest price first"""
        return tuple(self._bids)

    @property
    def asks(self) -> tuple[PriceLevel, ...]:
        """Ask levels, lowest price first"""
        return tuple(self._asks)

    def add_bid(self, price: float, quantity: int) -> None:
        """
        Insert a bid level at its price rank

        Args:
            price: Positive limit price
            quantity: Non-negative quantity
        """
        level = self._make_level(price, quantity)
        self._insert(self._bids, level, _bid_key)

    def add_ask(self, price: float, quantity: int) -> None:
        """
        Insert an ask level at its price rank

        Args:
            price: Positive limit price
            quantity: Non-negative quantity
        """
        level = self._make_level(price, quantity)
        self._insert(self._asks, level, _ask_key)

    def best_bid(self) -> PriceLevel:
        """Highest bid, or EMPTY_LEVEL when there are no bids"""
        return self._bids[0] if self._bids else EMPTY_LEVEL

    def best_ask(self) -> PriceLevel:
        """Lowest ask, or EMPTY_LEVEL when there are no asks"""
        return self._asks[0] if self._asks else EMPTY_LEVEL

    def top_of_book(self) -> tuple[float, float]:
        """Best bid and ask prices, 0 for an empty side"""
        return self.best_bid().price, self.best_ask().price

    def spread(self) -> Optional[float]:
        """Best ask minus best bid, None if missing either side"""
        if not self._bids or not self._asks:
            return None
        return self._asks[0].price - self._bids[0].price

    def mid_price(self) -> Optional[float]:
        """Mid price between best bid/ask, None if missing either side"""
        if not self._bids or not self._asks:
            return None
        return (self._bids[0].price + self._asks[0].price) / 2.0

    def depth(self, side: str) -> int:
        """Number of levels on one side"""
        return len(self._side(side))

    def notional_value(self, side: str, max_levels: int = 5) -> float:
        """Notional value of the best max_levels levels on one side"""
        return calculate_notional_value(tuple(self._side(side)), max_levels)

    def cancel_bid(self, price: float) -> Optional[PriceLevel]:
        """Remove the first bid level at exactly this price"""
        return self._remove(self._bids, price, _bid_key)

    def cancel_ask(self, price: float) -> Optional[PriceLevel]:
        """Remove the first ask level at exactly this price"""
        return self._remove(self._asks, price, _ask_key)

    def _side(self, side: str) -> list[PriceLevel]:
        if side == BID:
            return self._bids
        if side == ASK:
            return self._asks
        raise InvalidParameterError(
            "Side must be 'bid' or 'ask'", parameter="side", value=side
        )

    def _insert(self, levels: list[PriceLevel], level: PriceLevel, key) -> None:
        if self.equal_price_priority == LIFO:
            # First rank whose price is not worse than the new price
            pos = bisect_left(levels, key(level), key=key)
        else:
            pos = bisect_right(levels, key(level), key=key)
        levels.insert(pos, level)

    @staticmethod
    def _remove(levels: list[PriceLevel], price: float, key) -> Optional[PriceLevel]:
        target = key(PriceLevel(price=price, quantity=0))
        pos = bisect_left(levels, target, key=key)
        if pos < len(levels) and levels[pos].price == price:
            return levels.pop(pos)
        return None

    @staticmethod
    def _make_level(price: float, quantity: int) -> PriceLevel:
        if not isinstance(price, (int, float)) or isinstance(price, bool) or not price > 0:
            raise InvalidParameterError(
                "Price must be a positive number", parameter="price", value=price
            )
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 0:
            raise InvalidParameterError(
                "Quantity must be a non-negative integer", parameter="quantity", value=quantity
            )
        return PriceLevel(price=float(price), quantity=quantity)

    def __len__(self) -> int:
        return len(self._bids) + len(self._asks)

    def __repr__(self) -> str:
        return (f"OrderBook(bids={len(self._bids)}, asks={len(self._asks)}, "
                f"priority={self.equal_price_priority!r})")
