"""Window statistics calculator over a record store"""

from typing import Optional

from ..data.store import RecordStore
from ..models.metrics import WindowStats
from .prices import (
    max_price,
    mean_price,
    min_price,
    percent_price_change,
    price_change,
    price_range,
    total_amount,
)


class WindowStatsCalculator:
    """
    Assembles the statistics of one time window from a record store

    The window is every record at a timestamp across all markets. The
    previous window is the one at the store's previous recorded time.
    """

    def __init__(self, store: RecordStore):
        self.store = store

    def calculate(self, timestamp: str, market: Optional[str] = None) -> WindowStats:
        """
        Calculate statistics for the window at timestamp

        Args:
            timestamp: Window timestamp
            market: Market for best buy/sell prices, defaults to the first
                known market

        Returns:
            WindowStats for the window; an empty window yields zeroed stats
        """
        current = self.store.records_at(timestamp)
        markets = self.store.known_markets()

        stats = WindowStats(
            timestamp=timestamp,
            record_count=len(current),
            total_records=len(self.store),
            market_count=len(markets),
            mean_price=mean_price(current),
            min_price=min_price(current),
            max_price=max_price(current),
            price_range=price_range(current),
            total_amount=total_amount(current),
        )

        previous_timestamp = self.store.previous_time(timestamp)
        if previous_timestamp:
            previous = self.store.records_at(previous_timestamp)
            stats.previous_timestamp = previous_timestamp
            stats.price_change = price_change(current, previous)
            stats.percent_price_change = percent_price_change(current, previous)

        if market is None and markets:
            market = markets[0]
        if market is not None:
            stats.market = market
            stats.best_buy_price = self.store.best_buy_price(market, timestamp)
            stats.best_sell_price = self.store.best_sell_price(market, timestamp)

        return stats
