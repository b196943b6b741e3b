"""Data models for window statistics"""

from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass
class WindowStats:
    """Summary of one time window, as shown by a market stats view"""
    timestamp: str
    record_count: int = 0
    total_records: int = 0
    market_count: int = 0

    mean_price: float = 0.0
    min_price: float = 0.0
    max_price: float = 0.0
    price_range: float = 0.0
    total_amount: float = 0.0

    # Comparison with the previous recorded time, None when there is none
    previous_timestamp: Optional[str] = None
    price_change: Optional[float] = None
    percent_price_change: Optional[float] = None

    # Best prices for one market at this time
    market: Optional[str] = None
    best_buy_price: Optional[float] = None
    best_sell_price: Optional[float] = None

    def has_records(self) -> bool:
        return self.record_count > 0

    def has_previous_window(self) -> bool:
        """Check if a previous window was available for comparison"""
        return self.previous_timestamp is not None and self.price_change is not None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
