"""Statistics over slices of market records"""

from .calculator import WindowStatsCalculator
from .prices import (
    max_price,
    mean_price,
    min_price,
    percent_price_change,
    price_change,
    price_range,
    total_amount,
)

__all__ = [
    "WindowStatsCalculator",
    "max_price",
    "mean_price",
    "min_price",
    "percent_price_change",
    "price_change",
    "price_range",
    "total_amount",
]
