"""Price statistics over slices of records"""

from typing import Iterable

from ..data.models import Record


def _prices(records: Iterable[Record]) -> list[float]:
    return [r.price for r in records]


def mean_price(records: Iterable[Record]) -> float:
    """
    Arithmetic mean of record prices

    Args:
        records: Any slice of records

    Returns:
        Mean price, 0.0 for an empty slice
    """
    prices = _prices(records)
    if not prices:
        return 0.0
    return sum(prices) / len(prices)


def min_price(records: Iterable[Record]) -> float:
    """Lowest record price, 0.0 for an empty slice"""
    prices = _prices(records)
    return min(prices) if prices else 0.0


def max_price(records: Iterable[Record]) -> float:
    """Highest record price, 0.0 for an empty slice"""
    prices = _prices(records)
    return max(prices) if prices else 0.0


def price_range(records: Iterable[Record]) -> float:
    """Highest minus lowest price, 0.0 for an empty slice"""
    prices = _prices(records)
    if not prices:
        return 0.0
    return max(prices) - min(prices)


def total_amount(records: Iterable[Record]) -> float:
    """Sum of offered quantities, 0.0 for an empty slice"""
    return float(sum(r.amount for r in records))


def price_change(current: Iterable[Record], previous: Iterable[Record]) -> float:
    """
    Change in mean price since the previous window

    change = mean(current) - mean(previous)

    Args:
        current: Records of the current window
        previous: Records of the previous window

    Returns:
        Mean price change, 0.0 if previous is empty
    """
    previous_prices = _prices(previous)
    if not previous_prices:
        return 0.0
    return mean_price(current) - sum(previous_prices) / len(previous_prices)


def percent_price_change(current: Iterable[Record], previous: Iterable[Record]) -> float:
    """
    Percentage change in mean price since the previous window

    pct = (mean(current) - mean(previous)) / mean(previous) * 100

    Args:
        current: Records of the current window
        previous: Records of the previous window

    Returns:
        Percent change, 0.0 if previous is empty or its mean is exactly 0.0
    """
    previous_prices = _prices(previous)
    if not previous_prices:
        return 0.0

    previous_mean = sum(previous_prices) / len(previous_prices)
    if previous_mean == 0.0:
        return 0.0

    return (mean_price(current) - previous_mean) / previous_mean * 100.0
