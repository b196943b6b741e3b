"""
Canonical data models for market records.

This module defines the immutable record type produced by ingestion and the
result object describing one load of a record source.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from ..errors import MalformedRecordError, SourceUnavailableError


class Side(Enum):
    """Intent of a record: buyers bid, sellers ask."""
    BUY = "bid"
    SELL = "ask"

    @property
    def token(self) -> str:
        """Source token for this side."""
        return self.value


@dataclass(frozen=True)
class Record:
    """A single quoted order at one market and time."""
    price: float        # Quoted unit price
    amount: float       # Quantity offered
    timestamp: str      # Fixed-width, lexicographically sortable
    market: str         # Tradable pair, e.g. "ETH/BTC"
    side: Side

    @property
    def key(self) -> tuple[str, str]:
        """Bucket key (market, timestamp)."""
        return (self.market, self.timestamp)

    @property
    def is_buy(self) -> bool:
        return self.side is Side.BUY

    @property
    def is_sell(self) -> bool:
        return self.side is Side.SELL


@dataclass(frozen=True)
class LoadResult:
    """Result of loading one record source."""

    source: str
    loaded: int = 0
    skipped: int = 0
    blank: int = 0

    # Per-line failures, in source order
    errors: tuple["MalformedRecordError", ...] = field(default_factory=tuple)

    # Set when the source could not be opened at all
    source_error: Optional["SourceUnavailableError"] = None

    duration_ms: float = 0.0

    @property
    def source_available(self) -> bool:
        return self.source_error is None

    @property
    def total_lines(self) -> int:
        return self.loaded + self.skipped + self.blank

    @property
    def success_rate(self) -> float:
        """Share of non-blank lines that produced a record."""
        attempted = self.loaded + self.skipped
        return self.loaded / max(attempted, 1)

    def get_stats(self) -> dict[str, Any]:
        """Load statistics as a plain dict (source excluded)."""
        return {
            "loaded": self.loaded,
            "skipped": self.skipped,
            "blank": self.blank,
            "total_lines": self.total_lines,
            "success_rate": self.success_rate,
            "source_available": self.source_available,
            "duration_ms": self.duration_ms,
        }

    @classmethod
    def unavailable(cls, source: str, error: "SourceUnavailableError",
                    duration_ms: float = 0.0) -> "LoadResult":
        """Create result for a source that could not be opened."""
        return cls(source=source, source_error=error, duration_ms=duration_ms)
