"""
Time-indexed record store.

Records are grouped into buckets keyed by (market, timestamp). A sorted list
of the distinct timestamps is maintained alongside the buckets so that
time navigation is a binary search rather than a scan.
"""

from bisect import bisect_left, bisect_right, insort
from collections import Counter
from typing import Iterable, Optional

from ..config.defaults import IngestParams
from .loader import SourceType, ingest_source
from .models import LoadResult, Record, Side

BucketKey = tuple[str, str]


class RecordStore:
    """
    Query surface over a snapshot of market records.

    The store owns every record it accepts. Query methods return new lists
    of immutable records, so callers cannot alter the index through them.
    """

    def __init__(self, records: Optional[Iterable[Record]] = None,
                 params: Optional[IngestParams] = None):
        """
        Initialize the store.

        Args:
            records: Optional initial records, inserted in order
            params: Ingestion parameters used by load()
        """
        self.params = params or IngestParams()
        self.last_load: Optional[LoadResult] = None

        self._buckets: dict[BucketKey, list[Record]] = {}
        self._timestamps: list[str] = []
        self._timestamp_counts: Counter = Counter()

        for record in records or ():
            self.insert(record)

    @classmethod
    def from_source(cls, source: SourceType,
                    params: Optional[IngestParams] = None) -> "RecordStore":
        """Create a store and load it from source."""
        store = cls(params=params)
        store.load(source)
        return store

    # Loading

    def load(self, source: SourceType) -> LoadResult:
        """
        Clear the store and rebuild it from source.

        The new index is built aside and swapped in once complete.

        Args:
            source: Path of the record file

        Returns:
            LoadResult of the ingestion; result.loaded is the new record count
        """
        records, result = ingest_source(source, self.params)

        buckets: dict[BucketKey, list[Record]] = {}
        timestamp_counts: Counter = Counter()
        for record in records:
            buckets.setdefault(record.key, []).append(record)
            timestamp_counts[record.timestamp] += 1

        self._buckets = buckets
        self._timestamp_counts = timestamp_counts
        self._timestamps = sorted(timestamp_counts)
        self.last_load = result
        return result

    def insert(self, record: Record) -> None:
        """Append one record to its (market, timestamp) bucket."""
        self._buckets.setdefault(record.key, []).append(record)

        if self._timestamp_counts[record.timestamp] == 0:
            insort(self._timestamps, record.timestamp)
        self._timestamp_counts[record.timestamp] += 1

    def clear(self) -> None:
        """Remove every record."""
        self._buckets = {}
        self._timestamps = []
        self._timestamp_counts = Counter()

    # Bucket queries

    def orders_for(self, side: Side, market: str, timestamp: str) -> list[Record]:
        """
        Records of one side in the (market, timestamp) bucket.

        Returns:
            Matching records in insertion order, empty if the bucket is missing
        """
        return [r for r in self._buckets.get((market, timestamp), ()) if r.side is side]

    def slice_for(self, market: str, timestamp: str) -> list[Record]:
        """Full (market, timestamp) bucket, both sides, in insertion order."""
        return list(self._buckets.get((market, timestamp), ()))

    def best_buy_price(self, market: str, timestamp: str) -> Optional[float]:
        """Highest bid price in the bucket, None if there are no bids."""
        prices = [r.price for r in self.orders_for(Side.BUY, market, timestamp)]
        return max(prices) if prices else None

    def best_sell_price(self, market: str, timestamp: str) -> Optional[float]:
        """Lowest ask price in the bucket, None if there are no asks."""
        prices = [r.price for r in self.orders_for(Side.SELL, market, timestamp)]
        return min(prices) if prices else None

    def spread(self, market: str, timestamp: str) -> Optional[float]:
        """Best ask minus best bid, None if either side is missing."""
        bid = self.best_buy_price(market, timestamp)
        ask = self.best_sell_price(market, timestamp)
        if bid is None or ask is None:
            return None
        return ask - bid

    # Flattened views

    def all_records(self) -> list[Record]:
        """Every record, buckets in (market, timestamp) order."""
        out: list[Record] = []
        for key in sorted(self._buckets):
            out.extend(self._buckets[key])
        return out

    def records_at(self, timestamp: str) -> list[Record]:
        """Every record at timestamp across all markets, in market order."""
        out: list[Record] = []
        for key in sorted(k for k in self._buckets if k[1] == timestamp):
            out.extend(self._buckets[key])
        return out

    def known_markets(self) -> list[str]:
        """Distinct market identifiers, sorted."""
        return sorted({market for market, _ in self._buckets})

    def timestamps(self) -> list[str]:
        """Distinct timestamps, sorted."""
        return list(self._timestamps)

    # Time navigation

    def earliest_time(self) -> str:
        """Smallest timestamp, empty string if the store is empty."""
        return self._timestamps[0] if self._timestamps else ""

    def latest_time(self) -> str:
        """Largest timestamp, empty string if the store is empty."""
        return self._timestamps[-1] if self._timestamps else ""

    def next_time(self, current: str) -> str:
        """
        First timestamp strictly after current.

        current need not be present in the store.

        Returns:
            Next timestamp, empty string if current is at or past the latest
        """
        i = bisect_right(self._timestamps, current)
        return self._timestamps[i] if i < len(self._timestamps) else ""

    def previous_time(self, current: str) -> str:
        """
        Last timestamp strictly before current.

        Returns:
            Previous timestamp, empty string if current is at or before the earliest
        """
        i = bisect_left(self._timestamps, current)
        return self._timestamps[i - 1] if i > 0 else ""

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())

    def __contains__(self, record: object) -> bool:
        if not isinstance(record, Record):
            return False
        return record in self._buckets.get(record.key, ())
