"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path
from typing import Callable, List

from tickbook.data.models import Record, Side


SCENARIO_LINES = [
    "2020/01/01 00:00:00,X/Y,bid,1.0,10.0",
    "2020/01/01 00:00:00,X/Y,ask,1.0,12.0",
    "garbage,line,only,three",
    "2020/01/02 00:00:00,X/Y,bid,2.0,11.0",
]


@pytest.fixture
def scenario_lines() -> List[str]:
    """Four source lines, one of them malformed."""
    return list(SCENARIO_LINES)


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing lines to a record file and returning its path."""
    def _write(lines: List[str], name: str = "records.csv") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def scenario_file(write_source, scenario_lines) -> Path:
    """Record file holding the scenario lines."""
    return write_source(scenario_lines)


@pytest.fixture
def sample_records() -> List[Record]:
    """Two markets over three timestamps, both sides."""
    t1 = "2020/03/17 17:01:24.884492"
    t2 = "2020/03/17 17:01:30.099017"
    t3 = "2020/03/17 17:01:55.120438"
    return [
        Record(price=0.02187308, amount=7.44564869, timestamp=t1, market="ETH/BTC", side=Side.BUY),
        Record(price=0.02187307, amount=3.467434, timestamp=t1, market="ETH/BTC", side=Side.BUY),
        Record(price=0.02189093, amount=0.15, timestamp=t1, market="ETH/BTC", side=Side.SELL),
        Record(price=0.02189094, amount=4.0, timestamp=t1, market="ETH/BTC", side=Side.SELL),
        Record(price=0.5, amount=100.0, timestamp=t1, market="DOGE/BTC", side=Side.BUY),
        Record(price=0.6, amount=50.0, timestamp=t1, market="DOGE/BTC", side=Side.SELL),
        Record(price=0.0219, amount=1.0, timestamp=t2, market="ETH/BTC", side=Side.BUY),
        Record(price=0.0220, amount=2.0, timestamp=t2, market="ETH/BTC", side=Side.SELL),
        Record(price=0.55, amount=10.0, timestamp=t3, market="DOGE/BTC", side=Side.SELL),
    ]
