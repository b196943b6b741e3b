"""Tests for price statistics"""

import pytest

from tickbook.data.models import Record, Side
from tickbook.metrics.prices import (
    max_price,
    mean_price,
    min_price,
    percent_price_change,
    price_change,
    price_range,
    total_amount,
)


def make_records(*prices, amount=1.0):
    return [
        Record(price=p, amount=amount, timestamp="2020/01/01 00:00:00", market="X/Y", side=Side.BUY)
        for p in prices
    ]


class TestSliceStatistics:
    """Test reductions over a single slice"""

    def test_mean_price(self):
        assert mean_price(make_records(10.0, 12.0)) == 11.0

    def test_min_max(self):
        records = make_records(3.0, 1.5, 9.25)
        assert min_price(records) == 1.5
        assert max_price(records) == 9.25

    def test_price_range(self):
        assert price_range(make_records(3.0, 1.5, 9.25)) == 7.75

    def test_single_record(self):
        records = make_records(4.2)
        assert mean_price(records) == 4.2
        assert price_range(records) == 0.0

    def test_total_amount(self):
        assert total_amount(make_records(1.0, 2.0, amount=2.5)) == 5.0

    def test_empty_slice_sentinels(self):
        """Test every reduction returns 0.0 for an empty slice"""
        assert mean_price([]) == 0.0
        assert min_price([]) == 0.0
        assert max_price([]) == 0.0
        assert price_range([]) == 0.0
        assert total_amount([]) == 0.0

    def test_accepts_generators(self):
        assert mean_price(r for r in make_records(2.0, 4.0)) == 3.0
        assert price_range(r for r in make_records(2.0, 4.0)) == 2.0


class TestPeriodChange:
    """Test change versus the previous window"""

    def test_price_change(self):
        current = make_records(12.0, 14.0)
        previous = make_records(10.0)
        assert price_change(current, previous) == 3.0

    def test_percent_price_change(self):
        current = make_records(11.0)
        previous = make_records(10.0)
        assert percent_price_change(current, previous) == pytest.approx(10.0)

    def test_negative_change(self):
        current = make_records(5.0)
        previous = make_records(10.0)
        assert price_change(current, previous) == -5.0
        assert percent_price_change(current, previous) == pytest.approx(-50.0)

    @pytest.mark.parametrize("current", [[], make_records(1.0), make_records(3.0, 7.0)])
    def test_empty_previous_is_zero(self, current):
        """Test no previous window means no change"""
        assert price_change(current, []) == 0.0
        assert percent_price_change(current, []) == 0.0

    def test_zero_previous_mean_guards_division(self):
        current = make_records(5.0)
        previous = make_records(0.0, 0.0)
        assert percent_price_change(current, previous) == 0.0
        assert price_change(current, previous) == 5.0

    def test_empty_current_against_previous(self):
        """Test an empty current window compares as mean 0.0"""
        previous = make_records(10.0)
        assert price_change([], previous) == -10.0
        assert percent_price_change([], previous) == pytest.approx(-100.0)
