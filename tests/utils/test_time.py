"""Tests for record timestamp helpers."""

import pytest
from datetime import datetime

from tickbook.utils.time import (
    DEFAULT_TIMESTAMP_FORMAT,
    is_lexicographically_ordered,
    matches_format,
    to_datetime,
)


class TestMatchesFormat:

    def test_matching_timestamp(self):
        assert matches_format("2020/03/17 17:01:24.884492", DEFAULT_TIMESTAMP_FORMAT)

    def test_non_matching_timestamp(self):
        assert not matches_format("2020/03/17 17:01:24", DEFAULT_TIMESTAMP_FORMAT)
        assert not matches_format("garbage", DEFAULT_TIMESTAMP_FORMAT)


class TestToDatetime:

    def test_fractional_seconds(self):
        assert to_datetime("2020/03/17 17:01:24.884492") == datetime(2020, 3, 17, 17, 1, 24, 884492)

    def test_whole_seconds(self):
        assert to_datetime("2020/01/02 00:00:00") == datetime(2020, 1, 2)

    def test_explicit_format(self):
        assert to_datetime("17.03.2020", "%d.%m.%Y") == datetime(2020, 3, 17)

    def test_unparseable(self):
        with pytest.raises(ValueError):
            to_datetime("not a time")


class TestLexicographicOrdering:
    """Test that string order equals time order only for fixed-width timestamps."""

    def test_zero_padded_timestamps(self):
        timestamps = [
            "2020/01/02 00:00:00",
            "2020/01/01 00:00:00",
            "2020/01/10 00:00:00",
            "2020/01/01 00:00:00",
        ]
        assert is_lexicographically_ordered(timestamps)

    def test_unpadded_timestamps_misorder(self):
        """Test day 10 sorts before day 9 as a string without padding."""
        timestamps = ["2020/1/9 00:00:00", "2020/1/10 00:00:00"]
        assert not is_lexicographically_ordered(timestamps, "%Y/%m/%d %H:%M:%S")

    def test_empty(self):
        assert is_lexicographically_ordered([])


class TestMatchesFormatPadding:
    """Test that only the zero-padded rendering of a format is accepted."""

    def test_unpadded_fields_rejected(self):
        fmt = "%Y/%m/%d %H:%M:%S"
        assert not matches_format("2020/1/9 0:0:0", fmt)
        assert not matches_format("2020/1/10 00:00:00", fmt)
        assert matches_format("2020/01/09 00:00:00", fmt)

    def test_short_fraction_rejected(self):
        assert not matches_format("2020/03/17 17:01:24.88", DEFAULT_TIMESTAMP_FORMAT)
