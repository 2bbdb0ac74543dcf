"""Tests for price and column coordinate mapping.

**Feature: candle-canvas**
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from asciicandles.chart.mapper import (
    column_for_index,
    map_candle_rows,
    price_to_row,
    round_half_up,
)
from asciicandles.models import CandleRows, PositionedCandle


class TestPriceToRowMonotonicity:
    """
    **Property: Row mapping monotonicity**
    
    *For any* fixed bounds and canvas height, a higher price never maps
    to a lower row than a lower price, and every row stays inside the
    buffered area.
    """

    @given(
        min_price=st.integers(min_value=-50, max_value=150),
        span=st.integers(min_value=1, max_value=40),
        height=st.integers(min_value=3, max_value=40),
        buffer=st.integers(min_value=0, max_value=1),
        a=st.floats(min_value=0, max_value=1),
        b=st.floats(min_value=0, max_value=1),
    )
    @settings(max_examples=200)
    def test_higher_price_maps_to_lower_or_equal_row(self, min_price, span, height, buffer, a, b):
        max_price = min_price + span
        low, high = sorted((min_price + a * span, min_price + b * span))

        high_row = price_to_row(high, min_price, max_price, height, buffer)
        low_row = price_to_row(low, min_price, max_price, height, buffer)

        assert high_row <= low_row
        for row in (high_row, low_row):
            assert buffer <= row <= height - buffer - 1

    @given(
        price=st.floats(min_value=-1000, max_value=1000),
        height=st.integers(min_value=3, max_value=40),
    )
    @settings(max_examples=100)
    def test_out_of_range_prices_are_clamped(self, price, height):
        row = price_to_row(price, 95.0, 101.0, height, 1)
        assert 1 <= row <= height - 2

    @given(
        price=st.floats(min_value=90, max_value=110),
        height=st.integers(min_value=3, max_value=40),
    )
    @settings(max_examples=50)
    def test_mapping_is_deterministic(self, price, height):
        first = price_to_row(price, 90.0, 110.0, height, 1)
        assert all(price_to_row(price, 90.0, 110.0, height, 1) == first for _ in range(5))


class TestPriceToRowEdgeCases:
    """Empty charts, degenerate ranges and rounding ties."""

    def test_empty_chart_maps_to_buffer(self):
        assert price_to_row(100.0, None, None, 7, 1) == 1
        assert price_to_row(100.0, None, None, 7, 2) == 2

    def test_degenerate_range_maps_to_center(self):
        assert price_to_row(100.0, 100.0, 100.0, 7, 1) == 3
        assert price_to_row(100.0, 100.0, 100.0, 10, 1) == 5

    def test_extremes_map_to_buffered_edges(self):
        assert price_to_row(101.0, 95.0, 101.0, 8, 1) == 1
        assert price_to_row(95.0, 95.0, 101.0, 8, 1) == 6

    def test_ties_round_half_up(self):
        # offsets of 0.5 and 2.5 rows from the top
        assert price_to_row(7.0, 0.0, 8.0, 6, 1) == 2
        assert price_to_row(3.0, 0.0, 8.0, 6, 1) == 4

    def test_round_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2
        assert round_half_up(0.0) == 0


class TestColumnMapping:

    def test_columns_follow_stride_from_margin(self):
        assert column_for_index(0) == 3
        assert column_for_index(1) == 9
        assert column_for_index(2) == 15

    @given(
        index=st.integers(min_value=0, max_value=100),
        margin=st.integers(min_value=0, max_value=10),
        stride=st.integers(min_value=1, max_value=10),
    )
    def test_neighbouring_columns_are_one_stride_apart(self, index, margin, stride):
        assert (
            column_for_index(index + 1, margin, stride) - column_for_index(index, margin, stride)
            == stride
        )


class TestCandleRowMapping:

    def _candle(self, kind, open_price, close_price, high_price, low_price):
        return PositionedCandle(
            kind=kind,
            body_size=abs(close_price - open_price),
            upper_wick=high_price - max(open_price, close_price),
            lower_wick=min(open_price, close_price) - low_price,
            column=3,
            high_price=high_price,
            open_price=open_price,
            close_price=close_price,
            low_price=low_price,
        )

    def test_bearish_body_top_is_open(self):
        candle = self._candle("bearish", 100.0, 97.0, 101.0, 95.0)
        rows = map_candle_rows(candle, lambda p: price_to_row(p, 95.0, 101.0, 8, 1))
        assert rows == CandleRows(high=1, body_top=2, body_bottom=5, low=6)

    def test_bullish_body_top_is_close(self):
        candle = self._candle("bullish", 97.0, 99.0, 100.0, 96.0)
        rows = map_candle_rows(candle, lambda p: price_to_row(p, 95.0, 101.0, 8, 1))
        assert rows == CandleRows(high=2, body_top=3, body_bottom=5, low=6)
