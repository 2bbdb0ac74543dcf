"""Tests for drawing a single candle.

**Feature: candle-canvas**
"""

from asciicandles.chart.canvas import Canvas
from asciicandles.chart.renderer import draw_candle
from asciicandles.config import GlyphSet
from asciicandles.models import CandleRows, PositionedCandle


def make_candle(kind: str = "bullish", column: int = 3) -> PositionedCandle:
    # price levels are irrelevant once rows are given
    return PositionedCandle(
        kind=kind,
        body_size=1,
        upper_wick=1,
        lower_wick=1,
        column=column,
        high_price=102,
        open_price=100,
        close_price=101,
        low_price=99,
    )


def lines(canvas: Canvas) -> list[str]:
    return canvas.to_text().split("\n")


class TestDrawCandle:

    def test_wicks_and_body(self):
        canvas = Canvas(7, 7)
        draw_candle(canvas, make_candle(), CandleRows(high=1, body_top=2, body_bottom=3, low=5), GlyphSet())

        assert lines(canvas) == [
            "       ",
            "   |   ",
            "  ███  ",
            "  ███  ",
            "   |   ",
            "   |   ",
            "       ",
        ]

    def test_bearish_uses_shaded_body(self):
        canvas = Canvas(7, 3)
        draw_candle(canvas, make_candle("bearish"), CandleRows(1, 1, 1, 1), GlyphSet())

        assert lines(canvas)[1] == "  ░░░  "

    def test_zero_height_body_draws_one_row_and_no_wicks(self):
        canvas = Canvas(7, 5)
        draw_candle(canvas, make_candle(), CandleRows(2, 2, 2, 2), GlyphSet())

        assert lines(canvas) == ["       ", "       ", "  ███  ", "       ", "       "]

    def test_body_is_clipped_at_edges(self):
        canvas = Canvas(4, 3)
        draw_candle(canvas, make_candle(column=0), CandleRows(1, 1, 1, 1), GlyphSet())
        draw_candle(canvas, make_candle("bearish", column=3), CandleRows(1, 1, 1, 1), GlyphSet())

        assert lines(canvas)[1] == "██░░"

    def test_rows_outside_canvas_are_skipped(self):
        canvas = Canvas(7, 3)
        draw_candle(canvas, make_candle(), CandleRows(-2, 0, 1, 6), GlyphSet())

        assert lines(canvas) == ["  ███  ", "  ███  ", "   |   "]

    def test_custom_glyphs(self):
        canvas = Canvas(7, 4)
        glyphs = GlyphSet(bullish_body="#", bearish_body="=", wick="!")
        draw_candle(canvas, make_candle(), CandleRows(0, 1, 2, 3), glyphs)

        assert lines(canvas) == ["   !   ", "  ###  ", "  ###  ", "   !   "]
