"""Paint a single candle into a canvas."""

from asciicandles.chart.canvas import Canvas
from asciicandles.config import GlyphSet
from asciicandles.models import CandleRows, PositionedCandle

BODY_HALF_WIDTH = 1


def body_glyph(candle: PositionedCandle, glyphs: GlyphSet) -> str:
    return glyphs.bullish_body if candle.is_bullish else glyphs.bearish_body


def draw_candle(
    canvas: Canvas,
    candle: PositionedCandle,
    rows: CandleRows,
    glyphs: GlyphSet,
) -> None:
    """Draw wicks and body of one candle.

    The body is three columns wide and always covers at least one row.
    Wicks are one column wide at the candle center. Cells that fall
    outside the canvas are skipped.

    Args:
        canvas: Canvas to paint into.
        candle: Candle providing column and direction.
        rows: Mapped rows of the candle.
        glyphs: Glyphs to paint with.
    """
    col = candle.column
    body = body_glyph(candle, glyphs)

    for row in range(rows.high, rows.body_top):
        canvas.set_cell(row, col, glyphs.wick)

    for row in range(rows.body_top, rows.body_bottom + 1):
        for body_col in range(col - BODY_HALF_WIDTH, col + BODY_HALF_WIDTH + 1):
            canvas.set_cell(row, body_col, body)

    for row in range(rows.body_bottom + 1, rows.low + 1):
        canvas.set_cell(row, col, glyphs.wick)
