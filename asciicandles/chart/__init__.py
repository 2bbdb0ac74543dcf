"""Candle chart rendering on a growing character canvas."""

from asciicandles.chart.builder import CandleChart
from asciicandles.chart.canvas import Canvas
from asciicandles.chart.mapper import column_for_index, map_candle_rows, price_to_row
from asciicandles.chart.overlay import render_with_axes, to_markdown
from asciicandles.chart.positioner import CandlePositioner
from asciicandles.chart.renderer import draw_candle

__all__ = [
    "CandleChart",
    "CandlePositioner",
    "Canvas",
    "column_for_index",
    "draw_candle",
    "map_candle_rows",
    "price_to_row",
    "render_with_axes",
    "to_markdown",
]
