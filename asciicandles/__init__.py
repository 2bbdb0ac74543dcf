"""asciicandles - draw candlestick charts as text."""

from asciicandles.chart import CandleChart, CandlePositioner, Canvas
from asciicandles.config import ChartConfig, GlyphSet, load_config
from asciicandles.models import Candle, PositionedCandle

__all__ = [
    "Candle",
    "CandleChart",
    "CandlePositioner",
    "Canvas",
    "ChartConfig",
    "GlyphSet",
    "PositionedCandle",
    "load_config",
]
