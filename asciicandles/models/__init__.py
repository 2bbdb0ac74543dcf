"""Data models for asciicandles."""

from asciicandles.models.candle import (
    Candle,
    CandleKind,
    CandleRows,
    Dimensions,
    PositionedCandle,
)

__all__ = [
    "Candle",
    "CandleKind",
    "CandleRows",
    "Dimensions",
    "PositionedCandle",
]
