"""Candle data models for the chart canvas."""

from typing import Literal, NamedTuple

from pydantic import BaseModel, Field

CandleKind = Literal["bullish", "bearish"]


class Candle(BaseModel):
    """A candle as submitted by the caller, before any price is derived."""

    kind: CandleKind = Field(..., description="Candle direction")
    body_size: float = Field(..., ge=0, description="Open-to-close distance")
    upper_wick: float = Field(..., ge=0, description="Body top to high distance")
    lower_wick: float = Field(..., ge=0, description="Body bottom to low distance")

    model_config = {"frozen": True}

    @property
    def is_bullish(self) -> bool:
        return self.kind == "bullish"

    @property
    def total_size(self) -> float:
        """Distance from high to low."""
        return self.upper_wick + self.body_size + self.lower_wick


class PositionedCandle(Candle):
    """A candle with its grid column and synthetic price levels."""

    column: int = Field(..., ge=0, description="Grid column of the candle center")
    high_price: float = Field(..., description="Synthetic high price")
    open_price: float = Field(..., description="Synthetic open price")
    close_price: float = Field(..., description="Synthetic close price")
    low_price: float = Field(..., description="Synthetic low price")


class Dimensions(BaseModel):
    """Current extent of a canvas."""

    width: int = Field(..., ge=0, description="Number of columns")
    height: int = Field(..., ge=0, description="Number of rows")

    model_config = {"frozen": True}


class CandleRows(NamedTuple):
    """Grid rows of one candle, top to bottom."""

    high: int
    body_top: int
    body_bottom: int
    low: int
