"""Fluent chart builder.

    chart = (
        CandleChart()
        .first_bearish(3, 1, 2)
        .add_bullish(2, 1, 1)
        .with_axes()
        .with_annotations()
    )
    print(chart)
"""

from typing import Optional

from asciicandles.chart.canvas import Grid
from asciicandles.chart.overlay import render_with_axes, to_markdown
from asciicandles.chart.positioner import CandlePositioner
from asciicandles.config import ChartConfig
from asciicandles.models import Candle, CandleKind, Dimensions, PositionedCandle


class CandleChart:
    """Chainable wrapper around one CandlePositioner."""

    def __init__(self, config: Optional[ChartConfig] = None):
        self.positioner = CandlePositioner(config)
        self.show_axes = False
        self.show_labels = False

    def _make(self, kind: CandleKind, body_size: float, upper_wick: float, lower_wick: float) -> Candle:
        return Candle(
            kind=kind,
            body_size=body_size,
            upper_wick=upper_wick,
            lower_wick=lower_wick,
        )

    def first_bullish(self, body_size: float, upper_wick: float, lower_wick: float) -> "CandleChart":
        self.positioner.add_first(self._make("bullish", body_size, upper_wick, lower_wick))
        return self

    def first_bearish(self, body_size: float, upper_wick: float, lower_wick: float) -> "CandleChart":
        self.positioner.add_first(self._make("bearish", body_size, upper_wick, lower_wick))
        return self

    def add_bullish(self, body_size: float, upper_wick: float, lower_wick: float) -> "CandleChart":
        self.positioner.add_next(self._make("bullish", body_size, upper_wick, lower_wick))
        return self

    def add_bearish(self, body_size: float, upper_wick: float, lower_wick: float) -> "CandleChart":
        self.positioner.add_next(self._make("bearish", body_size, upper_wick, lower_wick))
        return self

    def add(self, candle: Candle) -> "CandleChart":
        self.positioner.add(candle)
        return self

    def with_axes(self) -> "CandleChart":
        self.show_axes = True
        return self

    def with_annotations(self) -> "CandleChart":
        """Label candles C1, C2, ... Only shown together with axes."""
        self.show_labels = True
        return self

    @property
    def candles(self) -> tuple[PositionedCandle, ...]:
        return self.positioner.get_positioned_candles()

    @property
    def grid(self) -> Grid:
        return self.positioner.get_grid()

    @property
    def dimensions(self) -> Dimensions:
        return self.positioner.get_dimensions()

    def render(self) -> str:
        """Render the chart, with axes and labels when enabled."""
        if not self.show_axes:
            return self.positioner.render_plain()

        return render_with_axes(
            self.grid,
            self.dimensions,
            self.candles,
            labels=self.show_labels,
        )

    def to_markdown(self) -> str:
        return to_markdown(self.render())

    def __str__(self) -> str:
        return self.render()
