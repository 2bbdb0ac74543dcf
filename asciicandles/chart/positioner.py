"""Candle positioning and canvas management.

The positioner owns the candles of one chart. Each added candle gets
synthetic price levels derived from the previous candle's close, the
canvas grows to fit the running price range and candle count, and the
whole chart is redrawn. A change of price bounds shifts every row
mapping, so partial redraws are never attempted.
"""

import logging
import math
from typing import Optional

from asciicandles.chart.canvas import Canvas, Grid
from asciicandles.chart.mapper import column_for_index, map_candle_rows, price_to_row
from asciicandles.chart.renderer import draw_candle
from asciicandles.config import ChartConfig
from asciicandles.models import Candle, CandleRows, Dimensions, PositionedCandle

logger = logging.getLogger(__name__)


class CandlePositioner:
    """Price levels, bounds and canvas of a single chart session.

    Not safe for concurrent mutation; callers sharing an instance across
    threads must serialize calls to the add methods.
    """

    def __init__(self, config: Optional[ChartConfig] = None):
        self.config = config or ChartConfig()
        self.canvas = Canvas(self.config.initial_width, self.config.initial_height)
        self._candles: list[PositionedCandle] = []
        self._min_price: Optional[float] = None
        self._max_price: Optional[float] = None

    @property
    def min_price(self) -> Optional[float]:
        return self._min_price

    @property
    def max_price(self) -> Optional[float]:
        return self._max_price

    def __len__(self) -> int:
        return len(self._candles)

    def add(self, candle: Candle) -> PositionedCandle:
        """Add a candle, anchoring the chart if it is the first one."""
        if not self._candles:
            return self.add_first(candle)
        return self.add_next(candle)

    def add_first(self, candle: Candle) -> PositionedCandle:
        """Anchor the chart with its first candle.

        The candle's body top (bullish close, bearish open) sits at the
        configured baseline price.

        Args:
            candle: First candle of the chart.

        Returns:
            The positioned candle.
        """
        if self._candles:
            logger.warning(
                "First candle added to a chart that already has "
                f"{len(self._candles)} candles; treating it as the next candle"
            )
            return self.add_next(candle)

        base = self.config.baseline_price
        buffer = self.config.buffer

        if candle.is_bullish:
            open_price = base - candle.body_size
            close_price = base
        else:
            open_price = base
            close_price = base - candle.body_size

        positioned = PositionedCandle(
            **candle.model_dump(),
            column=column_for_index(0, self.config.left_margin, self.config.column_stride),
            high_price=base + candle.upper_wick,
            open_price=open_price,
            close_price=close_price,
            low_price=base - candle.body_size - candle.lower_wick,
        )

        self._min_price = positioned.low_price
        self._max_price = positioned.high_price

        required_height = math.ceil(candle.total_size) + 2 * buffer
        if required_height > self.canvas.height:
            self._expand(self.canvas.width, required_height)

        self._candles.append(positioned)
        self.redraw()
        return positioned

    def add_next(self, candle: Candle) -> PositionedCandle:
        """Add a candle that opens where the previous one closed.

        Consecutive candles of the same direction are pushed apart by the
        separation unit so their bodies do not merge visually: up for two
        bullish candles, down for two bearish ones.

        Args:
            candle: Candle to append.

        Returns:
            The positioned candle.
        """
        if not self._candles:
            return self.add_first(candle)

        previous = self._candles[-1]
        open_price = previous.close_price

        if previous.kind == candle.kind:
            if candle.is_bullish:
                open_price += self.config.separation_unit
            else:
                open_price -= self.config.separation_unit

        if candle.is_bullish:
            close_price = open_price + candle.body_size
            high_price = close_price + candle.upper_wick
            low_price = open_price - candle.lower_wick
        else:
            close_price = open_price - candle.body_size
            high_price = open_price + candle.upper_wick
            low_price = close_price - candle.lower_wick

        self._min_price = min(self._min_price, low_price)
        self._max_price = max(self._max_price, high_price)

        count = len(self._candles)
        required_height = math.ceil(self._max_price - self._min_price) + 2 * self.config.buffer
        required_width = (count + 1) * self.config.column_stride + self.config.left_margin
        self._expand(required_width, required_height)

        positioned = PositionedCandle(
            **candle.model_dump(),
            column=column_for_index(count, self.config.left_margin, self.config.column_stride),
            high_price=high_price,
            open_price=open_price,
            close_price=close_price,
            low_price=low_price,
        )
        self._candles.append(positioned)
        self.redraw()
        return positioned

    def _expand(self, width: int, height: int) -> None:
        before = self.canvas.dimensions()
        if self.canvas.expand(width, height):
            logger.debug(
                f"Canvas grew from {before.width}x{before.height} "
                f"to {self.canvas.width}x{self.canvas.height}"
            )

    def price_to_row(self, price: float) -> int:
        """Map a price to a row under the current bounds and canvas height."""
        return price_to_row(
            price,
            self._min_price,
            self._max_price,
            self.canvas.height,
            self.config.buffer,
        )

    def candle_rows(self, candle: PositionedCandle) -> CandleRows:
        return map_candle_rows(candle, self.price_to_row)

    def redraw(self) -> None:
        """Clear the canvas and draw every candle again, left to right."""
        self.canvas.clear()

        for index, candle in enumerate(self._candles):
            column = column_for_index(index, self.config.left_margin, self.config.column_stride)
            if candle.column != column:
                candle = candle.model_copy(update={"column": column})
                self._candles[index] = candle
            draw_candle(self.canvas, candle, self.candle_rows(candle), self.config.glyphs)

    def get_grid(self) -> Grid:
        return self.canvas.read()

    def get_dimensions(self) -> Dimensions:
        return self.canvas.dimensions()

    def get_positioned_candles(self) -> tuple[PositionedCandle, ...]:
        """Candles in insertion order, with columns and price levels."""
        return tuple(self._candles)

    def render_plain(self) -> str:
        """Grid rows joined with newlines, untrimmed."""
        return self.canvas.to_text()
