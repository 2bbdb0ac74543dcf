"""Price and ordinal to grid coordinate conversion.

Rows grow downwards while price grows upwards, so the highest price maps
to the top of the drawable area and the lowest to the bottom.
"""

import math
from typing import Callable, Optional

from asciicandles.models import CandleRows, PositionedCandle


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties towards +infinity."""
    return math.floor(value + 0.5)


def price_to_row(
    price: float,
    min_price: Optional[float],
    max_price: Optional[float],
    height: int,
    buffer: int = 1,
) -> int:
    """Map a price to a canvas row.

    Args:
        price: Price to map.
        min_price: Lowest price of the chart, None while it is empty.
        max_price: Highest price of the chart, None while it is empty.
        height: Canvas height in rows.
        buffer: Blank rows reserved at the top and bottom.

    Returns:
        Row index in [buffer, height - buffer - 1].
    """
    if min_price is None or max_price is None:
        return buffer

    lowest = buffer
    highest = max(buffer, height - buffer - 1)

    price_range = max_price - min_price
    if price_range == 0:
        return min(max(height // 2, lowest), highest)

    available_rows = height - 2 * buffer
    row = buffer + round_half_up((max_price - price) * available_rows / price_range)

    return min(max(row, lowest), highest)


def column_for_index(index: int, left_margin: int = 3, stride: int = 6) -> int:
    """Grid column of the candle at position ``index``."""
    return left_margin + index * stride


def map_candle_rows(
    candle: PositionedCandle, to_row: Callable[[float], int]
) -> CandleRows:
    """Map all four price levels of a candle to rows."""
    open_row = to_row(candle.open_price)
    close_row = to_row(candle.close_price)
    return CandleRows(
        high=to_row(candle.high_price),
        body_top=min(open_row, close_row),
        body_bottom=max(open_row, close_row),
        low=to_row(candle.low_price),
    )
