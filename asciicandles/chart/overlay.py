"""Axis and label overlay for finished candle grids.

Takes the grid and positioned candles from a chart and composes the
final text with a price axis, optional candle labels and a time axis.
The source grid is never modified.
"""

from typing import Sequence

from asciicandles.chart.canvas import BLANK, Grid
from asciicandles.models import Dimensions, PositionedCandle

AXIS_WIDTH = 4
AXIS_HEIGHT = 3
TIME_LABEL_SPACE = 10
AXIS_COLUMN = 3
ROW_OFFSET = 2
COL_OFFSET = AXIS_WIDTH + 2


def _write_text(cells: list[list[str]], row: int, col: int, text: str) -> None:
    width = len(cells[0])
    for i, ch in enumerate(text):
        if 0 <= col + i < width:
            cells[row][col + i] = ch


def _column_top(cells: list[list[str]], col: int) -> int:
    """First non-blank row in a column, 0 if the column is empty."""
    for row, line in enumerate(cells):
        if line[col] != BLANK:
            return row
    return 0


def render_with_axes(
    grid: Grid,
    dimensions: Dimensions,
    candles: Sequence[PositionedCandle],
    labels: bool = False,
) -> str:
    """Compose a candle grid with price and time axes.

    Args:
        grid: Candle grid, row by row.
        dimensions: Extent of the grid.
        candles: Positioned candles drawn in the grid.
        labels: Write C1, C2, ... above each candle.

    Returns:
        Chart text with trailing spaces and trailing blank lines removed.
    """
    total_width = dimensions.width + AXIS_WIDTH + TIME_LABEL_SPACE
    total_height = dimensions.height + AXIS_HEIGHT
    time_limit = total_width - TIME_LABEL_SPACE

    cells = [[BLANK] * total_width for _ in range(total_height)]

    _write_text(cells, 0, 1, "Price")
    cells[1][AXIS_COLUMN] = "↑"
    for row in range(ROW_OFFSET, total_height - 1):
        cells[row][AXIS_COLUMN] = "|"

    for row, line in enumerate(grid):
        for col, ch in enumerate(line):
            if ch != BLANK:
                cells[row + ROW_OFFSET][col + COL_OFFSET] = ch

    if labels:
        for index, candle in enumerate(candles):
            label_row = _column_top(cells, candle.column + COL_OFFSET) - 1
            if label_row >= 0:
                _write_text(cells, label_row, candle.column + COL_OFFSET - 1, f"C{index + 1}")

    time_row = total_height - 1
    for col in range(AXIS_WIDTH, time_limit):
        cells[time_row][col] = "_"

    for candle in candles:
        dot_col = candle.column + COL_OFFSET
        if dot_col < time_limit:
            cells[time_row][dot_col] = "."

    cells[time_row][time_limit] = "→"
    _write_text(cells, time_row, time_limit + 2, "Time")

    lines = ["".join(line).rstrip() for line in cells]
    while lines and not lines[-1]:
        lines.pop()

    return "\n".join(lines)


def to_markdown(text: str) -> str:
    """Wrap chart text in a fenced code block."""
    return f"```\n{text}\n```"
