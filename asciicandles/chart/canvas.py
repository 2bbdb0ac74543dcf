"""Resizable character grid."""

from asciicandles.models import Dimensions

BLANK = " "

Grid = tuple[tuple[str, ...], ...]


def _blank_grid(width: int, height: int) -> list[list[str]]:
    return [[BLANK] * width for _ in range(height)]


class Canvas:
    """A grid of single characters that only ever grows.

    Rows are indexed top to bottom, columns left to right. Growing the
    canvas keeps every cell at its original (row, col).
    """

    def __init__(self, width: int = 7, height: int = 7):
        self._width = width
        self._height = height
        self._cells = _blank_grid(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def dimensions(self) -> Dimensions:
        return Dimensions(width=self._width, height=self._height)

    def expand(self, new_width: int, new_height: int) -> bool:
        """Grow the canvas to at least the requested extent.

        Each axis grows independently to the larger of its current and
        requested size. Existing content is copied to the same position.

        Args:
            new_width: Requested number of columns.
            new_height: Requested number of rows.

        Returns:
            True if the canvas grew, False if it already fit.
        """
        if new_width <= self._width and new_height <= self._height:
            return False

        width = max(self._width, new_width)
        height = max(self._height, new_height)

        cells = _blank_grid(width, height)
        for row, line in enumerate(self._cells):
            cells[row][: len(line)] = line

        self._cells = cells
        self._width = width
        self._height = height
        return True

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._height and 0 <= col < self._width

    def set_cell(self, row: int, col: int, ch: str) -> None:
        """Write one character. Writes outside the grid are ignored."""
        if self.in_bounds(row, col):
            self._cells[row][col] = ch

    def get_cell(self, row: int, col: int) -> str:
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) outside {self._height}x{self._width} canvas")
        return self._cells[row][col]

    def clear(self) -> None:
        """Blank every cell, keeping the current extent."""
        self._cells = _blank_grid(self._width, self._height)

    def read(self) -> Grid:
        """Return an immutable snapshot of the grid."""
        return tuple(tuple(line) for line in self._cells)

    def to_text(self) -> str:
        return "\n".join("".join(line) for line in self._cells)
