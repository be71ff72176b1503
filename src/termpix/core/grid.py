"""Grid - fixed-size 2D array of optional colors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from termpix.core.color import Color
from termpix.core.constants import GRID_SIZE

Cell = Optional[Color]


@dataclass
class Grid:
    """
    A square grid of cells, each holding a Color or None (unpainted).

    Stored row-major. Coordinates are (x, y) with x the column and y the
    row. The dimensions are fixed at construction.
    """
    size: int = GRID_SIZE
    _buffer: list[list[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if not self._buffer:
            self._buffer = [[None] * self.size for _ in range(self.size)]

    @property
    def width(self) -> int:
        return self.size

    @property
    def height(self) -> int:
        return self.size

    def _check(self, x: int, y: int) -> None:
        if x < 0 or x >= self.size:
            raise IndexError(f"x={x} out of bounds (width={self.size})")
        if y < 0 or y >= self.size:
            raise IndexError(f"y={y} out of bounds (height={self.size})")

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        self._check(x, y)
        return self._buffer[y][x]

    def set(self, x: int, y: int, color: Cell) -> None:
        """Set the cell at position (x, y). None erases it."""
        self._check(x, y)
        self._buffer[y][x] = color

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], color: Cell) -> None:
        x, y = pos
        self.set(x, y, color)

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows, top to bottom."""
        for row in self._buffer:
            yield list(row)

    def painted_count(self) -> int:
        return sum(1 for row in self._buffer for cell in row if cell is not None)
