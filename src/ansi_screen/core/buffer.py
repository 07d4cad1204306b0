"""CellBuffer - fixed-size 2D grid of cells backing a screen."""

from __future__ import annotations

from typing import Iterator

from ansi_screen.core.cell import BLANK, Cell


class CellBuffer:
    """
    A dense grid of Cells sized to the terminal.

    Writes outside the grid are dropped; reads outside it return a
    blank cell. Resizing keeps the overlapping region.
    """

    def __init__(self, cols: int, rows: int) -> None:
        self._cols = max(cols, 0)
        self._rows = max(rows, 0)
        self._grid: list[list[Cell]] = [
            [BLANK] * self._cols for _ in range(self._rows)
        ]

    @property
    def size(self) -> tuple[int, int]:
        """Current (cols, rows)."""
        return self._cols, self._rows

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self._cols and 0 <= row < self._rows

    def get(self, col: int, row: int) -> Cell:
        """Get the cell at (col, row)."""
        if not self.in_bounds(col, row):
            return BLANK
        return self._grid[row][col]

    def set(self, col: int, row: int, cell: Cell) -> None:
        """Set the cell at (col, row); out-of-bounds writes are clipped."""
        if self.in_bounds(col, row):
            self._grid[row][col] = cell

    def clear(self) -> None:
        """Reset every cell to blank."""
        for row in self._grid:
            row[:] = [BLANK] * self._cols

    def resize(self, cols: int, rows: int) -> None:
        """Change the grid size, keeping cells in the overlapping region."""
        cols = max(cols, 0)
        rows = max(rows, 0)
        grid: list[list[Cell]] = []
        for y in range(rows):
            if y < self._rows:
                old = self._grid[y][:cols]
                grid.append(old + [BLANK] * (cols - len(old)))
            else:
                grid.append([BLANK] * cols)
        self._grid = grid
        self._cols = cols
        self._rows = rows

    def copy(self) -> "CellBuffer":
        """Create a copy of this buffer (cells are immutable and shared)."""
        other = CellBuffer(0, 0)
        other._cols = self._cols
        other._rows = self._rows
        other._grid = [list(row) for row in self._grid]
        return other

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._grid

