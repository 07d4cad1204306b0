"""Render screen buffers to terminal escape sequences."""

from __future__ import annotations

from ansi_screen.core.buffer import CellBuffer
from ansi_screen.core.cell import Cell
from ansi_screen.core.constants import CSI, RESET
from ansi_screen.core.style import sgr_codes


def move_to(col: int, row: int) -> str:
    """Cursor position sequence for a zero-based (col, row)."""
    return f"{CSI}{row + 1};{col + 1}H"


def sgr_for(cell: Cell) -> str:
    """Full SGR sequence selecting a cell's colors and styles.

    Starts with a reset so styles set by an earlier cell do not carry over.
    """
    parts = ["0", *sgr_codes(cell.styles), cell.fg.to_sgr_fg(), cell.bg.to_sgr_bg()]
    return f"{CSI}{';'.join(parts)}m"


class TerminalRenderer:
    """
    Render the difference between two buffers as ANSI escape sequences.

    Only cells that differ from what the terminal already shows are
    emitted. Runs of adjacent changed cells share one cursor move, and
    SGR codes are only emitted when attributes change.
    """

    def __init__(self, reset_at_end: bool = True):
        self.reset_at_end = reset_at_end

    def render(self, front: CellBuffer | None, back: CellBuffer) -> str:
        """Render ``back`` assuming the terminal currently shows ``front``.

        Pass ``front=None`` to repaint every cell.

        Every cell is assumed to be one column wide. After a non-ASCII
        character the next cell is placed with an explicit cursor move, so
        a terminal that draws it wider cannot shift the rest of the row.
        """
        parts: list[str] = []
        last_attrs: tuple | None = None

        for y, row in enumerate(back.rows()):
            next_col: int | None = None
            for x, cell in enumerate(row):
                if front is not None and front.get(x, y) == cell:
                    continue

                if next_col != x:
                    parts.append(move_to(x, y))

                attrs = (cell.fg, cell.bg, cell.styles)
                if attrs != last_attrs:
                    parts.append(sgr_for(cell))
                    last_attrs = attrs

                parts.append(cell.char)
                next_col = x + 1 if cell.char.isascii() else None

        if parts and self.reset_at_end and last_attrs is not None:
            parts.append(RESET)

        return ''.join(parts)
