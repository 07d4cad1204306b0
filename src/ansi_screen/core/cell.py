"""Cell - atomic unit of the screen buffer."""

from dataclasses import dataclass, field

from ansi_screen.core.color import Color
from ansi_screen.core.style import NO_STYLES, Style


@dataclass(frozen=True, slots=True)
class Cell:
    """
    A single character cell with styling attributes.

    Represents one position in the terminal grid with its character
    and resolved color/style information. Cells are immutable; a write
    replaces the cell at its coordinate.
    """
    char: str = ' '
    fg: Color = Color.DEFAULT
    bg: Color = Color.DEFAULT
    styles: frozenset[Style] = field(default=NO_STYLES)

    def is_blank(self) -> bool:
        """Check if this cell is an empty space with default colors and no styles."""
        return self == BLANK


BLANK = Cell()
