"""Core data structures: cells, colors, styles, and the cell buffer."""

from ansi_screen.core.buffer import CellBuffer
from ansi_screen.core.cell import Cell
from ansi_screen.core.color import Color, ColorMode, resolve_color
from ansi_screen.core.style import Style, resolve_styles

__all__ = [
    "Cell",
    "CellBuffer",
    "Color",
    "ColorMode",
    "Style",
    "resolve_color",
    "resolve_styles",
]
