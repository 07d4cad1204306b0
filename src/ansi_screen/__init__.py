"""
ansi-screen: buffered character-grid screens for ANSI terminals

Write styled text into an in-memory buffer, then flush it to the
terminal in one go.

Quick Start:
    >>> import ansi_screen as ansi
    >>> with ansi.terminal_screen() as scr:
    ...     scr.put_string(0, 0, "Hello", fg="red", styles={"bold"})
    ...     scr.put_sheet(0, 2, ["foo", [("b", {"fg": "#a1a1a1"}), "ar"]])
    ...     scr.redraw()
    ...     key = scr.get_key_blocking(timeout=5)

Features:
    - Double-buffered drawing; redraw sends only changed cells
    - Colors by name, 256-color index ("#5"), or RGB ("#a1a1a1")
    - Sheets: 2D blocks of mixed plain and styled text
    - Non-blocking and blocking (polling) key input
    - Resize listeners with removable handles
    - In-memory VirtualTerminal for headless use and tests
"""

__version__ = "0.1.0"

# Core types
from ansi_screen.core.cell import Cell
from ansi_screen.core.color import Color, ColorMode, resolve_color
from ansi_screen.core.style import Style, resolve_styles

# Screen
from ansi_screen.config import ScreenConfig
from ansi_screen.screen.blocking import block_on
from ansi_screen.screen.options import DrawOptions
from ansi_screen.screen.screen import ListenerHandle, Screen, in_screen, terminal_screen

# Terminal devices and input
from ansi_screen.terminal.ansi import AnsiTerminal
from ansi_screen.terminal.input import Key, KeyEvent
from ansi_screen.terminal.virtual import VirtualTerminal

# Errors
from ansi_screen.errors import (
    ColorResolutionError,
    LifecycleError,
    ScreenError,
    UnrecognizedItemError,
)

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "Color",
    "ColorMode",
    "Style",
    "resolve_color",
    "resolve_styles",
    # Screen
    "Screen",
    "ScreenConfig",
    "DrawOptions",
    "ListenerHandle",
    "block_on",
    "in_screen",
    "terminal_screen",
    # Terminal
    "AnsiTerminal",
    "VirtualTerminal",
    "Key",
    "KeyEvent",
    # Errors
    "ScreenError",
    "LifecycleError",
    "ColorResolutionError",
    "UnrecognizedItemError",
]
