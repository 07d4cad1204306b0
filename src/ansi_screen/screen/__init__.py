"""The buffered screen and its drawing helpers."""

from ansi_screen.screen.blocking import block_on
from ansi_screen.screen.options import DrawOptions
from ansi_screen.screen.screen import ListenerHandle, Screen, in_screen, terminal_screen
from ansi_screen.screen.sheet import CharItem, StyledItem, TextItem, parse_sheet

__all__ = [
    "Screen",
    "ListenerHandle",
    "in_screen",
    "terminal_screen",
    "block_on",
    "DrawOptions",
    "CharItem",
    "TextItem",
    "StyledItem",
    "parse_sheet",
]
