"""Terminal devices and keyboard input."""

from ansi_screen.terminal.ansi import AnsiTerminal
from ansi_screen.terminal.base import Device, ResizeCallback
from ansi_screen.terminal.input import InputReader, Key, KeyEvent, decode_key
from ansi_screen.terminal.virtual import VirtualTerminal

__all__ = [
    "AnsiTerminal",
    "Device",
    "ResizeCallback",
    "InputReader",
    "Key",
    "KeyEvent",
    "decode_key",
    "VirtualTerminal",
]
