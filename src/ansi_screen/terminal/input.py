"""Keyboard input: raw key tokenizing and key event normalization."""

from __future__ import annotations

import os
import select
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    REVERSE_TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    DELETE = auto()
    INSERT = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable, or the letter of a Ctrl combination
    raw: str = ""  # Raw escape sequence
    ctrl: bool = False  # Ctrl was held (Ctrl-A .. Ctrl-Z)

    @property
    def is_char(self) -> bool:
        """Check if this is a printable character."""
        return self.char is not None and self.key is None and not self.ctrl


# Escape sequence mappings (without the \x1b prefix)
SEQUENCES: dict[str, Key] = {
    # Arrow keys (CSI)
    '[A': Key.UP,
    '[B': Key.DOWN,
    '[C': Key.RIGHT,
    '[D': Key.LEFT,
    # Arrow keys (SS3 - application mode)
    'OA': Key.UP,
    'OB': Key.DOWN,
    'OC': Key.RIGHT,
    'OD': Key.LEFT,
    # Navigation
    '[H': Key.HOME,
    '[F': Key.END,
    'OH': Key.HOME,
    'OF': Key.END,
    '[1~': Key.HOME,
    '[4~': Key.END,
    '[5~': Key.PAGE_UP,
    '[6~': Key.PAGE_DOWN,
    '[2~': Key.INSERT,
    '[3~': Key.DELETE,
    '[Z': Key.REVERSE_TAB,
    # Function keys
    'OP': Key.F1,
    'OQ': Key.F2,
    'OR': Key.F3,
    'OS': Key.F4,
    '[15~': Key.F5,
    '[17~': Key.F6,
    '[18~': Key.F7,
    '[19~': Key.F8,
    '[20~': Key.F9,
    '[21~': Key.F10,
    '[23~': Key.F11,
    '[24~': Key.F12,
}

SIMPLE_KEYS: dict[str, Key] = {
    '\r': Key.ENTER,
    '\n': Key.ENTER,
    '\t': Key.TAB,
    '\x7f': Key.BACKSPACE,
    '\x08': Key.BACKSPACE,
}


def split_key(buffer: str) -> tuple[str, str]:
    """
    Split the first key token off a buffer of raw input.

    Returns (token, rest). A token is one character or one escape
    sequence; an escape sequence ends at a letter or '~', or right
    before the next escape.
    """
    if not buffer:
        return "", ""
    if buffer[0] != '\x1b' or len(buffer) == 1:
        return buffer[0], buffer[1:]

    rest = buffer[1:]
    end_idx = 0
    for i, ch in enumerate(rest):
        if ch == '\x1b':
            # Start of next escape sequence
            end_idx = i
            break
        # The introducer after ESC is never a terminator
        if i > 0 and (ch.isalpha() or ch == '~'):
            end_idx = i + 1
            break
        end_idx = i + 1

    return buffer[:1 + end_idx], buffer[1 + end_idx:]


def decode_key(raw: str | None) -> KeyEvent | None:
    """
    Normalize one raw key token into a KeyEvent.

    Ctrl-A through Ctrl-Z (other than the named keys) become the letter
    with ``ctrl=True``. Other control characters keep only the raw text.
    Returns None only for an empty token.
    """
    if not raw:
        return None

    if raw in SIMPLE_KEYS:
        return KeyEvent(key=SIMPLE_KEYS[raw], raw=raw)

    if raw[0] == '\x1b':
        if len(raw) == 1:
            return KeyEvent(key=Key.ESCAPE, raw=raw)
        key = SEQUENCES.get(raw[1:])
        # Unknown sequences keep only the raw text
        return KeyEvent(key=key, raw=raw)

    if len(raw) == 1 and raw.isprintable():
        return KeyEvent(char=raw, raw=raw)

    if len(raw) == 1 and 0x01 <= ord(raw) <= 0x1a:
        return KeyEvent(char=chr(ord(raw) + 0x60), ctrl=True, raw=raw)

    return KeyEvent(raw=raw)


class InputReader:
    """
    Non-blocking keyboard input reader.

    Uses os.read() to bypass Python's I/O buffering and properly
    handle escape sequences that may arrive split across reads.
    """

    def __init__(self, fd: int, escape_delay: float = 0.1) -> None:
        self._buffer = ""
        self._fd = fd
        self._escape_delay = escape_delay

    def read_raw(self) -> Optional[str]:
        """
        Pop one raw key token without waiting.

        Returns None if no input is available.
        """
        if not self._buffer and self._has_input(0):
            self._read_available()

        if not self._buffer:
            return None

        token, self._buffer = split_key(self._buffer)
        return token

    def _read_available(self) -> None:
        """Read all currently available input into buffer using os.read."""
        try:
            # Read up to 1024 bytes at once - gets everything available
            data = os.read(self._fd, 1024)
            self._buffer += data.decode('utf-8', errors='replace')
        except (OSError, BlockingIOError):
            pass

        # If buffer is just escape, wait for potential sequence
        if self._buffer == '\x1b':
            self._wait_for_escape_sequence()

    def _wait_for_escape_sequence(self) -> None:
        """Wait for escape sequence to complete with proper timeouts."""
        deadline = time.monotonic() + self._escape_delay

        while time.monotonic() < deadline:
            remaining = deadline - time.monotonic()
            wait_time = min(remaining, 0.025)  # 25ms intervals

            if wait_time <= 0:
                break

            if self._has_input(wait_time):
                try:
                    data = os.read(self._fd, 1024)
                    self._buffer += data.decode('utf-8', errors='replace')
                except (OSError, BlockingIOError):
                    pass

                # Check if sequence looks complete
                if len(self._buffer) > 2:
                    rest = self._buffer[1:]
                    # Sequence ends with letter or ~
                    if rest[-1].isalpha() or rest[-1] == '~':
                        return
                    # Or we have a known sequence
                    if rest in SEQUENCES:
                        return

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False
