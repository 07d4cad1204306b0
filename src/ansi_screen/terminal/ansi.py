"""ANSI/VT terminal device backed by stdin/stdout (Unix)."""

from __future__ import annotations

import logging
import os
import signal
import sys
from typing import Optional, TextIO

from ansi_screen.core.constants import (
    ALT_SCREEN_ENTER,
    ALT_SCREEN_EXIT,
    CLEAR_SCREEN,
    HIDE_CURSOR,
    RESET,
    SHOW_CURSOR,
)
from ansi_screen.terminal.base import ResizeCallback
from ansi_screen.terminal.input import InputReader, KeyEvent, decode_key

logger = logging.getLogger(__name__)


class AnsiTerminal:
    """
    Terminal device for real ANSI terminals.

    ``start`` switches to the alternate screen and raw input mode and
    installs a SIGWINCH handler; ``stop`` restores everything. Output is
    collected and written in one go on ``flush``.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        alternate_screen: bool = True,
    ) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._alternate_screen = alternate_screen
        self._pending: list[str] = []
        self._listeners: list[ResizeCallback] = []
        self._reader: Optional[InputReader] = None
        self._old_settings: Optional[list] = None
        self._prev_sigwinch = None

    # -- lifecycle ------------------------------------------------------------

    def start(self) -> None:
        """Enter alternate screen and raw mode, start watching for resizes."""
        fd = self._stdin.fileno()
        self._enter_raw_mode(fd)
        self._reader = InputReader(fd)

        if self._alternate_screen:
            self._raw_write(ALT_SCREEN_ENTER)
        self._raw_write(CLEAR_SCREEN)

        if hasattr(signal, "SIGWINCH"):
            self._prev_sigwinch = signal.getsignal(signal.SIGWINCH)
            signal.signal(signal.SIGWINCH, self._on_sigwinch)

    def stop(self) -> None:
        """Restore the terminal; always leaves raw mode even if output fails."""
        if self._prev_sigwinch is not None:
            signal.signal(signal.SIGWINCH, self._prev_sigwinch)
            self._prev_sigwinch = None

        try:
            self._pending.clear()
            self._raw_write(RESET + SHOW_CURSOR)
            if self._alternate_screen:
                self._raw_write(ALT_SCREEN_EXIT)
        finally:
            self._leave_raw_mode()
            self._reader = None

    def _enter_raw_mode(self, fd: int) -> None:
        try:
            import termios
            import tty
        except ImportError:
            # Windows or no termios - input stays cooked
            return
        self._old_settings = termios.tcgetattr(fd)
        tty.setraw(fd)

    def _leave_raw_mode(self) -> None:
        if self._old_settings is None:
            return
        import termios
        termios.tcsetattr(self._stdin.fileno(), termios.TCSADRAIN, self._old_settings)
        self._old_settings = None

    # -- viewport -------------------------------------------------------------

    @property
    def size(self) -> tuple[int, int]:
        """Get current terminal dimensions as (cols, rows)."""
        try:
            size = os.get_terminal_size(self._stdout.fileno())
            return size.columns, size.lines
        except (OSError, ValueError):
            return 80, 24

    def add_resize_listener(self, callback: ResizeCallback) -> None:
        self._listeners.append(callback)

    def remove_resize_listener(self, callback: ResizeCallback) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _on_sigwinch(self, signum: int, frame: object) -> None:
        cols, rows = self.size
        logger.debug("Terminal resized to %dx%d", cols, rows)
        for callback in list(self._listeners):
            callback(cols, rows)

    # -- output ---------------------------------------------------------------

    def write(self, data: str) -> None:
        """Queue text for the next flush."""
        self._pending.append(data)

    def flush(self) -> None:
        """Write queued text to the terminal."""
        if self._pending:
            data = ''.join(self._pending)
            self._pending.clear()
            self._raw_write(data)

    def hide_cursor(self) -> None:
        self.write(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(SHOW_CURSOR)

    def _raw_write(self, data: str) -> None:
        self._stdout.write(data)
        self._stdout.flush()

    # -- input ----------------------------------------------------------------

    def read_raw(self) -> Optional[str]:
        if self._reader is None:
            return None
        return self._reader.read_raw()

    def decode_key(self, raw: str) -> Optional[KeyEvent]:
        return decode_key(raw)
