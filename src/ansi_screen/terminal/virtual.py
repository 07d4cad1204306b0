"""Virtual terminal -- implements the Device protocol in-memory.

Nothing is written to a real terminal. All output is captured for
inspection, key input is queued with ``feed``, and ``resize`` delivers
resize events synchronously.
"""

from __future__ import annotations

from collections import deque
from typing import Optional

from ansi_screen.core.constants import HIDE_CURSOR, SHOW_CURSOR
from ansi_screen.terminal.base import ResizeCallback
from ansi_screen.terminal.input import KeyEvent, decode_key, split_key


class VirtualTerminal:
    """In-memory terminal that records all writes.

    Parameters
    ----------
    cols:
        Number of terminal columns (width).
    rows:
        Number of terminal rows (height).
    """

    def __init__(self, cols: int = 80, rows: int = 24) -> None:
        self._cols = cols
        self._rows = rows
        self._output: list[str] = []
        self._pending: list[str] = []
        self._input: deque[str] = deque()
        self._listeners: list[ResizeCallback] = []
        self.started = False
        self.cursor_visible = True
        self.flush_count = 0

    # -- Device protocol: lifecycle -----------------------------------------

    def start(self) -> None:
        self.started = True

    def stop(self) -> None:
        self.started = False

    # -- Device protocol: viewport ------------------------------------------

    @property
    def size(self) -> tuple[int, int]:
        return self._cols, self._rows

    def resize(self, cols: int, rows: int) -> None:
        """Change the size and notify resize listeners."""
        self._cols = cols
        self._rows = rows
        for callback in list(self._listeners):
            callback(cols, rows)

    def add_resize_listener(self, callback: ResizeCallback) -> None:
        self._listeners.append(callback)

    def remove_resize_listener(self, callback: ResizeCallback) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    # -- Device protocol: output --------------------------------------------

    def write(self, data: str) -> None:
        """Buffer ``data`` until the next flush."""
        self._pending.append(data)

    def flush(self) -> None:
        self._output.extend(self._pending)
        self._pending.clear()
        self.flush_count += 1

    def hide_cursor(self) -> None:
        self.cursor_visible = False
        self.write(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.cursor_visible = True
        self.write(SHOW_CURSOR)

    @property
    def output(self) -> str:
        """Everything flushed so far."""
        return "".join(self._output)

    def take_output(self) -> str:
        """Return flushed output and forget it."""
        data = self.output
        self._output.clear()
        return data

    # -- Device protocol: input ---------------------------------------------

    def feed(self, data: str) -> None:
        """Queue raw keyboard input, split into key tokens."""
        while data:
            token, data = split_key(data)
            self._input.append(token)

    def read_raw(self) -> Optional[str]:
        if not self._input:
            return None
        return self._input.popleft()

    def decode_key(self, raw: str) -> Optional[KeyEvent]:
        return decode_key(raw)
