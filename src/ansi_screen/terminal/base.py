"""Device boundary: the terminal operations a Screen depends on."""

from __future__ import annotations

from typing import Callable, Optional, Protocol, runtime_checkable

from ansi_screen.terminal.input import KeyEvent

ResizeCallback = Callable[[int, int], None]


@runtime_checkable
class Device(Protocol):
    """Interface for a terminal device a Screen draws to."""

    def start(self) -> None:
        """Acquire the terminal (raw mode, alternate screen, ...)."""
        ...

    def stop(self) -> None:
        """Restore the terminal to its original state."""
        ...

    @property
    def size(self) -> tuple[int, int]:
        """Current (cols, rows)."""
        ...

    def write(self, data: str) -> None: ...

    def flush(self) -> None: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def read_raw(self) -> Optional[str]:
        """Pop one raw key token, or None if nothing is queued. Never blocks."""
        ...

    def decode_key(self, raw: str) -> Optional[KeyEvent]:
        """Translate a raw key token into a KeyEvent."""
        ...

    def add_resize_listener(self, callback: ResizeCallback) -> None: ...

    def remove_resize_listener(self, callback: ResizeCallback) -> None: ...
