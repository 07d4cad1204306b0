"""Screen - double-buffered drawing surface over a terminal device."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Iterable, Iterator, Mapping, Optional, Union

from ansi_screen.config import ScreenConfig
from ansi_screen.core.buffer import CellBuffer
from ansi_screen.core.cell import Cell
from ansi_screen.errors import LifecycleError
from ansi_screen.render.terminal import TerminalRenderer, move_to
from ansi_screen.screen.blocking import block_on
from ansi_screen.screen.options import DrawOptions, StyleResolver
from ansi_screen.screen.sheet import layout, parse_sheet
from ansi_screen.terminal.base import Device, ResizeCallback
from ansi_screen.terminal.input import KeyEvent

logger = logging.getLogger(__name__)

Options = Union[DrawOptions, Mapping[str, Any], None]

_handle_ids = count(1)


@dataclass(frozen=True)
class ListenerHandle:
    """Token returned by add_resize_listener, used to remove the listener."""
    id: int = field(default_factory=lambda: next(_handle_ids))


class Screen:
    """
    A buffered screen on top of a terminal device.

    Drawing calls only change the in-memory buffer; nothing reaches the
    terminal until ``redraw``. The screen must be started before use and
    stopped afterwards; prefer ``with screen:`` or ``in_screen(screen)``.

    Example:
        >>> with Screen(VirtualTerminal()) as scr:
        ...     scr.put_string(0, 0, "Hello", fg="red", styles={"bold"})
        ...     scr.put_sheet(0, 2, ["foo", [["b", {"fg": "#a1a1a1"}]]])
        ...     scr.redraw()
    """

    def __init__(self, device: Device, config: Optional[ScreenConfig] = None) -> None:
        self.device = device
        self.config = config or ScreenConfig()
        self._resolver = StyleResolver(
            self.config.default_fg,
            self.config.default_bg,
            strict=self.config.strict_colors,
        )
        self._renderer = TerminalRenderer()
        self._back: Optional[CellBuffer] = None
        self._front: Optional[CellBuffer] = None
        self._cursor: tuple[int, int] = (0, 0)
        self._listeners: dict[ListenerHandle, ResizeCallback] = {}
        self._pending_size: Optional[tuple[int, int]] = None
        self._started = False

    # -- lifecycle --------------------------------------------------------------

    @property
    def started(self) -> bool:
        return self._started

    def start(self) -> None:
        """
        Start the screen.  Consider using ``with screen:`` instead.

        This must be called before you do anything else to the screen.
        Starting a started screen raises LifecycleError; a stopped screen
        may be started again and gets fresh, blank buffers.
        """
        if self._started:
            raise LifecycleError("Screen is already started")

        self.device.start()
        cols, rows = self.device.size
        self._back = CellBuffer(cols, rows)
        self._front = None  # Unknown terminal contents: first redraw is full
        self._cursor = (0, 0)
        self._pending_size = None
        self.device.add_resize_listener(self._on_resize)
        if self.config.hide_cursor:
            self.device.hide_cursor()
        self._started = True
        logger.debug("Screen started at %dx%d", cols, rows)

    def stop(self) -> None:
        """
        Stop the screen.  Consider using ``with screen:`` instead.

        Discards all buffered cells and restores the terminal.
        """
        if not self._started:
            raise LifecycleError("Screen is not started")

        self._started = False
        self._back = None
        self._front = None
        self._pending_size = None
        try:
            self.device.remove_resize_listener(self._on_resize)
        finally:
            self.device.stop()
        logger.debug("Screen stopped")

    def __enter__(self) -> Screen:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _require_started(self) -> CellBuffer:
        if not self._started or self._back is None:
            raise LifecycleError("Screen is not started")
        return self._back

    # -- viewport ---------------------------------------------------------------

    def get_size(self) -> tuple[int, int]:
        """Return the current size of the screen as (cols, rows)."""
        self._apply_pending_resize()
        return self.device.size

    def get_cursor(self) -> tuple[int, int]:
        """Return the cursor position as (col, row)."""
        self._require_started()
        return self._cursor

    def move_cursor(self, col: Union[int, tuple[int, int]], row: Optional[int] = None) -> None:
        """
        Move the cursor to a specific location on the screen.

        Accepts ``move_cursor(col, row)`` or ``move_cursor((col, row))``.
        This does not affect where text is drawn; the new position shows
        up at the next redraw.
        """
        self._require_started()
        if row is None:
            if not isinstance(col, tuple):
                raise TypeError("move_cursor needs (col, row) or a single (col, row) tuple")
            col, row = col
        self._cursor = (int(col), int(row))

    # -- resize listeners -------------------------------------------------------

    def add_resize_listener(self, callback: ResizeCallback) -> ListenerHandle:
        """
        Call ``callback(cols, rows)`` whenever the terminal is resized.

        Resizes are picked up by the next redraw, get_key or get_size call,
        never in the middle of a drawing call.

        Returns a handle for remove_resize_listener.
        """
        handle = ListenerHandle()
        self._listeners[handle] = callback
        return handle

    def remove_resize_listener(self, handle: ListenerHandle) -> None:
        """Remove a listener added with add_resize_listener."""
        self._listeners.pop(handle, None)

    def _on_resize(self, cols: int, rows: int) -> None:
        # May run inside a signal handler; only record the size here
        self._pending_size = (cols, rows)

    def _apply_pending_resize(self) -> None:
        if self._pending_size is None:
            return
        cols, rows = self._pending_size
        self._pending_size = None
        logger.debug("Resized to %dx%d", cols, rows)
        if self._back is not None:
            self._back.resize(cols, rows)
            self._front = None

        for callback in list(self._listeners.values()):
            try:
                callback(cols, rows)
            except Exception:
                logger.exception("Resize listener %r failed", callback)

    # -- drawing ----------------------------------------------------------------

    def set_cell(self, col: int, row: int, cell: Cell) -> None:
        """Write one cell into the buffer."""
        self._require_started().set(col, row, cell)

    def get_cell(self, col: int, row: int) -> Cell:
        """Read back the buffered cell at (col, row)."""
        return self._require_started().get(col, row)

    def put_string(
        self,
        col: int,
        row: int,
        text: str,
        options: Options = None,
        *,
        fg: Any = None,
        bg: Any = None,
        styles: Optional[Iterable[Any]] = None,
    ) -> None:
        """
        Put a string on the screen buffer, ready to be drawn at the next redraw.

        ``col`` and ``row`` are where the string starts. Colors and styles
        come from ``options`` (a DrawOptions or a mapping with ``fg``,
        ``bg`` and ``styles``), overridden by the keyword arguments.

        Colors can be:

        * a name such as ``"blue"`` or ``"bright_red"``, or ``"default"``
        * ``"#5"``, an index 0-255 into the terminal's own palette
        * ``"#a1a1a1"``, a literal RGB color
        * a Color, used as-is

        Anything else draws with the screen's default color, or raises
        ColorResolutionError when the screen is configured with strict
        colors. Styles is a set of names such as ``{"bold", "underline"}``;
        unknown names are ignored.

        Text is not wrapped; characters past the edge are dropped.
        """
        buffer = self._require_started()
        opts = DrawOptions.coerce(options).merge(fg=fg, bg=bg, styles=styles)
        style = self._resolver.resolve(opts)

        for i, char in enumerate(text):
            buffer.set(col + i, row, Cell(char, style.fg, style.bg, style.styles))

    def put_sheet(self, col: int, row: int, sheet: Iterable[Any]) -> None:
        """
        Draw a sheet to the screen (buffered, of course).

        A sheet is a sequence of rows printed with its upper-left corner at
        (col, row). The simplest sheet is a list of strings::

            scr.put_sheet(2, 0, ["foo", "bar", "hello!"])

        Rows can also be sequences of characters or strings::

            scr.put_sheet(5, 0, [["s", "p", "a", "m"], ["e", "g", "g", "s"]])

        Instead of a bare character or string, an item can be a pair of
        ``(char-or-string, options)``::

            scr.put_sheet(1, 0, [[("r", {"fg": "red"}), ("g", {"fg": "green"})],
                                 [("b", {"fg": "blue"})]])

        All forms can be mixed within one sheet or row. Rows are not padded:
        cells to the right of a short row keep whatever they held.

        The whole sheet is checked first; an item of any other shape raises
        UnrecognizedItemError and nothing is drawn.
        """
        self._require_started()
        parsed = parse_sheet(sheet)
        for x, y, item in layout(parsed, col, row):
            self.put_string(x, y, item.text, item.options)

    def clear(self) -> None:
        """
        Clear the screen.

        This is buffered like everything else; redraw to see the effect.
        """
        self._require_started().clear()

    def redraw(self, full: bool = False) -> None:
        """
        Draw the screen.

        Flushes changes made since the last redraw to the terminal. Pass
        ``full=True`` to repaint every cell regardless. A terminal resize
        reported since the last call is applied first.
        """
        self._require_started()
        self._apply_pending_resize()
        back = self._back
        front = None if full else self._front
        output = self._renderer.render(front, back)

        col, row = self._cursor
        self.device.write(output + move_to(col, row))
        self.device.flush()
        self._front = back.copy()
        logger.debug("Redraw wrote %d bytes", len(output))

    flush = redraw

    # -- input ------------------------------------------------------------------

    def get_key(self) -> Optional[KeyEvent]:
        """
        Get the next keypress from the user, or None if none are buffered.

        Never waits. Use get_key_blocking to wait for input.
        """
        self._require_started()
        self._apply_pending_resize()
        raw = self.device.read_raw()
        if raw is None:
            return None
        return self.device.decode_key(raw)

    def get_key_blocking(
        self,
        interval: Optional[float] = None,
        timeout: Optional[float] = None,
    ) -> Optional[KeyEvent]:
        """
        Get the next keypress from the user, waiting for one if needed.

        Checks every ``interval`` seconds (the configured poll interval by
        default). With a ``timeout`` in seconds, returns None if nothing
        arrives in time.
        """
        self._require_started()
        if interval is None:
            interval = self.config.poll_interval
        return block_on(self.get_key, interval=interval, timeout=timeout)


def terminal_screen(device: Optional[Device] = None, config: Optional[ScreenConfig] = None) -> Screen:
    """Create a Screen, on a real ANSI terminal unless a device is given."""
    config = config or ScreenConfig()
    if device is None:
        from ansi_screen.terminal.ansi import AnsiTerminal
        device = AnsiTerminal(alternate_screen=config.alternate_screen)
    return Screen(device, config)


@contextmanager
def in_screen(screen: Screen) -> Iterator[Screen]:
    """Start the given screen, run the block, and stop the screen afterward."""
    screen.start()
    try:
        yield screen
    finally:
        screen.stop()
