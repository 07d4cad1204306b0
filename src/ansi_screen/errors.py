"""Exception types raised by ansi-screen."""

from __future__ import annotations

from typing import Any, Optional


class ScreenError(Exception):
    """Base class for all ansi-screen errors."""


class LifecycleError(ScreenError):
    """A screen was used in the wrong lifecycle state.

    Raised on a double start, a stop without a start, or drawing and
    input calls against a screen that is not started.
    """


class ColorResolutionError(ScreenError, ValueError):
    """A color input matched none of the accepted forms (strict mode only)."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Cannot resolve color: {value!r}")
        self.value = value


class UnrecognizedItemError(ScreenError, TypeError):
    """A sheet item is not a character, a string, or a (content, options) pair."""

    def __init__(self, row: int, column: Optional[int], item: Any) -> None:
        where = f"row {row}" if column is None else f"row {row}, item {column}"
        super().__init__(f"Unrecognized sheet item at {where}: {item!r}")
        self.row = row
        self.column = column
        self.item = item
