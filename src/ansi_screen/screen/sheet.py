"""Sheets: 2D blocks of mixed plain and styled text."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Union

from ansi_screen.errors import UnrecognizedItemError
from ansi_screen.screen.options import DEFAULT_OPTIONS, DrawOptions


@dataclass(frozen=True)
class CharItem:
    char: str

    @property
    def text(self) -> str:
        return self.char

    @property
    def options(self) -> DrawOptions:
        return DEFAULT_OPTIONS


@dataclass(frozen=True)
class TextItem:
    text: str

    @property
    def options(self) -> DrawOptions:
        return DEFAULT_OPTIONS


@dataclass(frozen=True)
class StyledItem:
    text: str
    options: DrawOptions


SheetItem = Union[CharItem, TextItem, StyledItem]


def parse_item(item: Any, row: int, column: int) -> SheetItem:
    """
    Classify one item of a sheet row.

    An item is a single character, a string, or a pair of
    (character-or-string, options). Anything else raises
    UnrecognizedItemError.
    """
    if isinstance(item, str):
        return CharItem(item) if len(item) == 1 else TextItem(item)

    if isinstance(item, (tuple, list)) and len(item) == 2:
        content, options = item
        if isinstance(content, str) and (
            options is None or isinstance(options, (Mapping, DrawOptions))
        ):
            return StyledItem(content, DrawOptions.coerce(options))

    raise UnrecognizedItemError(row, column, item)


def parse_row(row: Any, index: int) -> list[SheetItem]:
    """Classify a row: a plain string, or a sequence of items."""
    if isinstance(row, str):
        return [TextItem(row)]
    if not isinstance(row, Sequence):
        raise UnrecognizedItemError(index, None, row)
    return [parse_item(item, index, column) for column, item in enumerate(row)]


def parse_sheet(sheet: Iterable[Any]) -> list[list[SheetItem]]:
    """Classify every row of a sheet before anything is drawn."""
    return [parse_row(row, index) for index, row in enumerate(sheet)]


def layout(sheet: list[list[SheetItem]], x: int, y: int) -> Iterator[tuple[int, int, SheetItem]]:
    """
    Yield (col, row, item) draw positions for a parsed sheet.

    Row i starts at (x, y + i). Items advance the column by their own
    length. Rows are not padded to a common width.
    """
    for i, items in enumerate(sheet):
        col = x
        for item in items:
            yield col, y + i, item
            col += len(item.text)
