"""Tests for sheet parsing and drawing."""

import pytest

from ansi_screen.core.cell import Cell
from ansi_screen.core.color import Color, resolve_color
from ansi_screen.core.style import Style
from ansi_screen.errors import UnrecognizedItemError
from ansi_screen.screen.options import DEFAULT_OPTIONS, DrawOptions
from ansi_screen.screen.screen import Screen
from ansi_screen.screen.sheet import (
    CharItem,
    StyledItem,
    TextItem,
    layout,
    parse_item,
    parse_sheet,
)


class TestParseSheet:
    """Tests for item classification."""

    def test_item_kinds(self) -> None:
        assert parse_item("a", 0, 0) == CharItem("a")
        assert parse_item("abc", 0, 0) == TextItem("abc")
        assert parse_item(("r", {"fg": "red"}), 0, 0) == StyledItem("r", DrawOptions(fg="red"))
        assert parse_item(["ab", None], 0, 0) == StyledItem("ab", DEFAULT_OPTIONS)

    def test_string_row(self) -> None:
        assert parse_sheet(["foo"]) == [[TextItem("foo")]]

    def test_unrecognized_item(self) -> None:
        with pytest.raises(UnrecognizedItemError) as exc_info:
            parse_sheet(["ok", ["a", 7]])
        error = exc_info.value
        assert (error.row, error.column, error.item) == (1, 1, 7)
        assert isinstance(error, TypeError)

    def test_bad_pairs(self) -> None:
        with pytest.raises(UnrecognizedItemError):
            parse_item(("a", "b"), 0, 0)
        with pytest.raises(UnrecognizedItemError):
            parse_item((1, {}), 0, 0)
        with pytest.raises(UnrecognizedItemError):
            parse_item(("a", {}, {}), 0, 0)

    def test_unrecognized_row(self) -> None:
        with pytest.raises(UnrecognizedItemError) as exc_info:
            parse_sheet(["ok", 12])
        assert exc_info.value.column is None

    def test_layout_advances_by_length(self) -> None:
        parsed = parse_sheet([["ab", "c", ("de", {})]])
        positions = [(x, y, item.text) for x, y, item in layout(parsed, 2, 3)]
        assert positions == [(2, 3, "ab"), (4, 3, "c"), (5, 3, "de")]


class TestPutSheet:
    """Tests for drawing sheets on a screen."""

    def test_string_rows(self, screen: Screen) -> None:
        screen.put_sheet(2, 0, ["foo", "bar", "hello!"])
        assert ''.join(screen.get_cell(x, 0).char for x in range(2, 5)) == "foo"
        assert ''.join(screen.get_cell(x, 1).char for x in range(2, 5)) == "bar"
        assert ''.join(screen.get_cell(x, 2).char for x in range(2, 8)) == "hello!"

    def test_character_rows(self, screen: Screen) -> None:
        screen.put_sheet(5, 0, [list("spam"), ["e", "g", "g", "s"]])
        assert ''.join(screen.get_cell(x, 0).char for x in range(5, 9)) == "spam"
        assert ''.join(screen.get_cell(x, 1).char for x in range(5, 9)) == "eggs"

    def test_styled_pairs(self, screen: Screen) -> None:
        screen.put_sheet(1, 0, [
            [["r", {"fg": "red"}], ["g", {"fg": "green"}]],
            [["b", {"fg": "blue"}]],
        ])
        assert screen.get_cell(1, 0).char == "r"
        assert screen.get_cell(1, 0).fg == resolve_color("red")
        assert screen.get_cell(2, 0).char == "g"
        assert screen.get_cell(2, 0).fg == resolve_color("green")
        assert screen.get_cell(1, 1).char == "b"
        assert screen.get_cell(1, 1).fg == resolve_color("blue")

    def test_rows_are_not_padded(self, screen: Screen) -> None:
        marker = Cell("#", resolve_color("yellow"))
        screen.set_cell(2, 0, marker)
        screen.put_sheet(0, 0, ["ab", "xyz"])
        assert screen.get_cell(2, 0) == marker
        assert screen.get_cell(2, 1).char == "z"

    def test_mixed_row(self, screen: Screen) -> None:
        screen.put_sheet(2, 0, ["foo", ["b", "a", ("r", {"bg": "yellow", "fg": "black"})]])
        assert ''.join(screen.get_cell(x, 1).char for x in range(2, 5)) == "bar"
        styled = screen.get_cell(4, 1)
        assert styled.fg == resolve_color("black")
        assert styled.bg == resolve_color("yellow")
        assert screen.get_cell(2, 1).fg == Color.DEFAULT

    def test_item_styles(self, screen: Screen) -> None:
        screen.put_sheet(0, 0, [[("hi", {"styles": {"bold", "reverse"}})]])
        assert screen.get_cell(1, 0).styles == {Style.BOLD, Style.REVERSE}

    def test_bad_item_draws_nothing(self, screen: Screen) -> None:
        with pytest.raises(UnrecognizedItemError):
            screen.put_sheet(0, 0, ["first", [object()]])
        assert screen.get_cell(0, 0).char == " "

    def test_empty_sheet(self, screen: Screen) -> None:
        screen.put_sheet(0, 0, [])
        screen.put_sheet(0, 0, [[]])
        assert screen.get_cell(0, 0).char == " "
