"""Tests for core data structures (no terminal needed)."""

import pytest

from ansi_screen.core.buffer import CellBuffer
from ansi_screen.core.cell import BLANK, Cell
from ansi_screen.core.color import (
    CanonicalSpec,
    Color,
    ColorMode,
    IndexedSpec,
    NamedSpec,
    RgbSpec,
    parse_color_spec,
    resolve_color,
)
from ansi_screen.core.style import Style, resolve_styles, sgr_codes
from ansi_screen.errors import ColorResolutionError


class TestCell:
    """Tests for Cell dataclass."""

    def test_default_cell(self) -> None:
        cell = Cell()
        assert cell.char == ' '
        assert cell.fg == Color.DEFAULT
        assert cell.bg == Color.DEFAULT
        assert cell.styles == frozenset()

    def test_is_blank(self) -> None:
        assert Cell().is_blank() is True
        assert Cell(char='X').is_blank() is False
        assert Cell(fg=Color.from_index(1)).is_blank() is False
        assert Cell(styles=frozenset({Style.BOLD})).is_blank() is False

    def test_cells_are_immutable(self) -> None:
        cell = Cell(char='A')
        with pytest.raises(AttributeError):
            cell.char = 'B'  # type: ignore[misc]


class TestColor:
    """Tests for Color and color resolution."""

    def test_named_colors(self) -> None:
        assert resolve_color("red") == Color(ColorMode.STANDARD_16, 1)
        assert resolve_color("Bright-Blue") == Color(ColorMode.STANDARD_16, 12)
        assert resolve_color("default") is Color.DEFAULT

    def test_indexed_color(self) -> None:
        color = resolve_color("#5")
        assert color.mode == ColorMode.EXTENDED_256
        assert color.value == 5
        assert resolve_color("#255").value == 255

    def test_int_is_indexed(self) -> None:
        assert resolve_color(196) == Color.from_256(196)

    def test_hex_color(self) -> None:
        color = resolve_color("#a1a1a1")
        assert color.mode == ColorMode.TRUE_COLOR
        assert color.value == (161, 161, 161)
        assert resolve_color("#FF8000").value == (255, 128, 0)

    def test_canonical_passes_through(self) -> None:
        color = Color.from_rgb(1, 2, 3)
        assert resolve_color(color) is color
        assert resolve_color(resolve_color(color)) is color

    def test_resolution_is_deterministic(self) -> None:
        for value in ("cyan", "#12", "#0a0b0c", Color.from_256(7)):
            assert resolve_color(value) == resolve_color(value)

    def test_unrecognized_falls_back_to_default(self) -> None:
        assert resolve_color("chartreuse") is Color.DEFAULT
        assert resolve_color("#256") is Color.DEFAULT
        assert resolve_color("#12345") is Color.DEFAULT
        assert resolve_color(None) is Color.DEFAULT
        assert resolve_color(True) is Color.DEFAULT

    def test_unrecognized_uses_given_default(self) -> None:
        fallback = Color.from_index(2)
        assert resolve_color("nope", default=fallback) is fallback

    def test_strict_raises(self) -> None:
        with pytest.raises(ColorResolutionError) as exc_info:
            resolve_color("nope", strict=True)
        assert exc_info.value.value == "nope"
        assert isinstance(exc_info.value, ValueError)

    def test_parse_color_spec(self) -> None:
        assert parse_color_spec("yellow") == NamedSpec("yellow")
        assert parse_color_spec("#3") == IndexedSpec(3)
        assert parse_color_spec("#000010") == RgbSpec((0, 0, 16))
        assert parse_color_spec(Color.DEFAULT) == CanonicalSpec(Color.DEFAULT)
        assert parse_color_spec("#xyz") is None

    def test_from_256_range(self) -> None:
        with pytest.raises(ValueError):
            Color.from_256(256)

    def test_from_rgb_range(self) -> None:
        with pytest.raises(ValueError):
            Color.from_rgb(0, 0, 300)

    def test_to_sgr_fg(self) -> None:
        assert Color.DEFAULT.to_sgr_fg() == "39"
        assert resolve_color("red").to_sgr_fg() == "31"
        assert resolve_color("bright_cyan").to_sgr_fg() == "96"
        assert Color.from_256(196).to_sgr_fg() == "38;5;196"
        assert Color.from_rgb(255, 0, 0).to_sgr_fg() == "38;2;255;0;0"

    def test_to_sgr_bg(self) -> None:
        assert Color.DEFAULT.to_sgr_bg() == "49"
        assert resolve_color("blue").to_sgr_bg() == "44"
        assert resolve_color("bright_green").to_sgr_bg() == "102"


class TestStyle:
    """Tests for style resolution."""

    def test_resolve_names(self) -> None:
        assert resolve_styles({"bold", "underline"}) == {Style.BOLD, Style.UNDERLINE}

    def test_unknown_tags_are_dropped(self) -> None:
        assert resolve_styles({"bold", "sparkly", 42}) == {Style.BOLD}

    def test_empty(self) -> None:
        assert resolve_styles(None) == frozenset()
        assert resolve_styles(set()) == frozenset()

    def test_aliases_and_enum_members(self) -> None:
        assert resolve_styles(["blink", Style.REVERSE]) == {Style.BLINKING, Style.REVERSE}

    def test_single_string(self) -> None:
        assert resolve_styles("bold") == {Style.BOLD}

    def test_order_independent(self) -> None:
        assert resolve_styles(["reverse", "bold"]) == resolve_styles(["bold", "reverse"])

    def test_sgr_codes_sorted(self) -> None:
        assert sgr_codes({Style.REVERSE, Style.BOLD}) == ["1", "7"]


class TestCellBuffer:
    """Tests for CellBuffer."""

    def test_size(self) -> None:
        buffer = CellBuffer(10, 4)
        assert buffer.size == (10, 4)
        assert all(cell == BLANK for row in buffer.rows() for cell in row)
        assert [len(row) for row in buffer.rows()] == [10, 10, 10, 10]

    def test_get_set_cell(self) -> None:
        buffer = CellBuffer(10, 4)
        buffer.set(3, 2, Cell(char='A'))
        assert buffer.get(3, 2).char == 'A'
        assert buffer.get(4, 2) == BLANK

    def test_out_of_bounds_is_clipped(self) -> None:
        buffer = CellBuffer(10, 4)
        buffer.set(10, 0, Cell(char='X'))
        buffer.set(-1, 0, Cell(char='X'))
        buffer.set(0, 4, Cell(char='X'))
        assert all(cell.char != 'X' for row in buffer.rows() for cell in row)
        assert buffer.get(50, 50) == BLANK

    def test_clear(self) -> None:
        buffer = CellBuffer(5, 2)
        buffer.set(1, 1, Cell(char='Z'))
        buffer.clear()
        assert buffer.get(1, 1) == BLANK

    def test_resize_keeps_overlap(self) -> None:
        buffer = CellBuffer(5, 2)
        buffer.set(1, 1, Cell(char='K'))
        buffer.set(4, 0, Cell(char='L'))
        buffer.resize(3, 3)
        assert buffer.size == (3, 3)
        assert buffer.get(1, 1).char == 'K'
        rows = list(buffer.rows())
        assert [cell.char for cell in rows[0]] == [' '] * 3
        assert [cell.char for cell in rows[2]] == [' '] * 3

    def test_copy_is_independent(self) -> None:
        buffer = CellBuffer(3, 1)
        copy = buffer.copy()
        buffer.set(0, 0, Cell(char='Q'))
        assert copy.get(0, 0) == BLANK
