"""Color representation and resolution of flexible color inputs."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union

from ansi_screen.core.constants import COLORS_16, DEFAULT_COLOR_NAME
from ansi_screen.errors import ColorResolutionError

logger = logging.getLogger(__name__)

_INDEXED_RE = re.compile(r"^#(\d{1,3})$")
_HEX_RE = re.compile(r"^#([0-9a-fA-F]{6})$")


class ColorMode(Enum):
    """Color mode for ANSI sequences."""
    DEFAULT = "default"     # Terminal's own default (SGR 39, 49)
    STANDARD_16 = "16"      # Standard 16-color (SGR 30-37, 40-47, 90-97, 100-107)
    EXTENDED_256 = "256"    # Extended 256-color (SGR 38;5;n, 48;5;n)
    TRUE_COLOR = "rgb"      # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


@dataclass(frozen=True)
class Color:
    """
    Canonical color value for a cell.

    Every accepted color input resolves to one of these. Supports the
    terminal default, 16-color, 256-color, and true color modes.
    """
    mode: ColorMode
    value: int | tuple[int, int, int] | None = None

    DEFAULT: ClassVar["Color"]

    @classmethod
    def from_index(cls, index: int) -> "Color":
        """Create a Color from a 16-color palette index."""
        if not 0 <= index <= 15:
            raise ValueError(f"16-color index must be 0-15, got {index}")
        return cls(ColorMode.STANDARD_16, index)

    @classmethod
    def from_256(cls, index: int) -> "Color":
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(ColorMode.EXTENDED_256, index)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.TRUE_COLOR, (r, g, b))

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for foreground color."""
        if self.mode == ColorMode.DEFAULT:
            return "39"
        elif self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            if self.value < 8:
                return str(30 + self.value)
            else:
                return str(90 + self.value - 8)
        elif self.mode == ColorMode.EXTENDED_256:
            return f"38;5;{self.value}"
        else:  # TRUE_COLOR
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"38;2;{r};{g};{b}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for background color."""
        if self.mode == ColorMode.DEFAULT:
            return "49"
        elif self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            if self.value < 8:
                return str(40 + self.value)
            else:
                return str(100 + self.value - 8)
        elif self.mode == ColorMode.EXTENDED_256:
            return f"48;5;{self.value}"
        else:  # TRUE_COLOR
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"48;2;{r};{g};{b}"


Color.DEFAULT = Color(ColorMode.DEFAULT)


# Parsed forms of a color input. Resolution only ever sees these.

@dataclass(frozen=True)
class NamedSpec:
    name: str


@dataclass(frozen=True)
class IndexedSpec:
    index: int


@dataclass(frozen=True)
class RgbSpec:
    rgb: tuple[int, int, int]


@dataclass(frozen=True)
class CanonicalSpec:
    color: Color


ColorSpec = Union[NamedSpec, IndexedSpec, RgbSpec, CanonicalSpec]


def normalize_name(name: str) -> str:
    """Normalize a symbolic name: 'Bright-Red' -> 'bright_red'."""
    return name.strip().lower().replace("-", "_").replace(" ", "_")


def parse_color_spec(value: Any) -> ColorSpec | None:
    """
    Classify a raw color input.

    Accepts:
        - A Color, passed through unchanged
        - Named colors: "red", "bright-blue", "default"
        - Indexed colors: "#0" through "#255", or a plain int 0-255
        - Hex colors: "#a1a1a1"

    Returns None for anything else.
    """
    if isinstance(value, Color):
        return CanonicalSpec(value)

    if isinstance(value, int) and not isinstance(value, bool):
        return IndexedSpec(value) if 0 <= value <= 255 else None

    if not isinstance(value, str):
        return None

    text = value.strip()

    name = normalize_name(text)
    if name == DEFAULT_COLOR_NAME or name in COLORS_16:
        return NamedSpec(name)

    match = _INDEXED_RE.match(text)
    if match:
        index = int(match.group(1))
        return IndexedSpec(index) if index <= 255 else None

    match = _HEX_RE.match(text)
    if match:
        digits = match.group(1)
        return RgbSpec((int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)))

    return None


def color_from_spec(spec: ColorSpec) -> Color:
    """Turn a parsed color input into its canonical Color."""
    if isinstance(spec, CanonicalSpec):
        return spec.color
    elif isinstance(spec, NamedSpec):
        if spec.name == DEFAULT_COLOR_NAME:
            return Color.DEFAULT
        return Color.from_index(COLORS_16[spec.name])
    elif isinstance(spec, IndexedSpec):
        return Color.from_256(spec.index)
    else:  # RgbSpec
        return Color.from_rgb(*spec.rgb)


def resolve_color(value: Any, default: Color = Color.DEFAULT, strict: bool = False) -> Color:
    """
    Resolve any accepted color input to a canonical Color.

    Unrecognized input resolves to ``default``, or raises
    ColorResolutionError when ``strict`` is set.
    """
    spec = parse_color_spec(value)
    if spec is not None:
        return color_from_spec(spec)

    if strict:
        raise ColorResolutionError(value)

    logger.debug("Unrecognized color %r, using %r", value, default)
    return default
