"""Text styles and resolution of style names."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from ansi_screen.core.color import normalize_name
from ansi_screen.core.constants import STYLE_ALIASES, STYLE_CODES


class Style(Enum):
    """SGR text attributes; each value is the attribute's SGR code."""
    BOLD = STYLE_CODES["bold"]
    DIM = STYLE_CODES["dim"]
    ITALIC = STYLE_CODES["italic"]
    UNDERLINE = STYLE_CODES["underline"]
    BLINKING = STYLE_CODES["blinking"]
    REVERSE = STYLE_CODES["reverse"]
    HIDDEN = STYLE_CODES["hidden"]
    STRIKETHROUGH = STYLE_CODES["strikethrough"]


STYLE_NAMES: dict[str, Style] = {name: Style(code) for name, code in STYLE_CODES.items()}
STYLE_NAMES.update({alias: STYLE_NAMES[target] for alias, target in STYLE_ALIASES.items()})

NO_STYLES: frozenset[Style] = frozenset()


def resolve_style(tag: object) -> Style | None:
    """Look up a single style tag; None if unknown."""
    if isinstance(tag, Style):
        return tag
    if isinstance(tag, str):
        return STYLE_NAMES.get(normalize_name(tag))
    return None


def resolve_styles(tags: Iterable[object] | None) -> frozenset[Style]:
    """
    Resolve a collection of style tags to a canonical style set.

    Unknown tags are dropped. A bare string is treated as a single tag.
    """
    if not tags:
        return NO_STYLES
    if isinstance(tags, (str, Style)):
        tags = (tags,)
    resolved = (resolve_style(tag) for tag in tags)
    return frozenset(style for style in resolved if style is not None)


def sgr_codes(styles: Iterable[Style]) -> list[str]:
    """Return SGR parameters for a style set, in a stable order."""
    return [str(style.value) for style in sorted(styles, key=lambda s: s.value)]
