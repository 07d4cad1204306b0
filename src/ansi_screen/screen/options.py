"""Draw options and their resolution into cell attributes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from ansi_screen.core.color import Color, resolve_color
from ansi_screen.core.style import Style, resolve_styles


@dataclass(frozen=True)
class DrawOptions:
    """Colors and styles for a piece of text, before resolution."""
    fg: Any = "default"
    bg: Any = "default"
    styles: frozenset = field(default_factory=frozenset)

    @classmethod
    def coerce(cls, value: Union["DrawOptions", Mapping[str, Any], None]) -> DrawOptions:
        """
        Build DrawOptions from a mapping or None.

        Mappings may use ``fg``/``bg``/``styles`` or the long names
        ``foreground``/``background``. Other keys are ignored.
        """
        if value is None:
            return DEFAULT_OPTIONS
        if isinstance(value, DrawOptions):
            return value
        if not isinstance(value, Mapping):
            raise TypeError(f"Draw options must be a mapping, got {value!r}")
        styles = value.get("styles") or ()
        if isinstance(styles, str):
            styles = (styles,)
        return cls(
            fg=_first(value, "fg", "foreground"),
            bg=_first(value, "bg", "background"),
            styles=frozenset(styles),
        )

    def merge(self, **overrides: Any) -> DrawOptions:
        """Return a copy with the given non-None fields replaced."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        if "styles" in changes:
            styles = changes["styles"]
            changes["styles"] = frozenset((styles,) if isinstance(styles, str) else styles)
        return DrawOptions(**{
            "fg": self.fg, "bg": self.bg, "styles": self.styles, **changes,
        })


def _first(options: Mapping[str, Any], *keys: str) -> Any:
    """First non-None value among keys; None counts as not given."""
    for key in keys:
        if options.get(key) is not None:
            return options[key]
    return "default"


DEFAULT_OPTIONS = DrawOptions()


@dataclass(frozen=True)
class ResolvedStyle:
    """Canonical attributes shared by every cell of one write."""
    fg: Color
    bg: Color
    styles: frozenset[Style]


class StyleResolver:
    """
    Resolve DrawOptions against a screen's default colors.

    The same fallback/strict policy applies to every color resolved
    through one resolver.
    """

    def __init__(self, default_fg: Any = "default", default_bg: Any = "default",
                 strict: bool = False) -> None:
        self.strict = strict
        self.default_fg = resolve_color(default_fg, strict=strict)
        self.default_bg = resolve_color(default_bg, strict=strict)

    def resolve(self, options: DrawOptions) -> ResolvedStyle:
        return ResolvedStyle(
            fg=self.color(options.fg, self.default_fg),
            bg=self.color(options.bg, self.default_bg),
            styles=resolve_styles(options.styles),
        )

    def color(self, value: Any, default: Color) -> Color:
        if isinstance(value, Color):
            return value
        resolved = resolve_color(value, default=default, strict=self.strict)
        # "default" means the screen's default, not the terminal's
        if resolved == Color.DEFAULT:
            return default
        return resolved

