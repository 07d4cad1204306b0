"""Screen configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

ENV_PREFIX = "ANSI_SCREEN_"

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    value = env.get(ENV_PREFIX + name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"Invalid boolean for {ENV_PREFIX + name}: {value!r}")


@dataclass
class ScreenConfig:
    """
    Settings for a Screen.

    Example:
        >>> config = (ScreenConfig()
        ...     .with_defaults(fg="white", bg="#0")
        ...     .with_poll_interval(0.02)
        ...     .with_strict_colors())
    """

    # Colors used for "default" and for unrecognized input
    default_fg: Any = "default"
    default_bg: Any = "default"

    # Raise ColorResolutionError instead of falling back to the default
    strict_colors: bool = False

    # Seconds between polls in get_key_blocking
    poll_interval: float = 0.05

    # Terminal behavior while started
    alternate_screen: bool = True
    hide_cursor: bool = False

    def with_defaults(self, fg: Any = None, bg: Any = None) -> ScreenConfig:
        """Set the default foreground and/or background color."""
        if fg is not None:
            self.default_fg = fg
        if bg is not None:
            self.default_bg = bg
        return self

    def with_strict_colors(self, strict: bool = True) -> ScreenConfig:
        """Fail on unrecognized colors instead of falling back."""
        self.strict_colors = strict
        return self

    def with_poll_interval(self, seconds: float) -> ScreenConfig:
        """Set the default interval for blocking key reads."""
        if seconds <= 0:
            raise ValueError(f"Poll interval must be positive, got {seconds}")
        self.poll_interval = seconds
        return self

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> ScreenConfig:
        """Build a config from ANSI_SCREEN_* environment variables."""
        env = os.environ if env is None else env
        config = cls()
        config.strict_colors = _env_bool(env, "STRICT_COLORS", config.strict_colors)
        config.alternate_screen = _env_bool(env, "ALT_SCREEN", config.alternate_screen)
        config.hide_cursor = _env_bool(env, "HIDE_CURSOR", config.hide_cursor)
        if interval := env.get(ENV_PREFIX + "POLL_INTERVAL"):
            config.with_poll_interval(float(interval))
        return config
