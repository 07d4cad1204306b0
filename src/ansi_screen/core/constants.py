"""Shared constants for terminal output and the fixed name tables."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

HIDE_CURSOR = f"{CSI}?25l"
SHOW_CURSOR = f"{CSI}?25h"
CLEAR_SCREEN = f"{CSI}2J{CSI}H"
ALT_SCREEN_ENTER = f"{CSI}?1049h"
ALT_SCREEN_EXIT = f"{CSI}?1049l"

# Standard 16-color ANSI palette (index into the terminal's theme)
COLORS_16 = {
    # Standard colors (30-37 fg, 40-47 bg)
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    # Bright colors (90-97 fg, 100-107 bg)
    "bright_black": 8,
    "bright_red": 9,
    "bright_green": 10,
    "bright_yellow": 11,
    "bright_blue": 12,
    "bright_magenta": 13,
    "bright_cyan": 14,
    "bright_white": 15,
}

# Name used for the terminal's own default foreground/background
DEFAULT_COLOR_NAME = "default"

# Style name -> SGR code
STYLE_CODES = {
    "bold": 1,
    "dim": 2,
    "italic": 3,
    "underline": 4,
    "blinking": 5,
    "reverse": 7,
    "hidden": 8,
    "strikethrough": 9,
}

# Alternative spellings accepted for style names
STYLE_ALIASES = {
    "underlined": "underline",
    "blink": "blinking",
    "crossed_out": "strikethrough",
}
