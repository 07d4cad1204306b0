"""Renderers for outputting screen buffers."""

from ansi_screen.render.terminal import TerminalRenderer

__all__ = ["TerminalRenderer"]
