"""Pytest fixtures: screens backed by an in-memory terminal."""

from typing import Iterator

import pytest

from ansi_screen.config import ScreenConfig
from ansi_screen.screen.screen import Screen
from ansi_screen.terminal.virtual import VirtualTerminal


@pytest.fixture
def terminal() -> VirtualTerminal:
    """A 20x5 virtual terminal."""
    return VirtualTerminal(cols=20, rows=5)


@pytest.fixture
def screen(terminal: VirtualTerminal) -> Iterator[Screen]:
    """A started screen on the virtual terminal, stopped after the test."""
    scr = Screen(terminal, ScreenConfig(poll_interval=0.001))
    scr.start()
    yield scr
    if scr.started:
        scr.stop()


class FakeClock:
    """Clock and sleep pair for timing tests without real waiting."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
