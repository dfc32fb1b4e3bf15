"""Shared fixtures for knobs tests."""

from enum import Enum

import pytest

from controller import GUI, HeadlessSurface


class Mode(Enum):
    FAST = "fast"
    SLOW = "slow"


class Params:
    """A plain object with one property per controller type."""

    def __init__(self):
        self.enabled = True
        self.label = "hello"
        self.speed = 5
        self.ratio = 0.5
        self.mode = Mode.FAST
        self.shape = "circle"
        self.color = "#ff0000"
        self.calls = 0

    def ping(self):
        self.calls += 1
        return "pong"


class Recorder:
    """Collects values passed to on_change / on_finish_change."""

    def __init__(self):
        self.changes = []
        self.finishes = []

    def on_change(self, value):
        self.changes.append(value)

    def on_finish(self, value):
        self.finishes.append(value)

    def attach(self, controller):
        return controller.on_change(self.on_change).on_finish_change(self.on_finish)


@pytest.fixture
def surface():
    """Headless surface, not scrollable, 24 rows high."""
    return HeadlessSurface()


@pytest.fixture
def gui(surface):
    """Root panel drawn on the headless surface."""
    return GUI(surface=surface)


@pytest.fixture
def params():
    return Params()


@pytest.fixture
def recorder():
    return Recorder()
