"""Pytest fixtures for the captcha runtime tests."""
import os

# Headless pygame for CI
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from models import Rectangle
from minigame.input.sources.scripted import ScriptedInputSource
from minigame.scheduler import EventScheduler


@pytest.fixture
def source():
    """Scripted input source with no subscribers."""
    return ScriptedInputSource()


@pytest.fixture
def arena():
    """200x200 arena offset from the window origin."""
    return Rectangle(x=100.0, y=50.0, width=200.0, height=200.0)


@pytest.fixture
def scheduler(source, arena):
    """Running scheduler with the default 5ms tick and 100ms debounce."""
    sched = EventScheduler(source, arena)
    yield sched
    sched.close()


class Recorder:
    """Callable that records its arguments."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_recorder():
    """Factory for tests that need several independent recorders."""
    return Recorder
