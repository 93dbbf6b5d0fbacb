"""Pytest fixtures for Astronum tests."""
import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pygame
import pytest

from minigame.input.sources.scripted import ScriptedInputSource


class SequenceRandom:
    """Random stand-in that replays fixed values.

    randint() pops from `ints`, random() pops from `floats`; random()
    repeats its last value once the list is exhausted.
    """

    def __init__(self, ints=(), floats=(0.0,)):
        self._ints = list(ints)
        self._floats = list(floats)
        self.randint_calls = 0

    def randint(self, a: int, b: int) -> int:
        self.randint_calls += 1
        value = self._ints.pop(0)
        assert a <= value <= b
        return value

    def random(self) -> float:
        if len(self._floats) > 1:
            return self._floats.pop(0)
        return self._floats[0]


@pytest.fixture
def sequence_random():
    """Factory for SequenceRandom instances."""
    return SequenceRandom


@pytest.fixture
def source():
    return ScriptedInputSource()


@pytest.fixture
def pygame_init():
    """Initialize pygame for testing."""
    pygame.init()
    yield
    pygame.quit()
