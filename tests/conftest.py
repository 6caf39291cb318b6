"""Shared pytest setup.

pygame reads the SDL driver variables on import, so headless drivers are
selected before any test module pulls in the display layer.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from conway_life.core.board import LifeBoard
from conway_life.core.rules import Cell


@pytest.fixture
def full_board_3x3():
    """3x3 board with every cell alive."""
    return LifeBoard(3, 3, lambda _x, _y: Cell.ALIVE)


@pytest.fixture(autouse=True)
def clear_life_env(monkeypatch):
    """Keep LIFE_* variables from the outer environment out of tests."""
    for name in list(os.environ):
        if name.startswith("LIFE_"):
            monkeypatch.delenv(name)
