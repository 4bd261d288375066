import os

# canvas tests touch pygame surfaces; never open a real window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from samples import Grid


@pytest.fixture
def grid():
    return Grid(64, 48)
