import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from tetris import Tetris
from tetris_scheduler import ManualScheduler


class FixedRandom:
    """Always draws the same kind."""
    def __init__(self, kind="c"):
        self.kind = kind

    def next_piece(self):
        return self.kind


class RecordingAdapter:
    def __init__(self):
        self.frames = []
        self.subs = []
        self.released = []

    def render(self, grid, score, next_kind):
        self.frames.append((grid, score, next_kind))

    def control(self, move):
        handle = object()
        self.subs.append((handle, move))
        return handle

    def release(self, handle):
        self.released.append(handle)


@pytest.fixture
def adapter():
    return RecordingAdapter()


@pytest.fixture
def small_game():
    # 4 wide, 6 visible rows + 2 hidden = 8 internal rows, squares only
    return Tetris(4, 6, rng=FixedRandom("c"), scheduler=ManualScheduler())
