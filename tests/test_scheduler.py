import pygame
import pytest

from tetris_config import CONFIG, tick_interval_ms
from tetris_rng import PieceRandom
from tetris_piece import KINDS
from tetris_scheduler import TICK_EVENT, ManualScheduler, PygameScheduler


def test_default_interval():
    assert CONFIG["TICKS_PER_SECOND"] == 15
    assert tick_interval_ms() == 66


def test_manual_scheduler_stops_mid_advance():
    s = ManualScheduler()
    ticks = []
    def cb():
        ticks.append(1)
        if len(ticks) == 3:
            s.stop()
    s.start(cb, 66)
    assert s.advance(10) == 3


def test_manual_scheduler_rejects_bad_interval():
    with pytest.raises(ValueError):
        ManualScheduler().start(lambda: None, 0)


def test_pygame_dispatch():
    s = PygameScheduler()
    ticks = []
    assert not s.dispatch(pygame.event.Event(TICK_EVENT))
    s.callback, s.running = (lambda: ticks.append(1)), True
    assert not s.dispatch(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    assert s.dispatch(pygame.event.Event(TICK_EVENT))
    assert ticks == [1]


def test_seeded_draws():
    a, b = PieceRandom(42), PieceRandom(42)
    seq = [a.next_piece() for _ in range(700)]
    assert seq == [b.next_piece() for _ in range(700)]
    assert set(seq) == set(KINDS)
