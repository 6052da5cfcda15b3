import pygame

from conftest import FixedRandom
from main import PygameAdapter
from tetris import Tetris
from tetris_input import KeyboardControl
from tetris_scheduler import ManualScheduler


def key(k, kind=pygame.KEYDOWN):
    return pygame.event.Event(kind, key=k)


def recorder():
    calls = []
    def move(m):
        calls.append(m)
        return True
    return calls, move


def test_arrow_mapping():
    kc = KeyboardControl(drop_repeat=8)
    calls, move = recorder()
    kc.control(move)
    for k in (pygame.K_LEFT, pygame.K_RIGHT, pygame.K_UP, pygame.K_DOWN, pygame.K_z):
        assert kc.handle(key(k))
    assert calls == ["left", "right", "rotate", "down", "rotate_ccw"]


def test_space_repeats_down():
    kc = KeyboardControl(drop_repeat=8)
    calls, move = recorder()
    kc.control(move)
    kc.handle(key(pygame.K_SPACE))
    assert calls == ["down"] * 8


def test_unmapped_and_keyup_ignored():
    kc = KeyboardControl(drop_repeat=8)
    calls, move = recorder()
    kc.control(move)
    assert not kc.handle(key(pygame.K_q))
    assert not kc.handle(key(pygame.K_LEFT, pygame.KEYUP))
    assert calls == []


def test_release_once():
    kc = KeyboardControl(drop_repeat=8)
    calls, move = recorder()
    sub = kc.control(move)
    kc.release(sub)
    kc.release(sub)
    sub.release()
    assert not sub.active
    assert not kc.handle(key(pygame.K_LEFT))
    assert calls == []


def test_hard_drop_then_lock():
    game = Tetris(4, 6, rng=FixedRandom("c"), scheduler=ManualScheduler())
    kc = KeyboardControl(drop_repeat=game.height)
    game.run(PygameAdapter(None, kc))
    kc.handle(key(pygame.K_LEFT))
    kc.handle(key(pygame.K_SPACE))
    assert (game.current.x, game.current.y) == (1, 5)
    game.stop()
    assert kc.subs == []
    assert not kc.handle(key(pygame.K_RIGHT))
