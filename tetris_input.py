"""Keyboard control: key -> move mapping and subscriptions"""
import logging
from typing import Callable, Dict, List, Optional

import pygame

logger = logging.getLogger(__name__)

KEYMAP: Dict[int, str] = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_DOWN: "down",
    pygame.K_UP: "rotate",
    pygame.K_z: "rotate_ccw",
}
HARD_DROP_KEY = pygame.K_SPACE


class Subscription:
    """Handle returned by control(); released at most once."""
    def __init__(self, owner: "KeyboardControl", callback: Callable[[str], bool]):
        self.owner = owner
        self.callback = callback
        self.active = True

    def release(self):
        if not self.active: return
        self.active = False
        self.owner._unsubscribe(self)


class KeyboardControl:
    def __init__(self, drop_repeat: int):
        # space repeats soft drops this many times; pass the board's internal height
        self.drop_repeat = drop_repeat
        self.subs: List[Subscription] = []

    def control(self, callback: Callable[[str], bool]) -> Subscription:
        s = Subscription(self, callback)
        self.subs.append(s)
        return s

    def release(self, handle: Optional[Subscription]):
        if handle is not None: handle.release()

    def _unsubscribe(self, s: Subscription):
        if s in self.subs: self.subs.remove(s)

    def handle(self, e) -> bool:
        if e.type != pygame.KEYDOWN or not self.subs: return False
        if e.key == HARD_DROP_KEY:
            for s in list(self.subs):
                for _ in range(self.drop_repeat):
                    s.callback("down")
            return True
        move = KEYMAP.get(e.key)
        if move is None:
            return False
        logger.debug("key %d -> %s", e.key, move)
        for s in list(self.subs):
            s.callback(move)
        return True
