"""Tick schedulers: manual (synchronous) and pygame timer driven"""
from typing import Callable, Optional

import pygame

TICK_EVENT = pygame.USEREVENT + 1

TickCallback = Callable[[], None]


class ManualScheduler:
    """Runs ticks only when asked; no real time passes."""

    def __init__(self):
        self.callback: Optional[TickCallback] = None
        self.interval_ms = 0
        self.running = False

    def start(self, callback: TickCallback, interval_ms: int):
        if interval_ms <= 0:
            raise ValueError(f"tick interval must be positive, got {interval_ms}")
        self.callback = callback
        self.interval_ms = interval_ms
        self.running = True

    def stop(self):
        self.running = False

    def advance(self, ticks: int = 1) -> int:
        """Fire up to `ticks` ticks; returns how many ran before a stop."""
        ran = 0
        while ran < ticks and self.running:
            self.callback()
            ran += 1
        return ran


class PygameScheduler:
    """Posts TICK_EVENT on a pygame timer; the host loop hands events to dispatch()."""

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type
        self.callback: Optional[TickCallback] = None
        self.running = False

    def start(self, callback: TickCallback, interval_ms: int):
        if interval_ms <= 0:
            raise ValueError(f"tick interval must be positive, got {interval_ms}")
        self.callback = callback
        self.running = True
        pygame.time.set_timer(self.event_type, interval_ms)

    def stop(self):
        if self.running:
            pygame.time.set_timer(self.event_type, 0)
        self.running = False

    def dispatch(self, e) -> bool:
        # a timer event may already be queued when stop() runs
        if e.type != self.event_type or not self.running:
            return False
        self.callback()
        return True
