"""
Board simulation
================

`Tetris` owns the whole game state: the grid (visible rows plus hidden buffer
rows on top), the falling piece, the announced next kind, the score and the
running flag. Everything advances through `tick()`, which a scheduler calls at
a fixed rate, and through `attempt_move()`, which the input adapter calls
between ticks.

A tick does, in order:

  1. Snapshot the grid with the falling piece drawn on top.
  2. Try to move the piece down. If that works, the tick is done.
  3. Otherwise the snapshot becomes the grid (the piece locks). A piece that
     overlaps blocks or hangs past a wall, or a block left in the top hidden
     row, ends the game instead. Full rows are removed and replaced by
     empty rows at the top, one point each. The next kind spawns and a new
     next kind is drawn.
  4. Hand the visible rows, score and next kind to the adapter.

Nothing here knows about pygame: the adapter draws and reads keys, the
scheduler decides when ticks happen.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol

from tetris_board import Board, collide, copy_board, empty_board, merge, sweep, topped_out, visible
from tetris_config import CONFIG, tick_interval_ms
from tetris_piece import Piece, rotate, translated_cells
from tetris_rng import PieceRandom
from tetris_scheduler import ManualScheduler

logger = logging.getLogger(__name__)

LEFT, RIGHT, DOWN, ROTATE, ROTATE_CCW = "left", "right", "down", "rotate", "rotate_ccw"

MOVE_DELTAS = {
    LEFT: (-1, 0),
    RIGHT: (1, 0),
    DOWN: (0, 1),
}
MOVES = (LEFT, RIGHT, DOWN, ROTATE, ROTATE_CCW)

MoveCallback = Callable[[str], bool]


class Adapter(Protocol):
    def render(self, grid: Board, score: int, next_kind: Optional[str]) -> None: ...
    def control(self, move: MoveCallback) -> Any: ...
    def release(self, handle: Any) -> None: ...


class Scheduler(Protocol):
    def start(self, callback: Callable[[], None], interval_ms: int) -> None: ...
    def stop(self) -> None: ...


class Tetris:
    def __init__(self, width: int, height: int,
                 rng: Optional[PieceRandom] = None,
                 scheduler: Optional[Scheduler] = None,
                 hidden_rows: Optional[int] = None,
                 interval_ms: Optional[int] = None):
        hidden = CONFIG["HIDDEN_ROWS"] if hidden_rows is None else hidden_rows
        if width < 1 or height < 1:
            raise ValueError(f"board must be at least 1x1, got {width}x{height}")
        if hidden < 1:
            raise ValueError(f"need at least one hidden row, got {hidden}")
        self.width = width
        self.height = height + hidden
        self.rng = rng or PieceRandom(CONFIG["SEED"])
        self.scheduler = scheduler or ManualScheduler()
        self.interval_ms = interval_ms if interval_ms is not None else tick_interval_ms()
        self.adapter: Optional[Adapter] = None
        self._subscription = None
        self.grid: Board = empty_board(self.width, self.height)
        self.current: Optional[Piece] = None
        self.next_kind: Optional[str] = None
        self.score = 0
        self.is_running = True

    @property
    def spawn_x(self) -> int:
        return self.width // 2

    def try_spawn(self, kind: str) -> Piece:
        """Replace the falling piece; a blocked spawn is caught by the next tick."""
        self.current = Piece.spawn(kind, self.spawn_x, 0)
        return self.current

    def attempt_move(self, to: str) -> bool:
        if to not in MOVES:
            raise ValueError(f"unknown move: {to!r}")
        p = self.current
        if not self.is_running or p is None:
            return False
        if to in MOVE_DELTAS:
            dx, dy = MOVE_DELTAS[to]
            cells = translated_cells(p, dx, dy)
        else:
            cells = p.rotated_cells(cw=(to == ROTATE))
        if collide(self.grid, cells):
            return False
        if to in MOVE_DELTAS:
            p.x += dx; p.y += dy
        else:
            p.rotation = rotate(p, cw=(to == ROTATE))
        return True

    def snapshot(self) -> Board:
        """Grid copy with the falling piece drawn in."""
        data = copy_board(self.grid)
        if self.current is not None:
            merge(data, self.current.cells, self.current.kind)
        return data

    def tick(self):
        if not self.is_running or self.current is None:
            return
        data = self.snapshot()
        if not self.attempt_move(DOWN):
            self._lock(data)
            if not self.is_running:
                return
        if self.adapter is not None:
            self.adapter.render(visible(data), self.score, self.next_kind)

    def _lock(self, data: Board):
        if collide(self.grid, self.current.cells):
            # spawned over blocks or past a wall: nothing is written
            self._game_over()
            return
        # `data` is kept as the grid, so clears also show in this tick's frame
        self.grid = data
        logger.debug("locked %s at (%d, %d)", self.current.kind, self.current.x, self.current.y)
        if topped_out(self.grid):
            self._game_over()
            return
        cleared = sweep(self.grid)
        if cleared:
            self.score += cleared
            logger.debug("cleared %d row(s), score %d", cleared, self.score)
        self.try_spawn(self.next_kind or self.rng.next_piece())
        self.next_kind = self.rng.next_piece()

    def _game_over(self):
        logger.info("game over, score %d", self.score)
        self.is_running = False
        self.stop()

    def run(self, adapter: Optional[Adapter] = None):
        self.adapter = adapter
        self.is_running = True
        self.try_spawn(self.rng.next_piece())
        self.next_kind = self.rng.next_piece()
        if adapter is not None:
            self._subscription = adapter.control(self.attempt_move)
        self.scheduler.start(self.tick, self.interval_ms)
        logger.info("game started on %dx%d board, first %s, next %s",
                    self.width, self.height, self.current.kind, self.next_kind)

    def stop(self):
        self.scheduler.stop()
        handle, self._subscription = self._subscription, None
        if handle is not None and self.adapter is not None:
            self.adapter.release(handle)

    def reset(self):
        logger.info("reset at score %d", self.score)
        self.stop()
        self.current = None
        self.grid = empty_board(self.width, self.height)
        self.score = 0
        self.run(self.adapter)
