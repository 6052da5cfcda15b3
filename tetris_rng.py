"""Uniform piece randomizer"""
import random
from typing import Optional, Sequence

from tetris_piece import KINDS


class PieceRandom:
    """Independent uniform draws, no bag and no repeat avoidance."""

    def __init__(self, seed: Optional[int] = None, kinds: Sequence[str] = KINDS):
        self.seed = seed
        self.kinds = tuple(kinds)
        self._random = random.Random(seed)

    def next_piece(self) -> str:
        return self._random.choice(self.kinds)
