"""Piece model, shapes, rotation states"""
from dataclasses import dataclass
from typing import Dict, List, Tuple

Cell = Tuple[int, int]  # (col, row)

KINDS = ("ll", "rl", "c", "s", "lz", "rz", "p")

# Every rotation state lists four (col, row) offsets from the piece anchor.
SHAPES: Dict[str, List[List[Cell]]] = {
    "ll": [
        [(1,0),(1,1),(1,2),(0,2)],
        [(0,0),(0,1),(1,1),(2,1)],
        [(0,0),(1,0),(0,1),(0,2)],
        [(0,0),(1,0),(2,0),(2,1)],
    ],
    "rl": [
        [(0,0),(0,1),(0,2),(1,2)],
        [(0,0),(1,0),(2,0),(0,1)],
        [(0,0),(1,0),(1,1),(1,2)],
        [(2,0),(2,1),(1,1),(0,1)],
    ],
    "lz": [
        [(1,1),(2,1),(2,2),(3,2)],
        [(3,0),(3,1),(2,1),(2,2)],
    ],
    "rz": [
        [(2,1),(3,1),(2,2),(1,2)],
        [(2,0),(2,1),(3,1),(3,2)],
    ],
    "p": [
        [(1,0),(1,1),(0,1),(2,1)],
        [(0,0),(0,1),(0,2),(1,1)],
        [(0,0),(1,0),(2,0),(1,1)],
        [(1,0),(1,1),(1,2),(0,1)],
    ],
    "c": [
        [(0,0),(0,1),(1,1),(1,0)],
    ],
    "s": [
        [(0,1),(1,1),(2,1),(3,1)],
        [(2,0),(2,1),(2,2),(2,3)],
    ],
}


def rotation_states(kind: str) -> List[List[Cell]]:
    try:
        return SHAPES[kind]
    except KeyError:
        raise ValueError(f"unknown piece kind: {kind!r}") from None


@dataclass
class Piece:
    kind: str
    x: int
    y: int
    rotation: int = 0

    @staticmethod
    def spawn(kind: str, x: int, y: int = 0) -> "Piece":
        rotation_states(kind)
        return Piece(kind, x, y)

    @property
    def cells(self) -> List[Cell]:
        return translated_cells(self, 0, 0)

    def rotated_cells(self, cw: bool = True) -> List[Cell]:
        """Cells of the neighbouring rotation state at the current anchor."""
        offsets = rotation_states(self.kind)[rotate(self, cw)]
        return [(self.x + c, self.y + r) for c, r in offsets]


# rotation

def rotate(piece: Piece, cw: bool = True) -> int:
    """Next rotation index; wraps around the kind's state count.

    Legality is the board's business: this always yields a candidate.
    """
    n = len(rotation_states(piece.kind))
    return (piece.rotation + (1 if cw else -1)) % n


def translated_cells(piece: Piece, dx: int, dy: int) -> List[Cell]:
    offsets = rotation_states(piece.kind)[piece.rotation]
    return [(piece.x + c + dx, piece.y + r + dy) for c, r in offsets]
