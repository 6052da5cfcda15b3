"""Board helpers: collide, merge, sweep, top-out"""
from typing import Iterable, List, Optional

from tetris_piece import Cell

Board = List[List[Optional[str]]]


def empty_board(cols: int, rows: int) -> Board:
    return [[None] * cols for _ in range(rows)]


def copy_board(board: Board) -> Board:
    return [row[:] for row in board]


def collide(board: Board, cells: Iterable[Cell]) -> bool:
    """True when any cell leaves the board, reaches the floor row or hits a block.

    The last row is never occupied: a cell landing on it counts as the floor.
    """
    rows, cols = len(board), len(board[0])
    for x, y in cells:
        if x < 0 or x >= cols or y < 0 or y >= rows - 1: return True
        if board[y][x]: return True
    return False


def merge(board: Board, cells: Iterable[Cell], kind: str):
    rows, cols = len(board), len(board[0])
    for x, y in cells:
        # a spawn hanging over the edge only keeps the part that fits
        if 0 <= x < cols and 0 <= y < rows:
            board[y][x] = kind


def sweep(board: Board) -> int:
    cols = len(board[0])
    c = 0; y = len(board) - 1
    while y >= 0:
        if all(board[y][x] for x in range(cols)):
            del board[y]; board.insert(0, [None] * cols); c += 1
        else: y -= 1
    return c


def topped_out(board: Board) -> bool:
    return any(board[0])


def visible(board: Board, skip: int = 1) -> Board:
    return copy_board(board[skip:])
