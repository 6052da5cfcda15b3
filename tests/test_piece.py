import pytest

from tetris_piece import KINDS, SHAPES, Piece, rotate, rotation_states, translated_cells


def test_state_counts():
    counts = {k: len(rotation_states(k)) for k in KINDS}
    assert counts == {"c": 1, "s": 2, "lz": 2, "rz": 2, "ll": 4, "rl": 4, "p": 4}
    for states in SHAPES.values():
        assert all(len(set(s)) == 4 for s in states)


@pytest.mark.parametrize("kind", KINDS)
def test_rotation_is_cyclic(kind):
    p = Piece.spawn(kind, 3)
    start = p.cells
    for _ in range(len(rotation_states(kind))):
        p.rotation = rotate(p)
    assert p.rotation == 0
    assert p.cells == start


@pytest.mark.parametrize("kind", KINDS)
def test_backward_undoes_forward(kind):
    p = Piece.spawn(kind, 3)
    assert rotate(p, cw=False) == len(rotation_states(kind)) - 1
    p.rotation = rotate(p)
    assert rotate(p, cw=False) == 0


def test_translated_cells_is_pure():
    p = Piece("p", 2, 3)
    assert translated_cells(p, 1, 2) == [(4, 5), (4, 6), (3, 6), (5, 6)]
    assert (p.x, p.y, p.rotation) == (2, 3, 0)
    assert p.cells == [(3, 3), (3, 4), (2, 4), (4, 4)]


def test_rotated_cells_keep_anchor():
    p = Piece("s", 5, 0)
    assert p.rotated_cells() == [(7, 0), (7, 1), (7, 2), (7, 3)]
    assert p.rotation == 0


def test_unknown_kind():
    with pytest.raises(ValueError):
        Piece.spawn("q", 0)
