#!/usr/bin/env python3
"""
Tests for the toroidal board.

Verifies:
1. Neighbour counting wraps at every edge and corner
2. Vectorised and per-cell counting agree
3. Seeds load into both boards exactly
"""

import numpy as np
import pytest

from led_life.board import (
    HEIGHT, WIDTH, Board, BoardPair, CellState, check_seed, neighbor_count,
    neighbor_counts,
)
from led_life.presets import SEEDS, _frozen, get_seed


def _board_with(*alive, dying=()):
    board = Board()
    for row, col in alive:
        board.cells[row, col] = CellState.ALIVE
    for row, col in dying:
        board.cells[row, col] = CellState.DYING
    return board


def test_neighbor_count_wraps_rows():
    """A cell on row 0 sees row H-1 and vice versa."""
    board = _board_with((HEIGHT - 1, 5))
    assert neighbor_count(board, 0, 5) == 1
    assert neighbor_count(board, 0, 4) == 1
    assert neighbor_count(board, 0, 6) == 1

    board = _board_with((0, 5))
    assert neighbor_count(board, HEIGHT - 1, 5) == 1


def test_neighbor_count_wraps_columns():
    """A cell on column W-1 sees column 0 and vice versa."""
    board = _board_with((2, 0))
    assert neighbor_count(board, 2, WIDTH - 1) == 1
    assert neighbor_count(board, 1, WIDTH - 1) == 1

    board = _board_with((2, WIDTH - 1))
    assert neighbor_count(board, 3, 0) == 1


def test_neighbor_count_corners():
    """All four corners are mutual neighbours on a torus."""
    corners = [(0, 0), (0, WIDTH - 1), (HEIGHT - 1, 0), (HEIGHT - 1, WIDTH - 1)]
    board = _board_with(*corners)
    for row, col in corners:
        assert neighbor_count(board, row, col) == 3, (row, col)


def test_neighbor_count_excludes_center_and_dying():
    board = _board_with((2, 2), (1, 1), (3, 3), dying=[(1, 2), (2, 1)])
    assert neighbor_count(board, 2, 2) == 2
    assert neighbor_count(board, 0, 0) == 1


def test_neighbor_count_full_board():
    board = Board(np.ones((HEIGHT, WIDTH), dtype=np.uint8))
    assert neighbor_count(board, 0, 0) == 8
    assert neighbor_count(board, HEIGHT - 1, WIDTH - 1) == 8


def test_vectorised_counts_match():
    rng = np.random.default_rng(3)
    cells = rng.integers(0, 3, size=(HEIGHT, WIDTH)).astype(np.uint8)
    counts = neighbor_counts(cells)
    for row in range(HEIGHT):
        for col in range(WIDTH):
            assert counts[row, col] == neighbor_count(cells, row, col), (row, col)


def test_fill_round_trip():
    """Loading a seed then reading reproduces its 0/1 pattern exactly."""
    for key, preset in SEEDS.items():
        pair = BoardPair(preset["cells"])
        expected = np.where(preset["cells"] == 1, CellState.ALIVE, CellState.DEAD)
        assert np.array_equal(pair.active.cells, expected), key
        assert np.array_equal(pair.inactive.cells, expected), key
        assert np.array_equal(pair.active.to_seed(), preset["cells"]), key


def test_fill_touches_every_cell():
    board = Board()
    board.cells[:] = CellState.DYING
    board.fill(get_seed("glider"))
    assert set(np.unique(board.cells)) <= {CellState.DEAD, CellState.ALIVE}
    assert board.alive_count == 5


def test_fill_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Board().fill(np.zeros((WIDTH, HEIGHT), dtype=np.uint8))


def test_pair_swap_and_load():
    pair = BoardPair()
    first = pair.active
    pair.swap()
    assert pair.active is not first
    assert pair.inactive is first
    pair.swap()
    assert pair.active is first

    pair.load(get_seed("default"))
    assert np.array_equal(pair.boards[0].cells, pair.boards[1].cells)


def test_seed_tables_validate_shape():
    with pytest.raises(ValueError):
        _frozen([[0, 1, 0]] * HEIGHT)
    with pytest.raises(ValueError):
        check_seed(np.zeros((HEIGHT + 1, WIDTH), dtype=np.uint8))
    assert check_seed(get_seed("glider")).shape == (HEIGHT, WIDTH)


def test_seeds_are_read_only():
    with pytest.raises(ValueError):
        get_seed("default")[0, 0] = 0


def test_any_alive_ignores_dying():
    board = _board_with(dying=[(0, 0), (3, 4)])
    assert not board.any_alive
    assert board[0, 0] is CellState.DYING
    board.cells[1, 1] = CellState.ALIVE
    assert board.any_alive


if __name__ == "__main__":
    print("\n=== Testing Board ===\n")
    test_neighbor_count_wraps_rows()
    test_neighbor_count_wraps_columns()
    test_neighbor_count_corners()
    test_neighbor_count_excludes_center_and_dying()
    test_neighbor_count_full_board()
    test_vectorised_counts_match()
    test_fill_round_trip()
    test_fill_touches_every_cell()
    test_pair_swap_and_load()
    test_any_alive_ignores_dying()
    print("\n✓ All tests passed!\n")
