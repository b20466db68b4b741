"""
Toroidal Tri-State Board

The LED matrix is a fixed 16x6 grid whose edges wrap around: the left
column neighbours the right one and the top row neighbours the bottom
one, so every cell has exactly eight neighbours.

Cells carry one of three states. DYING is a one-generation visual
stage between ALIVE and DEAD; it never counts as a live neighbour.

The simulation keeps two boards and flips which one is authoritative
after every generation (see BoardPair).
"""

from enum import IntEnum

import numpy as np


# Display dimensions (fixed by the hardware)
WIDTH = 16
HEIGHT = 6


class CellState(IntEnum):
    """Cell states. Values double as palette indices in the renderer."""

    DEAD = 0
    ALIVE = 1
    DYING = 2


def check_seed(seed):
    seed = np.asarray(seed)
    if seed.shape != (HEIGHT, WIDTH):
        raise ValueError(
            f"seed must have shape {(HEIGHT, WIDTH)}, got {seed.shape}")
    return seed


def neighbor_count(board, row, col):
    """Count ALIVE cells around (row, col), wrapping at every edge.

    Python's % is a true modulo, so row -1 maps to HEIGHT - 1 and
    row HEIGHT maps to 0 (same for columns).
    """
    cells = board.cells if isinstance(board, Board) else board
    total = 0
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dy == 0 and dx == 0:
                continue
            if cells[(row + dy) % HEIGHT, (col + dx) % WIDTH] == CellState.ALIVE:
                total += 1
    return total


def neighbor_counts(cells):
    """Count ALIVE Moore neighbours for every cell using np.roll (periodic)."""
    alive = (np.asarray(cells) == CellState.ALIVE).astype(np.int32)
    n = np.zeros_like(alive)
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dy == 0 and dx == 0:
                continue
            n += np.roll(np.roll(alive, dy, axis=0), dx, axis=1)
    return n


class Board:
    """A single HEIGHT x WIDTH grid of CellState values."""

    def __init__(self, seed=None):
        self.cells = np.full((HEIGHT, WIDTH), CellState.DEAD, dtype=np.uint8)
        if seed is not None:
            self.fill(seed)

    def fill(self, seed):
        """Overwrite every cell: ALIVE where seed is 1, DEAD otherwise."""
        seed = check_seed(seed)
        self.cells[:] = np.where(seed == 1, CellState.ALIVE, CellState.DEAD)

    def to_seed(self):
        """Return the board as a 0/1 array (only ALIVE maps to 1)."""
        return (self.cells == CellState.ALIVE).astype(np.uint8)

    @property
    def alive_count(self):
        return int((self.cells == CellState.ALIVE).sum())

    @property
    def any_alive(self):
        return bool((self.cells == CellState.ALIVE).any())

    def __getitem__(self, pos):
        return CellState(int(self.cells[pos]))

    def __repr__(self):
        glyphs = {CellState.DEAD: ".", CellState.ALIVE: "#", CellState.DYING: "+"}
        rows = ["".join(glyphs[CellState(int(c))] for c in row) for row in self.cells]
        return "Board(\n  " + "\n  ".join(rows) + "\n)"


class BoardPair:
    """Double buffer: the active board is read, the inactive one written.

    After every generation the roles swap by flipping ``active_index``,
    so a step never reads a board it is writing to.
    """

    def __init__(self, seed=None):
        self.boards = (Board(), Board())
        self.active_index = 1
        if seed is not None:
            self.load(seed)

    @property
    def active(self):
        return self.boards[self.active_index]

    @property
    def inactive(self):
        return self.boards[1 - self.active_index]

    def swap(self):
        self.active_index = 1 - self.active_index

    def load(self, seed):
        """Fill both boards with the same seed configuration."""
        self.boards[0].fill(seed)
        self.boards[1].fill(seed)
