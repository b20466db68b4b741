"""
Game of Life Rule Engine with a Dying Stage

Conway's B3/S23 rule on the toroidal board:
- a cell is born if it has exactly three neighbours
- a cell dies of loneliness with fewer than two neighbours
- a cell dies of overcrowding with more than three neighbours
- otherwise it survives

To make the animation more colorful a live cell that dies passes through
DYING for one generation before it becomes DEAD. A DYING cell with two
neighbours finishes dying instead of surviving.
"""

import numpy as np

from .board import CellState, neighbor_counts


def next_states(cells):
    """Compute the next generation of a cell array.

    Args:
        cells: (HEIGHT, WIDTH) array of CellState values

    Returns:
        Tuple of (new_cells, any_alive). DYING cells do not count as alive.
    """
    n = neighbor_counts(cells)
    alive = cells == CellState.ALIVE
    dying = cells == CellState.DYING

    # n < 2 or n > 3: live cells start dying, everything else is dead
    new_cells = np.where(alive, CellState.DYING, CellState.DEAD).astype(np.uint8)

    # n == 2: unchanged, but a dying cell completes its death
    keep = n == 2
    new_cells[keep] = np.where(dying[keep], CellState.DEAD, cells[keep])

    # n == 3: birth or survival
    new_cells[n == 3] = CellState.ALIVE

    return new_cells, bool((new_cells == CellState.ALIVE).any())


def step(pair):
    """Advance a BoardPair by one generation.

    Writes into the inactive board, then flips the pair so the freshly
    written board becomes active.

    Returns:
        True if any cell on the new board is ALIVE.
    """
    new_cells, any_alive = next_states(pair.active.cells)
    pair.inactive.cells[:] = new_cells
    pair.swap()
    return any_alive
