"""
Color Choices for the LED Board

Dead cells are drawn in a semi-random green (green channel fixed, red and
blue jittered) so the background always reads as green. Alive cells get
a completely random color, re-drawn every frame. Dying cells keep one
fixed color so the transition stays recognizable.

All functions take a numpy Generator so runs are reproducible.
"""

import numpy as np


BLACK = (0, 0, 0)
DYING = (184, 172, 58)

DEAD_GREEN = 236
DEAD_RED_MAX = 128   # exclusive
DEAD_BLUE_MAX = 50   # exclusive


def random_color(rng):
    """Completely random color, each channel uniform over [0, 255]."""
    return tuple(int(c) for c in rng.integers(0, 256, size=3))


def random_dead_color(rng):
    """Random green: fixed green level, red and blue within a range."""
    return (int(rng.integers(0, DEAD_RED_MAX)), DEAD_GREEN,
            int(rng.integers(0, DEAD_BLUE_MAX)))


def frame_palette(rng):
    """Build the (3, 3) uint8 lookup table for one frame.

    Row order follows CellState values: DEAD, ALIVE, DYING.
    """
    return np.array([
        random_dead_color(rng),
        random_color(rng),
        DYING,
    ], dtype=np.uint8)


def row_stripes(rng, height, width):
    """One random solid color per row, as a (height * width, 3) array."""
    rows = np.array([random_color(rng) for _ in range(height)], dtype=np.uint8)
    return np.repeat(rows, width, axis=0)
