"""
Board -> Frame rendering.

Every frame re-draws the dead and alive colors (see colors.py) and maps
each cell through the three-entry palette, so all alive cells in a frame
share one color and all dead cells share another.
"""

import numpy as np

from .colors import frame_palette
from .frames import Frame
from .presets import TIMING


class FrameRenderer:

    def __init__(self, rng=None, delay=None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.delay = TIMING["frame_delay"] if delay is None else delay
        self.palette = None  # last palette used, for inspection

    def render(self, board):
        """Render a Board (or raw cell array) into a Frame."""
        cells = getattr(board, "cells", board)
        self.palette = frame_palette(self.rng)
        return Frame(self.palette[cells.reshape(-1)], self.delay)
