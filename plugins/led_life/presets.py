"""
Seed Configurations and Timing Presets

Each seed is a fixed HEIGHT x WIDTH pattern of 0/1 written out as a
2D list for readability. The animation starts from "default" and, every
time all cells have died, restarts from "alternate".
"""

import numpy as np

from .board import check_seed


def _frozen(rows):
    cells = check_seed(np.array(rows, dtype=np.uint8))
    cells.flags.writeable = False
    return cells


SEEDS = {
    # Single glider, see http://en.wikipedia.org/wiki/Glider_(Conway%27s_Life)
    "glider": {
        "name": "Glider",
        "description": "A single glider drifting down and to the right",
        "cells": _frozen([
            [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
        ]),
    },
    "default": {
        "name": "Glider Fleet",
        "description": "A few gliders colliding across the wrapped edges",
        "cells": _frozen([
            [1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
            [0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
            [1, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1],
            [0, 0, 0, 1, 1, 1, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0],
            [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0],
            [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 0, 0, 0],
        ]),
    },
    # Slightly modified loaf and two hives,
    # see http://en.wikipedia.org/wiki/Still_life_(cellular_automaton)
    "alternate": {
        "name": "Loaf & Hives",
        "description": "Restart pattern, shown once every cell has died",
        "cells": _frozen([
            [0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0],
            [0, 1, 1, 1, 0, 0, 0, 0, 1, 0, 1, 0, 0, 1, 0, 0],
            [1, 0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 1, 1, 0, 0, 0],
            [0, 1, 1, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0],
        ]),
    },
}

SEED_ORDER = ["default", "alternate", "glider"]

START_SEED = "default"
RESTART_SEED = "alternate"

# Frame delays are in milliseconds; the player needs at least 50ms.
TIMING = {
    "frame_delay": 200,       # one generation
    "transition_delay": 400,  # striped frame shown before a restart
    "fade_delay": 50,         # frames of the fade-out tail
    "fade_step": 8,           # brightness lost per fade frame (of 256)
}

MS_PER_SECOND = 1000  # CLI budgets are in seconds, the core works in ms


def get_seed(name):
    """Get a seed's cell array by name. Raises KeyError if not found."""
    try:
        return SEEDS[name]["cells"]
    except KeyError:
        raise KeyError(f"unknown seed configuration: {name!r}") from None


def list_seeds():
    """Return list of (key, name, description) in display order."""
    return [(k, SEEDS[k]["name"], SEEDS[k]["description"])
            for k in SEED_ORDER if k in SEEDS]
