"""
Fade-Out Envelope

Once the animation has used up its time budget it does not stop
abruptly: the controller latches into a fade and dims every following
frame a little more until it reaches black, which ends the animation.

Brightness is an integer magnitude in [0, 256]:
- 256: full brightness, frames pass through untouched
- 0 < m < 256: every channel is scaled by m / 256 (integer division)
- 0: black, the animation is over
"""

from enum import Enum

import numpy as np

from .frames import Frame
from .presets import TIMING


FULL = 256


class FadeState(Enum):
    RUNNING = "running"
    FADING_OUT = "fading_out"
    TERMINATED = "terminated"


def scale(pixels, magnitude):
    """Scale uint8 channels by magnitude / 256 with integer division.

    magnitude == 256 returns the channels unchanged bit for bit.
    """
    wide = np.asarray(pixels, dtype=np.uint16) * int(magnitude)
    return (wide // FULL).astype(np.uint8)


class FadeController:
    """Latching fade-out driven by elapsed animation time."""

    def __init__(self, step=None, delay=None):
        """
        Args:
            step: Magnitude lost per faded frame
            delay: Display time (ms) of faded frames
        """
        self.step = TIMING["fade_step"] if step is None else step
        self.delay = TIMING["fade_delay"] if delay is None else delay
        self.magnitude = FULL
        self.direction = self.step
        self.latched = False

    @property
    def state(self):
        if self.magnitude >= FULL:
            return FadeState.RUNNING
        if self.magnitude <= 0:
            return FadeState.TERMINATED
        return FadeState.FADING_OUT

    @property
    def done(self):
        return self.magnitude <= 0

    def update(self, elapsed, budget):
        """Start fading the first time elapsed time exceeds the budget.

        Returns:
            True on the call that starts the fade, False otherwise.
        """
        if self.latched or elapsed <= budget or self.magnitude < FULL:
            return False
        self.latched = True
        self.magnitude = FULL - 1
        self.direction = -self.direction
        return True

    def apply(self, frame):
        """Dim frame by the current magnitude, then advance the fade.

        Frames pass through unchanged at full brightness (or once
        terminated). Dimmed frames use the fade delay.
        """
        if not 0 < self.magnitude < FULL:
            return frame
        dimmed = Frame(scale(frame.pixels, self.magnitude), self.delay)
        self.magnitude = min(FULL, max(0, self.magnitude + self.direction))
        return dimmed
