"""
Animation Driver: runs the Game of Life on the LED board and produces
the timed frame sequence.

Each generation:
    step -> render -> (restart if extinct) -> fade -> emit

The animation starts with a black lead-in frame and plays normally until
the emitted display time exceeds the budget. It then fades to black
(see fade.py) and stops once the fade reaches zero; there is no other
iteration limit.

If a generation leaves no ALIVE cell (DYING cells don't count), a
striped transition frame is emitted and both boards are reloaded from
the restart seed. This repeats every time the board dies out.

Usage:
    from led_life.animation import Animation
    anim = Animation(30_000, rng=np.random.default_rng(7))
    anim.run(writer)          # writer: any callable taking a Frame
    frames = list(Animation(1000).frames())
"""

import logging
import numbers

import numpy as np

from .board import HEIGHT, WIDTH, BoardPair
from .colors import BLACK, row_stripes
from .fade import FadeController
from .frames import Frame
from .presets import RESTART_SEED, START_SEED, TIMING, get_seed
from .renderer import FrameRenderer
from .rules import step


logger = logging.getLogger(__name__)


class Animation:
    """Owns the session state of one animation run."""

    def __init__(self, budget_ms, rng=None, start=START_SEED,
                 restart=RESTART_SEED):
        """
        Args:
            budget_ms: Play time in milliseconds before the fade-out begins.
                Must be a positive integer.
            rng: numpy Generator for all color choices (default: fresh entropy)
            start: Name of the seed configuration to start from
            restart: Name of the seed configuration loaded after extinction
        """
        if isinstance(budget_ms, bool) or not isinstance(budget_ms, numbers.Integral):
            raise TypeError(f"budget_ms must be an int, got {type(budget_ms).__name__}")
        if budget_ms <= 0:
            raise ValueError(f"budget_ms must be positive, got {budget_ms}")

        self.budget_ms = int(budget_ms)
        self.rng = rng if rng is not None else np.random.default_rng()
        self.start_seed = get_seed(start)
        self.restart_seed = get_seed(restart)

        self.boards = BoardPair(self.start_seed)
        self.renderer = FrameRenderer(self.rng)
        self.fade = FadeController()

        # Chosen once per run, shown every time the board dies out
        self.transition_frame = Frame(
            row_stripes(self.rng, HEIGHT, WIDTH), TIMING["transition_delay"])

        self.elapsed_ms = 0
        self.generation = 0
        self.restarts = 0
        self.is_alive = True

    @property
    def board(self):
        """The currently authoritative board."""
        return self.boards.active

    @property
    def state(self):
        return self.fade.state

    def _emitted(self, frame):
        self.elapsed_ms += frame.delay
        return frame

    def _check_extinction(self):
        """Reload the restart seed if the last step left nothing alive.

        Returns the transition frame to emit, or None.
        """
        if self.is_alive:
            return None
        self.restarts += 1
        logger.info("generation %d: all cells died, restart #%d",
                    self.generation, self.restarts)
        self.boards.load(self.restart_seed)
        return self.transition_frame

    def advance(self):
        """Run one generation. Returns the frames to emit, in order."""
        self.is_alive = step(self.boards)
        self.generation += 1
        frame = self.renderer.render(self.board)

        out = []
        transition = self._check_extinction()
        if transition is not None:
            out.append(self._emitted(transition))

        if self.fade.update(self.elapsed_ms, self.budget_ms):
            logger.info("budget of %dms used up at %dms, fading out",
                        self.budget_ms, self.elapsed_ms)
        out.append(self._emitted(self.fade.apply(frame)))

        logger.debug("generation %d: %d alive, fade %d, elapsed %dms",
                     self.generation, self.board.alive_count,
                     self.fade.magnitude, self.elapsed_ms)
        return out

    def frames(self):
        """Yield every frame of the animation in emission order."""
        yield self._emitted(Frame.solid(BLACK, TIMING["frame_delay"]))
        while not self.fade.done:
            yield from self.advance()
        logger.info("animation finished: %d generations, %d restarts, %dms",
                    self.generation, self.restarts, self.elapsed_ms)

    def run(self, emit):
        """Hand every frame to emit(frame). Emission errors propagate."""
        for frame in self.frames():
            emit(frame)
