"""
Pygame Preview for Recorded Animation Streams

Plays a stream written by ``python -m led_life`` in a window, honouring
each frame's delay, so an animation can be checked without the LED
hardware. Playback is passive; closing the window (or Q / ESC) quits.
"""

import logging

import pygame

from .stream import read_stream


logger = logging.getLogger(__name__)

CELL = 40   # window pixels per LED
GAP = 4     # dark border drawn around each LED


class Viewer:

    def __init__(self, path, cell=CELL):
        self.path = path
        self.cell = cell
        self.running = True
        self.frames_shown = 0

    def _draw(self, screen, frame):
        img = frame.to_image()
        screen.fill((0, 0, 0))
        height, width = img.shape[:2]
        for y in range(height):
            for x in range(width):
                rect = (x * self.cell + GAP // 2, y * self.cell + GAP // 2,
                        self.cell - GAP, self.cell - GAP)
                pygame.draw.rect(screen, tuple(int(c) for c in img[y, x]), rect)

    def run(self):
        """Main playback loop."""
        with open(self.path, "rb") as fp:
            width, height, frames = read_stream(fp)

            total_ms = 0
            pygame.init()
            try:
                screen = pygame.display.set_mode((width * self.cell, height * self.cell))
                pygame.display.set_caption(f"LED Life - {self.path}")

                for frame in frames:
                    for event in pygame.event.get():
                        if event.type == pygame.QUIT:
                            self.running = False
                        elif event.type == pygame.KEYDOWN and event.key in (pygame.K_q, pygame.K_ESCAPE):
                            self.running = False
                    if not self.running:
                        break

                    self._draw(screen, frame)
                    pygame.display.flip()
                    pygame.time.wait(frame.delay)
                    total_ms += frame.delay
                    self.frames_shown += 1
            finally:
                pygame.quit()
        logger.info("played %d frames (%.1fs)", self.frames_shown, total_ms / 1000)
        return self.frames_shown

