"""
Animation Frames

A frame is one fully rendered image for the LED board plus how long the
player should show it. Pixels are stored row-major as a read-only
(WIDTH * HEIGHT, 3) uint8 array; pixel (x, y) lives at x + y * WIDTH.

Wire layout (little-endian, packed):
    delay   uint16   milliseconds, the player honours >= 50
    pixels  WIDTH * HEIGHT * (r, g, b) bytes
"""

import struct

import numpy as np

from .board import HEIGHT, WIDTH


PIXEL_COUNT = WIDTH * HEIGHT
DELAY_FORMAT = "<H"
FRAME_SIZE = struct.calcsize(DELAY_FORMAT) + PIXEL_COUNT * 3

MAX_DELAY = 0xFFFF


class Frame:
    """Immutable image + display duration."""

    __slots__ = ("pixels", "delay")

    def __init__(self, pixels, delay):
        pixels = np.array(pixels, dtype=np.uint8)
        if pixels.shape == (HEIGHT, WIDTH, 3):
            pixels = pixels.reshape(PIXEL_COUNT, 3)
        if pixels.shape != (PIXEL_COUNT, 3):
            raise ValueError(
                f"frame needs {PIXEL_COUNT} RGB pixels, got shape {pixels.shape}")
        delay = int(delay)
        if not 0 < delay <= MAX_DELAY:
            raise ValueError(f"frame delay out of range: {delay}")
        pixels.flags.writeable = False
        object.__setattr__(self, "pixels", pixels)
        object.__setattr__(self, "delay", delay)

    def __setattr__(self, name, value):
        raise AttributeError("Frame is immutable")

    @classmethod
    def solid(cls, color, delay):
        """A frame with every pixel set to one color."""
        return cls(np.tile(np.asarray(color, dtype=np.uint8), (PIXEL_COUNT, 1)), delay)

    @classmethod
    def from_bytes(cls, data):
        if len(data) != FRAME_SIZE:
            raise ValueError(f"expected {FRAME_SIZE} bytes, got {len(data)}")
        (delay,) = struct.unpack_from(DELAY_FORMAT, data)
        pixels = np.frombuffer(data, dtype=np.uint8,
                               offset=struct.calcsize(DELAY_FORMAT))
        return cls(pixels.reshape(PIXEL_COUNT, 3), delay)

    def to_bytes(self):
        return struct.pack(DELAY_FORMAT, self.delay) + self.pixels.tobytes()

    def to_image(self):
        """Return pixels as a (HEIGHT, WIDTH, 3) array."""
        return self.pixels.reshape(HEIGHT, WIDTH, 3)

    def __eq__(self, other):
        if not isinstance(other, Frame):
            return NotImplemented
        return self.delay == other.delay and np.array_equal(self.pixels, other.pixels)

    __hash__ = None

    def __repr__(self):
        return f"Frame(delay={self.delay}, pixels=<{PIXEL_COUNT}x3>)"
