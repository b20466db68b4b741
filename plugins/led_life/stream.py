"""
Binary Animation Stream

The player reads a 6-byte header followed by frames until EOF:

    magic   4 bytes   b"LLE2"
    width   uint8
    height  uint8
    frame*  see frames.Frame

FrameWriter is the emission boundary: it writes and flushes each frame
and keeps the running total of emitted display time. Any failed or
short write raises EmissionError and is never retried.
"""

import logging
import struct

from .board import HEIGHT, WIDTH
from .frames import FRAME_SIZE, Frame


logger = logging.getLogger(__name__)

MAGIC = b"LLE2"
HEADER_FORMAT = "<4sBB"
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)


class EmissionError(OSError):
    """The output sink rejected or truncated a write."""


class StreamFormatError(ValueError):
    """Input is not a well-formed animation stream."""


def encode_header(width=WIDTH, height=HEIGHT):
    return struct.pack(HEADER_FORMAT, MAGIC, width, height)


class FrameWriter:
    """Writes the header and frames to a binary file object."""

    def __init__(self, fp):
        self.fp = fp
        self.total_time = 0
        self.frame_count = 0

    def _write(self, data, what):
        try:
            written = self.fp.write(data)
            self.fp.flush()
        except OSError as exc:
            raise EmissionError(f"{what} write error: {exc}") from exc
        # Raw (unbuffered) streams may report a short write; None means the
        # non-blocking sink took nothing
        if written is None:
            written = 0
        if written != len(data):
            raise EmissionError(
                f"{what} write error: wrote {written} of {len(data)} bytes")

    def write_header(self):
        self._write(encode_header(), "Header")

    def write_frame(self, frame):
        self._write(frame.to_bytes(), "Frame")
        self.total_time += frame.delay
        self.frame_count += 1
        logger.debug("frame %d: %dms (total %dms)",
                     self.frame_count, frame.delay, self.total_time)

    __call__ = write_frame


def _read_exact(fp, size):
    """Read size bytes, looping over short reads. Fewer only at EOF."""
    chunks = []
    remaining = size
    while remaining > 0:
        data = fp.read(remaining)
        if not data:
            break
        chunks.append(data)
        remaining -= len(data)
    return b"".join(chunks)


def read_stream(fp):
    """Parse an animation stream.

    Returns:
        (width, height, frames) where frames is a lazy iterator of Frame.
    """
    header = _read_exact(fp, HEADER_SIZE)
    if len(header) != HEADER_SIZE:
        raise StreamFormatError("stream too short for header")
    magic, width, height = struct.unpack(HEADER_FORMAT, header)
    if magic != MAGIC:
        raise StreamFormatError(f"bad magic {magic!r}, expected {MAGIC!r}")
    if (width, height) != (WIDTH, HEIGHT):
        raise StreamFormatError(
            f"unsupported board size {width}x{height}, expected {WIDTH}x{HEIGHT}")

    def frames():
        index = 0
        while True:
            data = _read_exact(fp, FRAME_SIZE)
            if not data:
                return
            if len(data) != FRAME_SIZE:
                raise StreamFormatError(
                    f"truncated frame {index}: {len(data)} of {FRAME_SIZE} bytes")
            try:
                frame = Frame.from_bytes(data)
            except ValueError as exc:
                raise StreamFormatError(f"bad frame {index}: {exc}") from exc
            yield frame
            index += 1

    return width, height, frames()
