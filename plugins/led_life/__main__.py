"""
LED Game of Life - Entry Point

Writes the animation stream for a 16x6 LED board to stdout (or a file).

Usage:
    python -m led_life SECONDS [options]

Examples:
    python -m led_life 30 > life.bin
    python -m led_life 30 --seed 7 --output life.bin
    python -m led_life 30 --start glider
    python -m led_life --snap 12 --start glider
    python -m led_life --play life.bin

Options:
    SECONDS         Play time before the fade-out (positive integer)
    --seed N        Seed for the color random generator
    --start NAME    Starting seed configuration (see --list)
    --output PATH   Write the stream to PATH instead of stdout
    --snap N        Save generation N of the start seed as a PNG and exit
    --play PATH     Show a recorded stream in a preview window
    --list          List seed configurations
    -v              Debug logging
"""

import logging
import os
import sys

import numpy as np

from .animation import Animation
from .board import BoardPair
from .presets import MS_PER_SECOND, SEEDS, START_SEED, list_seeds
from .renderer import FrameRenderer
from .rules import step
from .stream import EmissionError, FrameWriter


logger = logging.getLogger("led_life")

SNAP_SCALE = 32  # screen pixels per LED in snapshots


def _error(msg):
    print(msg, file=sys.stderr)
    sys.exit(1)


def snap(start, generations, seed=None):
    """Headless mode: run N generations, save the rendered frame as PNG."""
    from PIL import Image

    screenshots_dir = os.path.join(os.getcwd(), "screenshots")
    os.makedirs(screenshots_dir, exist_ok=True)

    pair = BoardPair(SEEDS[start]["cells"])
    for _ in range(generations):
        step(pair)
    frame = FrameRenderer(np.random.default_rng(seed)).render(pair.active)

    img = Image.fromarray(np.array(frame.to_image()))
    img = img.resize((img.width * SNAP_SCALE, img.height * SNAP_SCALE),
                     Image.Resampling.NEAREST)
    path = os.path.join(screenshots_dir, f"life_{start}_{generations}.png")
    img.save(path)
    print(f"saved: {path}", file=sys.stderr)
    print(repr(pair.active), file=sys.stderr)
    return path


def play(path):
    from .viewer import Viewer

    Viewer(path).run()


def animate(seconds, out, seed=None, start=START_SEED):
    """Write header + full animation to a binary file object."""
    writer = FrameWriter(out)
    anim = Animation(seconds * MS_PER_SECOND,
                     rng=np.random.default_rng(seed), start=start)
    try:
        writer.write_header()
    except EmissionError as exc:
        logger.debug("%s", exc)
        _error("Header write error!")
    try:
        anim.run(writer)
    except EmissionError as exc:
        logger.debug("%s", exc)
        _error("Frame write error!")
    logger.info("wrote %d frames, %dms", writer.frame_count, writer.total_time)


def main(argv=None):
    seconds = None
    seed = None
    start = START_SEED
    output = None
    snap_steps = None
    play_path = None
    verbose = False

    args = sys.argv[1:] if argv is None else list(argv)
    i = 0
    try:
        while i < len(args):
            arg = args[i]
            if arg == "--seed" and i + 1 < len(args):
                seed = int(args[i + 1])
                i += 2
            elif arg == "--start" and i + 1 < len(args):
                start = args[i + 1]
                i += 2
            elif arg == "--output" and i + 1 < len(args):
                output = args[i + 1]
                i += 2
            elif arg == "--snap" and i + 1 < len(args):
                snap_steps = int(args[i + 1])
                i += 2
            elif arg == "--play" and i + 1 < len(args):
                play_path = args[i + 1]
                i += 2
            elif arg == "--list":
                print("\nSeed configurations:", file=sys.stderr)
                for key, name, desc in list_seeds():
                    print(f"    {key:12s} {name:16s} {desc}", file=sys.stderr)
                return
            elif arg == "-v":
                verbose = True
                i += 1
            elif arg in ("--help", "-h"):
                print(__doc__, file=sys.stderr)
                return
            elif seconds is None and (not arg.startswith("-")
                                      or arg.lstrip("-").isdigit()):
                seconds = int(arg)
                i += 1
            else:
                _error(f"Unknown argument: {arg}")
    except ValueError:
        _error("Incorrect parameters!")

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if seed is not None and seed < 0:
        _error("Incorrect parameters!")

    if start not in SEEDS:
        _error(f"Unknown seed configuration: {start} (use --list)")

    if play_path is not None:
        play(play_path)
        return

    if snap_steps is not None:
        if snap_steps < 0:
            _error("Incorrect parameters!")
        snap(start, snap_steps, seed)
        return

    if seconds is None or seconds <= 0:
        _error("Incorrect parameters!")

    if output is not None:
        try:
            # unbuffered, so a failed write leaves nothing to flush on close
            out = open(output, "wb", buffering=0)
        except OSError as exc:
            _error(f"Cannot open {output}: {exc}")
        with out:
            animate(seconds, out, seed, start)
    else:
        animate(seconds, sys.stdout.buffer, seed, start)


if __name__ == "__main__":
    main()
