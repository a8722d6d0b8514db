"""
First-person raycaster in the terminal over a generated maze.

Controls:
- W/S: move forward/back, A/D: strafe
- LEFT/RIGHT: turn
- +/-: widen/narrow the field of view
- Q: quit

Reaching the exit in the bottom wall generates a new maze.

Usage:
  python3 main.py [--static] [--width 23 --height 23] [--seed N]
"""

from __future__ import annotations

import argparse
import logging

from .constants import DEFAULT_MAZE_SIZE, MAX_DEPTH, MIN_MAZE_SIZE, RAY_STEP, SHADES
from .game import run
from .logging_config import setup_logging
from .models import Settings


def _maze_size(text: str) -> int:
    value = int(text)
    if value < MIN_MAZE_SIZE or value % 2 == 0:
        raise argparse.ArgumentTypeError(f"must be an odd number >= {MIN_MAZE_SIZE}")
    return value


def _positive_float(text: str) -> float:
    value = float(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be positive")
    return value


def _shade_count(text: str) -> int:
    value = int(text)
    if value < 2:
        raise argparse.ArgumentTypeError("need at least 2 shades")
    return value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Terminal raycaster over a generated maze")
    p.add_argument("--static", action="store_true", help="play the fixed open level instead of a maze")
    p.add_argument("--width", type=_maze_size, default=DEFAULT_MAZE_SIZE, help="maze width in cells (odd)")
    p.add_argument("--height", type=_maze_size, default=DEFAULT_MAZE_SIZE, help="maze height in cells (odd)")
    p.add_argument("--seed", type=int, default=None, help="random seed for maze generation")
    p.add_argument("--max-depth", type=_positive_float, default=MAX_DEPTH, help="how far rays travel")
    p.add_argument("--ray-step", type=_positive_float, default=RAY_STEP, help="ray march step in map units")
    p.add_argument("--shades", type=_shade_count, default=SHADES, help="number of shade levels")
    p.add_argument("--no-map", action="store_true", help="hide the minimap")
    p.add_argument("--no-debug", action="store_true", help="hide the status line")
    p.add_argument("--log-file", default=None, help="write logs here instead of stderr")
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug")
    return p


def settings_from_args(args: argparse.Namespace) -> Settings:
    return Settings(
        map_source="static" if args.static else "maze",
        width=args.width,
        height=args.height,
        seed=args.seed,
        max_depth=args.max_depth,
        ray_step=args.ray_step,
        shades=args.shades,
        show_minimap=not args.no_map,
        debug=not args.no_debug,
    )


def cli(argv=None) -> int:
    args = build_parser().parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    setup_logging(level, args.log_file)
    run(settings_from_args(args))
    return 0


