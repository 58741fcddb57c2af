"""Command-line entry point.

Usage examples
--------------
Run the two reference rovers on a 5x5 plateau:
    python -m mars_rover

Drive rovers of your own:
    python -m mars_rover --width 5 --height 5 "1 2 N" LMLMLMLMM "3 3 E" MMRMMRMRRM

Load the plateau and rover physics from a JSON document:
    python -m mars_rover --world world.json "0 0 N" MMRM
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Tuple

from .errors import WorldConfigError
from .library import MarsRoverLibrary
from .validate import load_world_document, world_from_document
from .world import World

DEFAULT_ROVERS: List[Tuple[str, str]] = [
    ("1 2 N", "LMLMLMLMM"),
    ("3 3 E", "MMRMMRMRRM"),
]


def _parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mars-rover", description="Mars rover plateau simulator")
    parser.add_argument(
        "rovers",
        nargs="*",
        metavar="PLACEMENT INSTRUCTIONS",
        help='pairs of placement ("1 2 N") and instruction ("LMLMLMLMM") lines',
    )
    parser.add_argument("--width", type=int, default=5, help="plateau upper-right x (default: 5)")
    parser.add_argument("--height", type=int, default=5, help="plateau upper-right y (default: 5)")
    parser.add_argument("--world", type=Path, help="JSON world document; overrides --width/--height")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)
    if len(args.rovers) % 2:
        parser.error("rovers must be given as PLACEMENT INSTRUCTIONS pairs")
    if args.width < 0 or args.height < 0:
        parser.error("--width and --height must not be negative")
    return args


def _build_world(args: argparse.Namespace) -> World:
    if args.world is not None:
        return world_from_document(load_world_document(args.world))
    return World.mars(width=args.width, height=args.height)


def main(argv: List[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        world = _build_world(args)
    except (OSError, ValueError) as exc:
        kind = "invalid world config" if isinstance(exc, WorldConfigError) else "cannot load world"
        print(f"error: {kind}: {exc}", file=sys.stderr)
        return 2

    pairs = list(zip(args.rovers[::2], args.rovers[1::2])) or DEFAULT_ROVERS
    outcomes, summary = MarsRoverLibrary().run_mission(world, pairs)
    for outcome in outcomes:
        if outcome.ok:
            print("\n".join(outcome.placement.report_lines()))
        else:
            print(f"error: {outcome.error}", file=sys.stderr)
    return 1 if summary.failed else 0


if __name__ == "__main__":
    sys.exit(main())
