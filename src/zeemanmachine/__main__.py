"""Command-line interface: sweep the pointer and report the disc angle.

Run with: python -m zeemanmachine --start 3 -1.5 --end 3 1.5 --steps 30
"""
from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Optional, Sequence

from zeemanmachine.config import DEFAULT_ANCHOR, DEFAULT_SETTINGS, SolverSettings
from zeemanmachine.logging_config import setup_logging
from zeemanmachine.model.geometry_primitives import Vector2
from zeemanmachine.model.machine import Machine
from zeemanmachine.solvers.sweep import sweep

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zeemanmachine",
        description="Sweep the pointer of Zeeman's catastrophe machine along a line."
    )
    parser.add_argument("--anchor", nargs=2, type=float, metavar=("X", "Y"),
                        default=[DEFAULT_ANCHOR.x, DEFAULT_ANCHOR.y])
    parser.add_argument("--start", nargs=2, type=float, metavar=("X", "Y"), default=[3.0, -1.5])
    parser.add_argument("--end", nargs=2, type=float, metavar=("X", "Y"), default=[3.0, 1.5])
    parser.add_argument("--steps", type=int, default=30)
    parser.add_argument("--theta", type=float, default=0.0, help="initial disc angle in radians")
    parser.add_argument("--tolerance", type=float, default=DEFAULT_SETTINGS.tolerance)
    parser.add_argument("--samples", type=int, default=DEFAULT_SETTINGS.samples)
    parser.add_argument("--max-iterations", type=int, default=DEFAULT_SETTINGS.max_iterations)
    parser.add_argument("--plot", action="store_true", help="show the angle against the sweep step")
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--log-file", help="also write the log to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    try:
        settings = SolverSettings(
            tolerance=args.tolerance,
            samples=args.samples,
            max_iterations=args.max_iterations,
        )
    except ValueError as e:
        parser.error(str(e))

    if args.steps < 1:
        parser.error(f"--steps must be at least 1, got {args.steps}")

    logger.debug(f"Solver settings: {settings}")

    machine = Machine(
        anchor=Vector2(*args.anchor),
        pointer=Vector2(*args.start),
        theta=args.theta,
    )
    result = sweep(machine, Vector2(*args.start), Vector2(*args.end), args.steps, settings)

    jumps = set(result.jumps())
    for i, (pointer, theta) in enumerate(zip(result.pointers, result.thetas)):
        marker = "  <- jump" if i in jumps else ""
        print(f"{i:4d}  ({pointer.x:7.3f}, {pointer.y:7.3f})  θ = {math.degrees(theta):8.3f}°{marker}")
    print(f"{len(jumps)} catastrophe jump(s)")

    if args.plot:
        result.plot()

    return 0


if __name__ == "__main__":
    sys.exit(main())
